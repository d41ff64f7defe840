import pytest

from sixfive.maplines import MapFileError, iter_map_file_lines
from sixfive.module import Module
from sixfive.module_name import ModuleName
from sixfive.module_segment import ModuleSegment

MODULES = r"""a1basic.o:
    A1BASIC           Offs=000000  Size=001000  Align=00001  Fill=0000
constants.o:
main.o:
    CODE              Offs=000000  Size=000027  Align=00001  Fill=0000
    DATA              Offs=000000  Size=00009C  Align=00001  Fill=0000
    HEADER            Offs=000000  Size=00000A  Align=00001  Fill=0000
    NMI               Offs=000000  Size=000002  Align=00001  Fill=0000
    RESET             Offs=000000  Size=000002  Align=00001  Fill=0000
    IRQ               Offs=000000  Size=000002  Align=00001  Fill=0000
wozmon.o:
    WOZMON            Offs=000000  Size=0000FA  Align=00001  Fill=0000
C:\bin\cc65\lib/none.lib(copydata.o):
    CODE              Offs=000027  Size=00002D  Align=00001  Fill=0000
C:\bin\cc65\lib/none.lib(zeropage.o):
    ZEROPAGE          Offs=000000  Size=00001A  Align=00001  Fill=0000
"""

FULL = (
    "Modules list:\n-------------\n"
    + MODULES
    + r"""

Segment list:
-------------
Name                   Start     End    Size  Align
----------------------------------------------------
HEADER                000000  000009  00000A  00001
ZEROPAGE              000000  000019  00001A  00001
DATA                  005000  00509B  00009C  00001
CODE                  00D016  00D069  000054  00001
A1BASIC               00E000  00EFFF  001000  00001
WOZMON                00FF00  00FFF9  0000FA  00001
NMI                   00FFFA  00FFFB  000002  00001
RESET                 00FFFC  00FFFD  000002  00001
IRQ                   00FFFE  00FFFF  000002  00001


Exports list by name:
---------------------
DSP                       00D012 REA    DSPCR                     00D013 REA
"""
)


def test_fetch_all():
    lines = iter_map_file_lines(FULL)
    modules = Module.fetch_all(lines)
    assert len(modules) == 6
    assert lines.peek() == "Segment list:"


def test_fetch_all_names_in_order():
    modules = Module.fetch_all(iter_map_file_lines(FULL))
    assert [m.name.name for m in modules] == [
        "a1basic.o",
        "constants.o",
        "main.o",
        "wozmon.o",
        "copydata.o",
        "zeropage.o",
    ]


def test_fetch_all_requires_header():
    with pytest.raises(MapFileError):
        Module.fetch_all(iter_map_file_lines(MODULES))


def test_fetch():
    lines = iter_map_file_lines(MODULES)

    module = Module.fetch(lines)
    assert module.name == ModuleName(name="a1basic.o", path=None)
    assert module.segments == [
        ModuleSegment(
            name="A1BASIC", offset=0x000000, size=0x001000, align=0x00001, fill=0x0000
        )
    ]

    module = Module.fetch(lines)
    assert module.name == ModuleName(name="constants.o", path=None)
    assert module.segments == []

    module = Module.fetch(lines)
    assert module.name == ModuleName(name="main.o", path=None)
    assert len(module.segments) == 6

    module = Module.fetch(lines)
    assert module.name == ModuleName(name="wozmon.o", path=None)
    assert len(module.segments) == 1

    module = Module.fetch(lines)
    assert module.name.name == "copydata.o"
    assert "none.lib" in str(module.name.path)
    assert len(module.segments) == 1

    module = Module.fetch(lines)
    assert module.name.name == "zeropage.o"
    assert "none.lib" in str(module.name.path)
    assert len(module.segments) == 1

    assert lines.peek() is None
    with pytest.raises(MapFileError):
        Module.fetch(lines)


def test_fetch_rejects_line_without_colon():
    lines = iter_map_file_lines("not a module header\n")
    with pytest.raises(MapFileError):
        Module.fetch(lines)
    assert lines.peek() == "not a module header"