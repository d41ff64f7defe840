# sixfive

Building blocks for working with 6502 programs in Python: reading ld65
linker map files, loading single-step CPU test scenarios, and simple
RAM and ROM memory devices.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install .[test]
pytest
```

## Linker map files

`sixfive.map_file.MapFile.parse(text)` reads the text of a map file written
by the ld65 linker and returns a `MapFile` with three lists:

- `modules`: `sixfive.module.Module` objects, each with a
  `sixfive.module_name.ModuleName` (`name`, and `path` when the object file
  came from a library, as in `none.lib(copydata.o)`) and its
  `sixfive.module_segment.ModuleSegment` entries (`name`, `offset`, `size`,
  `align`, `fill`).
- `segments`: `sixfive.segment.Segment` objects (`name`, `start`, `end`,
  `size`, `align`).
- `exports`: `sixfive.export.Export` objects (`name`, `value`, and `kind`,
  an `ExportKind` of `REA`, `RLA` or `RLZ`), sorted by name. Only the
  "Exports list by name" section is read; the list by value is skipped.

The section readers can be used on their own. Each takes the line cursor
returned by `sixfive.maplines.iter_map_file_lines(text)`, which strips
whitespace and dashes from every line, drops lines left empty, and offers
`peek()` to look at the next line without consuming it:

- `Module.fetch_all(lines)` reads from `Modules list:` up to `Segment list:`;
  `Module.fetch(lines)` reads a single module.
- `Segment.fetch_all(lines)` reads from `Segment list:` up to
  `Exports list by name:`.
- `Export.fetch_all(lines)` reads from `Exports list by name:` and leaves the
  cursor at `Imports list:`.

Malformed input raises `sixfive.maplines.MapFileError`, a `ValueError`.

```python
from sixfive.map_file import MapFile

with open("program.map") as f:
    map_file = MapFile.parse(f.read())

for segment in map_file.segments:
    print(f"{segment.name:<12} ${segment.start:06X}-${segment.end:06X}")
```

## Single-step test scenarios

`sixfive.scenario.Scenario.from_json(text)` parses one scenario in the
SingleStepTests JSON format (`Scenario.from_dict` takes the decoded object).
A scenario has a `name`, an `initial` and a `final` `State` (`pc`, `sp`, `a`,
`x`, `y`, `p` and `ram`, a tuple of `AddressValue`), and `cycles`, a tuple of
`Cycle` (`address`, `value`, `operation`). Values are checked to fit their
register or byte width; bad input raises `sixfive.scenario.ScenarioError`.
`str()` of a scenario or state gives a readable dump with RAM sorted by
address.

`sixfive.scenario_filter.ScenarioLoader` reads a JSON file of scenarios with
`read_scenarios(json_path)`. The first read caches the parsed scenarios as a
pickle in `archive_dir`, and later reads use that cache. By default
`json_dir` is `SingleStepTests-65x02/6502/v1` under the current directory and
`archive_dir` is `scenarios` in the user configuration directory for
`sixfive`.

`ScenarioFilter.from_filter(loader, filter_str)` chooses what to run:

- `None`: every `.json` file in `loader.json_dir`, sorted.
- `"a9"`: only the file for that opcode, `a9.json`.
- `"a9 12 34"`: that file, and `filter(scenarios)` keeps only the scenario
  with exactly that name.

```python
from sixfive.scenario_filter import ScenarioFilter, ScenarioLoader

loader = ScenarioLoader()
selection = ScenarioFilter.from_filter(loader, "a9")
for path in selection.paths:
    for scenario in selection.filter(loader.read_scenarios(path)):
        print(scenario.name, scenario.initial.pc)
```

## Memory devices and word helpers

`sixfive.memory` has two devices sized at construction and filled from
`ImageSlice(load, bytes)` pieces:

- `Ram`: `load(addr)` and `store(addr, value)`.
- `Rom`: `load(addr)`; `store` checks the address and value and then
  discards the write.

An address outside the device raises `IndexError`; a slice that does not fit
raises `ValueError`.

The helpers `make_word(hi, lo)`, `split_word(value)` and
`crosses_page_boundary(addr)` (true for the last byte of a page) work on
16-bit addresses.

```python
from sixfive.memory import ImageSlice, Ram, make_word

ram = Ram(0x10000, [ImageSlice(load=0x0200, bytes=bytes([0x34, 0x12]))])
print(hex(make_word(ram.load(0x0201), ram.load(0x0200))))  # 0x1234
```

## What it does not do

This package has no CPU: it cannot execute 6502 code or run the scenarios it
loads against an emulated processor. There is no system bus, no machine
configuration, no terminal or keyboard device, no debugger screen and no
command-line program. The scenario cache is the only thing it writes to disk.