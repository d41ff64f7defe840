"""The modules list of a linker map file."""

from __future__ import annotations

from dataclasses import dataclass, field

from sixfive.maplines import LineCursor, MapFileError
from sixfive.module_name import ModuleName
from sixfive.module_segment import ModuleSegment


@dataclass
class Module:
    """An object module and the segments it contributes."""

    name: ModuleName
    segments: list[ModuleSegment] = field(default_factory=list)

    @classmethod
    def fetch_all(cls, lines: LineCursor) -> list[Module]:
        """Read the modules list, stopping before the segment list."""
        if lines.peek() != "Modules list:":
            raise MapFileError("Invalid module list")
        next(lines)

        modules = []
        while lines.peek() != "Segment list:":
            try:
                modules.append(cls.fetch(lines))
            except MapFileError:
                break
        return modules

    @classmethod
    def fetch(cls, lines: LineCursor) -> Module:
        """Read one module header line and the segment lines that follow it."""
        header = lines.peek()
        if header is None:
            raise MapFileError("Invalid module")
        header = header.strip()
        if not header.endswith(":"):
            raise MapFileError("Invalid module")

        name = ModuleName.parse(header[:-1])
        next(lines)

        segments = []
        while (line := lines.peek()) is not None:
            try:
                segment = ModuleSegment.parse(line)
            except MapFileError:
                break
            segments.append(segment)
            next(lines)

        return cls(name=name, segments=segments)