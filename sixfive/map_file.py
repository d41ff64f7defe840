"""Parsing of complete linker map files."""

from __future__ import annotations

from dataclasses import dataclass, field

from sixfive.export import Export
from sixfive.maplines import iter_map_file_lines
from sixfive.module import Module
from sixfive.segment import Segment


@dataclass
class MapFile:
    """The modules, segments and exports listed in a linker map file."""

    modules: list[Module] = field(default_factory=list)
    segments: list[Segment] = field(default_factory=list)
    exports: list[Export] = field(default_factory=list)

    @classmethod
    def parse(cls, text: str) -> MapFile:
        """Parse the text of a map file."""
        lines = iter_map_file_lines(text)
        modules = Module.fetch_all(lines)
        segments = Segment.fetch_all(lines)
        exports = Export.fetch_all(lines)
        return cls(modules=modules, segments=segments, exports=exports)