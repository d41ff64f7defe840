"""The exports list of a linker map file."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from sixfive.maplines import LineCursor, MapFileError, _parse_hex


class ExportKind(Enum):
    """The kind flags printed next to an exported symbol."""

    REA = "REA"
    RLA = "RLA"
    RLZ = "RLZ"


@dataclass(frozen=True)
class Export:
    """An exported symbol and its value."""

    name: str
    value: int
    kind: ExportKind

    @classmethod
    def _from_parts(cls, name: str, value: str, kind: str) -> Export:
        try:
            export_kind = ExportKind(kind)
        except ValueError as exc:
            raise MapFileError(f"invalid export kind {kind!r}") from exc
        return cls(name=name, value=_parse_hex(value, 32), kind=export_kind)

    @classmethod
    def fetch_all(cls, lines: LineCursor) -> list[Export]:
        """Read the exports list by name, skipping the list by value.

        Stops before the imports list; the result is sorted by name.
        """
        if lines.peek() != "Exports list by name:":
            raise MapFileError("Invalid export list")
        next(lines)

        exports = []
        while lines.peek() not in (None, "Exports list by value:"):
            parts = next(lines).split()
            if len(parts) not in (3, 6):
                raise MapFileError("Invalid export list")
            exports.append(cls._from_parts(*parts[:3]))
            if len(parts) == 6:
                exports.append(cls._from_parts(*parts[3:]))

        while lines.peek() not in (None, "Imports list:"):
            next(lines)

        exports.sort(key=lambda export: export.name)
        return exports