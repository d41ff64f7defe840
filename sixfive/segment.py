"""The segment list of a linker map file."""

from __future__ import annotations

from dataclasses import dataclass

from sixfive.maplines import LineCursor, MapFileError, _parse_hex

_HEADER = ["Name", "Start", "End", "Size", "Align"]


@dataclass(frozen=True)
class Segment:
    """A linked segment with its address range."""

    name: str
    start: int
    end: int
    size: int
    align: int

    @classmethod
    def parse(cls, text: str) -> Segment:
        """Parse one row of the segment list."""
        parts = text.split()
        if len(parts) != 5:
            raise MapFileError(f'Invalid segment "{text}"')
        start, end, size, align = (_parse_hex(p, 32) for p in parts[1:])
        return cls(name=parts[0], start=start, end=end, size=size, align=align)

    @classmethod
    def fetch_all(cls, lines: LineCursor) -> list[Segment]:
        """Read the segment list, stopping before the exports list."""
        if lines.peek() != "Segment list:":
            raise MapFileError("Invalid segment list")
        next(lines)

        header = next(lines, None)
        if header is None or header.split() != _HEADER:
            raise MapFileError("Invalid segment list")

        segments = []
        while lines.peek() not in (None, "Exports list by name:"):
            row = next(lines)
            try:
                segments.append(cls.parse(row))
            except MapFileError as exc:
                raise MapFileError("Invalid segment list") from exc
        return segments