"""Per-module segment entries of a linker map file."""

from __future__ import annotations

from dataclasses import dataclass

from sixfive.maplines import MapFileError, _parse_hex


@dataclass(frozen=True)
class ModuleSegment:
    """A segment contributed by one module."""

    name: str
    offset: int
    size: int
    align: int
    fill: int

    @classmethod
    def parse(cls, text: str) -> ModuleSegment:
        """Parse ``NAME Offs=.. Size=.. Align=.. Fill=..``."""
        parts = text.split()
        if len(parts) != 5:
            raise MapFileError(f'Invalid segment "{text}"')

        def field(part: str, prefix: str, bits: int) -> int:
            if not part.startswith(prefix):
                raise MapFileError(f'Invalid segment "{text}"')
            return _parse_hex(part[len(prefix):], bits)

        return cls(
            name=parts[0],
            offset=field(parts[1], "Offs=", 32),
            size=field(parts[2], "Size=", 32),
            align=field(parts[3], "Align=", 32),
            fill=field(parts[4], "Fill=", 16),
        )