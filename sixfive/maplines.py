"""Line-level access to linker map files."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator

_HEX_RE = re.compile(r"\+?[0-9A-Fa-f]+")
_EMPTY = object()


class MapFileError(ValueError):
    """Raised when a linker map file, or part of one, cannot be parsed."""


class LineCursor:
    """An iterator over lines that can look one line ahead."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines: Iterator[str] = iter(lines)
        self._pending: object = _EMPTY

    def __iter__(self) -> LineCursor:
        return self

    def __next__(self) -> str:
        if self._pending is not _EMPTY:
            line = self._pending
            self._pending = _EMPTY
            if line is None:
                raise StopIteration
            return line  # type: ignore[return-value]
        return next(self._lines)

    def peek(self) -> str | None:
        """Return the next line without consuming it, or None at the end."""
        if self._pending is _EMPTY:
            self._pending = next(self._lines, None)
        return self._pending  # type: ignore[return-value]


def iter_map_file_lines(text: str) -> LineCursor:
    """Return a cursor over the meaningful lines of a map file.

    Each line is stripped of surrounding whitespace and dashes; lines that
    end up empty (blank lines and rulers) are dropped.
    """
    cleaned = (line.strip().strip("-") for line in text.splitlines())
    return LineCursor(line for line in cleaned if line)


def _parse_hex(text: str, bits: int) -> int:
    """Parse an unsigned hexadecimal number that must fit in ``bits`` bits."""
    if not _HEX_RE.fullmatch(text):
        raise MapFileError(f"invalid hexadecimal number {text!r}")
    value = int(text, 16)
    if value >= 1 << bits:
        raise MapFileError(f"hexadecimal number {text!r} is out of range")
    return value