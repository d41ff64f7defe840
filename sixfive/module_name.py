"""Module names as they appear in a linker map file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePath


@dataclass(frozen=True)
class ModuleName:
    """An object file name, optionally inside a library at ``path``."""

    name: str
    path: PurePath | None = None

    @classmethod
    def parse(cls, text: str) -> ModuleName:
        """Parse ``name`` or ``library(name)``."""
        if text.endswith(")"):
            prefix, sep, suffix = text[:-1].rpartition("(")
            if sep:
                return cls(name=suffix, path=PurePath(prefix))
        return cls(name=text)