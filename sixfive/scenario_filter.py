"""Locating, caching and selecting single-step test scenarios."""

from __future__ import annotations

import json
import pickle
import re
from dataclasses import dataclass, field
from pathlib import Path

from platformdirs import user_config_path

from sixfive.scenario import Scenario, ScenarioError

SKIPPED_SCENARIO_NAMES: tuple[str, ...] = ()

_HEX_RE = re.compile(r"\+?[0-9A-Fa-f]+")
_ARCHIVE_SUFFIX = ".pickle"


def _parse_opcode(text: str) -> int:
    if not _HEX_RE.fullmatch(text):
        raise ScenarioError(f"invalid opcode {text!r}")
    value = int(text, 16)
    if value > 0xFF:
        raise ScenarioError(f"opcode {text!r} is out of range")
    return value


def _default_json_dir() -> Path:
    return Path.cwd() / "SingleStepTests-65x02" / "6502" / "v1"


def _default_archive_dir() -> Path:
    return user_config_path("sixfive") / "scenarios"


@dataclass
class ScenarioLoader:
    """Reads scenario files, caching each one as a binary archive."""

    json_dir: Path = field(default_factory=_default_json_dir)
    archive_dir: Path = field(default_factory=_default_archive_dir)

    def read_scenarios(self, json_path: Path) -> list[Scenario]:
        """Read the scenarios of one JSON file, using the archive when present."""
        json_path = Path(json_path)
        archive_path = self._archive_path(json_path)
        if archive_path.is_file():
            return self._read_archive(archive_path)

        scenarios = self._read_json(json_path)
        self._write_archive(archive_path, scenarios)
        return scenarios

    def _archive_path(self, json_path: Path) -> Path:
        if not json_path.name:
            raise ScenarioError(f"could not extract file name from {json_path}")
        return (self.archive_dir / json_path.name).with_suffix(_ARCHIVE_SUFFIX)

    @staticmethod
    def _read_json(json_path: Path) -> list[Scenario]:
        with json_path.open(encoding="utf-8") as file:
            try:
                data = json.load(file)
            except json.JSONDecodeError as exc:
                raise ScenarioError(f"{json_path}: {exc}") from exc
        if not isinstance(data, list):
            raise ScenarioError(f"{json_path}: expected a list of scenarios")
        return [Scenario.from_dict(item) for item in data]

    @staticmethod
    def _read_archive(archive_path: Path) -> list[Scenario]:
        with archive_path.open("rb") as file:
            return list(pickle.load(file))

    @staticmethod
    def _write_archive(archive_path: Path, scenarios: list[Scenario]) -> None:
        archive_path.parent.mkdir(parents=True, exist_ok=True)
        with archive_path.open("wb") as file:
            pickle.dump(scenarios, file)


@dataclass
class ScenarioFilter:
    """Which scenario files to read and which scenarios in them to run."""

    paths: list[Path]
    scenario_name: str | None = None
    skipped_scenario_names: list[str] = field(default_factory=list)

    @classmethod
    def from_filter(cls, loader: ScenarioLoader, filter_str: str | None) -> ScenarioFilter:
        """Build a filter from an optional ``"OP"`` or ``"OP xx yy"`` string.

        With no filter every JSON file is selected; with an opcode only its
        file; with a full scenario name only that scenario.
        """
        if filter_str is None:
            return cls(
                paths=cls._scenario_files(loader.json_dir, ".json"),
                skipped_scenario_names=list(SKIPPED_SCENARIO_NAMES),
            )

        opcode_text, sep, _ = filter_str.partition(" ")
        opcode = _parse_opcode(opcode_text)
        path = loader.json_dir / f"{opcode:02x}.json"
        if not sep:
            return cls(
                paths=[path],
                skipped_scenario_names=list(SKIPPED_SCENARIO_NAMES),
            )
        return cls(paths=[path], scenario_name=filter_str)

    def filter(self, scenarios: list[Scenario]) -> list[Scenario]:
        """Keep the scenarios this filter selects, in their original order."""
        if self.scenario_name is not None:
            return [s for s in scenarios if s.name == self.scenario_name]
        return [s for s in scenarios if s.name not in self.skipped_scenario_names]

    @staticmethod
    def _scenario_files(directory: Path, suffix: str) -> list[Path]:
        return sorted(p for p in Path(directory).iterdir() if p.suffix == suffix)