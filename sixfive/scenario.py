"""Single-step CPU test scenarios and their JSON form."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any


class ScenarioError(ValueError):
    """Raised when a scenario, or part of one, cannot be read."""


def _uint(value: Any, bits: int, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value < 1 << bits:
        raise ScenarioError(f"invalid {what}: {value!r}")
    return value


def _sequence(data: Any, count: int, expecting: str) -> list[Any]:
    if not isinstance(data, (list, tuple)) or len(data) != count:
        raise ScenarioError(f"expected {expecting}, got {data!r}")
    return list(data)


def _mapping(data: Any, what: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise ScenarioError(f"expected an object for {what}, got {data!r}")
    return data


def _field(data: dict[str, Any], key: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise ScenarioError(f"missing field {key!r}") from None


def _list(data: Any, what: str) -> list[Any]:
    if not isinstance(data, list):
        raise ScenarioError(f"expected a list for {what}, got {data!r}")
    return data


@dataclass(frozen=True)
class AddressValue:
    """A byte held at a memory address."""

    address: int
    value: int

    @classmethod
    def from_json(cls, data: Any) -> AddressValue:
        """Build from a decoded ``[address, value]`` pair."""
        address, value = _sequence(data, 2, "[u16, u8]")
        return cls(
            address=_uint(address, 16, "address"),
            value=_uint(value, 8, "value"),
        )


@dataclass(frozen=True)
class Cycle:
    """One bus cycle: address, value and the operation performed."""

    address: int
    value: int
    operation: str

    @classmethod
    def from_json(cls, data: Any) -> Cycle:
        """Build from a decoded ``[address, value, operation]`` triple."""
        address, value, operation = _sequence(data, 3, "[u16, u8, String]")
        if not isinstance(operation, str):
            raise ScenarioError(f"invalid operation: {operation!r}")
        return cls(
            address=_uint(address, 16, "address"),
            value=_uint(value, 8, "value"),
            operation=operation,
        )


@dataclass(frozen=True)
class State:
    """Registers and the relevant memory of the CPU at one moment."""

    pc: int
    sp: int
    a: int
    x: int
    y: int
    p: int
    ram: tuple[AddressValue, ...] = ()

    @classmethod
    def from_json(cls, data: Any) -> State:
        """Build from a decoded state object."""
        data = _mapping(data, "state")
        return cls(
            pc=_uint(_field(data, "pc"), 16, "pc"),
            sp=_uint(_field(data, "s"), 8, "s"),
            a=_uint(_field(data, "a"), 8, "a"),
            x=_uint(_field(data, "x"), 8, "x"),
            y=_uint(_field(data, "y"), 8, "y"),
            p=_uint(_field(data, "p"), 8, "p"),
            ram=tuple(
                AddressValue.from_json(item)
                for item in _list(_field(data, "ram"), "ram")
            ),
        )

    def __str__(self) -> str:
        lines = [
            f"  pc: ${self.pc:04X} ({self.pc})",
            f"  s : ${self.sp:02X}  ({self.sp})",
            f"  a : ${self.a:02X}  ({self.a})",
            f"  x : ${self.x:02X}  ({self.x})",
            f"  y : ${self.y:02X}  ({self.y})",
            f"  p : {self.p} (0b{self.p:08b}) (${self.p:02X}) ({self.p})",
        ]
        lines.extend(
            f"    {item.address:04X} {item.value:02X} ({item.value})"
            for item in sorted(self.ram, key=lambda item: item.address)
        )
        return "".join(line + "\n" for line in lines)


@dataclass(frozen=True)
class Scenario:
    """A named single-instruction test: initial state, final state and cycles."""

    name: str
    initial: State
    final: State
    cycles: tuple[Cycle, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> Scenario:
        """Build from a decoded scenario object."""
        data = _mapping(data, "scenario")
        name = _field(data, "name")
        if not isinstance(name, str):
            raise ScenarioError(f"invalid name: {name!r}")
        return cls(
            name=name,
            initial=State.from_json(_field(data, "initial")),
            final=State.from_json(_field(data, "final")),
            cycles=tuple(
                Cycle.from_json(item)
                for item in _list(_field(data, "cycles"), "cycles")
            ),
        )

    @classmethod
    def from_json(cls, text: str) -> Scenario:
        """Parse a scenario from JSON text."""
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ScenarioError(str(exc)) from exc
        return cls.from_dict(data)

    def __str__(self) -> str:
        return f"Scenario: {self.name}\nInitial:\n{self.initial}Final:\n{self.final}"