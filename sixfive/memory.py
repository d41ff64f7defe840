"""RAM and ROM bus devices and 16-bit word helpers."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class ImageSlice:
    """Bytes to place at ``load`` within a device's address space."""

    load: int
    bytes: bytes


def _fill(size: int, image_slices: Iterable[ImageSlice]) -> bytearray:
    memory = bytearray(size)
    for image_slice in image_slices:
        end = image_slice.load + len(image_slice.bytes)
        if image_slice.load < 0 or end > size:
            raise ValueError(
                f"image slice at {image_slice.load:#06x} of {len(image_slice.bytes)} "
                f"bytes does not fit in {size} bytes"
            )
        memory[image_slice.load:end] = image_slice.bytes
    return memory


def _check_addr(addr: int, size: int) -> int:
    if not 0 <= addr < size:
        raise IndexError(f"address ${addr:04X} is out of range")
    return addr


def _check_value(value: int) -> int:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"value {value} is not a byte")
    return value


class Ram:
    """Readable and writable memory."""

    def __init__(self, size: int, image_slices: Iterable[ImageSlice] = ()) -> None:
        self._bytes = _fill(size, image_slices)

    def __len__(self) -> int:
        return len(self._bytes)

    def load(self, addr: int) -> int:
        """Return the byte at ``addr``."""
        return self._bytes[_check_addr(addr, len(self._bytes))]

    def store(self, addr: int, value: int) -> None:
        """Write ``value`` at ``addr``."""
        self._bytes[_check_addr(addr, len(self._bytes))] = value


class Rom:
    """Read-only memory: stores leave the contents unchanged."""

    def __init__(self, size: int, image_slices: Iterable[ImageSlice] = ()) -> None:
        self._bytes = bytes(_fill(size, image_slices))

    def __len__(self) -> int:
        return len(self._bytes)

    def load(self, addr: int) -> int:
        """Return the byte at ``addr``."""
        return self._bytes[_check_addr(addr, len(self._bytes))]

    def store(self, addr: int, value: int) -> None:
        """Validate the write and discard it; the contents never change."""
        _check_addr(addr, len(self._bytes))
        _check_value(value)


def make_word(hi: int, lo: int) -> int:
    """Combine a high and a low byte into a 16-bit word."""
    return ((hi & 0xFF) << 8) | (lo & 0xFF)


def split_word(value: int) -> tuple[int, int]:
    """Split a 16-bit word into ``(hi, lo)``."""
    return (value >> 8) & 0xFF, value & 0xFF


def crosses_page_boundary(addr: int) -> bool:
    """Whether ``addr`` is the last byte of a page."""
    return (addr & 0x00FF) == 0x00FF