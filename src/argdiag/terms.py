from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True, slots=True)
class BitString:
    data: bytes
    bit_size: int

    def __post_init__(self) -> None:
        if isinstance(self.bit_size, bool) or self.bit_size < 0:
            raise ValueError("bit_size must be a non-negative integer")
        if self.bit_size > len(self.data) * 8:
            raise ValueError("bit_size exceeds the supplied data")
        object.__setattr__(self, "data", bytes(self.data))

    @property
    def is_byte_aligned(self) -> bool:
        return self.bit_size % 8 == 0

    @property
    def byte_size(self) -> int:
        return (self.bit_size + 7) // 8


@dataclass(frozen=True, slots=True)
class TableRef:
    id: int


@dataclass(frozen=True, slots=True)
class ProcessHandle:
    id: int


class ImproperList:
    """A list whose tail is not a list; it has no length."""

    __slots__ = ("items", "tail")

    def __init__(self, items: tuple[object, ...] | list[object], tail: object) -> None:
        self.items = tuple(items)
        self.tail = tail

    def __len__(self) -> int:
        raise TypeError("improper list has no length")

    def __iter__(self) -> Iterator[object]:
        yield from self.items
        raise TypeError("improper list tail is not a list")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ImproperList):
            return NotImplemented
        return self.items == other.items and self.tail == other.tail

    def __hash__(self) -> int:
        return hash((self.items, repr(self.tail)))

    def __repr__(self) -> str:
        return f"ImproperList({list(self.items)!r}, tail={self.tail!r})"


@dataclass(frozen=True, slots=True)
class MapIterator:
    entries: tuple[tuple[object, object], ...]

    @classmethod
    def over(cls, mapping: Mapping[object, object]) -> MapIterator:
        return cls(entries=tuple(mapping.items()))

    def next(self) -> tuple[object, object, MapIterator] | None:
        if not self.entries:
            return None
        key, value = self.entries[0]
        return (key, value, MapIterator(entries=self.entries[1:]))


@dataclass(frozen=True, slots=True)
class CompiledPattern:
    needles: tuple[bytes, ...]


@dataclass(frozen=True, slots=True)
class CompiledMatchSpec:
    clauses: tuple[tuple[object, tuple[object, ...], tuple[object, ...]], ...]


def is_binary(value: object) -> bool:
    if isinstance(value, bytes | bytearray):
        return True
    return isinstance(value, BitString) and value.is_byte_aligned


def byte_size(value: object) -> int:
    if isinstance(value, BitString):
        return value.byte_size
    if isinstance(value, bytes | bytearray):
        return len(value)
    raise TypeError("not a binary")


def is_integer(value: object) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(value, int | np.integer)


def is_number(value: object) -> bool:
    if isinstance(value, bool | np.bool_):
        return False
    return isinstance(value, int | float | np.integer | np.floating)
