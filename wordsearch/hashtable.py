"""Open-addressing hash table keyed by strings, with quadratic probing."""

from __future__ import annotations

from collections.abc import Iterator, MutableMapping
from dataclasses import dataclass
from typing import Any

INITIAL_CAPACITY = 257
REHASH_THRESHOLD = 0.7

_MASK64 = (1 << 64) - 1


@dataclass(slots=True)
class _Cell:
    key: str
    value: Any


class _Tombstone:
    """Marks a slot whose entry has been removed."""

    def __repr__(self) -> str:
        return "<tombstone>"


_TOMBSTONE = _Tombstone()


def _char_value(byte: int) -> int:
    if 0x30 <= byte <= 0x39:  # '0'..'9'
        return byte - 0x30 + 1
    if 0x41 <= byte <= 0x5A:  # 'A'..'Z'
        return byte - 0x41 + 11
    if 0x61 <= byte <= 0x7A:  # 'a'..'z'
        return byte - 0x61 + 11
    return 0


def key_number(key: str) -> int:
    """Return the key read as a base-27 number, wrapped to 64 unsigned bits.

    Digits count 1-10, letters 11-36 regardless of case, anything else 0.
    """
    data = key.encode("utf-8")
    if not data:
        return 0
    power = 1
    for _ in range(len(data) - 1):
        power = (power * 27) & _MASK64
    value = 0
    for byte in data:
        value = (value + _char_value(byte) * power) & _MASK64
        power //= 27
    return value


class HashTable(MutableMapping):
    """A string-keyed mapping stored in a single probed array.

    The table grows to ``2 * capacity + 1`` slots when an insertion would
    push the load factor above 0.7. Removed entries leave tombstones that
    keep probe chains intact until the next resize.
    """

    def __init__(self, capacity: int = INITIAL_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._slots: list[_Cell | _Tombstone | None] = [None] * capacity
        self._size = 0

    @property
    def capacity(self) -> int:
        """Number of slots currently allocated."""
        return len(self._slots)

    def _probe(self, key: str) -> Iterator[int]:
        cap = len(self._slots)
        start = key_number(key) % cap
        for i in range(cap):
            yield (start + i * i) % cap

    def _resize(self) -> None:
        old = self._slots
        self._slots = [None] * (len(old) * 2 + 1)
        self._size = 0
        for cell in old:
            if isinstance(cell, _Cell):
                self._insert(cell.key, cell.value)

    def _insert(self, key: str, value: Any) -> None:
        first_tombstone: int | None = None
        for idx in self._probe(key):
            cell = self._slots[idx]
            if cell is _TOMBSTONE:
                if first_tombstone is None:
                    first_tombstone = idx
            elif cell is None:
                target = idx if first_tombstone is None else first_tombstone
                self._slots[target] = _Cell(key, value)
                self._size += 1
                return
            elif cell.key == key:
                cell.value = value
                return
        raise RuntimeError("hash table is full")

    def _find(self, key: str) -> int | None:
        for idx in self._probe(key):
            cell = self._slots[idx]
            if cell is None:
                return None
            if isinstance(cell, _Cell) and cell.key == key:
                return idx
        return None

    @staticmethod
    def _check_key(key: Any) -> None:
        if not isinstance(key, str):
            raise TypeError(f"keys must be str, not {type(key).__name__}")

    def __setitem__(self, key: str, value: Any) -> None:
        self._check_key(key)
        if (self._size + 1) / len(self._slots) > REHASH_THRESHOLD:
            self._resize()
        self._insert(key, value)

    def __getitem__(self, key: str) -> Any:
        self._check_key(key)
        idx = self._find(key)
        if idx is None:
            raise KeyError(key)
        cell = self._slots[idx]
        assert isinstance(cell, _Cell)
        return cell.value

    def __delitem__(self, key: str) -> None:
        self._check_key(key)
        idx = self._find(key)
        if idx is None:
            raise KeyError(key)
        self._slots[idx] = _TOMBSTONE
        self._size -= 1

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return self._find(key) is not None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[str]:
        for cell in list(self._slots):
            if isinstance(cell, _Cell):
                yield cell.key