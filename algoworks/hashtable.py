"""A set of strings in an open-addressing hash table with double hashing."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator

INITIAL_SIZE = 8
MAX_LOAD_FACTOR = 0.75
DEFAULT_PRIME = 71

_WORD_MASK = (1 << 64) - 1

_EMPTY = object()
_DELETED = object()


def string_hash(text: str, prime: int = DEFAULT_PRIME) -> int:
    """Polynomial hash of the UTF-8 bytes of ``text``, wrapped to 64 bits.

    Bytes are taken as signed values, so those above 127 count as negative.
    """
    value = 0
    for byte in text.encode("utf-8"):
        signed = byte - 256 if byte >= 128 else byte
        value = (value * prime + signed) & _WORD_MASK
    return value


class OpenAddressingSet:
    """Set of strings stored with double hashing and lazy deletion."""

    def __init__(
        self,
        initial_size: int = INITIAL_SIZE,
        hasher: Callable[[str], int] = string_hash,
    ):
        if initial_size < 2:
            raise ValueError("initial_size must be at least 2")
        self._slots: list[object] = [_EMPTY] * initial_size
        self._size = 0
        self._deleted = 0
        self._hasher = hasher

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def _probe(self, key: str, capacity: int) -> Iterator[int]:
        index = self._hasher(key) % capacity
        step = string_hash(key) % (capacity - 1) + 1
        for _ in range(capacity):
            yield index
            index = (index + step) % capacity

    def add(self, key: str) -> bool:
        """Insert ``key``; return False if it was already present."""
        if self._size + self._deleted >= len(self._slots) * MAX_LOAD_FACTOR:
            self._rehash()
        first_deleted = None
        empty = None
        for index in self._probe(key, len(self._slots)):
            slot = self._slots[index]
            if slot is _EMPTY:
                empty = index
                break
            if slot is _DELETED:
                if first_deleted is None:
                    first_deleted = index
            elif slot == key:
                return False
        if first_deleted is not None:
            target = first_deleted
            self._deleted -= 1
        elif empty is not None:
            target = empty
        else:
            self._rehash()
            return self.add(key)
        self._slots[target] = key
        self._size += 1
        return True

    def discard(self, key: str) -> bool:
        """Remove ``key``; return False if it was not present."""
        for index in self._probe(key, len(self._slots)):
            slot = self._slots[index]
            if slot is _EMPTY:
                return False
            if slot is not _DELETED and slot == key:
                self._slots[index] = _DELETED
                self._size -= 1
                self._deleted += 1
                return True
        return False

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        for index in self._probe(key, len(self._slots)):
            slot = self._slots[index]
            if slot is _EMPTY:
                return False
            if slot is not _DELETED and slot == key:
                return True
        return False

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[str]:
        for slot in self._slots:
            if slot is not _EMPTY and slot is not _DELETED:
                yield slot  # type: ignore[misc]

    def _rehash(self) -> None:
        keys = list(self)
        capacity = len(self._slots) * 2
        while True:
            slots = self._place_all(keys, capacity)
            if slots is not None:
                break
            capacity *= 2
        self._slots = slots
        self._deleted = 0

    def _place_all(self, keys: list[str], capacity: int) -> list[object] | None:
        slots: list[object] = [_EMPTY] * capacity
        for key in keys:
            for index in self._probe(key, capacity):
                if slots[index] is _EMPTY:
                    slots[index] = key
                    break
            else:
                return None
        return slots


_COMMAND = re.compile(r"(\S)\s*(\S+)")


def solve_hash_commands(text: str) -> str:
    """Run ``+ key``, ``- key`` and ``? key`` commands, answering OK or FAIL."""
    table = OpenAddressingSet()
    actions = {"+": table.add, "-": table.discard, "?": table.__contains__}
    lines = []
    for match in _COMMAND.finditer(text):
        action = actions.get(match.group(1))
        if action is not None:
            lines.append("OK\n" if action(match.group(2)) else "FAIL\n")
    return "".join(lines)