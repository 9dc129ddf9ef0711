"""A double-ended queue on a growable circular buffer, and tasks built on it."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

MAX_CAPACITY = 1_000_000


class RingDeque:
    """Deque stored in a circular buffer that doubles when full."""

    def __init__(self, iterable: Iterable[Any] = (), *, max_capacity: int = MAX_CAPACITY):
        if max_capacity < 1:
            raise ValueError("max_capacity must be positive")
        self._buffer: list[Any] = []
        self._head = 0
        self._size = 0
        self._max_capacity = max_capacity
        for value in iterable:
            self.push_back(value)

    @property
    def capacity(self) -> int:
        return len(self._buffer)

    def _ensure_room(self) -> None:
        capacity = len(self._buffer)
        if self._size < capacity:
            return
        if capacity >= self._max_capacity:
            raise OverflowError("deque is at its maximum capacity")
        new_capacity = min(max(2, capacity * 2), self._max_capacity)
        items = self._buffer[self._head :] + self._buffer[: self._head]
        self._buffer = items + [None] * (new_capacity - len(items))
        self._head = 0

    def push_front(self, value: Any) -> None:
        self._ensure_room()
        self._head = (self._head - 1) % len(self._buffer)
        self._buffer[self._head] = value
        self._size += 1

    def push_back(self, value: Any) -> None:
        self._ensure_room()
        self._buffer[(self._head + self._size) % len(self._buffer)] = value
        self._size += 1

    def pop_front(self) -> Any:
        if not self._size:
            raise IndexError("pop from an empty deque")
        value = self._buffer[self._head]
        self._buffer[self._head] = None
        self._head = (self._head + 1) % len(self._buffer)
        self._size -= 1
        if not self._size:
            self._head = 0
        return value

    def pop_back(self) -> Any:
        if not self._size:
            raise IndexError("pop from an empty deque")
        index = (self._head + self._size - 1) % len(self._buffer)
        value = self._buffer[index]
        self._buffer[index] = None
        self._size -= 1
        if not self._size:
            self._head = 0
        return value

    def front(self) -> Any:
        if not self._size:
            raise IndexError("front of an empty deque")
        return self._buffer[self._head]

    def back(self) -> Any:
        if not self._size:
            raise IndexError("back of an empty deque")
        return self._buffer[(self._head + self._size - 1) % len(self._buffer)]

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        capacity = len(self._buffer)
        for offset in range(self._size):
            yield self._buffer[(self._head + offset) % capacity]

    def __repr__(self) -> str:
        return f"RingDeque({list(self)!r})"


def is_stack_anagram(source: str, target: str) -> bool:
    """Whether pushing ``source`` letters onto a stack and popping can spell ``target``."""
    stack = RingDeque()
    matched = 0
    for letter in source:
        stack.push_back(letter)
        while stack and matched < len(target) and stack.back() == target[matched]:
            stack.pop_back()
            matched += 1
    return not stack


def _pop_or_sentinel(pop) -> int:
    try:
        return pop()
    except IndexError:
        return -1


def solve_deque_commands(text: str) -> str:
    """Run deque commands and report whether every pop returned the expected value.

    Commands: 1 push front, 2 pop front, 3 push back, 4 pop back. A pop from
    an empty deque yields -1.
    """
    numbers = [int(token) for token in text.split()]
    if not numbers:
        raise ValueError("input is empty")
    count = numbers[0]
    pairs = numbers[1 : 1 + 2 * count]
    if count < 0 or len(pairs) < 2 * count:
        raise ValueError("not enough commands in input")
    deque = RingDeque()
    consistent = True
    for command, value in zip(pairs[::2], pairs[1::2]):
        if command == 1:
            deque.push_front(value)
        elif command == 2:
            if _pop_or_sentinel(deque.pop_front) != value:
                consistent = False
        elif command == 3:
            deque.push_back(value)
        elif command == 4:
            if _pop_or_sentinel(deque.pop_back) != value:
                consistent = False
    return "YES\n" if consistent else "NO\n"


def solve_stack_anagram(text: str) -> str:
    """Read two words and answer YES if the second is a stack anagram of the first."""
    words = text.split()
    if len(words) < 2:
        raise ValueError("two words are required")
    return "YES\n" if is_stack_anagram(words[0], words[1]) else "NO\n"