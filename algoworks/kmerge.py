"""A binary heap with a custom ordering and k-way merging of sorted arrays."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")

Less = Callable[[Any, Any], bool]


class Heap(Generic[T]):
    """Binary heap whose top is the item that ``less`` ranks first."""

    def __init__(self, items: Iterable[T] = (), less: Less = operator.lt):
        self._items: list[T] = []
        self._less = less
        for item in items:
            self.push(item)

    def push(self, item: T) -> None:
        """Add ``item`` to the heap."""
        self._items.append(item)
        self._sift_up(len(self._items) - 1)

    def pop(self) -> T:
        """Remove and return the top item."""
        if not self._items:
            raise IndexError("pop from an empty heap")
        top = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            self._sift_down(0)
        return top

    def peek(self) -> T:
        """Return the top item without removing it."""
        if not self._items:
            raise IndexError("peek into an empty heap")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)

    def _sift_up(self, index: int) -> None:
        items, less = self._items, self._less
        while index > 0:
            parent = (index - 1) // 2
            if not less(items[index], items[parent]):
                break
            items[index], items[parent] = items[parent], items[index]
            index = parent

    def _sift_down(self, index: int) -> None:
        items, less = self._items, self._less
        size = len(items)
        while True:
            smallest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and less(items[child], items[smallest]):
                    smallest = child
            if smallest == index:
                return
            items[index], items[smallest] = items[smallest], items[index]
            index = smallest


@dataclass(frozen=True)
class _Cursor:
    array: Sequence[Any]
    position: int

    @property
    def value(self) -> Any:
        return self.array[self.position]

    def advanced(self) -> _Cursor | None:
        if self.position + 1 < len(self.array):
            return _Cursor(self.array, self.position + 1)
        return None


def merge_sorted(arrays: Iterable[Sequence[T]], less: Less = operator.lt) -> list[T]:
    """Merge arrays each sorted by ``less`` into one list sorted by ``less``."""
    heap: Heap[_Cursor] = Heap(
        (_Cursor(array, 0) for array in arrays if len(array)),
        less=lambda a, b: less(a.value, b.value),
    )
    result: list[T] = []
    while heap:
        cursor = heap.pop()
        result.append(cursor.value)
        following = cursor.advanced()
        if following is not None:
            heap.push(following)
    return result


def solve_merge(text: str) -> str:
    """Read ``K`` arrays given as a size and its elements; print them merged."""
    tokens = iter(int(token) for token in text.split())
    try:
        count = next(tokens)
        arrays = []
        for _ in range(count):
            size = next(tokens)
            arrays.append([next(tokens) for _ in range(size)])
    except StopIteration:
        raise ValueError("not enough numbers in input") from None
    return "".join(f"{value} " for value in merge_sorted(arrays)) + "\n"