"""Ordering boxes so that each one nests inside the next."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, replace
from typing import Any, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Box:
    """A box with three dimensions and its arrival number."""

    x: int
    y: int
    z: int
    id: int = 0

    def normalized(self) -> Box:
        """The same box turned so that its dimensions ascend."""
        x, y, z = sorted((self.x, self.y, self.z))
        return replace(self, x=x, y=y, z=z)

    @property
    def dimensions(self) -> tuple[int, int, int]:
        return self.x, self.y, self.z


def insertion_sort(items: Iterable[T], less: Callable[[Any, Any], bool]) -> list[T]:
    """Stable insertion sort into a new list ordered by ``less``."""
    result: list[T] = []
    for item in items:
        position = len(result)
        while position > 0 and less(item, result[position - 1]):
            position -= 1
        result.insert(position, item)
    return result


def _box_less(a: Box, b: Box) -> bool:
    return a.dimensions < b.dimensions


def nesting_order(boxes: Iterable[Sequence[int]]) -> list[int]:
    """Arrival numbers of the boxes from the smallest to the largest."""
    normalized = [Box(*dims, id=index).normalized() for index, dims in enumerate(boxes)]
    return [box.id for box in insertion_sort(normalized, _box_less)]


def solve_boxes(text: str) -> str:
    """Read ``n`` boxes of three dimensions each and print their nesting order."""
    numbers = [int(token) for token in text.split()]
    if not numbers:
        raise ValueError("input is empty")
    count = numbers[0]
    dims = numbers[1 : 1 + 3 * count]
    if count < 0 or len(dims) < 3 * count:
        raise ValueError("not enough dimensions in input")
    boxes = [dims[i : i + 3] for i in range(0, len(dims), 3)]
    return "".join(f"{index} " for index in nesting_order(boxes)) + "\n"