"""Order statistics by quickselect with a random pivot."""

from __future__ import annotations

import operator
import random
from collections.abc import Callable, Iterable, MutableSequence
from typing import Any

Less = Callable[[Any, Any], bool]


def partition(
    values: MutableSequence[Any],
    left: int,
    right: int,
    less: Less = operator.lt,
    rng: random.Random | None = None,
) -> int:
    """Partition ``values[left:right + 1]`` in place around a random pivot.

    Both scanning positions move from the end towards the start. Returns the
    pivot's final index: items before it rank below the pivot, items after
    it do not.
    """
    if not 0 <= left <= right < len(values):
        raise IndexError("partition range is out of bounds")
    rng = rng if rng is not None else random.Random()
    pivot_index = rng.randrange(left, right + 1)
    values[pivot_index], values[right] = values[right], values[pivot_index]
    pivot = values[right]
    boundary = right
    for j in range(right - 1, left - 1, -1):
        if not less(values[j], pivot):
            boundary -= 1
            values[boundary], values[j] = values[j], values[boundary]
    values[boundary], values[right] = values[right], values[boundary]
    return boundary


def kth_statistic(
    values: MutableSequence[Any],
    k: int,
    left: int = 0,
    right: int | None = None,
    less: Less = operator.lt,
    rng: random.Random | None = None,
) -> Any:
    """The item that would stand at index ``k`` if the range were sorted.

    Reorders ``values`` in place.
    """
    if right is None:
        right = len(values) - 1
    if not left <= k <= right:
        raise IndexError("k is outside the search range")
    rng = rng if rng is not None else random.Random()
    while True:
        pivot = partition(values, left, right, less, rng)
        if pivot == k:
            return values[pivot]
        if pivot > k:
            right = pivot - 1
        else:
            left = pivot + 1


def percentiles(values: Iterable[Any]) -> tuple[Any, Any, Any]:
    """The 10th percentile, the median and the 90th percentile."""
    items = list(values)
    n = len(items)
    if n == 0:
        raise ValueError("no values given")
    rng = random.Random()
    return tuple(
        kth_statistic(items, int(share * n), rng=rng) for share in (0.1, 0.5, 0.9)
    )


def solve_percentiles(text: str) -> str:
    """Read ``n`` numbers and print their three percentiles, one per line."""
    numbers = [int(token) for token in text.split()]
    if not numbers:
        raise ValueError("input is empty")
    count = numbers[0]
    if count < 0 or len(numbers) < count + 1:
        raise ValueError("not enough numbers in input")
    return "".join(f"{value}\n" for value in percentiles(numbers[1 : count + 1]))