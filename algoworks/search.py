"""Searching in bitonic and sorted integer sequences."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence


def _read_ints(text: str) -> list[int]:
    return [int(token) for token in text.split()]


def exponential_search(values: Sequence[int]) -> tuple[int, int]:
    """Return bounds (left, right) that enclose the peak of a bitonic sequence.

    The bound doubles while the sequence keeps rising, so the cost is
    logarithmic in the position of the peak.
    """
    n = len(values)
    if n == 0:
        raise ValueError("sequence is empty")
    bound = 1
    while bound < n and values[bound] > values[bound - 1]:
        bound <<= 1
    return bound >> 1, min(bound, n - 1)


def peak_in_range(values: Sequence[int], left: int, right: int) -> int:
    """Binary search for the peak index between ``left`` and ``right`` inclusive."""
    if not 0 <= left <= right < len(values):
        raise IndexError("search range is out of bounds")
    while left < right:
        mid = (left + right) // 2
        if values[mid] > values[mid + 1]:
            right = mid
        else:
            left = mid + 1
    return left


def find_peak(values: Sequence[int]) -> int:
    """Index of the maximum of a strictly rising then strictly falling sequence."""
    left, right = exponential_search(values)
    return peak_in_range(values, left, right)


def insertion_position(values: Sequence[int], target: int) -> int:
    """Index of ``target`` in sorted distinct ``values``, or where it would be inserted."""
    return bisect_left(values, target)


def solve_peak(text: str) -> str:
    """Read ``n`` and ``n`` numbers; answer with the index of the peak."""
    numbers = _read_ints(text)
    if not numbers:
        raise ValueError("input is empty")
    count, values = numbers[0], numbers[1:]
    if count < 0 or len(values) < count:
        raise ValueError("not enough numbers in input")
    return f"{find_peak(values[:count])}\n"


def solve_insertion(text: str) -> str:
    """Read ``n``, ``n`` sorted numbers and ``k``; answer with k's position."""
    numbers = _read_ints(text)
    if not numbers:
        raise ValueError("input is empty")
    count = numbers[0]
    if count < 0 or len(numbers) < count + 2:
        raise ValueError("not enough numbers in input")
    values = numbers[1 : count + 1]
    target = numbers[count + 1]
    return f"{insertion_position(values, target)}\n"