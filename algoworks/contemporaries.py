"""Largest group of people who were adults under eighty at the same moment."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Any, TypeVar

T = TypeVar("T")

Date = tuple[int, int, int]

ADULT_AGE = 18
OLD_AGE = 80


@dataclass(frozen=True)
class Event:
    """Start (``is_death`` false) or end of a period of being able to meet."""

    day: int
    month: int
    year: int
    is_death: bool = False


def event_less(a: Event, b: Event) -> bool:
    """Order by date; on the same date an end comes before a start."""
    key_a = (a.year, a.month, a.day)
    key_b = (b.year, b.month, b.day)
    if key_a != key_b:
        return key_a < key_b
    return a.is_death > b.is_death


def _merge(first: Sequence[T], second: Sequence[T], less: Callable[[Any, Any], bool]) -> list[T]:
    result: list[T] = []
    i = j = 0
    while i < len(first) and j < len(second):
        if less(first[i], second[j]):
            result.append(first[i])
            i += 1
        else:
            result.append(second[j])
            j += 1
    result.extend(first[i:])
    result.extend(second[j:])
    return result


def merge_sort(items: Iterable[T], less: Callable[[Any, Any], bool]) -> list[T]:
    """Return a new list of ``items`` sorted by ``less`` using merge sort."""
    values = list(items)
    if len(values) <= 1:
        return values
    half = len(values) // 2
    return _merge(merge_sort(values[:half], less), merge_sort(values[half:], less), less)


def life_events(birth: Date, death: Date) -> list[Event]:
    """Start and end events of a life, or none if the person never turned 18.

    Dates are ``(day, month, year)``.
    """
    birth_day, birth_month, birth_year = birth
    death_day, death_month, death_year = death
    adult_year = birth_year + ADULT_AGE
    old_year = birth_year + OLD_AGE
    death_key = (death_year, death_month, death_day)
    if death_key < (adult_year, birth_month, birth_day):
        return []
    start = Event(birth_day, birth_month, adult_year, False)
    if death_key < (old_year, birth_month, birth_day):
        end = Event(death_day, death_month, death_year, True)
    else:
        end = Event(birth_day, birth_month, old_year, True)
    return [start, end]


def max_overlap(events: Iterable[Event]) -> int:
    """Peak number of open periods in events already in chronological order."""
    current = best = 0
    for event in events:
        current += -1 if event.is_death else 1
        best = max(best, current)
    return best


def max_contemporaries(lives: Iterable[tuple[Date, Date]]) -> int:
    """Largest number of people who could have met, given (birth, death) pairs."""
    events = [event for birth, death in lives for event in life_events(birth, death)]
    return max_overlap(merge_sort(events, event_less))


def solve_contemporaries(text: str) -> str:
    """Read ``K`` lives as six numbers each and print the maximum contemporaries."""
    numbers = [int(token) for token in text.split()]
    if not numbers:
        raise ValueError("input is empty")
    count = numbers[0]
    data = numbers[1 : 1 + 6 * count]
    if count < 0 or len(data) < 6 * count:
        raise ValueError("not enough dates in input")
    lives = [
        (tuple(data[i : i + 3]), tuple(data[i + 3 : i + 6]))
        for i in range(0, len(data), 6)
    ]
    return f"{max_contemporaries(lives)}\n"