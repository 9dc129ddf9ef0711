import operator

import pytest

from algoworks.contemporaries import (
    Event,
    event_less,
    life_events,
    max_contemporaries,
    max_overlap,
    merge_sort,
    solve_contemporaries,
)

SOURCE_EVENTS = [
    Event(2, 1, 1938, False),
    Event(1, 1, 2000, False),
    Event(2, 1, 2000, True),
    Event(1, 1, 2030, True),
    Event(2, 5, 1998, False),
    Event(2, 5, 2060, True),
]


def test_event_less_orders_by_date():
    assert event_less(Event(2, 1, 1938), Event(2, 5, 1998))
    assert not event_less(Event(2, 5, 1998), Event(2, 1, 1938))


def test_event_less_death_first_on_same_date():
    assert event_less(Event(1, 1, 2000, True), Event(1, 1, 2000, False))
    assert not event_less(Event(1, 1, 2000, False), Event(1, 1, 2000, True))


def test_merge_sort_events_strictly_increasing():
    ordered = merge_sort(SOURCE_EVENTS, event_less)
    assert len(ordered) == 6
    for earlier, later in zip(ordered, ordered[1:]):
        assert event_less(earlier, later)


def test_merge_sort_events_dates():
    ordered = merge_sort(SOURCE_EVENTS, event_less)
    assert [(e.year, e.month, e.day) for e in ordered] == [
        (1938, 1, 2),
        (1998, 5, 2),
        (2000, 1, 1),
        (2000, 1, 2),
        (2030, 1, 1),
        (2060, 5, 2),
    ]


def test_max_overlap_of_source_events():
    assert max_overlap(merge_sort(SOURCE_EVENTS, event_less)) == 3


def test_merge_sort_integers_matches_sorted():
    values = [5, 3, 9, 1, 7, 2, 8, 4, 6, 0]
    assert merge_sort(values, operator.lt) == sorted(values)
    assert values == [5, 3, 9, 1, 7, 2, 8, 4, 6, 0]


def test_life_events_capped_at_eighty():
    assert life_events((2, 5, 1980), (1, 1, 2100)) == [
        Event(2, 5, 1998, False),
        Event(2, 5, 2060, True),
    ]


def test_life_events_death_before_eighty():
    assert life_events((1, 1, 1982), (1, 1, 2030)) == [
        Event(1, 1, 2000, False),
        Event(1, 1, 2030, True),
    ]


def test_life_events_died_before_adulthood():
    assert life_events((1, 1, 2000), (31, 12, 2017)) == []


def test_died_on_eighteenth_birthday_never_counts():
    assert max_contemporaries([((1, 1, 2000), (1, 1, 2018))]) == 0


def test_max_contemporaries_source_people():
    lives = [
        ((2, 1, 1920), (2, 1, 2000)),
        ((1, 1, 1982), (1, 1, 2030)),
        ((2, 5, 1980), (2, 5, 2060)),
    ]
    assert max_contemporaries(lives) == 3


def test_max_contemporaries_empty():
    assert max_contemporaries([]) == 0


def test_solve_contemporaries():
    text = "3\n2 1 1920 2 1 2000\n1 1 1982 1 1 2030\n2 5 1980 2 5 2060\n"
    assert solve_contemporaries(text) == "3\n"


def test_solve_contemporaries_truncated():
    with pytest.raises(ValueError):
        solve_contemporaries("1\n2 1 1920 2 1")