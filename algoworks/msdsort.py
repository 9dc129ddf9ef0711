"""Most-significant-digit radix sort of strings by character codes."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable

_END = 0


def _code(text: str, position: int) -> int:
    return ord(text[position]) if position < len(text) else _END


def msd_sort(strings: Iterable[str]) -> list[str]:
    """Return the strings sorted character by character, most significant first.

    A string that ends before the current position falls into the lowest
    bucket, as does a NUL character, so shorter prefixes come first. Equal
    strings keep their relative order.
    """
    result = list(strings)
    pending = [(0, len(result), 0)]
    while pending:
        start, end, position = pending.pop()
        if end - start <= 1:
            continue
        buckets: defaultdict[int, list[str]] = defaultdict(list)
        for text in result[start:end]:
            buckets[_code(text, position)].append(text)
        index = start
        for code in sorted(buckets):
            bucket = buckets[code]
            result[index : index + len(bucket)] = bucket
            if code != _END and len(bucket) > 1:
                pending.append((index, index + len(bucket), position + 1))
            index += len(bucket)
    return result


def solve_msd(text: str) -> str:
    """Read whitespace-separated words and print them sorted, one per line."""
    return "".join(f"{word}\n" for word in msd_sort(text.split()))