from __future__ import annotations

from typing import Callable, Sequence

from .models import CharCount, CountResult, EmptyResultError


def filter_counts(result: Sequence[CharCount], predicate: Callable[[CharCount], bool]) -> CountResult:
    return CountResult(e for e in result if predicate(e))


def most(result: Sequence[CharCount]) -> CountResult:
    """Entries sharing the highest count (a prefix of a sorted result)."""
    if not result:
        raise EmptyResultError("most() needs at least one entry")
    top = result[0].count
    return filter_counts(result, lambda e: e.count == top)


def least(result: Sequence[CharCount]) -> CountResult:
    """Entries sharing the lowest count (a suffix of a sorted result)."""
    if not result:
        raise EmptyResultError("least() needs at least one entry")
    bottom = result[-1].count
    return filter_counts(result, lambda e: e.count == bottom)


def find_by_count(result: Sequence[CharCount], n: int) -> CountResult:
    want = int(n)
    return filter_counts(result, lambda e: e.count == want)


def find_by_char(result: Sequence[CharCount], c: str) -> CharCount | None:
    for e in result:
        if e.character == c:
            return e
    return None
