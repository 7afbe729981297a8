from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable


class EmptyResultError(ValueError):
    """Raised when an extremal query (most/least) is asked of an empty result."""


@dataclass(frozen=True, order=True)
class CharCount:
    character: str
    count: int

    def as_dict(self) -> dict:
        return {"char": self.character, "count": self.count}


class CountResult(tuple):
    """Sorted, per-character-unique sequence of CharCount entries.

    Entries run by descending count, ties broken by ascending code point.
    Compares equal to a plain tuple of the same entries.
    """

    __slots__ = ()

    def __new__(cls, entries: Iterable[CharCount] = ()) -> "CountResult":
        return super().__new__(cls, entries)

    def __repr__(self) -> str:
        return f"CountResult({list(self)!r})"

    @property
    def total(self) -> int:
        return sum(e.count for e in self)

    def most(self) -> "CountResult":
        from .query import most

        return most(self)

    def least(self) -> "CountResult":
        from .query import least

        return least(self)

    def find_by_count(self, n: int) -> "CountResult":
        from .query import find_by_count

        return find_by_count(self, n)

    def find_by_char(self, c: str) -> CharCount | None:
        from .query import find_by_char

        return find_by_char(self, c)

    def filter(self, predicate: Callable[[CharCount], bool]) -> "CountResult":
        from .query import filter_counts

        return filter_counts(self, predicate)

    def as_dicts(self) -> list[dict]:
        return [e.as_dict() for e in self]
