"""Character frequency counting.

``count`` is the single counting routine; the ``count_*`` helpers fix its
predicate to one of the named presets in :mod:`charcount.presets`.
"""

from __future__ import annotations

from collections import Counter
from typing import Callable

from .models import CharCount, CountResult
from .presets import (
    accept_all,
    get_predicate,
    is_alphabetic,
    is_alphanumeric,
    is_ascii,
    is_chinese,
    is_not_space,
    is_numeric,
    is_whitespace,
)


def count(text: str, predicate: Callable[[str], bool] | None = None) -> CountResult:
    keep = predicate or accept_all
    c: Counter[str] = Counter(ch for ch in text if keep(ch))
    entries = [CharCount(character=ch, count=int(n)) for ch, n in c.items()]
    # Descending count, then ascending code point.
    entries.sort(key=lambda e: (-e.count, e.character))
    return CountResult(entries)


def count_preset(text: str, name: str) -> CountResult:
    return count(text, get_predicate(name))


def count_all(text: str) -> CountResult:
    return count(text, accept_all)


def count_ascii(text: str) -> CountResult:
    return count(text, is_ascii)


def count_numeric(text: str) -> CountResult:
    return count(text, is_numeric)


def count_alphabetic(text: str) -> CountResult:
    return count(text, is_alphabetic)


def count_alphanumeric(text: str) -> CountResult:
    return count(text, is_alphanumeric)


def count_whitespace(text: str) -> CountResult:
    return count(text, is_whitespace)


def count_no_whitespace(text: str) -> CountResult:
    """Count everything except the plain space character.

    Tabs, newlines and other whitespace are still counted; only ``" "`` is
    dropped. Use :func:`count` with your own predicate to skip all whitespace.
    """
    return count(text, is_not_space)


def count_chinese(text: str) -> CountResult:
    return count(text, is_chinese)
