from __future__ import annotations

import pytest

from charcount.counter import count
from charcount.models import CharCount, CountResult, EmptyResultError
from charcount.query import filter_counts, find_by_char, find_by_count, least, most


HELLO = "Hello world!"


def test_most_hello_world() -> None:
    assert most(count(HELLO)) == (CharCount("l", 3),)


def test_least_hello_world() -> None:
    assert least(count(HELLO)) == tuple(
        CharCount(c, 1) for c in [" ", "!", "H", "d", "e", "r", "w"]
    )


def test_find_by_count() -> None:
    r = count(HELLO)
    assert find_by_count(r, 2) == (CharCount("o", 2),)
    assert find_by_count(r, 7) == ()
    assert find_by_count(CountResult(), 1) == ()


def test_find_by_char() -> None:
    r = count(HELLO)
    assert find_by_char(r, "H") == CharCount("H", 1)
    assert find_by_char(r, "z") is None
    assert find_by_char(CountResult(), "a") is None


def test_most_and_least_are_prefix_and_suffix() -> None:
    r = count("aabbbccdde")
    top = most(r)
    bottom = least(r)
    assert top and bottom
    assert r[: len(top)] == top
    assert r[len(r) - len(bottom):] == bottom
    assert {e.count for e in top} == {max(e.count for e in r)}
    assert {e.count for e in bottom} == {min(e.count for e in r)}


def test_single_distinct_char_is_both_most_and_least() -> None:
    r = count("zzz")
    assert most(r) == least(r) == (CharCount("z", 3),)


def test_most_on_empty_raises() -> None:
    with pytest.raises(EmptyResultError):
        most(CountResult())


def test_least_on_empty_raises() -> None:
    with pytest.raises(EmptyResultError):
        least(count("abc", lambda _c: False))


def test_empty_result_error_is_value_error() -> None:
    assert issubclass(EmptyResultError, ValueError)


def test_find_by_char_iff_accepted() -> None:
    text = "ab1 2"
    r = count(text, str.isdigit)
    for c in "ab12 x":
        assert (find_by_char(r, c) is not None) == (c in text and c.isdigit())


def test_queries_chain() -> None:
    r = count(HELLO)
    assert r.least().find_by_char("H") == CharCount("H", 1)
    assert r.most().most() == r.most()
    assert r.find_by_count(1).least() == r.least()
    assert r.least().find_by_count(3) == ()


def test_filter_counts_preserves_order() -> None:
    r = count(HELLO)
    upper = filter_counts(r, lambda e: e.character.isupper())
    assert isinstance(upper, CountResult)
    assert upper == (CharCount("H", 1),)
    assert r.filter(lambda e: e.count >= 2) == (CharCount("l", 3), CharCount("o", 2))


def test_queries_do_not_mutate_input() -> None:
    r = count(HELLO)
    before = tuple(r)
    r.most()
    r.least()
    r.find_by_count(1)
    assert tuple(r) == before
