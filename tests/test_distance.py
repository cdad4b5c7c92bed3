# Copyright 2026, speller authors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from speller.distance import damerau_levenshtein_distance

import pytest


@pytest.mark.parametrize(
    ["s", "t", "expected"],
    [
        ("", "", 0),
        ("abc", "abc", 0),
        ("ca", "ac", 1),
        ("cit", "cat", 1),
        ("cit", "cats", 2),
        ("cat", "cats", 1),
        ("", "ab", 2),
        ("ab", "", 2),
        ("abcd", "acbd", 1),
        ("abcd", "badc", 2),
        ("flaw", "lawn", 2),
        ("cit", "dog", 3),
    ],
)
def test_distance(s: str, t: str, expected: int) -> None:
    assert damerau_levenshtein_distance(s, t) == expected


def test_kitten_sitting_is_rejected() -> None:
    assert damerau_levenshtein_distance("kitten", "sitting", 2) > 2


def test_length_difference_returns_sentinel() -> None:
    assert damerau_levenshtein_distance("a", "abcdef", 2) == 3
    assert damerau_levenshtein_distance("abcdef", "a", 1) == 2
    assert damerau_levenshtein_distance("", "abc", 0) == 1


def test_larger_bound_gives_exact_distance() -> None:
    assert damerau_levenshtein_distance("kitten", "sitting", 5) == 3
    assert damerau_levenshtein_distance("a", "abcdef", 5) == 5


def test_transposition_is_not_free() -> None:
    assert damerau_levenshtein_distance("teh", "the") == 1
    assert damerau_levenshtein_distance("ab", "ba") == 1
