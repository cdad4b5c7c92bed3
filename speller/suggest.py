# Copyright 2026, speller authors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""Ranked spelling suggestions drawn from a PrefixIndex"""
from __future__ import annotations

from .distance import damerau_levenshtein_distance, DEFAULT_MAX_DISTANCE
from .trie import fold, PrefixIndex, TrieNode
from typing import NamedTuple

MAX_SUGGESTIONS = 6


class Suggestion(NamedTuple):
    word: str
    distance: int


def _rank(suggestion: Suggestion) -> tuple[int, int]:
    return suggestion.distance, len(suggestion.word)


def get_suggestions(
    index: PrefixIndex,
    word: str,
    node: TrieNode | None = None,
    prefix: str = "",
    distance: int = DEFAULT_MAX_DISTANCE,
) -> list[Suggestion]:
    """Dictionary words within `distance` edits of `word`, closest first.

    Every word stored below `node` (the root by default) is compared, there is
    no pruning of subtrees. Candidates are ordered by distance and then by
    length; equal candidates stay in trie order. At most MAX_SUGGESTIONS are
    returned.

    The reported distance is always computed under DEFAULT_MAX_DISTANCE, so
    with a larger `distance` every candidate whose length differs by more
    than that reports DEFAULT_MAX_DISTANCE + 1.
    """
    word = fold(word)
    suggestions = []
    for candidate, current in index.walk(node, prefix):
        if not current.is_end_of_word:
            continue
        # gate with the caller bound, rank by the value under the default bound
        if damerau_levenshtein_distance(word, candidate, distance) <= distance:
            suggestions.append(Suggestion(candidate, damerau_levenshtein_distance(word, candidate)))

    suggestions.sort(key=_rank)
    return suggestions[:MAX_SUGGESTIONS]
