# Copyright 2026, speller authors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

DEFAULT_MAX_DISTANCE = 2


def damerau_levenshtein_distance(s: str, t: str, max_distance: int = DEFAULT_MAX_DISTANCE) -> int:
    """Edit distance between `s` and `t` counting insertions, deletions,
    substitutions and transpositions of adjacent characters as one edit each.

    When the lengths alone differ by more than `max_distance` the table is not
    computed and `max_distance + 1` is returned instead. Any result above
    `max_distance` must therefore be read as "too far", not as an exact count.
    """
    if abs(len(s) - len(t)) > max_distance:
        return max_distance + 1

    m, n = len(s), len(t)
    # rows i-2, i-1 and i of the (m+1) x (n+1) table
    before_previous_row: list[int] = []
    previous_row = list(range(n + 1))
    for i in range(1, m + 1):
        current_row = [i] + [0] * n
        for j in range(1, n + 1):
            substitution_cost = 0 if s[i - 1] == t[j - 1] else 1
            current_row[j] = min(
                current_row[j - 1] + 1,
                previous_row[j] + 1,
                previous_row[j - 1] + substitution_cost,
            )
            if i > 1 and j > 1 and s[i - 1] == t[j - 2] and s[i - 2] == t[j - 1]:
                current_row[j] = min(current_row[j], before_previous_row[j - 2] + 1)
        before_previous_row, previous_row = previous_row, current_row

    return previous_row[n]
