# Copyright 2026, speller authors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from .checker import CheckResult, SpellChecker
from .distance import damerau_levenshtein_distance
from .suggest import get_suggestions, Suggestion
from .trie import build_index, PrefixIndex, TrieNode

__all__ = [
    "CheckResult",
    "PrefixIndex",
    "SpellChecker",
    "Suggestion",
    "TrieNode",
    "build_index",
    "damerau_levenshtein_distance",
    "get_suggestions",
]
