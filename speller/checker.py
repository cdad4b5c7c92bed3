# Copyright 2026, speller authors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from .distance import DEFAULT_MAX_DISTANCE
from .sources import dictionary_location, open_word_source
from .suggest import get_suggestions, Suggestion
from .trie import build_index, PrefixIndex, TrieNode
from requests import Session
from typing import Any, Iterable, NamedTuple

import logging


class CheckResult(NamedTuple):
    valid: bool
    suggestions: tuple[str, ...] | None = None

    def to_dict(self) -> dict[str, Any]:
        if self.valid:
            return {"valid": True}
        return {"valid": False, "suggestions": list(self.suggestions or ())}


class SpellChecker:
    """Spell checker around a fully built PrefixIndex"""

    def __init__(self, index: PrefixIndex) -> None:
        self.log = logging.getLogger("SpellChecker")
        self.index = index

    @classmethod
    def from_words(cls, words: Iterable[str]) -> SpellChecker:
        return cls(build_index(words))

    @classmethod
    def create_from(
        cls,
        dictionary: str,
        base: str = "dictionaries",
        session: Session | None = None,
        timeout: float | None = None,
    ) -> SpellChecker:
        """Load one of the named dictionaries ("popular", "enable1", "ospd") from `base`,
        a directory or an HTTP(S) URL
        """
        location = dictionary_location(dictionary, base)
        return cls.from_words(open_word_source(location, session=session, timeout=timeout))

    def get_suggestions(
        self,
        word: str,
        node: TrieNode | None = None,
        prefix: str = "",
        distance: int = DEFAULT_MAX_DISTANCE,
    ) -> list[Suggestion]:
        return get_suggestions(self.index, word, node=node, prefix=prefix, distance=distance)

    def check(self, word: str) -> CheckResult:
        if self.index.contains(word):
            return CheckResult(valid=True)

        suggestions = tuple(suggestion.word for suggestion in self.get_suggestions(word))
        self.log.debug("%r not found, %d suggestions", word, len(suggestions))
        return CheckResult(valid=False, suggestions=suggestions)
