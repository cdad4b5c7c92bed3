# Copyright 2026, speller authors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""Prefix tree holding the known words of a dictionary"""
from __future__ import annotations

from typing import Iterable, Iterator

import logging

log = logging.getLogger("speller.trie")


def fold(word: str) -> str:
    """Case folding applied on both insert and lookup"""
    return word.lower()


class TrieNode:
    __slots__ = ("children", "is_end_of_word")

    def __init__(self) -> None:
        # dicts keep insertion order, which pins the traversal order of a build
        self.children: dict[str, TrieNode] = {}
        self.is_end_of_word = False


class PrefixIndex:
    """Trie of folded words.

    Words are lowercased when inserted and when looked up, so a dictionary
    containing "Paris" answers both "paris" and "PARIS". The empty string is
    never stored.
    """

    def __init__(self) -> None:
        self.root = TrieNode()
        self._size = 0

    def insert(self, word: str) -> None:
        if not word:
            return

        node = self.root
        for char in fold(word):
            child = node.children.get(char)
            if child is None:
                child = node.children[char] = TrieNode()
            node = child

        if not node.is_end_of_word:
            node.is_end_of_word = True
            self._size += 1

    def insert_many(self, words: Iterable[str]) -> None:
        for word in words:
            self.insert(word)

    def contains(self, word: str) -> bool:
        node = self.root
        for char in fold(word):
            node = node.children.get(char)
            if node is None:
                return False
        return node.is_end_of_word

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __len__(self) -> int:
        return self._size

    def walk(self, node: TrieNode | None = None, prefix: str = "") -> Iterator[tuple[str, TrieNode]]:
        """Pre-order walk yielding (path label, node) for every node below `node`

        Uses an explicit stack so deep entries cannot hit the recursion limit.
        Children are visited in the order their characters were first inserted.
        """
        stack = [(prefix, node or self.root)]
        while stack:
            label, current = stack.pop()
            yield label, current
            for char, child in reversed(current.children.items()):
                stack.append((label + char, child))

    def words(self) -> Iterator[str]:
        for label, node in self.walk():
            if node.is_end_of_word:
                yield label

    def node_count(self) -> int:
        return sum(1 for _ in self.walk())


def build_index(words: Iterable[str]) -> PrefixIndex:
    """Build a PrefixIndex from `words`, all or nothing.

    The index is only returned after every word has been inserted; an error
    raised while iterating `words` propagates and the partial index is dropped.
    """
    index = PrefixIndex()
    index.insert_many(words)
    log.debug("built index with %d words", len(index))
    return index
