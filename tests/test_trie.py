# Copyright 2026, speller authors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from speller.trie import build_index, PrefixIndex
from typing import Iterator

import pytest

WORDS = ["cat", "cats", "cot", "dog", "Paris", "catalog"]


def test_every_inserted_word_is_found() -> None:
    index = build_index(WORDS)
    for word in WORDS:
        assert index.contains(word.lower())
        assert word in index


@pytest.mark.parametrize("prefix", ["c", "ca", "cata", "catal", "d", "do", "par"])
def test_strict_prefixes_are_not_words(prefix: str) -> None:
    index = build_index(WORDS)
    assert not index.contains(prefix)


@pytest.mark.parametrize("word", ["PARIS", "paris", "Paris", "CaT", "DOG"])
def test_lookup_is_case_insensitive(word: str) -> None:
    assert build_index(WORDS).contains(word)


def test_mixed_case_entries_are_folded_on_insert() -> None:
    index = build_index(["Paris"])
    assert list(index.words()) == ["paris"]
    assert index.contains("paris")


def test_missing_branch_short_circuits() -> None:
    index = build_index(WORDS)
    assert not index.contains("cab")
    assert not index.contains("catsx")
    assert not index.contains("x")


def test_empty_word_is_ignored() -> None:
    index = build_index(["", "a"])
    assert not index.contains("")
    assert not index.root.is_end_of_word
    assert len(index) == 1


def test_repeated_insert_is_idempotent() -> None:
    index = PrefixIndex()
    index.insert("cat")
    nodes = index.node_count()
    index.insert("cat")
    index.insert("CAT")
    assert len(index) == 1
    assert index.node_count() == nodes
    assert list(index.words()) == ["cat"]


def test_node_count_has_no_dangling_nodes() -> None:
    index = build_index(["cat", "cats", "cot"])
    # root, c, a, t, s, o, t
    assert index.node_count() == 7
    for label, node in index.walk():
        assert node is index.root or node.is_end_of_word or node.children, label


def test_walk_follows_first_insertion_order() -> None:
    index = build_index(["dog", "cot", "cat", "cats"])
    assert list(index.words()) == ["dog", "cot", "cat", "cats"]


def test_identical_builds_iterate_identically() -> None:
    first = build_index(WORDS)
    second = build_index(WORDS)
    assert list(first.words()) == list(second.words())


def test_walk_from_subtree() -> None:
    index = build_index(["cat", "cats", "cot"])
    node = index.root.children["c"].children["a"]
    assert [label for label, current in index.walk(node, "ca") if current.is_end_of_word] == ["cat", "cats"]


def test_deep_words_do_not_recurse() -> None:
    word = "a" * 5000
    index = build_index([word])
    assert index.contains(word)
    assert list(index.words()) == [word]


def test_failing_word_source_publishes_no_index() -> None:
    yielded: list[str] = []

    def words() -> Iterator[str]:
        for word in ["cat", "cats"]:
            yielded.append(word)
            yield word
        raise OSError("connection reset")

    index = None
    with pytest.raises(OSError):
        index = build_index(words())
    assert yielded == ["cat", "cats"]
    assert index is None
