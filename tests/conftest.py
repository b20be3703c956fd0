"""Shared fixtures for solver tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from ninep.word_tree import WordTree


@pytest.fixture
def small_words() -> list[str]:
    """Hand-picked words covering prefixes, repeats and double letters."""
    return [
        # prefixes of each other
        "a", "at", "ate", "cat", "cats", "act", "acts",
        "kind", "kinder", "happy", "happiness",
        # double letters
        "oo", "zoo", "zoos", "book", "boot", "boo",
        # assorted
        "dog", "god", "tea", "eat", "seat", "east", "stake", "steak",
    ]


@pytest.fixture
def small_tree(small_words: list[str]) -> WordTree:
    """Tree built directly from small_words. No file I/O."""
    return WordTree.from_words(small_words)


@pytest.fixture
def word_list_file(tmp_path: Path, small_words: list[str]) -> Path:
    path = tmp_path / "words.txt"
    path.write_text("\n".join(small_words) + "\n")
    return path
