"""The puzzle board: a pool of available letters solved against a WordTree."""

from __future__ import annotations

from ninep.alphabet import validate_word
from ninep.word_tree import WordTree


def sort_results(words: list[str]) -> list[str]:
    """Longest first, then alphabetical."""
    return sorted(words, key=lambda w: (-len(w), w))


class Board:
    """Available letters for one puzzle, e.g. ``Board("abcdefghi", tree)``."""

    def __init__(self, letters: str, tree: WordTree, min_length: int = 1) -> None:
        self.letters = validate_word(letters.strip().lower())
        self.tree = tree
        self.min_length = min_length

    def solve(self) -> list[str]:
        words = [w for w in self.tree.solve(self.letters) if len(w) >= self.min_length]
        return sort_results(words)

    def __repr__(self) -> str:
        return f"Board({self.letters!r})"
