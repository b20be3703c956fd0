"""26-way prefix trie built from a sorted word list, with letter-pool search.

The tree is built in one divide-and-conquer pass over the sorted,
deduplicated words: each node binary-searches its slice for the range of
suffixes that start with each letter and recurses on that range with the
letter stripped. Nothing is mutated once ``WordTree.from_words`` returns, so
a built tree can be shared between threads.
"""

from __future__ import annotations

import logging
from bisect import bisect_left
from typing import Callable, Iterable

from ninep.alphabet import ALPHABET, ALPHABET_SIZE, letter_to_index, validate_word

logger = logging.getLogger("ninep")

ProgressHook = Callable[[int], None]


class TrieConsistencyError(AssertionError):
    """The builder was handed words that are not sorted and grouped by letter."""


class TrieNode:
    __slots__ = ("children", "is_terminal")

    def __init__(self) -> None:
        self.children: list[TrieNode | None] = [None] * ALPHABET_SIZE
        self.is_terminal: bool = False


def build_node(words: list[str], progress: ProgressHook | None = None) -> TrieNode:
    """Build the subtree holding exactly *words*.

    *words* must be sorted and free of duplicates; an empty string, if
    present, comes first and marks this node as terminal. Recursion depth
    equals the longest word, so words must stay well under the interpreter's
    recursion limit.
    """
    node = TrieNode()
    if not words:
        return node

    node.is_terminal = words[0] == ""
    if node.is_terminal and progress is not None:
        progress(1)

    end = len(words) - 1 if words[-1] == "" else len(words)
    # Walk z..a so each letter's range ends where the next letter's began.
    for index in range(ALPHABET_SIZE - 1, -1, -1):
        letter = ALPHABET[index]
        start = bisect_left(words, letter, 0, end)
        if start < end:
            suffixes: list[str] = []
            for word in words[start:end]:
                if not word.startswith(letter):
                    raise TrieConsistencyError(
                        f"Expected {word!r} to start with {letter!r}; "
                        "input was not sorted"
                    )
                suffixes.append(word[1:])
            node.children[index] = build_node(suffixes, progress)
        end = start
        if start == 0:
            break
    return node


class WordTree:
    """Immutable dictionary trie answering letter-pool queries."""

    __slots__ = ("root", "_word_count")

    def __init__(self, root: TrieNode | None = None, word_count: int = 0) -> None:
        self.root = root if root is not None else TrieNode()
        self._word_count = word_count

    @classmethod
    def from_words(cls, words: Iterable[str],
                   progress: ProgressHook | None = None) -> WordTree:
        """Validate, sort and deduplicate *words*, then build the tree.

        Raises ``InvalidCharacterError`` for the first word containing a
        character outside a-z. *progress* is called with 1 for every word
        placed in the tree.
        """
        unique = sorted({validate_word(w) for w in words})
        logger.info("Building word tree from %d unique words", len(unique))
        tree = cls(build_node(unique, progress), len(unique))
        logger.debug(
            "First layer of tree %s",
            "".join(ALPHABET[i] if child is not None else "_"
                    for i, child in enumerate(tree.root.children)),
        )
        return tree

    def get_words(self) -> list[str]:
        """Every stored word.

        A node's own word is emitted after all of its descendants, so "cats"
        comes before "cat".
        """
        results: list[str] = []
        _collect(self.root, "", results)
        logger.info("Found %d total words in tree", len(results))
        return results

    def solve(self, letters: str) -> list[str]:
        """Every stored word spellable from *letters*, respecting counts.

        Leftover letters are allowed. Results come in exploration order.
        """
        pool = sorted(validate_word(letters))
        found: list[str] = []
        _search(pool, self.root, "", found)
        logger.debug("Board %r matched %d words", letters, len(found))
        return found

    def node_count(self) -> int:
        count = 0
        stack = [self.root]
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(child for child in node.children if child is not None)
        return count

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        node: TrieNode | None = self.root
        for ch in word:
            index = ALPHABET.find(ch)
            if index < 0:
                return False
            node = node.children[index]
            if node is None:
                return False
        return node.is_terminal

    def __len__(self) -> int:
        return self._word_count


def _collect(node: TrieNode, prefix: str, results: list[str]) -> None:
    for index, child in enumerate(node.children):
        if child is not None:
            _collect(child, prefix + ALPHABET[index], results)
    if node.is_terminal:
        results.append(prefix)


def _search(remaining: list[str], node: TrieNode, prefix: str,
            found: list[str]) -> None:
    # dict.fromkeys keeps the sorted order while dropping repeats
    for letter in dict.fromkeys(remaining):
        child = node.children[letter_to_index(letter)]
        if child is None:
            continue
        # Consume exactly one copy of the letter.
        pos = bisect_left(remaining, letter)
        _search(remaining[:pos] + remaining[pos + 1:], child, prefix + letter, found)
    if node.is_terminal:
        found.append(prefix)


def build(words: Iterable[str]) -> WordTree:
    return WordTree.from_words(words)


def enumerate_words(tree: WordTree) -> list[str]:
    return tree.get_words()


def solve(tree: WordTree, letters: str) -> list[str]:
    return tree.solve(letters)
