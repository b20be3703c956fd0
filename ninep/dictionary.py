"""Word-list loading: one word per line into a WordTree."""

from __future__ import annotations

import logging
from pathlib import Path

from ninep.alphabet import InvalidCharacterError, clean_word, validate_word
from ninep.settings import settings
from ninep.word_tree import ProgressHook, WordTree

logger = logging.getLogger("ninep")

# The builder recurses once per letter; longer lines would hit the recursion limit.
MAX_WORD_LENGTH = 100


def read_words(path: str | Path, strict: bool = False) -> list[str]:
    """Read a word list, lower-casing each line and skipping blank ones.

    Lines with characters outside a-z are logged and skipped, or raised
    as ``InvalidCharacterError`` when *strict* is set. Words longer than
    ``MAX_WORD_LENGTH`` are always logged and skipped.
    """
    words: list[str] = []
    skipped = 0
    with open(path, encoding="utf-8") as f:
        for lineno, line in enumerate(f, start=1):
            word = clean_word(line).strip().lower()
            if not word:
                continue
            if len(word) > MAX_WORD_LENGTH:
                logger.warning("Skipping line %d of %s: longer than %d letters",
                               lineno, path, MAX_WORD_LENGTH)
                skipped += 1
                continue
            try:
                words.append(validate_word(word))
            except InvalidCharacterError as e:
                if strict:
                    logger.error("Invalid word on line %d of %s", lineno, path)
                    raise
                logger.warning("Skipping line %d of %s: %s", lineno, path, e)
                skipped += 1
    logger.info("Read %d words from %s (%d skipped)", len(words), path, skipped)
    return words


def load_tree(path: str | Path, progress: ProgressHook | None = None,
              strict: bool = False) -> WordTree:
    return WordTree.from_words(read_words(path, strict=strict), progress=progress)


def load_default_tree() -> WordTree:
    """Load the word list configured by ``settings.WORD_LIST_PATH``."""
    path = settings.WORD_LIST_PATH
    if not path.exists():
        raise FileNotFoundError(
            f"Word list not found at {path}. "
            "Place a newline-separated word list there or set WORD_LIST_PATH"
        )
    return load_tree(path, strict=settings.STRICT_WORD_LIST)
