"""Mapping between the 26 lowercase letters and dense indices 0..25."""

from __future__ import annotations

ALPHABET = "abcdefghijklmnopqrstuvwxyz"
ALPHABET_SIZE = len(ALPHABET)

# Line terminators map here during raw-line cleanup; never stored in a trie.
WORD_TERMINATOR = ALPHABET_SIZE

_LETTER_TO_INDEX: dict[str, int] = {ch: i for i, ch in enumerate(ALPHABET)}
_LETTER_TO_INDEX["\n"] = WORD_TERMINATOR
_LETTER_TO_INDEX["\r"] = WORD_TERMINATOR


class InvalidCharacterError(ValueError):
    """A word or board contains a character outside a-z."""

    def __init__(self, char: str, position: int, word: str | None = None) -> None:
        self.char = char
        self.position = position
        self.word = word
        where = f" in {word!r}" if word is not None else ""
        super().__init__(
            f"Invalid character {char!r} at position {position}{where} "
            "(only lowercase a-z allowed)"
        )


def letter_to_index(letter: str, position: int = 0) -> int:
    try:
        return _LETTER_TO_INDEX[letter]
    except KeyError:
        raise InvalidCharacterError(letter, position) from None


def index_to_letter(index: int) -> str:
    if not 0 <= index < ALPHABET_SIZE:
        raise IndexError(f"Letter index {index} out of range 0..{ALPHABET_SIZE - 1}")
    return ALPHABET[index]


def clean_word(raw: str) -> str:
    """Strip trailing line terminators from a raw dictionary line."""
    return raw.rstrip("\r\n")


def validate_word(word: str) -> str:
    """Return *word* unchanged, or raise at its first character outside a-z."""
    for pos, ch in enumerate(word):
        if _LETTER_TO_INDEX.get(ch, WORD_TERMINATOR) == WORD_TERMINATOR:
            raise InvalidCharacterError(ch, pos, word)
    return word
