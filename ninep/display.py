"""Terminal rendering of solver results."""

from __future__ import annotations

from itertools import groupby


def render_words(words: list[str], group: bool = False) -> str:
    """One word per line, or grouped under a header per word length."""
    if not words:
        return "(no words)"
    if not group:
        return "\n".join(words)

    lines: list[str] = []
    by_length = sorted(words, key=lambda w: (-len(w), w))
    for length, same in groupby(by_length, key=len):
        same = list(same)
        lines.append(f"{length} letters ({len(same)}):")
        lines.extend(f"  {w}" for w in same)
    return "\n".join(lines)


def print_words(words: list[str], group: bool = False) -> None:
    print(render_words(words, group=group))
