"""CLI entry point for the letter-pool word solver."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from tqdm import tqdm

from ninep.alphabet import InvalidCharacterError
from ninep.board import Board
from ninep.dictionary import read_words
from ninep.display import print_words
from ninep.settings import settings
from ninep.word_tree import WordTree

logger = logging.getLogger("ninep")

VERBOSITY = [logging.WARNING, logging.INFO, logging.DEBUG]


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Find every word that can be spelled from a pool of letters",
    )
    parser.add_argument(
        "--word-list", "-w",
        type=Path,
        metavar="FILE",
        default=settings.WORD_LIST_PATH,
        help="Newline separated list of valid words (default: %(default)s)",
    )
    parser.add_argument(
        "--board", "-b",
        type=str,
        required=True,
        metavar="LETTERS",
        help='The available letters to play with, e.g. "abcdefghi"',
    )
    parser.add_argument(
        "--min-length", "-m",
        type=int,
        default=settings.MIN_WORD_LENGTH,
        help="Shortest word to report (default: %(default)s)",
    )
    parser.add_argument(
        "--group",
        action="store_true",
        help="Group results by word length",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=settings.STRICT_WORD_LIST,
        help="Fail on word-list lines with characters outside a-z instead of skipping them",
    )
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Don't show a progress bar while building the word tree",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="count",
        default=0,
        help="Increase log output (-v info, -vv debug)",
    )
    return parser.parse_args(argv)


def configure_logging(verbose: int) -> None:
    if verbose:
        level = VERBOSITY[min(verbose, len(VERBOSITY) - 1)]
    else:
        level = logging.getLevelName(settings.LOG_LEVEL.upper())
    logging.basicConfig(level=level, format="%(asctime)s %(name)s %(levelname)s %(message)s")


def build_tree(path: Path, strict: bool, show_progress: bool) -> WordTree:
    words = read_words(path, strict=strict)
    if not show_progress:
        return WordTree.from_words(words)
    with tqdm(total=len(set(words)), desc="Building", unit="word") as bar:
        return WordTree.from_words(words, progress=bar.update)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    configure_logging(args.verbose)

    if not args.word_list.exists():
        print(f"Word list not found: {args.word_list}", file=sys.stderr)
        sys.exit(1)

    try:
        tree = build_tree(args.word_list, args.strict, not args.no_progress)
        board = Board(args.board, tree, min_length=args.min_length)
    except InvalidCharacterError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    words = board.solve()
    if settings.MAX_RESULTS > 0:
        words = words[:settings.MAX_RESULTS]
    logger.info("Found %d words for %r", len(words), board.letters)
    print_words(words, group=args.group)


if __name__ == "__main__":
    main()
