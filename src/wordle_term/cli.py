from __future__ import annotations
import argparse
import logging
import random
import sys
from typing import Callable, List, Optional

from . import VERSION
from .display import banner, final_message, render_row, share_grid
from .engine import is_valid
from .errors import EmptyPool, MalformedTarget, SourceNotFound, SourceUnreadable
from .game import MAX_ATTEMPTS, GameSession, Outcome
from .words import PACKAGED_WORDS, default_words_path, frequent_words, load_word_pool

log = logging.getLogger(__name__)

Reader = Callable[[str], str]
Writer = Callable[[str], None]


def prompt_guess(attempt: int, read: Reader = input, write: Writer = print) -> str:
    """Ask until the player types exactly 5 letters; returns it uppercased."""
    while True:
        guess = read(f"Attempt {attempt}: ").strip().upper()
        if is_valid(guess):
            return guess
        write("Invalid input. Please enter exactly 5 letters.")


def play(
    session: GameSession,
    read: Reader = input,
    write: Writer = print,
    color: bool = True,
) -> Outcome:
    while not session.finished:
        guess = prompt_guess(session.attempts + 1, read, write)
        feedback = session.submit(guess)
        write(render_row(guess, feedback, color=color))
        write("")
    outcome = session.outcome()
    for line in final_message(outcome):
        write(line)
    return outcome


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wordle", description="Guess the hidden 5-letter word")
    parser.add_argument("--words", default=default_words_path(),
                        help="Word list, one per line (default: $WORDLE_WORDS or the bundled list)")
    parser.add_argument("--lang", help="Draw words from the wordfreq list for this language instead of a file")
    parser.add_argument("--top", type=int, default=30000, help="Size of the wordfreq list used with --lang")
    parser.add_argument("--attempts", type=int, default=MAX_ATTEMPTS, help="Attempt budget (default: 6)")
    parser.add_argument("--seed", type=int, help="Seed for the target word")
    parser.add_argument("--strict", action="store_true", help="Drop word list entries that are not 5 letters")
    parser.add_argument("--no-color", dest="color", action="store_false", help="Plain text tiles")
    parser.add_argument("--share", action="store_true", help="Print an emoji grid at the end")
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    return parser


def _load(args: argparse.Namespace) -> List[str]:
    if args.lang:
        return frequent_words(args.lang, args.top)
    return load_word_pool(args.words, strict=args.strict)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.attempts < 1:
        parser.error("--attempts must be at least 1")
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        stream=sys.stderr,
    )
    source = f"wordfreq:{args.lang}" if args.lang else (args.words or PACKAGED_WORDS)

    for line in banner(args.attempts):
        print(line)

    try:
        words = _load(args)
        session = GameSession.from_pool(
            words,
            max_attempts=args.attempts,
            rng=random.Random(args.seed) if args.seed is not None else None,
        )
    except SourceNotFound as e:
        print(f"Error: File not found - {e}")
        print(f"Please ensure the file '{source}' exists.")
        return 1
    except SourceUnreadable as e:
        print(f"Error: Unable to read file - {e}")
        print(f"Please ensure the file '{source}' is readable.")
        return 1
    except EmptyPool:
        print(f"Error: No words found in {source}")
        return 1
    except MalformedTarget as e:
        print(f"Error: {e}")
        print(f"Please ensure every entry in '{source}' has exactly 5 letters, or use --strict.")
        return 1

    try:
        play(session, color=args.color)
    except (EOFError, KeyboardInterrupt):
        print()
        print(f"The word was: {session.target}")
        return 130

    if args.share:
        print(share_grid(session.history))
    return 0


if __name__ == "__main__":
    sys.exit(main())
