from __future__ import annotations
from typing import List, Sequence, Tuple

from .engine import Feedback, to_emoji
from .game import Outcome

SEPARATOR_LENGTH = 40

GREEN_BG = "\u001b[42m"
YELLOW_BG = "\u001b[43m"
GRAY_BG = "\u001b[100m"
BOLD = "\u001b[1m"
RESET = "\u001b[0m"

_COLORS = {Feedback.CORRECT: GREEN_BG, Feedback.PRESENT: YELLOW_BG, Feedback.ABSENT: GRAY_BG}
_PLAIN = {Feedback.CORRECT: "[{}]", Feedback.PRESENT: "({})", Feedback.ABSENT: " {} "}


def separator() -> str:
    return "=" * SEPARATOR_LENGTH


def banner(max_attempts: int) -> List[str]:
    return [
        separator(),
        "         WELCOME TO WORDLE",
        separator(),
        "",
        f"Guess the 5-letter word in {max_attempts} attempts!",
        "Green = correct letter in correct position",
        "Yellow = correct letter in wrong position",
        "Gray = letter not in the word",
        "",
    ]


def render_row(guess: str, feedback: Sequence[int], color: bool = True) -> str:
    if color:
        return "".join(
            f"{_COLORS[Feedback(f)]}{BOLD} {ch} {RESET}" for ch, f in zip(guess, feedback)
        )
    return "".join(_PLAIN[Feedback(f)].format(ch) for ch, f in zip(guess, feedback))


def share_grid(history: Sequence[Tuple[str, Sequence[int]]]) -> str:
    return "\n".join(to_emoji(fb) for _, fb in history)


def final_message(outcome: Outcome) -> List[str]:
    if outcome.won:
        plural = "" if outcome.attempts == 1 else "s"
        body = [
            "Congratulations! You guessed the word!",
            f"You solved it in {outcome.attempts} attempt{plural}!",
        ]
    else:
        body = ["Game Over!", f"The word was: {outcome.target}"]
    return [separator(), *body, separator()]
