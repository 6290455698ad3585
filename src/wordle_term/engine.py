from __future__ import annotations
from enum import IntEnum
from typing import List, Sequence

WORD_LENGTH = 5


class Feedback(IntEnum):
    ABSENT = 0
    PRESENT = 1
    CORRECT = 2


_CODES = {Feedback.CORRECT: "G", Feedback.PRESENT: "Y", Feedback.ABSENT: "K"}
_EMOJI = {Feedback.CORRECT: "🟩", Feedback.PRESENT: "🟨", Feedback.ABSENT: "⬛"}


def is_valid(word: str) -> bool:
    """True if `word` is exactly 5 letters, in any case."""
    return len(word) == WORD_LENGTH and all(ch.isalpha() for ch in word)


def evaluate_guess(guess: str, target: str) -> List[Feedback]:
    """
    Feedback for guess vs target, one value per guess position.

    Exact matches are resolved first so they take priority over displaced
    ones, and each target letter is matched by at most one guess position.
    Both words must have the same length; callers validate guesses with
    `is_valid` before evaluating.
    """
    if len(guess) != len(target):
        raise ValueError(
            f"guess and target differ in length ({len(guess)} != {len(target)})"
        )
    n = len(target)
    res = [Feedback.ABSENT] * n
    used = [False] * n

    # greens
    for i in range(n):
        if guess[i] == target[i]:
            res[i] = Feedback.CORRECT
            used[i] = True

    # yellows, first unconsumed target letter from the left
    for i in range(n):
        if res[i] != Feedback.ABSENT:
            continue
        for j in range(n):
            if not used[j] and target[j] == guess[i]:
                res[i] = Feedback.PRESENT
                used[j] = True
                break

    return res


def is_win(feedback: Sequence[int]) -> bool:
    return bool(feedback) and all(f == Feedback.CORRECT for f in feedback)


def to_pattern(feedback: Sequence[int]) -> str:
    """G=green, Y=yellow, K=gray."""
    return "".join(_CODES[Feedback(f)] for f in feedback)


def to_emoji(feedback: Sequence[int]) -> str:
    return "".join(_EMOJI[Feedback(f)] for f in feedback)
