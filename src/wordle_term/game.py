from __future__ import annotations
import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .engine import Feedback, evaluate_guess, is_valid, is_win
from .errors import EmptyPool, GameFinished, GameInProgress, InvalidGuess, MalformedTarget
from .words import pick_random_word

log = logging.getLogger(__name__)

MAX_ATTEMPTS = 6


@dataclass(frozen=True)
class Outcome:
    won: bool
    attempts: int
    target: Optional[str] = None  # only revealed on a loss


@dataclass
class GameSession:
    target: str
    max_attempts: int = MAX_ATTEMPTS
    history: List[Tuple[str, List[Feedback]]] = field(default_factory=list)

    @classmethod
    def from_pool(
        cls,
        words: List[str],
        max_attempts: int = MAX_ATTEMPTS,
        rng: Optional[random.Random] = None,
    ) -> "GameSession":
        """Start a game, drawing (and removing) the target from `words`."""
        if not words:
            raise EmptyPool("no words to pick a target from")
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        target = pick_random_word(words, rng)
        if not is_valid(target):
            raise MalformedTarget(f"word list entry {target!r} is not a 5-letter word")
        log.debug("target drawn, %d words left in pool", len(words))
        return cls(target=target, max_attempts=max_attempts)

    @property
    def attempts(self) -> int:
        return len(self.history)

    @property
    def remaining(self) -> int:
        return self.max_attempts - self.attempts

    @property
    def won(self) -> bool:
        return bool(self.history) and is_win(self.history[-1][1])

    @property
    def finished(self) -> bool:
        return self.won or self.attempts >= self.max_attempts

    def submit(self, guess: str) -> List[Feedback]:
        if self.finished:
            raise GameFinished("the game is over")
        g = guess.strip().upper()
        if not is_valid(g):
            raise InvalidGuess(f"{guess!r} is not exactly 5 letters")
        feedback = evaluate_guess(g, self.target)
        self.history.append((g, feedback))
        log.debug("attempt %d/%d: %s", self.attempts, self.max_attempts, g)
        return feedback

    def outcome(self) -> Outcome:
        if not self.finished:
            raise GameInProgress(f"{self.remaining} attempts left")
        if self.won:
            return Outcome(won=True, attempts=self.attempts)
        return Outcome(won=False, attempts=self.attempts, target=self.target)
