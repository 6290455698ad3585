from __future__ import annotations


class WordleError(Exception):
    """Base class for every error raised by wordle_term."""


class WordSourceError(WordleError):
    """The candidate pool could not be produced; the game does not start."""


class SourceNotFound(WordSourceError):
    pass


class SourceUnreadable(WordSourceError):
    pass


class EmptyPool(WordSourceError):
    """The word source yielded no usable entries."""


class InvalidGuess(WordleError, ValueError):
    """A guess is not exactly 5 letters."""


class PoolExhausted(WordleError, ValueError):
    """A word was requested from an empty pool."""


class GameFinished(WordleError):
    pass


class GameInProgress(WordleError):
    pass


class MalformedTarget(WordSourceError):
    """The word drawn as target is not exactly 5 letters."""
