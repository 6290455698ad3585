"""Terminal word-guessing game with a two-pass Wordle evaluator."""

VERSION = "0.1.0"
