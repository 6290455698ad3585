# MCP tools to play wordle_term sessions over stdio.
# - reset_session: load a word pool for the session
# - new_game: draw a target from that pool
# - guess: evaluate a guess and report feedback
# - state: pool size, current game and history

from __future__ import annotations
import argparse
import logging
import random
import sys
import threading
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from mcp.server.fastmcp import FastMCP

from . import VERSION
from .engine import to_emoji, to_pattern
from .errors import WordleError
from .game import MAX_ATTEMPTS, GameSession
from .words import default_words_path, frequent_words, load_word_pool

log = logging.getLogger(__name__)


@dataclass
class SessionState:
    source: str
    words: List[str] = field(default_factory=list)
    game: Optional[GameSession] = None
    games_played: int = 0


_SESSIONS: Dict[str, SessionState] = {}
_LOCK = threading.Lock()


def _load(words_file: Optional[str], lang: Optional[str], strict: bool) -> SessionState:
    if lang:
        return SessionState(source=f"wordfreq:{lang}", words=frequent_words(lang))
    path = words_file or default_words_path()
    return SessionState(source=path or "words.txt", words=load_word_pool(path, strict=strict))


def _ensure_session(session: str) -> SessionState:
    with _LOCK:
        if session not in _SESSIONS:
            try:
                _SESSIONS[session] = _load(None, None, False)
            except WordleError as e:
                raise ValueError(str(e)) from e
        st = _SESSIONS[session]
    return st


def _current_game(st: SessionState) -> GameSession:
    if st.game is None:
        raise ValueError("no game in progress; call new_game first")
    return st.game


def _game_summary(game: GameSession) -> dict:
    out = {
        "attempts": game.attempts,
        "max_attempts": game.max_attempts,
        "remaining": game.remaining,
        "won": game.won,
        "finished": game.finished,
        "history": [
            {"guess": g, "pattern": to_pattern(fb)} for g, fb in game.history
        ],
    }
    if game.finished:
        out["target"] = game.outcome().target
    return out


mcp = FastMCP("wordle-term")


@mcp.tool()
def reset_session(
    session: str = "default",
    words_file: Optional[str] = None,
    lang: Optional[str] = None,
    strict: bool = False,
) -> dict:
    """Reload the session's word pool and drop any game in progress."""
    try:
        st = _load(words_file, lang, strict)
    except WordleError as e:
        raise ValueError(str(e)) from e
    with _LOCK:
        _SESSIONS[session] = st
    log.debug("session %s reset: %d words from %s", session, len(st.words), st.source)
    return {"session": session, "source": st.source, "words": len(st.words)}


@mcp.tool()
def new_game(session: str = "default", max_attempts: int = MAX_ATTEMPTS, seed: Optional[int] = None) -> dict:
    """Start a game; the target is removed from the session pool so it will not come up again."""
    st = _ensure_session(session)
    rng = random.Random(seed) if seed is not None else None
    try:
        st.game = GameSession.from_pool(st.words, max_attempts=max_attempts, rng=rng)
    except WordleError as e:
        raise ValueError(f"{e}; call reset_session to reload words") from e
    st.games_played += 1
    return {
        "session": session,
        "game": st.games_played,
        "max_attempts": max_attempts,
        "words_left": len(st.words),
    }


@mcp.tool()
def guess(session: str, word: str) -> dict:
    """Evaluate a guess against the session's target word."""
    st = _ensure_session(session)
    game = _current_game(st)
    try:
        feedback = game.submit(word)
    except WordleError as e:
        raise ValueError(str(e)) from e
    return {
        "session": session,
        "guess": game.history[-1][0],
        "feedback": [int(f) for f in feedback],
        "pattern": to_pattern(feedback),
        "tiles": to_emoji(feedback),
        **_game_summary(game),
    }


@mcp.tool()
def state(session: str = "default") -> dict:
    """Word pool size, game count and the current game, if any."""
    st = _ensure_session(session)
    return {
        "session": session,
        "source": st.source,
        "words": len(st.words),
        "games_played": st.games_played,
        "game": _game_summary(st.game) if st.game else None,
    }


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="wordle-term MCP server")
    parser.add_argument(
        "transport",
        nargs="?",
        default="stdio",
        choices=["stdio"],
        help="MCP transport (default: stdio)",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        stream=sys.stderr,
    )
    log.info("wordle-term %s starting on %s", VERSION, args.transport)
    mcp.run(transport=args.transport)


if __name__ == "__main__":
    main()
