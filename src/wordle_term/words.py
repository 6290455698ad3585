from __future__ import annotations
import logging
import os
import random
from importlib.resources import files
from typing import Iterable, List, Optional

from unidecode import unidecode
from wordfreq import top_n_list

from .engine import WORD_LENGTH, is_valid
from .errors import PoolExhausted, SourceNotFound, SourceUnreadable

log = logging.getLogger(__name__)

WORDS_ENV = "WORDLE_WORDS"
PACKAGED_WORDS = "words.txt"


def _normalize(lines: Iterable[str]) -> List[str]:
    return [w for w in (line.strip().upper() for line in lines) if w]


def _read_source(path: Optional[str]) -> List[str]:
    if path is None:
        txt = files("wordle_term").joinpath(PACKAGED_WORDS).read_text(encoding="utf-8")
        return txt.splitlines()
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.readlines()
    except FileNotFoundError as e:
        raise SourceNotFound(f"{path}: {e.strerror}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise SourceUnreadable(f"{path}: {e}") from e


def load_word_pool(path: Optional[str] = None, strict: bool = False) -> List[str]:
    """
    Candidate pool from a one-word-per-line text file.

    Lines are trimmed and uppercased and blank lines dropped; order is kept.
    Entries are not checked for shape unless `strict` is set, in which case
    anything that is not 5 letters is dropped. With no path the word list
    shipped with the package is used. An empty pool is returned as is.
    """
    words = _normalize(_read_source(path))
    bad = [w for w in words if not is_valid(w)]
    if bad:
        if strict:
            words = [w for w in words if is_valid(w)]
            log.warning("dropped %d malformed entries from %s", len(bad), path or PACKAGED_WORDS)
        else:
            log.warning("%d entries in %s are not %d-letter words, e.g. %r",
                        len(bad), path or PACKAGED_WORDS, WORD_LENGTH, bad[0])
    log.debug("loaded %d words from %s", len(words), path or PACKAGED_WORDS)
    return words


def frequent_words(lang: str = "en", n: int = 30000) -> List[str]:
    """5-letter words among the `n` most frequent in `lang`, most frequent first."""
    out: List[str] = []
    seen = set()
    try:
        ranked = top_n_list(lang, n)
    except (LookupError, ValueError) as e:
        raise SourceNotFound(f"wordfreq:{lang}: {e}") from e
    for raw in ranked:
        w = unidecode(raw).strip().upper()
        if is_valid(w) and w not in seen:
            seen.add(w)
            out.append(w)
    log.debug("wordfreq %s top %d -> %d words", lang, n, len(out))
    return out


def pick_random_word(words: List[str], rng: Optional[random.Random] = None) -> str:
    """Remove and return a uniformly chosen entry of `words`."""
    if not words:
        raise PoolExhausted("word list cannot be empty")
    idx = (rng or random).randrange(len(words))
    return words.pop(idx)


def default_words_path() -> Optional[str]:
    return os.environ.get(WORDS_ENV) or None
