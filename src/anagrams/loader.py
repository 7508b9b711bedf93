from __future__ import annotations
import logging
import os
from typing import List

from .config import DICTIONARY_ENV, DICTIONARY_PATH, ENCODING, VERBOSE_ENV
from .models import Word

log = logging.getLogger(__name__)

PROGRESS_EVERY_WORDS = 50_000


def resolve_dictionary_path(path: str | None = None) -> str:
    """Explicit path > $ANAGRAMS_DICTIONARY > bundled word list."""
    if path:
        return os.path.abspath(path)
    env = os.environ.get(DICTIONARY_ENV)
    if env:
        return os.path.abspath(env)
    return DICTIONARY_PATH


def load_dictionary(path: str | None = None, *, encoding: str = ENCODING) -> List[Word]:
    """
    Read a newline-delimited word list, one word per line, in file order.
    Blank lines are skipped. A missing/unreadable file is fatal for the
    caller: the OSError is logged and re-raised.
    """
    resolved = resolve_dictionary_path(path)
    verbose = os.environ.get(VERBOSE_ENV) == "1"

    if not os.path.isfile(resolved):
        log.error("Could not load word list, dictionary file not found: %s", resolved)
        raise FileNotFoundError(f"dictionary file not found: {resolved}")

    words: List[Word] = []
    try:
        with open(resolved, "r", encoding=encoding) as f:
            for raw in f:
                word = raw.rstrip("\r\n")
                if not word.strip():
                    continue
                words.append(word)
                if verbose and len(words) % PROGRESS_EVERY_WORDS == 0:
                    log.info("[loaded] words=%s", f"{len(words):,}")
    except OSError as exc:
        log.error("Could not load word list: %s", exc)
        raise

    if not words:
        raise ValueError(f"dictionary file is empty: {resolved}")

    log.info("Loaded %d words from %s", len(words), resolved)
    return words
