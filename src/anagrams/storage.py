from __future__ import annotations
import logging
import os
import pickle

from .index import DictionaryIndex

log = logging.getLogger(__name__)


def save_index(index: DictionaryIndex, path: str) -> None:
    """Pickle to `path` (written to a temp file, then swapped in)."""
    tmp = f"{path}.tmp"
    os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
    with open(tmp, "wb") as f:
        pickle.dump(index, f, protocol=pickle.HIGHEST_PROTOCOL)
    os.replace(tmp, path)
    log.info("Saved index (%d signatures) to %s", len(index), path)


def load_index(path: str) -> DictionaryIndex:
    with open(path, "rb") as f:
        index = pickle.load(f)
    if not isinstance(index, DictionaryIndex):
        raise TypeError(f"{path} does not hold a DictionaryIndex (got {type(index).__name__})")
    return index
