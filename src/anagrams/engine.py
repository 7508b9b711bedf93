# anagrams/engine.py
from __future__ import annotations

import os
import logging
from typing import Iterable, List, Optional, Union

from . import config as CFG
from .index import DictionaryIndex, word_anagrams
from .loader import load_dictionary
from .models import Sentence, Word
from .search import sentence_anagrams
from .storage import load_index, save_index

log = logging.getLogger(__name__)


class Engine:
    """
    Thin orchestration layer that glues together:
      - dictionary loading (loader.load_dictionary),
      - the signature index (DictionaryIndex),
      - the anagram search (search.sentence_anagrams).

    Public API (used by CLI/Flask/GUI):
      * build(dictionary, ...): load words -> index -> (optional) persist
      * load(cache=...):        load a pickled index
      * word_anagrams(word) / sentence_anagrams(sentence)
      * shutdown():             drop the index
    """

    # ------------- lifecycle -------------

    def __init__(self) -> None:
        self.index: Optional[DictionaryIndex] = None

    # /* ~~~ Build an index from a word list ~~~ */
    def build(
        self,
        dictionary: Optional[str] = None,      # path to word list; None -> env / bundled list
        *,
        words: Optional[Iterable[Word]] = None,  # in-memory word list instead of a file
        cache: Optional[str] = None,           # path to pickle the built index to
        verbose: bool = False,
    ) -> None:
        if verbose:
            logging.basicConfig(level=logging.INFO)
            os.environ[CFG.VERBOSE_ENV] = "1"

        if words is not None:
            word_list = list(words)
            if not word_list:
                raise ValueError("build(): words must not be empty")
            log.info("Using %d in-memory words", len(word_list))
        else:
            word_list = load_dictionary(dictionary)

        log.info("Building signature index")
        idx = DictionaryIndex.build(word_list)

        if cache:
            log.info("Saving pickle index to %s", cache)
            save_index(idx, cache)

        self.index = idx
        log.info("Engine build() complete: words=%d signatures=%d", idx.size, len(idx))

    # /* ~~~ Load an already-built index ~~~ */
    def load(self, *, cache: Optional[str] = None, verbose: bool = False) -> None:
        if verbose:
            logging.basicConfig(level=logging.INFO)
            os.environ[CFG.VERBOSE_ENV] = "1"

        if not cache:
            raise ValueError("load(): require --cache to load an index")
        if not os.path.exists(cache):
            raise FileNotFoundError(cache)

        log.info("Loading pickle index from %s", cache)
        self.index = load_index(cache)
        log.info("Engine load() complete: words=%d signatures=%d", self.index.size, len(self.index))

    # ------------- query -------------

    def word_anagrams(self, word: Word) -> List[Word]:
        return word_anagrams(word, self._require_index())

    def sentence_anagrams(self, sentence: Union[Sentence, str]) -> List[Sentence]:
        """`sentence` is a list of words or a whitespace-separated string."""
        if isinstance(sentence, str):
            sentence = sentence.split()
        return sentence_anagrams(list(sentence), self._require_index())

    # ------------- teardown -------------

    def shutdown(self) -> None:
        self.index = None
        log.info("Engine shutdown complete")

    # ------------- internals -------------

    def _require_index(self) -> DictionaryIndex:
        if self.index is None:
            raise RuntimeError("Engine not initialized. Call build() or load() first.")
        return self.index
