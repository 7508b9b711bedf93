from __future__ import annotations
import logging
from itertools import permutations
from typing import Iterator, List, Set, Tuple

from .combinations import combinations
from .index import DictionaryIndex
from .models import Occurrences, Sentence, Word
from .occurrences import (
    can_subtract,
    occurrences_size,
    sentence_occurrences,
    subtract,
    word_occurrences,
)

log = logging.getLogger(__name__)

Candidate = Tuple[Word, Occurrences]


def candidate_words(target: Occurrences, index: DictionaryIndex) -> List[Word]:
    """
    Every dictionary word whose signature is a non-empty subset of `target`.
    Dictionary order within a signature is kept; repeated words appear once.
    """
    seen: dict[Word, None] = {}
    for sub in combinations(target):
        if not sub:
            continue
        for w in index.words_for(sub):
            seen.setdefault(w, None)
    return list(seen)


def iter_covers(target: Occurrences, candidates: List[Word]) -> Iterator[Tuple[Word, ...]]:
    """
    Yield each multiset of candidates (as a tuple) whose combined signature is
    exactly `target`. Words may repeat; each multiset is produced once because
    picks never move backwards through `candidates`.
    """
    pool: List[Candidate] = [(w, word_occurrences(w)) for w in candidates]
    pool = [(w, occ) for w, occ in pool if occ]
    chosen: List[Word] = []

    def _walk(remaining: Occurrences, start: int) -> Iterator[Tuple[Word, ...]]:
        if not remaining:
            yield tuple(chosen)
            return
        for i in range(start, len(pool)):
            word, occ = pool[i]
            if not can_subtract(remaining, occ):
                continue
            chosen.append(word)
            yield from _walk(subtract(remaining, occ), i)
            chosen.pop()

    yield from _walk(target, 0)


def sentence_anagrams(sentence: Sentence, index: DictionaryIndex) -> List[Sentence]:
    """
    All anagram sentences of `sentence` made of dictionary words.

    Word order matters ("you olive" and "olive you" are both returned) and the
    word count need not match the input. The empty sentence has exactly one
    anagram, the empty sentence. An input nothing covers gives [].
    """
    if not sentence:
        return [[]]

    target = sentence_occurrences(sentence)
    candidates = candidate_words(target, index)
    log.debug("sentence=%r letters=%d candidates=%d", sentence, occurrences_size(target), len(candidates))

    out: List[Sentence] = []
    emitted: Set[Tuple[Word, ...]] = set()
    covers = 0
    for cover in iter_covers(target, candidates):
        covers += 1
        for perm in permutations(cover):
            if perm in emitted:
                continue
            emitted.add(perm)
            out.append(list(perm))

    log.debug("covers=%d anagrams=%d", covers, len(out))
    return out
