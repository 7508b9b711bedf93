from __future__ import annotations
import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

from .models import Occurrences, Word
from .occurrences import word_occurrences

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class DictionaryIndex:
    """
    Dictionary grouped by signature.
    For "eat" the entry is (('a', 1), ('e', 1), ('t', 1)) -> ("ate", "eat", "tea"),
    in whatever order the words appeared in the dictionary.
    """
    by_occurrences: Dict[Occurrences, Tuple[Word, ...]] = field(default_factory=dict)
    size: int = 0  # words indexed (duplicates included)

    # ---- Build (offline) ----
    @classmethod
    def build(cls, words: Iterable[Word]) -> "DictionaryIndex":
        buckets: Dict[Occurrences, List[Word]] = defaultdict(list)
        n = 0
        for w in words:
            buckets[word_occurrences(w)].append(w)
            n += 1
        log.info("Indexed %d words under %d signatures", n, len(buckets))
        return cls(by_occurrences={occ: tuple(ws) for occ, ws in buckets.items()}, size=n)

    # ---- Query ----
    def words_for(self, occ: Occurrences) -> Tuple[Word, ...]:
        return self.by_occurrences.get(occ, ())

    def __len__(self) -> int:
        return len(self.by_occurrences)

    def __contains__(self, occ: object) -> bool:
        return occ in self.by_occurrences


def word_anagrams(word: Word, index: DictionaryIndex) -> List[Word]:
    """All dictionary words sharing `word`'s signature (empty list if none)."""
    return list(index.words_for(word_occurrences(word)))
