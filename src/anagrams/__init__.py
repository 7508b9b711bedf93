"""
Sentence Anagrams

Finds every anagram sentence of an input sentence against a word list: the
input's letters are re-split into dictionary words in every possible way,
with word order significant and duplicate sentences removed.

- Occurrence lists (sorted char -> count signatures) and their arithmetic
- A dictionary index keyed by signature
- Sub-multiset enumeration and the cover search built on it

Example Usage:
    from anagrams import Engine

    eng = Engine()
    eng.build("/usr/share/dict/words")
    for sentence in eng.sentence_anagrams("Yes man"):
        print(" ".join(sentence))
"""

# src/anagrams/__init__.py
from .combinations import combinations
from .engine import Engine
from .index import DictionaryIndex, word_anagrams
from .loader import load_dictionary
from .occurrences import can_subtract, sentence_occurrences, subtract, word_occurrences
from .search import sentence_anagrams

__version__ = "1.0.0"
__all__ = [
    "Engine",
    "DictionaryIndex",
    "load_dictionary",
    "word_occurrences",
    "sentence_occurrences",
    "can_subtract",
    "subtract",
    "combinations",
    "word_anagrams",
    "sentence_anagrams",
]
