from __future__ import annotations
from typing import List, Tuple

Word = str                  # case preserved; signature is case-insensitive
Sentence = List[Word]       # order matters

# Sorted (char, count) pairs: lowercase chars, each at most once, counts > 0.
Occurrences = Tuple[Tuple[str, int], ...]
