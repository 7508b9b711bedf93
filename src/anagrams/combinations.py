from __future__ import annotations
from itertools import product
from typing import List

from .models import Occurrences


def combinations(occurrences: Occurrences) -> List[Occurrences]:
    """
    Every sub-multiset of `occurrences`, including () and `occurrences` itself.

    Each character independently takes a count in 0..max; a zero choice drops
    the character. For (('a', 2), ('b', 2)) that is 3 * 3 = 9 subsets:

        (), (('a', 1),), (('a', 2),), (('b', 1),), (('a', 1), ('b', 1)), ...

    Input order is preserved per character, so every result is itself a
    sorted, zero-free occurrence list. Output order is not significant.
    """
    choices = [range(n + 1) for _, n in occurrences]
    chars = [ch for ch, _ in occurrences]
    return [
        tuple((ch, n) for ch, n in zip(chars, counts) if n > 0)
        for counts in product(*choices)
    ]
