from __future__ import annotations
from collections import Counter

from .models import Occurrences, Sentence, Word


def _freeze(counts: Counter) -> Occurrences:
    """Counter -> sorted (char, count) tuple, zero/negative counts dropped."""
    return tuple(sorted((ch, n) for ch, n in counts.items() if n > 0))


def word_occurrences(word: Word) -> Occurrences:
    """
    Character occurrence list of a word.
    Upper/lower case collapse to lowercase. Every character is counted,
    including digits and punctuation ("o'clock" carries an apostrophe).
    """
    return _freeze(Counter(word.lower()))


def sentence_occurrences(sentence: Sentence) -> Occurrences:
    """Occurrences of all words together; same as the occurrences of their concatenation."""
    counts: Counter = Counter()
    for w in sentence:
        counts.update(w.lower())
    return _freeze(counts)


def occurrences_size(occ: Occurrences) -> int:
    """Total number of characters described by `occ`."""
    return sum(n for _, n in occ)


def can_subtract(x: Occurrences, y: Occurrences) -> bool:
    """True iff every char of y appears in x at least as often."""
    have = dict(x)
    return all(have.get(ch, 0) >= n for ch, n in y)


def subtract(x: Occurrences, y: Occurrences) -> Occurrences:
    """
    x minus y, per character, zeros dropped.
    Precondition: y is a sub-multiset of x (see can_subtract). Anything else
    is a caller bug and raises ValueError.
    """
    if not can_subtract(x, y):
        raise ValueError(f"subtract(): {y!r} is not a subset of {x!r}")
    counts = Counter(dict(x))
    counts.subtract(dict(y))
    return _freeze(counts)


def add(x: Occurrences, y: Occurrences) -> Occurrences:
    """Multiset union (counts summed)."""
    counts = Counter(dict(x))
    counts.update(dict(y))
    return _freeze(counts)

