from __future__ import annotations
import bisect
import logging
from functools import cmp_to_key
from typing import List, Sequence, Tuple

from .models import Comparator, Term, prefix_order, reverse_weight_order, unique_terms
from .protocols import check_inputs, check_prefix, check_word

log = logging.getLogger(__name__)


def _sort_key(t: Term) -> Tuple[str, str]:
    # case folded first so every case-insensitive prefix range is contiguous
    return (t.word.lower(), t.word)


def first_index_of(a: Sequence[Term], key: Term, comparator: Comparator) -> int:
    """
    Index of the first element of `a` that `comparator` considers equal to `key`,
    or -1. `a` must be sorted consistently with `comparator`.
    Calls `comparator` at most 1 + ceil(log2(len(a))) times.
    """
    # a[<= low] < key, a[>= high] >= key (a[len-1] unchecked until the end)
    low, high = -1, len(a) - 1
    while high - low > 1:
        mid = (low + high) // 2
        if comparator(a[mid], key) < 0:
            low = mid
        else:
            high = mid
    if high >= 0 and comparator(a[high], key) == 0:
        return high
    return -1


def last_index_of(a: Sequence[Term], key: Term, comparator: Comparator) -> int:
    """Same as first_index_of, but the last matching index."""
    if not a:
        return -1
    # a[< low] <= key (a[0] unchecked until the end), a[>= high] > key
    low, high = 0, len(a)
    while high - low > 1:
        mid = (low + high) // 2
        if comparator(a[mid], key) <= 0:
            low = mid
        else:
            high = mid
    if comparator(a[low], key) == 0:
        return low
    return -1


class BinarySearchAutocomplete:
    """
    Sorted array of Terms. A query bounds the prefix range with two binary
    searches under prefix_order(len(prefix)), then ranks only that slice.
    Matching is case-insensitive.
    """

    first_index_of = staticmethod(first_index_of)
    last_index_of = staticmethod(last_index_of)

    def __init__(self, terms: Sequence[str], weights: Sequence[float]) -> None:
        check_inputs(terms, weights)
        self._terms: Tuple[Term, ...] = tuple(
            sorted(unique_terms(terms, weights), key=_sort_key)
        )
        self._keys: List[Tuple[str, str]] = [_sort_key(t) for t in self._terms]
        log.debug("BinarySearchAutocomplete: %d terms sorted", len(self._terms))

    def __len__(self) -> int:
        return len(self._terms)

    @property
    def terms(self) -> Tuple[Term, ...]:
        return self._terms

    def _matching(self, prefix: str) -> Sequence[Term]:
        if not prefix:
            return self._terms
        key = Term(prefix, 0)
        order = prefix_order(len(prefix))
        first = first_index_of(self._terms, key, order)
        if first < 0:
            return ()
        last = last_index_of(self._terms, key, order)
        return self._terms[first:last + 1]

    def top_k_matches(self, prefix: str, k: int) -> List[str]:
        """
        Up to k words starting with `prefix`, heaviest first.
        e.g. {air:3, bat:2, bell:4, boy:1}: top_k_matches("b", 2) -> ["bell", "bat"].
        Equal truncated weights keep their lexicographic order.
        """
        check_prefix(prefix)
        if k <= 0:
            return []
        matches = self._matching(prefix)
        ranked = sorted(matches, key=cmp_to_key(reverse_weight_order))
        return [t.word for t in ranked[:k]]

    def top_match(self, prefix: str) -> str:
        check_prefix(prefix)
        best = None
        for t in self._matching(prefix):
            if best is None or reverse_weight_order(t, best) < 0:
                best = t
        return best.word if best is not None else ""

    def weight_of(self, word: str) -> float:
        check_word(word)
        i = bisect.bisect_left(self._keys, (word.lower(), word))
        if i < len(self._terms) and self._terms[i].word == word:
            return self._terms[i].weight
        return 0.0
