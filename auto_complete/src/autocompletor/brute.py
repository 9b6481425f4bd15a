from __future__ import annotations
import heapq
from typing import List, Sequence, Tuple

from .models import Term, unique_terms
from .protocols import check_inputs, check_prefix, check_word


def _rank(t: Term) -> Tuple[int, str, str]:
    # heaviest first, ties in the same word order as the sorted array
    return (-int(t.weight), t.word.lower(), t.word)


class BruteAutocomplete:
    """
    Linear scan over all terms. No index at all; used as the reference
    implementation in cross-checks and as the baseline in benchmarks.
    """

    def __init__(self, terms: Sequence[str], weights: Sequence[float]) -> None:
        check_inputs(terms, weights)
        self._terms: Tuple[Term, ...] = tuple(unique_terms(terms, weights))

    def __len__(self) -> int:
        return len(self._terms)

    def _matching(self, prefix: str) -> List[Term]:
        p = prefix.lower()
        return [t for t in self._terms if t.word[:len(p)].lower() == p]

    def top_k_matches(self, prefix: str, k: int) -> List[str]:
        check_prefix(prefix)
        if k <= 0:
            return []
        best = heapq.nsmallest(k, self._matching(prefix), key=_rank)
        return [t.word for t in best]

    def top_match(self, prefix: str) -> str:
        found = self.top_k_matches(prefix, 1)
        return found[0] if found else ""

    def weight_of(self, word: str) -> float:
        check_word(word)
        for t in self._terms:
            if t.word == word:
                return t.weight
        return 0.0
