from __future__ import annotations
import math
import numbers
from dataclasses import dataclass
from typing import Callable, Dict, List, Sequence, Tuple

Comparator = Callable[["Term", "Term"], int]


@dataclass(frozen=True)
class Term:
    """
    A vocabulary entry: a word and its non-negative weight.
    Default ordering is lexicographic by word (case-sensitive).
    """
    word: str
    weight: float

    def __post_init__(self) -> None:
        if self.word is None:
            raise TypeError("word cannot be None")
        if not isinstance(self.word, str):
            raise TypeError(f"word must be a str, got {type(self.word).__name__}")
        if not self.word:
            raise ValueError("word cannot be empty")
        if isinstance(self.weight, bool) or not isinstance(self.weight, numbers.Real):
            raise TypeError(f"weight must be a number, got {type(self.weight).__name__}")
        weight = float(self.weight)
        if not math.isfinite(weight) or weight < 0:
            raise ValueError(f"weight must be finite and non-negative: {self.word!r} -> {self.weight!r}")
        object.__setattr__(self, "weight", weight)

    def __lt__(self, other: "Term") -> bool:
        return self.word < other.word

    def __str__(self) -> str:
        return f"{self.weight:14.1f}\t{self.word}"


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def prefix_order(r: int) -> Comparator:
    """
    Compare two terms on their first r characters, ignoring case.
    A word shorter than r is compared on its whole length.
    """
    def compare(v: Term, w: Term) -> int:
        return _cmp(v.word[:r].lower(), w.word[:r].lower())
    return compare


# Weights are truncated to int before comparing: 2.1 and 2.9 tie.
def weight_order(v: Term, w: Term) -> int:
    return int(v.weight) - int(w.weight)


def reverse_weight_order(v: Term, w: Term) -> int:
    return int(w.weight) - int(v.weight)


@dataclass(frozen=True)
class Vocabulary:
    words: Tuple[str, ...]
    weights: Tuple[float, ...]

    def __len__(self) -> int:
        return len(self.words)


@dataclass(frozen=True)
class Completion:
    word: str
    weight: float


def unique_terms(words: Sequence[str], weights: Sequence[float]) -> List[Term]:
    """Terms for the given pairs; a repeated word keeps its last weight, like TrieAutocomplete.add."""
    latest: Dict[str, Term] = {}
    for word, weight in zip(words, weights):
        t = Term(word, weight)
        latest[t.word] = t
    return list(latest.values())
