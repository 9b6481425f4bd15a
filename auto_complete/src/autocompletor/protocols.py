from __future__ import annotations
from typing import List, Protocol, runtime_checkable


@runtime_checkable
class Autocompletor(Protocol):
    """Query interface shared by every index (binary search, trie, brute force)."""

    def top_match(self, prefix: str) -> str: ...
    def top_k_matches(self, prefix: str, k: int) -> List[str]: ...
    def weight_of(self, word: str) -> float: ...
    def __len__(self) -> int: ...


def check_prefix(prefix: str) -> None:
    if prefix is None:
        raise TypeError("prefix cannot be None")


def check_word(word: str) -> None:
    if word is None:
        raise TypeError("word cannot be None")


def check_inputs(terms, weights) -> None:
    if terms is None or weights is None:
        raise TypeError("terms and weights cannot be None")
    if len(terms) != len(weights):
        raise ValueError(f"got {len(terms)} terms but {len(weights)} weights")
