"""
Weighted prefix autocomplete.

Given a fixed vocabulary of (word, weight) pairs, answer:
    top_match(prefix)         -> heaviest word starting with prefix, or ""
    top_k_matches(prefix, k)  -> up to k such words, heaviest first

Three interchangeable indexes implement the Autocompletor protocol:
- BinarySearchAutocomplete: sorted array + two binary searches per query
- TrieAutocomplete:         trie with per-subtree max weights, best-first search
- BruteAutocomplete:        linear scan (reference / baseline)

Example Usage:
    from autocompletor import TrieAutocomplete

    ac = TrieAutocomplete(["air", "bat", "bell", "boy"], [3, 2, 4, 1])
    ac.top_k_matches("b", 2)   # ["bell", "bat"]
    ac.top_match("b")          # "bell"
"""

# src/autocompletor/__init__.py
from .models import Term, Completion, Vocabulary, prefix_order, weight_order, reverse_weight_order
from .protocols import Autocompletor
from .binary_search import BinarySearchAutocomplete, first_index_of, last_index_of
from .trie import TrieAutocomplete
from .brute import BruteAutocomplete
from .loader import load_vocabulary, parse_vocabulary
from .engine import Engine, make_autocompletor

__version__ = "1.0.0"
__all__ = [
    "Term", "Completion", "Vocabulary",
    "prefix_order", "weight_order", "reverse_weight_order",
    "Autocompletor",
    "BinarySearchAutocomplete", "first_index_of", "last_index_of",
    "TrieAutocomplete", "BruteAutocomplete",
    "load_vocabulary", "parse_vocabulary",
    "Engine", "make_autocompletor",
]
