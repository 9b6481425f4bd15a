# autocompletor/engine.py
from __future__ import annotations

import os
import logging
from typing import List, Optional, Sequence

from . import config as CFG
from .models import Completion
from .loader import load_vocabulary
from .protocols import Autocompletor
from .binary_search import BinarySearchAutocomplete
from .trie import TrieAutocomplete
from .brute import BruteAutocomplete

log = logging.getLogger(__name__)


def make_autocompletor(impl: str, words: Sequence[str], weights: Sequence[float]) -> Autocompletor:
    """Build the index named by `impl` ("binary" | "trie" | "brute")."""
    if impl == "binary":
        return BinarySearchAutocomplete(words, weights)
    if impl == "trie":
        return TrieAutocomplete(words, weights)
    if impl == "brute":
        return BruteAutocomplete(words, weights)
    raise ValueError(f"unknown implementation {impl!r}; expected one of {CFG.IMPLEMENTATIONS}")


class Engine:
    """
    Thin orchestration layer that glues together:
      - vocabulary loading (loader.load_vocabulary) or explicit word/weight lists,
      - one index implementation behind the Autocompletor protocol.

    Public API (used by CLI/Flask/GUI):
      * build(source | words+weights, impl=...): load -> index
      * complete(prefix, top_k): heaviest completions as Completion rows
      * top_match(prefix):       single heaviest word or ""
      * shutdown():              drop the index
    """

    # ------------- lifecycle -------------

    def __init__(self) -> None:
        self.index: Optional[Autocompletor] = None
        self.impl: Optional[str] = None
        self.source: Optional[str] = None

    # /* ~~~ Build an index from a vocabulary file or from explicit lists ~~~ */
    def build(
        self,
        source: Optional[str] = None,
        *,
        words: Optional[Sequence[str]] = None,
        weights: Optional[Sequence[float]] = None,
        impl: Optional[str] = None,
        verbose: bool = False,
    ) -> None:
        if verbose:
            logging.basicConfig(level=logging.INFO)
            os.environ["AUTOCOMPLETE_VERBOSE"] = "1"

        impl = impl or CFG.DEFAULT_IMPL
        if impl not in CFG.IMPLEMENTATIONS:
            raise ValueError(f"unknown implementation {impl!r}; expected one of {CFG.IMPLEMENTATIONS}")

        if source is not None:
            vocab = load_vocabulary(source)
            words, weights = vocab.words, vocab.weights
        elif words is None and weights is None:
            raise ValueError("build(): a vocabulary path or words+weights is required")

        log.info("Building %s index", impl)
        index = make_autocompletor(impl, words, weights)  # type: ignore[arg-type]

        # Commit engine state
        self.index = index
        self.impl = impl
        self.source = source
        log.info("Engine build() complete: impl=%s terms=%d", impl, len(index))

    # ------------- query -------------

    def _require_index(self) -> Autocompletor:
        if self.index is None:
            raise RuntimeError("Engine not initialized. Call build() first.")
        return self.index

    # /* ~~~ Heaviest completions for a prefix, with their weights ~~~ */
    def complete(self, prefix: str, *, top_k: int = CFG.TOP_K) -> List[Completion]:
        index = self._require_index()
        words = index.top_k_matches(prefix, top_k)
        log.debug("complete(%r, %d) -> %d rows", prefix, top_k, len(words))
        return [Completion(word=w, weight=index.weight_of(w)) for w in words]

    def top_match(self, prefix: str) -> str:
        return self._require_index().top_match(prefix)

    def __len__(self) -> int:
        return len(self.index) if self.index is not None else 0

    # ------------- teardown -------------

    def shutdown(self) -> None:
        self.index = None
        self.impl = None
        log.info("Engine shutdown complete")
