"""
Character trie where every node carries the largest weight found in its subtree.

Nodes live in a flat list (the arena) and refer to each other by index:
`children` maps a lowercased character to a child index and `parent` is the
index of the node one level up (None for the root). The parent link is only
used to repair bounds when a word is re-added with a lower weight.

Edges are case-folded, so "Bell" and "bell" end on the same node. A node keeps
every spelling that ends there in `words` and its own `weight` is the largest
of them.

Invariant kept by `add`:
    node.subtree_max == max(node.weight if node.is_word, child.subtree_max ...)

Queries
-------
- top_match: walk to the prefix node, then follow the child whose bound equals
  the current bound until a word realizing that bound is reached.
- top_k_matches: best-first expansion with a heap ordered by bound. Two
  emission policies are available:
    "weight"  a popped word node pushes each of its words back into the heap
              keyed by the word's own weight, so words come out strictly
              heaviest first;
    "bound"   the words of a node are emitted as soon as it is popped, i.e.
              ordered by the subtree bound. For {"a": 1, "ab": 10} and prefix
              "a" this yields ["a", "ab"].
Weights are compared after int() truncation, ties broken by
(word.lower(), word), which keeps results in line with BinarySearchAutocomplete.
"""
from __future__ import annotations
import heapq
import logging
from typing import Dict, List, Optional, Sequence

from . import config as CFG
from .models import Term
from .protocols import check_inputs, check_prefix, check_word

log = logging.getLogger(__name__)

ORDERS = ("weight", "bound")

# heap entry kinds
_NODE = 0
_WORD = 1


def _spelling_order(word: str):
    return (word.lower(), word)


class TrieNode:
    __slots__ = ("char", "parent", "children", "words", "weight", "subtree_max")

    def __init__(self, char: str, parent: Optional[int], subtree_max: float = 0.0) -> None:
        self.char = char
        self.parent = parent
        self.children: Dict[str, int] = {}
        self.words: Dict[str, float] = {}
        self.weight = 0.0
        self.subtree_max = subtree_max

    @property
    def is_word(self) -> bool:
        return bool(self.words)

    def __repr__(self) -> str:
        return (f"TrieNode({self.char!r}, words={self.words!r}, weight={self.weight}, "
                f"max={self.subtree_max}, children={len(self.children)})")


class TrieAutocomplete:
    """
    Trie-backed autocompletor. Matching is case-insensitive, like the sorted array.
    """

    def __init__(self, terms: Sequence[str], weights: Sequence[float],
                 *, order: Optional[str] = None) -> None:
        check_inputs(terms, weights)
        order = order or CFG.TRIE_ORDER
        if order not in ORDERS:
            raise ValueError(f"unknown trie order {order!r}; expected one of {ORDERS}")
        self.order = order
        self._nodes: List[TrieNode] = [TrieNode("", None)]
        self._size = 0
        for word, weight in zip(terms, weights):
            self.add(word, weight)
        log.debug("TrieAutocomplete: %d words, %d nodes", self._size, len(self._nodes))

    # ---- build ----

    def add(self, word: str, weight: float) -> None:
        """
        Insert `word`, or overwrite its weight if it is already present.
        Bounds on the path only grow while walking down; if an overwrite
        lowers the node's weight the path is repaired bottom-up.
        """
        weight = Term(word, weight).weight  # validates word and weight
        nodes = self._nodes
        idx = 0
        for ch in word:
            node = nodes[idx]
            if node.subtree_max < weight:
                node.subtree_max = weight
            key = ch.lower()
            nxt = node.children.get(key)
            if nxt is None:
                nxt = len(nodes)
                nodes.append(TrieNode(key, idx, weight))
                node.children[key] = nxt
            idx = nxt

        node = nodes[idx]
        if word not in node.words:
            self._size += 1
        before = node.weight
        node.words[word] = weight
        node.weight = max(node.words.values())
        if node.subtree_max < node.weight:
            node.subtree_max = node.weight
        if node.weight < before:
            self._repair(idx)

    def _repair(self, idx: Optional[int]) -> None:
        nodes = self._nodes
        while idx is not None:
            node = nodes[idx]
            best = node.weight if node.is_word else 0.0
            for c in node.children.values():
                if nodes[c].subtree_max > best:
                    best = nodes[c].subtree_max
            if best == node.subtree_max:
                return
            node.subtree_max = best
            idx = node.parent

    # ---- lookups ----

    def __len__(self) -> int:
        return self._size

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        idx = self._find(word)
        return idx is not None and word in self._nodes[idx].words

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    def node(self, prefix: str) -> Optional[TrieNode]:
        idx = self._find(prefix)
        return None if idx is None else self._nodes[idx]

    def _find(self, prefix: str) -> Optional[int]:
        idx: Optional[int] = 0
        for ch in prefix:
            idx = self._nodes[idx].children.get(ch.lower())
            if idx is None:
                return None
        return idx

    def weight_of(self, word: str) -> float:
        check_word(word)
        idx = self._find(word)
        if idx is None:
            return 0.0
        return self._nodes[idx].words.get(word, 0.0)

    # ---- queries ----

    def top_match(self, prefix: str) -> str:
        check_prefix(prefix)
        idx = self._find(prefix)
        if idx is None:
            return ""
        nodes = self._nodes
        node = nodes[idx]
        if not node.is_word and not node.children:
            return ""

        target = int(node.subtree_max)
        while True:
            best = [w for w, wt in node.words.items() if int(wt) == target]
            if best:
                return min(best, key=_spelling_order)
            ch = min((c for c, i in node.children.items()
                      if int(nodes[i].subtree_max) == target), default=None)
            if ch is None:
                raise RuntimeError(f"trie bound invariant broken under {prefix!r}")
            node = nodes[node.children[ch]]

    def top_k_matches(self, prefix: str, k: int) -> List[str]:
        check_prefix(prefix)
        if k <= 0:
            return []
        idx = self._find(prefix)
        if idx is None:
            return []
        path = prefix.lower()
        if self.order == "bound":
            return self._by_bound(idx, path, k)
        return self._by_weight(idx, path, k)

    def _by_weight(self, start: int, path: str, k: int) -> List[str]:
        # entries: (-bound, folded path, kind, node index | word)
        nodes = self._nodes
        heap: list = [(-int(nodes[start].subtree_max), path, _NODE, start)]
        out: List[str] = []
        while heap and len(out) < k:
            _, path, kind, item = heapq.heappop(heap)
            if kind == _WORD:
                out.append(item)
                continue
            node = nodes[item]
            for word, weight in node.words.items():
                heapq.heappush(heap, (-int(weight), word.lower(), _WORD, word))
            for ch, c in node.children.items():
                heapq.heappush(heap, (-int(nodes[c].subtree_max), path + ch, _NODE, c))
        return out

    def _by_bound(self, start: int, path: str, k: int) -> List[str]:
        nodes = self._nodes
        heap = [(-int(nodes[start].subtree_max), path, start)]
        out: List[str] = []
        while heap and len(out) < k:
            _, path, idx = heapq.heappop(heap)
            node = nodes[idx]
            out.extend(sorted(node.words, key=_spelling_order)[:k - len(out)])
            for ch, c in node.children.items():
                heapq.heappush(heap, (-int(nodes[c].subtree_max), path + ch, c))
        return out
