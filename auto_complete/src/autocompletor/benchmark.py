from __future__ import annotations
import logging
import random
import time
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from . import config as CFG
from .engine import make_autocompletor

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class BenchRow:
    impl: str
    terms: int
    queries: int
    build_s: float
    top_k_us: float     # mean microseconds per top_k_matches call
    top_match_us: float  # mean microseconds per top_match call


def random_prefixes(words: Sequence[str], n: int, seed: Optional[int] = CFG.BENCH_SEED) -> List[str]:
    """Sample n query prefixes: a random word cut at a random length (empty prefix allowed)."""
    if not words or n <= 0:
        return []
    rng = random.Random(seed)
    out: List[str] = []
    for _ in range(n):
        w = rng.choice(words)
        out.append(w[:rng.randint(0, len(w))])
    return out


def run_benchmark(words: Sequence[str],
                  weights: Sequence[float],
                  prefixes: Sequence[str],
                  *,
                  k: int = CFG.TOP_K,
                  impls: Iterable[str] = CFG.IMPLEMENTATIONS) -> List[BenchRow]:
    """Time index build and the mean per-query cost for each implementation."""
    rows: List[BenchRow] = []
    n = max(1, len(prefixes))
    for impl in impls:
        t0 = time.perf_counter()
        index = make_autocompletor(impl, words, weights)
        t1 = time.perf_counter()

        for p in prefixes:
            index.top_k_matches(p, k)
        t2 = time.perf_counter()

        for p in prefixes:
            index.top_match(p)
        t3 = time.perf_counter()

        row = BenchRow(
            impl=impl,
            terms=len(index),
            queries=len(prefixes),
            build_s=t1 - t0,
            top_k_us=(t2 - t1) / n * 1e6,
            top_match_us=(t3 - t2) / n * 1e6,
        )
        log.info("[bench] %s build=%.3fs topk=%.1fus top=%.1fus",
                 impl, row.build_s, row.top_k_us, row.top_match_us)
        rows.append(row)
    return rows


def format_rows(rows: Sequence[BenchRow]) -> str:
    lines = [f"{'impl':<8} {'terms':>9} {'queries':>8} {'build(s)':>9} {'topK(us)':>10} {'top(us)':>10}"]
    for r in rows:
        lines.append(f"{r.impl:<8} {r.terms:>9,} {r.queries:>8,} {r.build_s:>9.3f} "
                     f"{r.top_k_us:>10.1f} {r.top_match_us:>10.1f}")
    return "\n".join(lines)
