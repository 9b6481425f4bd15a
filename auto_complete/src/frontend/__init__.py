"""Module-level API over a single shared Engine."""
from __future__ import annotations
import time
import logging
from typing import List, Optional

from autocompletor.config import TOP_K
from autocompletor.engine import Engine
from autocompletor.models import Completion

log = logging.getLogger(__name__)

_engine: Optional[Engine] = None


def initialize(path: str, impl: Optional[str] = None, verbose: bool = False) -> Engine:
    """Load the vocabulary at `path` and build the shared index."""
    global _engine
    t0 = time.perf_counter()
    eng = Engine()
    eng.build(path, impl=impl, verbose=verbose)
    _engine = eng
    log.info("[ready] init complete in %.2fs", time.perf_counter() - t0)
    return eng


def complete(prefix: str, k: int = TOP_K) -> List[Completion]:
    """Return the top-k completions (list[Completion])."""
    if _engine is None:
        raise RuntimeError("Engine not initialized. Call initialize(...) first.")
    return _engine.complete(prefix, top_k=k)


def top_match(prefix: str) -> str:
    if _engine is None:
        raise RuntimeError("Engine not initialized. Call initialize(...) first.")
    return _engine.top_match(prefix)
