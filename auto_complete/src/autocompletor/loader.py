from __future__ import annotations
import logging
import os
from typing import Iterable, List

from .config import ENCODING, PROGRESS_EVERY_LINES
from .models import Vocabulary

log = logging.getLogger(__name__)

# Progress logging (set AUTOCOMPLETE_VERBOSE=1 to enable)
VERBOSE = os.environ.get("AUTOCOMPLETE_VERBOSE") == "1"


def _parse_line(line: str, line_no: int) -> tuple[str, float]:
    """Split `weight<whitespace>word`; the word is the rest of the line and may contain spaces."""
    parts = line.strip().split(None, 1)
    if len(parts) != 2:
        raise ValueError(f"line {line_no}: expected '<weight> <word>', got {line.rstrip()!r}")
    raw_weight, word = parts
    try:
        weight = float(raw_weight)
    except ValueError:
        raise ValueError(f"line {line_no}: bad weight {raw_weight!r}") from None
    return word.strip(), weight


def parse_vocabulary(lines: Iterable[str]) -> Vocabulary:
    """
    Parse vocabulary lines:
        [count]
        weight<TAB>word
        ...
    A first non-blank line holding a single integer is a size hint and is skipped.
    Blank lines are ignored.
    """
    words: List[str] = []
    weights: List[float] = []
    expected: int | None = None
    verbose = VERBOSE or os.environ.get("AUTOCOMPLETE_VERBOSE") == "1"
    first = True

    for line_no, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        if first:
            first = False
            if line.strip().isdigit():
                expected = int(line.strip())
                continue
        word, weight = _parse_line(line, line_no)
        words.append(word)
        weights.append(weight)
        if verbose and len(words) % PROGRESS_EVERY_LINES == 0:
            log.info("[loaded] terms=%s", f"{len(words):,}")

    if expected is not None and expected != len(words):
        log.debug("size hint says %d terms, read %d", expected, len(words))
    return Vocabulary(words=tuple(words), weights=tuple(weights))


def load_vocabulary(path: str, encoding: str = ENCODING) -> Vocabulary:
    """Read a vocabulary file (see parse_vocabulary for the format)."""
    log.info("Loading vocabulary from %s", path)
    with open(path, "r", encoding=encoding) as f:
        vocab = parse_vocabulary(ln.rstrip("\r\n") for ln in f)
    log.info("Loaded %d terms from %s", len(vocab), path)
    return vocab
