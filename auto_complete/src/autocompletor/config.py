TOP_K: int = 5

# Index implementation used when none is requested: "binary", "trie" or "brute"
DEFAULT_IMPL: str = "trie"
IMPLEMENTATIONS: tuple[str, ...] = ("binary", "trie", "brute")

# /* ~~~ trie top-k emission policy ~~~ */
# "weight": words come out strictly by (truncated) weight
# "bound":  words come out as soon as their node is popped by subtree bound
TRIE_ORDER: str = "weight"

# Vocabulary files
ENCODING: str = "utf-8"
PROGRESS_EVERY_LINES: int = 100_000

# Benchmark defaults
BENCH_QUERIES: int = 1000
BENCH_SEED: int = 1234
