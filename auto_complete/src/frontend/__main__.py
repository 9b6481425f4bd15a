from __future__ import annotations
import argparse, logging, os, sys, json
from autocompletor import Engine, load_vocabulary
from autocompletor import config as CFG
from autocompletor.benchmark import random_prefixes, run_benchmark, format_rows

QUIT = ":q"


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Weighted prefix autocomplete CLI")
    p.add_argument("--vocab", required=True, help="Vocabulary file (weight<TAB>word per line)")
    p.add_argument("--impl", choices=CFG.IMPLEMENTATIONS, default=CFG.DEFAULT_IMPL, help="Index implementation")
    p.add_argument("-k", type=int, default=CFG.TOP_K, help="Top-K results")
    p.add_argument("--q", default=None, help="Single query to run once")
    p.add_argument("--top", action="store_true", help="Print only the single best match")
    p.add_argument("--repl", action="store_true", help="Interactive loop after init")
    p.add_argument("--json", action="store_true", help="Emit JSON rows")
    p.add_argument("--bench", type=int, default=None, metavar="N",
                   help="Benchmark every implementation with N random prefixes")
    p.add_argument("--verbose", action="store_true")

    args = p.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO)
        os.environ["AUTOCOMPLETE_VERBOSE"] = "1"

    eng = Engine()
    try:
        try:
            vocab = load_vocabulary(args.vocab)
            eng.build(words=vocab.words, weights=vocab.weights, impl=args.impl)
        except (OSError, ValueError) as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 2

        def run_query(q: str) -> None:
            if args.top:
                best = eng.top_match(q)
                print(json.dumps({"match": best}, ensure_ascii=False) if args.json else (best or "(no matches)"))
                return
            rows = eng.complete(q, top_k=args.k)
            if args.json:
                print(json.dumps([r.__dict__ for r in rows], ensure_ascii=False, indent=2))
            else:
                if not rows:
                    print("(no matches)"); return
                print("#  Weight          Word")
                for i, r in enumerate(rows, 1):
                    print(f"{i:<2} {r.weight:<15.1f} {r.word}")

        if args.bench is not None:
            prefixes = random_prefixes(vocab.words, args.bench)
            print(format_rows(run_benchmark(vocab.words, vocab.weights, prefixes, k=args.k)))

        if args.q is not None:
            run_query(args.q)

        if args.repl:
            print(f"Type a prefix ({QUIT} or Ctrl-D to exit; empty line lists everything).")
            while True:
                try:
                    q = input("> ").strip()
                except (EOFError, KeyboardInterrupt):
                    break
                if q == QUIT:
                    break
                run_query(q)

        return 0
    finally:
        eng.shutdown()


if __name__ == "__main__":
    raise SystemExit(main())
