from __future__ import annotations
import argparse, os, sys, json
from . import Engine
from .config import MAX_RESULTS


def _supports_color() -> bool:
    return sys.stdout.isatty() and os.environ.get("NO_COLOR", "") == ""

CSI = "\033["
def _c(text: str, code: str) -> str:
    if not _supports_color(): return text
    return f"{CSI}{code}m{text}{CSI}0m"


def _print_rows(rows: list[list[str]], total: int) -> None:
    if not rows:
        print(_c("(no anagrams)", "2;37")); return
    for i, words in enumerate(rows, 1):
        print(f"{i:<4} {' '.join(words)}")
    if total > len(rows):
        print(_c(f"... {total - len(rows)} more", "2;37"))


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Sentence anagram finder (Engine-backed)")
    g = p.add_mutually_exclusive_group()
    g.add_argument("--dictionary", default=None, help="Word list, one word per line (default: bundled list)")
    g.add_argument("--load", action="store_true", help="Load a pickled index from --cache instead of a word list")

    p.add_argument("--cache", default=None, help="Pickle path for the index (written on build, read on --load)")
    p.add_argument("--q", default=None, help="Sentence to find anagrams of")
    p.add_argument("--word", default=None, help="Single word to look up anagrams of")
    p.add_argument("-k", type=int, default=MAX_RESULTS, help="Print at most k anagrams")
    p.add_argument("--json", action="store_true", help="Emit JSON rows")
    p.add_argument("--repl", action="store_true", help="Interactive loop after init")
    p.add_argument("--verbose", action="store_true")

    args = p.parse_args(argv)
    if args.load and not args.cache:
        p.error("--load requires --cache")

    eng = Engine()
    try:
        if args.load:
            eng.load(cache=args.cache, verbose=args.verbose)
        else:
            eng.build(args.dictionary, cache=args.cache, verbose=args.verbose)

        def run_sentence(s: str):
            rows = eng.sentence_anagrams(s)
            if args.json:
                print(json.dumps(rows[: args.k], ensure_ascii=False, indent=2))
            else:
                _print_rows(rows[: args.k], len(rows))

        if args.word:
            found = eng.word_anagrams(args.word)
            if args.json:
                print(json.dumps(found, ensure_ascii=False))
            else:
                print(" ".join(found) if found else _c("(no anagrams)", "2;37"))

        if args.q is not None:
            run_sentence(args.q)

        if args.repl:
            print("Type a sentence (empty line to exit).")
            while True:
                try:
                    q = input("> ").strip()
                except (EOFError, KeyboardInterrupt):
                    break
                if not q:
                    break
                run_sentence(q)

        return 0
    finally:
        eng.shutdown()


if __name__ == "__main__":
    raise SystemExit(main())
