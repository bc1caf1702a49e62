"""
Build the start-word (root word) list from a larger word list.

Features:
- Source is a local file (--in) or a plain-text URL (--url), one word per line.
- Keeps lowercase a–z words of exactly --length letters (8 by default).
- Optional --dictionary: keep only words the bundled/given dictionary knows,
  so every root word is itself a real word.
- Stable dedupe (first occurrence wins); optional alphabetical --sort.

Usage:
    python -m script.build_start_words --in big_list.txt \
        --out wordscramble/datasets/data/start.txt --dictionary wordscramble/datasets/data/words_en.txt
    python -m script.build_start_words --url https://example.org/words.txt --length 7 --sort
"""

import argparse
from pathlib import Path

import requests

from wordscramble.datasets.io import START_WORDS_PATH, read_words, write_lines


def unique_preserve_order(words):
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def fetch_words(url: str) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    return [ln.strip().lower() for ln in r.text.splitlines() if ln.strip()]


def select_start_words(words, length: int, known=None) -> list[str]:
    """Exact-length alphabetic words, optionally restricted to `known`."""
    picked = [w for w in words if len(w) == length and w.isascii() and w.isalpha()]
    if known is not None:
        picked = [w for w in picked if w in known]
    return unique_preserve_order(picked)


def main():
    ap = argparse.ArgumentParser(description="Build the root word list for Word Scramble.")
    src = ap.add_mutually_exclusive_group(required=True)
    src.add_argument("--in", dest="inp", help="input .txt file (one word per line)")
    src.add_argument("--url", help="plain-text word list URL")
    ap.add_argument("--out", default=str(START_WORDS_PATH))
    ap.add_argument("--length", type=int, default=8, help="root word length")
    ap.add_argument("--dictionary", help="only keep words present in this word list")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically after dedupe")
    args = ap.parse_args()

    words = read_words(args.inp) if args.inp else fetch_words(args.url)
    known = set(read_words(args.dictionary)) if args.dictionary else None

    out = select_start_words(words, args.length, known)
    if args.sort:
        out = sorted(out)
    if not out:
        raise SystemExit(f"No {args.length}-letter words found; refusing to write an empty list.")

    write_lines(out, Path(args.out))
    print(f"Input: {len(words)} words → Output: {args.out} ({len(out)} root words)")


if __name__ == "__main__":
    main()
