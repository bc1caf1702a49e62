# apps/cli/survey.py
"""
CLI entry point for surveying root words.

This script:
  1) Validates the start word list (prints counts + SHA).
  2) Loads the start words, a candidate vocabulary, and the requested oracle.
  3) For every root word, finds all words the game would accept and the best
     reachable score, with a live progress indicator, and writes:
       - CSV:  one row per root word (count, max score, longest, words)
       - JSON: manifest with config, word-list hash, git commit, etc.

Useful for spotting root words that are too stingy (few playable words) or
for checking a new dictionary against the start list.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path
from typing import Iterable, Iterator, List, Sequence

from tqdm import tqdm
from wordfreq import top_n_list

from wordscramble.datasets import Ready, load_start_words, pretty_summary, validate_wordlist
from wordscramble.datasets.io import DICTIONARY_EN_PATH, START_WORDS_PATH, read_words
from wordscramble.engine import MIN_WORD_LENGTH
from wordscramble.harness import run_survey, write_csv, write_manifest
from wordscramble.harness.io import git_commit_or_unknown, timestamp_id
from wordscramble.oracle import (
    DEFAULT_LANGUAGE, DictionaryOracle, WordListOracle, create_oracle, get_oracle_ids,
)
from wordscramble.oracle.frequency import DEFAULT_MIN_ZIPF

# Size of the wordfreq vocabulary when no --vocab file is given.
DEFAULT_TOP_N = 50_000


def _plain_progress(cases: Sequence[str]) -> Iterator[str]:
    """Yield cases while writing a throttled one-line status to stderr."""
    total = len(cases)
    start = time.time()
    last_print = 0.0
    for idx, case in enumerate(cases, 1):
        yield case
        now = time.time()
        if (now - last_print >= 1.0) or (idx == total):
            elapsed = now - start
            rate = (idx / elapsed) if elapsed > 0 else 0.0
            remaining = (total - idx) / rate if rate > 0 else 0.0
            pct = 100.0 * idx / max(1, total)
            sys.stderr.write(
                f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
            )
            sys.stderr.flush()
            last_print = now
    sys.stderr.write("\n")
    sys.stderr.flush()


def _progress(cases: Sequence[str], mode: str) -> Iterable[str]:
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"
    if mode == "bar":
        return tqdm(cases, ncols=80, desc="Surveying", unit="root")
    if mode == "plain":
        return _plain_progress(cases)
    return cases


def _load_vocabulary(args: argparse.Namespace) -> List[str]:
    """
    Candidate words to try against each root word: an explicit file, else
    the oracle's own list, else the most frequent words from wordfreq.
    """
    if args.vocab:
        return read_words(args.vocab)
    if args.oracle == "wordlist":
        return read_words(args.dictionary or DICTIONARY_EN_PATH)
    return [w for w in top_n_list(args.language, args.top_n) if w.isalpha()]


def _build_oracle(args: argparse.Namespace) -> DictionaryOracle:
    if args.oracle == "wordlist":
        if not args.dictionary and args.language != DEFAULT_LANGUAGE:
            raise SystemExit(f"The bundled word list is English; pass --dictionary for "
                             f"language {args.language!r}")
        return WordListOracle.from_file(args.dictionary or DICTIONARY_EN_PATH,
                                        language=args.language)
    if args.oracle == "wordfreq":
        return create_oracle("wordfreq", min_zipf=args.min_zipf)
    return create_oracle(args.oracle)


def main(argv: Sequence[str] | None = None) -> int:
    """
    Parse CLI args, validate the start list, run the survey with progress, and write outputs.
    """
    ap = argparse.ArgumentParser(description="Word Scramble: survey playable words per root word")
    ap.add_argument("--start-words", default=str(START_WORDS_PATH),
                    help="path to the root word list")
    ap.add_argument("--oracle", default="wordlist", choices=get_oracle_ids(),
                    help="how to decide whether a word is real")
    ap.add_argument("--dictionary", help="word list for --oracle wordlist")
    ap.add_argument("--vocab", help="candidate words to try (default depends on --oracle)")
    ap.add_argument("--top-n", type=int, default=DEFAULT_TOP_N,
                    help="wordfreq vocabulary size when no --vocab is given")
    ap.add_argument("--language", default=DEFAULT_LANGUAGE)
    ap.add_argument("--min-zipf", type=float, default=DEFAULT_MIN_ZIPF)
    ap.add_argument("--min-length", type=int, default=MIN_WORD_LENGTH)
    ap.add_argument("--sample", type=int,
                    help="survey only a subset of root words (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123)
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--progress", choices=["auto", "bar", "plain", "off"], default="auto",
                    help="Show run progress (auto=bar on a terminal, else plain text).")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    # 1) Validate the start list and print a one-liner summary
    rep = validate_wordlist(args.start_words, min_length=args.min_length)
    print(pretty_summary(rep))

    # 2) Load inputs; no start words means nothing to survey
    result = load_start_words(args.start_words)
    if not isinstance(result, Ready):
        raise SystemExit(f"Cannot survey: {result.reason}")
    roots = list(result.root_words)
    if args.sample and args.sample < len(roots):
        random.Random(args.seed).shuffle(roots)
        roots = roots[: args.sample]

    vocabulary = _load_vocabulary(args)
    oracle = _build_oracle(args)

    # 3) Survey with live progress
    results = run_survey(
        _progress(roots, args.progress),
        vocabulary=vocabulary, oracle=oracle,
        language=args.language, min_length=args.min_length,
    )

    # 4) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"survey_{run_id}.csv"
    manifest_path = outdir / f"survey_{run_id}_manifest.json"

    write_csv(results, str(csv_path))
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlists": rep,
        "vocabulary_size": len(vocabulary),
        "num_roots": len(results),
    }
    write_manifest(manifest, str(manifest_path))

    stingy = [r["root_word"] for r in results if r["count"] == 0]
    if stingy:
        print(f"Root words with no playable words: {', '.join(stingy)}")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
