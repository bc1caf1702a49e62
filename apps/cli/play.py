# apps/cli/play.py
"""
Terminal front-end for Word Scramble.

This script:
  1) Loads the start words (falls back to a fixed root word unless --strict).
  2) Builds the requested dictionary oracle.
  3) Runs the read-submit-render loop:
       - a word           -> validate; on accept it joins the list and scores
       - :new             -> new root word, cleared list
       - :quit / EOF      -> leave
       - blank line       -> nothing happens

The loop owns the one RoundState and swaps it for whatever the game
functions hand back; it never edits state itself.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import Iterable, Sequence, TextIO

from wordscramble.datasets import (
    FALLBACK_ROOT_WORD, Ready, WordSourceError, load_start_words, pick_root_word,
)
from wordscramble.datasets.io import START_WORDS_PATH
from wordscramble.engine import MIN_WORD_LENGTH, Reject
from wordscramble.game import RoundState, rejection_message, start_round, submit_word
from wordscramble.oracle import (
    DEFAULT_LANGUAGE, DictionaryOracle, WordListOracle, create_oracle, get_oracle_ids,
)
from wordscramble.oracle.frequency import DEFAULT_MIN_ZIPF
from wordscramble.oracle.network import DEFAULT_TIMEOUT

NEW_ROUND_COMMANDS = {":new", ":n"}
QUIT_COMMANDS = {":quit", ":q"}


def render(state: RoundState, out: TextIO) -> None:
    """Title (root word), score, then used words newest-first with their lengths."""
    out.write(f"\n== {state.root_word} ==  (round {state.round_number})\n")
    out.write(f"Current Score: {state.score}\n")
    for w in state.used_words:
        out.write(f"  ({len(w):2d}) {w}\n")
    out.flush()


def run_session(
        state: RoundState,
        lines: Iterable[str],
        *,
        out: TextIO,
        oracle: DictionaryOracle,
        root_words: Sequence[str],
        rng: random.Random,
        language: str = DEFAULT_LANGUAGE,
        min_length: int = MIN_WORD_LENGTH,
        reset_score: bool = False,
) -> RoundState:
    """
    Drive the game from an iterable of input lines; returns the final state.
    """
    render(state, out)
    for raw in lines:
        command = raw.strip().lower()
        if command in QUIT_COMMANDS:
            break
        if command in NEW_ROUND_COMMANDS:
            state = start_round(state, root_words, rng=rng, reset_score=reset_score)
            render(state, out)
            continue

        state, outcome = submit_word(state, raw, oracle, language=language,
                                     min_length=min_length)
        if outcome is None:
            continue
        if isinstance(outcome, Reject):
            title, message = rejection_message(outcome.reason, state.root_word)
            out.write(f"! {title}: {message}\n")
            out.flush()
        else:
            render(state, out)
    return state


def _build_oracle(args: argparse.Namespace) -> DictionaryOracle:
    if args.oracle == "wordlist":
        if args.dictionary:
            return WordListOracle.from_file(args.dictionary, language=args.language)
        if args.language != DEFAULT_LANGUAGE:
            raise SystemExit(f"The bundled word list is English; pass --dictionary for "
                             f"language {args.language!r}")
        return WordListOracle()
    if args.oracle == "wordfreq":
        return create_oracle("wordfreq", min_zipf=args.min_zipf)
    if args.oracle == "network":
        return create_oracle("network", timeout=args.timeout)
    return create_oracle(args.oracle)


def _lines(stream: TextIO, out: TextIO) -> Iterable[str]:
    """Prompted input lines until EOF."""
    while True:
        out.write("> ")
        out.flush()
        line = stream.readline()
        if not line:
            return
        yield line


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Word Scramble: make words from a root word")
    ap.add_argument("--start-words", default=str(START_WORDS_PATH),
                    help="path to the root word list (one per line)")
    ap.add_argument("--oracle", default="wordlist", choices=get_oracle_ids(),
                    help="how to decide whether a word is real")
    ap.add_argument("--dictionary",
                    help="word list for --oracle wordlist (default: bundled English list)")
    ap.add_argument("--language", default=DEFAULT_LANGUAGE, help="dictionary language tag")
    ap.add_argument("--min-zipf", type=float, default=DEFAULT_MIN_ZIPF,
                    help="frequency threshold for --oracle wordfreq")
    ap.add_argument("--timeout", type=float, default=DEFAULT_TIMEOUT,
                    help="request timeout (seconds) for --oracle network")
    ap.add_argument("--seed", type=int, help="RNG seed for root word choice")
    ap.add_argument("--strict", action="store_true",
                    help="abort if no start words load (default: fall back to "
                         f"'{FALLBACK_ROOT_WORD}')")
    ap.add_argument("--reset-score", action="store_true",
                    help="start each round at 0 instead of keeping a session total")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return ap


def main(argv: Sequence[str] | None = None) -> int:
    """
    Parse CLI args, load words and oracle, and play until :quit or EOF.
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    rng = random.Random(args.seed)

    # 1) Start words; Failed becomes a fallback word or an abort (--strict)
    result = load_start_words(args.start_words)
    if isinstance(result, Ready):
        root_words = result.root_words
    else:
        try:
            root_words = (pick_root_word(result, rng=rng, strict=args.strict),)
        except WordSourceError as e:
            raise SystemExit(f"Cannot start: {e}")

    # 2) Dictionary oracle
    oracle = _build_oracle(args)

    # 3) Play
    print("Type a word and press Enter. ':new' for a new root word, ':quit' to leave.")
    state = start_round(None, root_words, rng=rng)
    state = run_session(
        state, _lines(sys.stdin, sys.stdout),
        out=sys.stdout, oracle=oracle, root_words=root_words, rng=rng,
        language=args.language, reset_score=args.reset_score,
    )
    print(f"\nFinal score: {state.score}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
