"""
Root-word survey primitives.

- survey_root:  list every word a player could get accepted for one root
                word, plus the best score reachable in a single round.
- run_survey:   survey many root words in sequence (optionally a sample prefix).

A word is counted only if the live pipeline would accept it on an empty
history, so the survey answers "what can a player actually score here?"
with exactly the rules used in play. The oracle can't enumerate words,
so a vocabulary (any word list) supplies the candidates and the oracle
has the final say.

These functions are UI-agnostic; the survey CLI adds progress and output.
"""

from __future__ import annotations
import time
from itertools import islice
from typing import Dict, Iterable, List

from wordscramble.engine import Accept, MIN_WORD_LENGTH, composable_words, validate
from wordscramble.oracle.base import DEFAULT_LANGUAGE, DictionaryOracle


def survey_root(
        root_word: str,
        *,
        vocabulary: Iterable[str],
        oracle: DictionaryOracle,
        language: str = DEFAULT_LANGUAGE,
        min_length: int = MIN_WORD_LENGTH,
) -> Dict:
    """
    Find every acceptable word for `root_word`.

    Returns:
        dict with keys:
            root_word (str), words (list[str], longest first then a-z),
            count (int), max_score (int), longest (str), time_ms (float)
    """
    root = root_word.strip().lower()

    t0 = time.perf_counter_ns()
    # Cheap letter check first so the oracle only sees plausible words.
    pool = sorted({w.strip().lower() for w in vocabulary if w.strip()})
    pool = composable_words(pool, root)

    accepted: List[str] = []
    for w in pool:
        outcome = validate(w, root, (), oracle, language=language, min_length=min_length)
        if isinstance(outcome, Accept):
            accepted.append(w)
    t1 = time.perf_counter_ns()

    accepted.sort(key=lambda w: (-len(w), w))
    return {
        "root_word": root,
        "words": accepted,
        "count": len(accepted),
        # Every accepted word is distinct, so one round can collect them all.
        "max_score": sum(len(w) for w in accepted),
        "longest": accepted[0] if accepted else "",
        "time_ms": (t1 - t0) / 1_000_000.0,
    }


def run_survey(
        root_words: Iterable[str],
        *,
        vocabulary: Iterable[str],
        oracle: DictionaryOracle,
        language: str = DEFAULT_LANGUAGE,
        min_length: int = MIN_WORD_LENGTH,
        sample: int | None = None,
) -> List[Dict]:
    """
    Survey many root words back-to-back. If 'sample' is provided, only the
    first K root words are used to speed up quick checks.
    """
    vocab = list(vocabulary)
    pool = root_words if sample is None else islice(root_words, sample)

    # Consumed lazily so a progress wrapper (tqdm) ticks once per root word.
    out: List[Dict] = []
    for root in pool:
        out.append(survey_root(root, vocabulary=vocab, oracle=oracle, language=language,
                               min_length=min_length))
    return out
