"""
Submission validation.

This module answers the question: "Should this word be accepted right now?"
A normalized candidate is accepted iff, checked in this order:
  1. it has not been used this round            (else ALREADY_USED)
  2. it can be spelled from the root's letters  (else NOT_COMPOSABLE)
  3. the dictionary oracle knows it             (else NOT_REAL)
  4. it has at least `min_length` letters       (else TOO_SIMPLE)

The first failing rule decides the rejection, so the order matters for which
message the player sees. Later rules are not evaluated once one fails; in
particular the oracle is never consulted for a used or impossible word.

`validate` is a pure decision: it returns an outcome and leaves the caller
to update the used-word history and score.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Union

from wordscramble.oracle.base import DEFAULT_LANGUAGE, DictionaryOracle
from .letters import is_composable

MIN_WORD_LENGTH = 3


class Rejection(Enum):
    ALREADY_USED = "already_used"
    NOT_COMPOSABLE = "not_composable"
    NOT_REAL = "not_real"
    TOO_SIMPLE = "too_simple"


@dataclass(frozen=True)
class Accept:
    score_delta: int


@dataclass(frozen=True)
class Reject:
    reason: Rejection


Outcome = Union[Accept, Reject]


def normalize(raw: str) -> str:
    """Lowercase and strip surrounding whitespace/newlines."""
    return raw.strip().lower()


def is_original(word: str, used_words: Sequence[str]) -> bool:
    return word not in used_words


def is_real(word: str, oracle: DictionaryOracle, language: str = DEFAULT_LANGUAGE) -> bool:
    return bool(oracle.is_real(word, language))


def is_long_enough(word: str, min_length: int = MIN_WORD_LENGTH) -> bool:
    return len(word) >= min_length


def validate(
        candidate: str,
        root_word: str,
        used_words: Sequence[str],
        oracle: DictionaryOracle,
        *,
        language: str = DEFAULT_LANGUAGE,
        min_length: int = MIN_WORD_LENGTH,
) -> Optional[Outcome]:
    """
    Decide whether `candidate` should be accepted.

    Args:
      candidate  : already-normalized submission (see `normalize`)
      root_word  : the round's letter pool
      used_words : words accepted so far this round
      oracle     : realness capability, e.g. a WordListOracle in tests
      language   : language tag passed through to the oracle
      min_length : shortest acceptable word

    Returns:
      None for an empty candidate (nothing to do), otherwise Accept(len) or
      Reject(reason) for the first failing rule.
    """
    if not candidate:
        return None

    if not is_original(candidate, used_words):
        return Reject(Rejection.ALREADY_USED)

    if not is_composable(candidate, root_word):
        return Reject(Rejection.NOT_COMPOSABLE)

    if not is_real(candidate, oracle, language):
        return Reject(Rejection.NOT_REAL)

    if not is_long_enough(candidate, min_length):
        return Reject(Rejection.TOO_SIMPLE)

    return Accept(score_delta=len(candidate))
