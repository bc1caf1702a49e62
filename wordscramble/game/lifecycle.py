"""
Round lifecycle.

- start_round: pick a fresh root word and clear the used-word history.
- submit_word: normalize one submission, validate it, and apply an accept.

Both are pure: they take a RoundState and hand back a new one. These
functions are UI-agnostic so the terminal front-end, tests, or any other
front-end drive the game the same way.
"""

from __future__ import annotations

import logging
import random
from dataclasses import replace
from typing import Optional, Sequence, Tuple

from wordscramble.engine import Accept, Outcome, MIN_WORD_LENGTH, normalize, validate
from wordscramble.oracle.base import DEFAULT_LANGUAGE, DictionaryOracle
from .state import RoundState

_log = logging.getLogger(__name__)


def start_round(
        state: Optional[RoundState],
        root_words: Sequence[str],
        *,
        rng: random.Random,
        reset_score: bool = False,
) -> RoundState:
    """
    Begin a new round with a root word chosen uniformly from `root_words`.

    The score carries over from `state` unless `reset_score` is set; passing
    `state=None` starts the first round at zero.
    """
    if not root_words:
        raise ValueError("root_words must contain at least one word")

    root = rng.choice(list(root_words))
    if state is None:
        new = RoundState(root_word=root)
    else:
        new = RoundState(
            root_word=root,
            used_words=(),
            score=0 if reset_score else state.score,
            round_number=state.round_number + 1,
        )
    _log.info("round %d: root word %r", new.round_number, new.root_word)
    return new


def submit_word(
        state: RoundState,
        raw: str,
        oracle: DictionaryOracle,
        *,
        language: str = DEFAULT_LANGUAGE,
        min_length: int = MIN_WORD_LENGTH,
) -> Tuple[RoundState, Optional[Outcome]]:
    """
    Run one submission through the validation pipeline.

    Returns (state, outcome). On Accept the returned state has the word at
    the front of `used_words` and the score raised by its length; otherwise
    the input state is returned unchanged. `outcome` is None for a blank
    submission.
    """
    word = normalize(raw)
    outcome = validate(word, state.root_word, state.used_words, oracle,
                       language=language, min_length=min_length)

    if isinstance(outcome, Accept):
        _log.debug("accepted %r (+%d)", word, outcome.score_delta)
        return replace(
            state,
            used_words=(word,) + state.used_words,
            score=state.score + outcome.score_delta,
        ), outcome

    if outcome is not None:
        _log.debug("rejected %r: %s", word, outcome.reason.value)
    return state, outcome
