from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class RoundState:
    """
    Immutable snapshot of the game.

    Notes
    -----
    - Transitions in `game.round` return a new state; the front-end holds the
      single current instance and re-renders from whatever it gets back.
    - `used_words` is most-recent-first.
    - `score` may span rounds (see `start_round(reset_score=...)`).
    """

    root_word: str
    used_words: Tuple[str, ...] = ()
    score: int = 0
    round_number: int = 1

    def __post_init__(self) -> None:
        rw = (self.root_word or "").strip().lower()
        if not rw:
            raise ValueError("`root_word` must be non-empty.")
        object.__setattr__(self, "root_word", rw)
        object.__setattr__(self, "used_words", tuple(self.used_words))

        if self.score < 0:
            raise ValueError("`score` must be >= 0.")
        if self.round_number < 1:
            raise ValueError("`round_number` must be >= 1.")
