from __future__ import annotations

from typing import Tuple

from wordscramble.engine import Rejection


def rejection_message(reason: Rejection, root_word: str) -> Tuple[str, str]:
    """Title and message shown to the player for a rejected word."""
    if reason is Rejection.ALREADY_USED:
        return "Word used already", "Be more original!"
    if reason is Rejection.NOT_COMPOSABLE:
        return "Word not possible", f"You can't spell that word from '{root_word}'!"
    if reason is Rejection.NOT_REAL:
        return "Word not recognized", "You can't just make them up, you know!"
    if reason is Rejection.TOO_SIMPLE:
        return "Word is too simple", "Try something longer!"
    raise ValueError(f"Unknown rejection: {reason!r}")
