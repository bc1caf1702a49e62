from .letters import is_composable, composable_words
from .validation import (
    Accept, Reject, Rejection, Outcome, MIN_WORD_LENGTH,
    normalize, is_original, is_real, is_long_enough, validate,
)

__all__ = [
    "is_composable", "composable_words",
    "Accept", "Reject", "Rejection", "Outcome", "MIN_WORD_LENGTH",
    "normalize", "is_original", "is_real", "is_long_enough", "validate",
]
