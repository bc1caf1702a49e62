"""
Letter-budget checks against a root word.

A candidate is composable from a root word when its letters, counted with
multiplicity, all fit inside the root's letters:

  - "pp"   vs "apple" -> True  (two p's available)
  - "pp"   vs "ample" -> False (only one p)
  - "silkk" vs "silkworm" -> False (one k)

Letters are consumed one at a time from a local budget; the first letter
that has no remaining count fails the check immediately.
"""

from collections import Counter
from typing import Iterable, List


def is_composable(word: str, root_word: str) -> bool:
    """
    Return True if `word` can be spelled from the letters of `root_word`.

    Both strings are compared as given; callers normalize case first.
    """
    remaining = Counter(root_word)
    for ch in word:
        if remaining[ch] <= 0:
            return False
        remaining[ch] -= 1  # consume one instance
    return True


def composable_words(words: Iterable[str], root_word: str) -> List[str]:
    """
    Keep only words spellable from `root_word` (order preserved).
    """
    return [w for w in words if is_composable(w, root_word)]
