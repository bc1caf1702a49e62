"""
Start-word source.

Loading the start list is the one step that can leave a round without a root
word, so it returns an explicit result instead of raising:

  - Ready(root_words)  : at least one usable word was loaded
  - Failed(reason)     : missing/unreadable file, or nothing usable in it

`pick_root_word` turns that result into a root word, either by falling back
to a fixed literal or by raising WordSourceError (strict mode).
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple, Union

from .io import START_WORDS_PATH, read_words

_log = logging.getLogger(__name__)

FALLBACK_ROOT_WORD = "silkworm"


class WordSourceError(RuntimeError):
    """No root word could be produced and no fallback was allowed."""


@dataclass(frozen=True)
class Ready:
    root_words: Tuple[str, ...]


@dataclass(frozen=True)
class Failed:
    reason: str


StartupResult = Union[Ready, Failed]


def load_start_words(path: Path | str = START_WORDS_PATH) -> StartupResult:
    """
    Load candidate root words (one per line). Blank and non-alphabetic lines
    are skipped; words are lowercased.
    """
    try:
        words = read_words(path)
    except (OSError, UnicodeDecodeError) as e:
        _log.warning("could not load start words from %s: %s", path, e)
        return Failed(f"could not load start words from {path}: {e}")

    usable = tuple(w for w in words if w.isalpha())
    if len(usable) != len(words):
        _log.info("skipped %d non-alphabetic start word(s) in %s",
                  len(words) - len(usable), path)
    if not usable:
        _log.warning("start word list %s has no usable words", path)
        return Failed(f"no usable start words in {path}")

    _log.debug("loaded %d start words from %s", len(usable), path)
    return Ready(usable)


def pick_root_word(
        result: StartupResult,
        *,
        rng: random.Random,
        fallback: str = FALLBACK_ROOT_WORD,
        strict: bool = False,
) -> str:
    """
    Choose a root word uniformly at random from a Ready result.

    On Failed: return `fallback` unless `strict`, in which case raise
    WordSourceError. The fallback itself must be non-empty.
    """
    if isinstance(result, Ready):
        return rng.choice(result.root_words)

    if strict:
        raise WordSourceError(result.reason)
    fb = fallback.strip().lower()
    if not fb:
        raise WordSourceError(f"{result.reason} (and the fallback root word is empty)")
    _log.warning("%s; using fallback root word %r", result.reason, fb)
    return fb
