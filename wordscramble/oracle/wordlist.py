"""
Word-list oracle.

A static set of known words for one language. Deterministic and offline,
which makes it the oracle of choice for tests and for play without the
frequency tables installed.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from wordscramble.datasets.io import DICTIONARY_EN_PATH, read_words
from .base import BaseOracle, DEFAULT_LANGUAGE, register

_log = logging.getLogger(__name__)


@register
class WordListOracle(BaseOracle):
    id = "wordlist"
    name = "Bundled word list"

    def __init__(self, words: Iterable[str] | None = None, language: str = DEFAULT_LANGUAGE):
        if words is None:
            words = read_words(DICTIONARY_EN_PATH)
        self.language = language.lower()
        self.words = frozenset(w.strip().lower() for w in words if w.strip())

    @classmethod
    def from_file(cls, path: Path | str, language: str = DEFAULT_LANGUAGE) -> "WordListOracle":
        """Load a one-word-per-line dictionary file."""
        oracle = cls(read_words(path), language=language)
        _log.debug("loaded %d %s words from %s", len(oracle), language, path)
        return oracle

    def __len__(self) -> int:
        return len(self.words)

    def is_real(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        # A list only speaks for its own language.
        if language.lower() != self.language:
            return False
        return word.strip().lower() in self.words
