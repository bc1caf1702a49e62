"""
Word-frequency oracle.

Treats a word as real when it shows up often enough in the `wordfreq`
frequency tables for the requested language. The Zipf scale runs from 0
(never seen) to about 8 ("the"); 1.5 keeps rare-but-real words while
dropping most typos and keyboard mash.
"""

from __future__ import annotations

import logging

from wordfreq import zipf_frequency

from .base import BaseOracle, DEFAULT_LANGUAGE, register

_log = logging.getLogger(__name__)

DEFAULT_MIN_ZIPF = 1.5


@register
class WordFreqOracle(BaseOracle):
    id = "wordfreq"
    name = "wordfreq (Zipf threshold)"

    def __init__(self, min_zipf: float = DEFAULT_MIN_ZIPF):
        self.min_zipf = float(min_zipf)

    def is_real(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        w = word.strip().lower()
        if not w.isalpha():
            return False
        try:
            freq = zipf_frequency(w, language)
        except LookupError:
            _log.warning("wordfreq has no word list for language %r", language)
            return False
        _log.debug("zipf(%r, %s) = %.2f", w, language, freq)
        return freq >= self.min_zipf
