"""
Network dictionary oracle.

Asks the free dictionary API (https://dictionaryapi.dev) whether a word has
an entry. 200 means real, 404 means not. Anything else (other statuses,
timeouts, connection errors) is logged and answered as "not real" so a
flaky connection reads as a rejection instead of a crash.

Definite answers are cached per (language, word) for the life of the oracle;
failed lookups are not, so the next submission retries.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional, Tuple

import requests

from .base import BaseOracle, DEFAULT_LANGUAGE, register

_log = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.dictionaryapi.dev/api/v2/entries"
DEFAULT_TIMEOUT = 5.0


@register
class NetworkDictionaryOracle(BaseOracle):
    id = "network"
    name = "dictionaryapi.dev"

    def __init__(self, base_url: str = DEFAULT_BASE_URL, timeout: float = DEFAULT_TIMEOUT,
                 session: requests.Session | None = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = float(timeout)
        self.session = session or requests.Session()
        self._cache: Dict[Tuple[str, str], bool] = {}

    def _lookup(self, word: str, language: str) -> Optional[bool]:
        """True/False for a definite answer, None when the service couldn't say."""
        url = f"{self.base_url}/{language}/{word}"
        try:
            r = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            _log.warning("dictionary lookup failed for %r: %s", word, e)
            return None
        if r.status_code == 200:
            return True
        if r.status_code == 404:
            return False
        _log.warning("dictionary lookup for %r returned HTTP %d", word, r.status_code)
        return None

    def is_real(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        w = word.strip().lower()
        if not w.isalpha():
            return False
        key = (language.lower(), w)
        if key in self._cache:
            return self._cache[key]
        answer = self._lookup(w, key[0])
        if answer is None:
            return False
        self._cache[key] = answer
        return answer
