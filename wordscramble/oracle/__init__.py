from __future__ import annotations
from typing import List
from .base import BaseOracle, DictionaryOracle, DEFAULT_LANGUAGE, REGISTRY, register

from . import wordlist  # noqa: F401
from . import frequency  # noqa: F401
from . import network  # noqa: F401

from .wordlist import WordListOracle
from .frequency import WordFreqOracle
from .network import NetworkDictionaryOracle


def create_oracle(oracle_id: str, **kwargs) -> BaseOracle:
    """
    Factory: instantiate a registered oracle by id, passing kwargs through.
    """
    try:
        cls = REGISTRY[oracle_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown oracle id: {oracle_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(**kwargs)


def get_oracle_ids() -> List[str]:
    """
    Return all registered oracle ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())


__all__ = [
    "DictionaryOracle", "BaseOracle", "DEFAULT_LANGUAGE",
    "WordListOracle", "WordFreqOracle", "NetworkDictionaryOracle",
    "create_oracle", "get_oracle_ids", "register",
]
