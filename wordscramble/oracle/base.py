from __future__ import annotations
from typing import Dict, Protocol, Type, runtime_checkable

DEFAULT_LANGUAGE = "en"

# ---- Global oracle registry ----
REGISTRY: Dict[str, Type["BaseOracle"]] = {}


def register(cls: Type["BaseOracle"]) -> Type["BaseOracle"]:
    """
    Decorator: @register on an oracle class adds it to REGISTRY by its `id`.
    """
    oid = getattr(cls, "id", None)
    if not oid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if oid in REGISTRY:
        raise ValueError(f"Duplicate oracle id: {oid}")
    REGISTRY[oid] = cls
    return cls


@runtime_checkable
class DictionaryOracle(Protocol):
    """Anything that can answer "is `word` a real word in `language`?"."""

    def is_real(self, word: str, language: str) -> bool: ...


# ---- Base class that bundled oracles inherit ----
class BaseOracle:
    id = "base"
    name = "Base"

    def is_real(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        raise NotImplementedError("Override in subclass")
