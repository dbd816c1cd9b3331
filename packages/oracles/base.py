from __future__ import annotations
from typing import Dict, List, Type

from packages.engine.errors import UnsupportedLanguageError

# ---- Global oracle registry ----
REGISTRY: Dict[str, Type["DictionaryOracle"]] = {}


def register(cls: Type["DictionaryOracle"]) -> Type["DictionaryOracle"]:
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


# ---- Base class that oracles inherit ----
class DictionaryOracle:
    """
    Answers "is this a real word in `language`?".

    Each oracle serves exactly one language, fixed at construction.
    Subclasses implement `_lookup(word)`; `is_valid_word` handles
    normalization and the language guard.
    """
    id = "base"
    name = "Base"

    def __init__(self, *, language: str = "en"):
        self.language = language

    def is_valid_word(self, word: str, language: str) -> bool:
        if language != self.language:
            raise UnsupportedLanguageError(
                f"{self.id} oracle serves '{self.language}', asked for '{language}'")
        w = word.strip().lower()
        if not w:
            return False
        return self._lookup(w)

    def _lookup(self, word: str) -> bool:
        raise NotImplementedError("Override in subclass")


def get_oracle_ids() -> List[str]:
    return sorted(REGISTRY.keys())
