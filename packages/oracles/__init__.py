from __future__ import annotations
from .base import DictionaryOracle, REGISTRY, register, get_oracle_ids

from . import wordlist  # noqa: F401
from . import static  # noqa: F401
from . import remote  # noqa: F401


def create_oracle(oracle_id: str, **kwargs) -> DictionaryOracle:
    """
    Factory: instantiate a registered oracle by id, passing kwargs through.
    """
    try:
        cls = REGISTRY[oracle_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown oracle id: {oracle_id}. Available: {get_oracle_ids()}") from e
    return cls(**kwargs)


__all__ = ["DictionaryOracle", "REGISTRY", "register", "create_oracle", "get_oracle_ids"]
