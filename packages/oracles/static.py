from __future__ import annotations
from typing import Iterable, List

from .base import DictionaryOracle, register


@register
class StaticOracle(DictionaryOracle):
    """
    Fixed answers, for tests and demos.

    Either give `words` (real iff listed) or `answer` (same reply for
    everything). Every lookup is appended to `calls`, which lets tests
    check that cheaper rules short-circuit before the oracle is asked.
    """
    id = "static"
    name = "Static"

    def __init__(self, *, language: str = "en", words: Iterable[str] | None = None,
                 answer: bool = True):
        super().__init__(language=language)
        self._words = None if words is None else {w.strip().lower() for w in words}
        self._answer = bool(answer)
        self.calls: List[str] = []

    def _lookup(self, word: str) -> bool:
        self.calls.append(word)
        if self._words is None:
            return self._answer
        return word in self._words
