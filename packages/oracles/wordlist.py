"""
Embedded dictionary: a word is real iff it appears in a word list file.

The bundled list lives in packages/datasets/data/words_<lang>.txt; any
newline-separated file (or an in-memory iterable) can be used instead.
"""

from __future__ import annotations
from pathlib import Path
from typing import FrozenSet, Iterable

from packages.datasets.io import default_dictionary_path, load_words
from .base import DictionaryOracle, register


@register
class WordListOracle(DictionaryOracle):
    id = "wordlist"
    name = "Word list"

    def __init__(self, *, language: str = "en", path: str | Path | None = None,
                 words: Iterable[str] | None = None):
        super().__init__(language=language)
        if words is None:
            words = load_words(path or default_dictionary_path(language))
        self._words: FrozenSet[str] = frozenset(w.strip().lower() for w in words if w.strip())

    def __len__(self) -> int:
        return len(self._words)

    def _lookup(self, word: str) -> bool:
        return word in self._words
