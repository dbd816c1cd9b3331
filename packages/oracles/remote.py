"""
Dictionary lookups against an HTTP service.

Default endpoint is the free dictionaryapi.dev API:
  GET https://api.dictionaryapi.dev/api/v2/entries/<language>/<word>
  200 -> the word has entries (real)
  404 -> no definitions found (not real)
Anything else (timeouts, 5xx, connection errors) is raised as
OracleUnavailableError; the game cannot tell "not a word" from "no answer".

Answers are cached per word for the life of the oracle, since a player
often retries the same word.
"""

from __future__ import annotations
from typing import Dict

import requests

from packages.engine.errors import OracleUnavailableError
from .base import DictionaryOracle, register

DEFAULT_URL = "https://api.dictionaryapi.dev/api/v2/entries/{language}/{word}"


@register
class RemoteOracle(DictionaryOracle):
    id = "remote"
    name = "Remote dictionary API"

    def __init__(self, *, language: str = "en", url: str = DEFAULT_URL, timeout: float = 30,
                 session: requests.Session | None = None):
        super().__init__(language=language)
        self.url = url
        self.timeout = timeout
        self._http = session or requests.Session()
        self._cache: Dict[str, bool] = {}

    def _lookup(self, word: str) -> bool:
        if word in self._cache:
            return self._cache[word]

        url = self.url.format(language=self.language, word=word)
        try:
            r = self._http.get(url, timeout=self.timeout)
            if r.status_code == 404:
                found = False
            else:
                r.raise_for_status()
                found = True
        except requests.RequestException as e:
            raise OracleUnavailableError(f"dictionary lookup failed for '{word}': {e}") from e

        self._cache[word] = found
        return found
