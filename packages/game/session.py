"""
GameSession: what a presentation layer holds on to.

It owns the current RoundState, the root word pool and the dictionary
oracle. Each submission (validate, apply, snapshot) runs under one lock,
so a re-render never sees a state between "word added" and "score updated".
"""

from __future__ import annotations
import random
import threading
from typing import List, Tuple

from packages.engine import RoundState, SubmissionResult, apply, start_round, validate
from packages.engine.errors import RoundNotStartedError
from packages.engine.validation import DEFAULT_LANGUAGE


class GameSession:
    def __init__(self, start_words, oracle, *, language: str = DEFAULT_LANGUAGE,
                 seed: int | None = None):
        self.start_words: List[str] = list(start_words)
        self.oracle = oracle
        self.language = language
        self.rng = random.Random(seed)
        self._state: RoundState | None = None
        self._lock = threading.Lock()

    @property
    def state(self) -> RoundState:
        with self._lock:
            if self._state is None:
                raise RoundNotStartedError("call start_round() before playing")
            return self._state

    def start_round(self) -> RoundState:
        """Discard the current round (if any) and begin a new one."""
        fresh = start_round(self.start_words, rng=self.rng)
        with self._lock:
            self._state = fresh
        return fresh

    def submit(self, raw: str) -> Tuple[SubmissionResult, RoundState]:
        """
        Validate `raw`, apply the outcome, and return (result, new_state).
        Empty and rejected input leave score and used words untouched.
        """
        with self._lock:
            if self._state is None:
                raise RoundNotStartedError("call start_round() before submitting words")
            result = validate(self._state, self.oracle, raw, language=self.language)
            self._state = apply(self._state, result)
            return result, self._state
