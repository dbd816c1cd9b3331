"""
Round state: the root word plus what the player has achieved so far.

A RoundState is an immutable value. `start_round` creates a fresh one and the
only ways to move forward are `record_acceptance` and `reset_streak`, which
return new values. Callers replace their reference wholesale, so a UI can
never observe a half-applied submission.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, replace
from typing import Iterable, List, Tuple

from .errors import ConfigurationError


@dataclass(frozen=True)
class RoundState:
    root_word: str
    used_words: Tuple[str, ...] = ()  # most recent first (display order)
    score: int = 0
    streak: int = 0

    @property
    def word_count(self) -> int:
        return len(self.used_words)

    def contains(self, word: str) -> bool:
        """True if `word` was already accepted this round."""
        return word in self.used_words

    def record_acceptance(self, word: str, points: int) -> "RoundState":
        """
        Return the state after accepting `word` worth `points`:
        the word goes to the front of `used_words`, score grows, streak +1.
        """
        if points < 0:
            raise ValueError(f"points must be non-negative; got {points}")
        return replace(
            self,
            used_words=(word,) + self.used_words,
            score=self.score + points,
            streak=self.streak + 1,
        )

    def reset_streak(self) -> "RoundState":
        return replace(self, streak=0)


def start_round(candidates: Iterable[str], *, rng: random.Random | None = None) -> RoundState:
    """
    Pick a root word uniformly at random and return a fresh RoundState.

    Args:
      candidates : root word pool, e.g. the lines of start.txt
      rng        : optional RNG for reproducible picks

    Raises:
      ConfigurationError if the pool has no non-blank entries.
    """
    # Word files usually end with a newline, which leaves a blank last entry
    pool: List[str] = [w.strip().lower() for w in candidates if w.strip()]
    if not pool:
        raise ConfigurationError("no root word candidates available to start a round")

    chooser = rng if rng is not None else random
    return RoundState(root_word=chooser.choice(pool))
