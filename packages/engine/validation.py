"""
Submission validation: classify one candidate word against the round.

Rules run in a fixed order and the first failing rule decides the verdict:

  1. empty          -> EMPTY         (silent, nothing to show)
  2. length <= 2    -> TOO_SHORT     (streak kept)
  3. equals root    -> SAME_AS_ROOT  (streak kept)
  4. already used   -> ALREADY_USED  (streak reset)
  5. not spellable  -> NOT_POSSIBLE  (streak reset)
  6. oracle says no -> NOT_REAL      (streak reset)

Later rules assume the earlier ones passed, and the dictionary oracle is the
most expensive check, so it always runs last.

`validate` never touches the state. The caller applies the outcome with
`apply` (or `GameSession.submit`, which does both).
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable, Tuple

from .letters import is_possible
from .scoring import points_for
from .state import RoundState

MIN_WORD_LENGTH = 3
DEFAULT_LANGUAGE = "en"


class Verdict(enum.Enum):
    EMPTY = "empty"
    TOO_SHORT = "too_short"
    SAME_AS_ROOT = "same_as_root"
    ALREADY_USED = "already_used"
    NOT_POSSIBLE = "not_possible"
    NOT_REAL = "not_real"
    ACCEPTED = "accepted"


# Gameplay mistakes break the streak; input slips (too short, the root itself) do not.
STREAK_RESETTING = frozenset({Verdict.ALREADY_USED, Verdict.NOT_POSSIBLE, Verdict.NOT_REAL})

_TITLES = {
    Verdict.TOO_SHORT: "Word is too short",
    Verdict.SAME_AS_ROOT: "Word is the same as the root",
    Verdict.ALREADY_USED: "Word used already",
    Verdict.NOT_POSSIBLE: "Word not possible",
    Verdict.NOT_REAL: "Word not recognized",
}

_MESSAGES = {
    Verdict.TOO_SHORT: "Write something longer than 2 letters",
    Verdict.SAME_AS_ROOT: "Be smarter than that!",
    Verdict.ALREADY_USED: "Be more original",
    Verdict.NOT_POSSIBLE: "You can't spell that word from '{root}'!",
    Verdict.NOT_REAL: "You can't just make them up, you know!",
}


@dataclass(frozen=True)
class SubmissionResult:
    verdict: Verdict
    word: str
    points: int = 0
    title: str = ""
    message: str = ""

    @property
    def accepted(self) -> bool:
        return self.verdict is Verdict.ACCEPTED

    @property
    def resets_streak(self) -> bool:
        return self.verdict in STREAK_RESETTING

    @property
    def is_error(self) -> bool:
        """True if the presentation layer should show an error dialog."""
        return self.verdict not in (Verdict.EMPTY, Verdict.ACCEPTED)


def normalize(raw: str) -> str:
    """Trim surrounding whitespace and lowercase."""
    return raw.strip().lower()


def _rules(state: RoundState, oracle, language: str) -> Tuple[Tuple[Verdict, Callable[[str], bool]], ...]:
    # (verdict on failure, predicate that must hold); order is significant
    root = state.root_word.lower()
    return (
        (Verdict.EMPTY, lambda w: len(w) > 0),
        (Verdict.TOO_SHORT, lambda w: len(w) >= MIN_WORD_LENGTH),
        (Verdict.SAME_AS_ROOT, lambda w: w != root),
        (Verdict.ALREADY_USED, lambda w: not state.contains(w)),
        (Verdict.NOT_POSSIBLE, lambda w: is_possible(w, root)),
        (Verdict.NOT_REAL, lambda w: oracle.is_valid_word(w, language)),
    )


def _rejection(verdict: Verdict, word: str, root: str) -> SubmissionResult:
    if verdict is Verdict.EMPTY:
        return SubmissionResult(verdict, word)
    return SubmissionResult(
        verdict,
        word,
        title=_TITLES[verdict],
        message=_MESSAGES[verdict].format(root=root),
    )


def validate(state: RoundState, oracle, raw: str, *, language: str = DEFAULT_LANGUAGE) -> SubmissionResult:
    """
    Classify `raw` against `state` without changing anything.

    Args:
      state    : current round
      oracle   : any object with is_valid_word(word, language) -> bool
      raw      : the text the player typed
      language : language passed through to the oracle

    Returns:
      SubmissionResult; `points` is set only for ACCEPTED and already
      includes the streak bump this acceptance will cause.
    """
    word = normalize(raw)

    for verdict, passes in _rules(state, oracle, language):
        if not passes(word):
            return _rejection(verdict, word, state.root_word)

    return SubmissionResult(
        Verdict.ACCEPTED,
        word,
        points=points_for(word, state.streak + 1),
    )


def apply(state: RoundState, result: SubmissionResult) -> RoundState:
    """Return the state after `result`; the caller swaps it in."""
    if result.accepted:
        return state.record_acceptance(result.word, result.points)
    if result.resets_streak:
        return state.reset_streak()
    return state
