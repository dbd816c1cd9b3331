"""
Replay harness primitives.

- play_round: replay a fixed list of submissions against a known root word.
- run_batch:  replay many rounds in sequence.

Useful for regression runs over recorded games and for checking a new
dictionary oracle against known outcomes. UI-agnostic, like the engine.
"""

from __future__ import annotations
import time
from typing import Dict, Iterable, List

from packages.engine import RoundState, apply, validate
from packages.engine.validation import DEFAULT_LANGUAGE


def play_round(
        root_word: str,
        submissions: Iterable[str],
        *,
        oracle,
        language: str = DEFAULT_LANGUAGE,
) -> Dict:
    """
    Replay `submissions` in order against `root_word`.

    Returns:
        dict with keys:
            root (str), score (int), streak (int), best_streak (int),
            words (list[str], most recent first), time_ms (float),
            history (list[(word, verdict, points, streak_after)])
    """
    state = RoundState(root_word=root_word.strip().lower())
    history: List[tuple] = []
    best_streak = 0

    t0 = time.perf_counter_ns()
    for raw in submissions:
        result = validate(state, oracle, raw, language=language)
        state = apply(state, result)
        best_streak = max(best_streak, state.streak)
        history.append((result.word, result.verdict.value, result.points, state.streak))
    dt = (time.perf_counter_ns() - t0) / 1_000_000.0

    return {
        "root": state.root_word,
        "score": state.score,
        "streak": state.streak,
        "best_streak": best_streak,
        "words": list(state.used_words),
        "time_ms": dt,
        "history": history,
    }


def run_batch(
        rounds: Iterable[Dict],
        *,
        oracle,
        language: str = DEFAULT_LANGUAGE,
) -> List[Dict]:
    """
    Replay many rounds. Each item needs "root" and "submissions" keys.
    """
    out: List[Dict] = []
    for item in rounds:
        out.append(play_round(item["root"], item["submissions"], oracle=oracle, language=language))
    return out
