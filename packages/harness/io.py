"""
I/O utilities for replay runs.

Responsibilities:
- write_csv:     flatten per-round results into a tidy CSV (one row per submission).
- write_manifest:dump the replay manifest (options, dictionary report, totals).
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

FIELDS = ["round", "root", "turn", "word", "verdict", "points", "streak", "score"]


def write_csv(results: List[Dict], path: str) -> str:
    """
    Serialize a batch of round results to CSV.

    Schema (columns):
      round, root, turn, word, verdict, points, streak, score

    `score` is the running total after that submission, so the last row of
    each round carries the round's final score.

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=FIELDS)
        w.writeheader()

        for idx, r in enumerate(results, start=1):
            running = 0
            for turn, (word, verdict, points, streak) in enumerate(r.get("history", []), start=1):
                running += points
                w.writerow({
                    "round": idx,
                    "root": r["root"],
                    "turn": turn,
                    "word": word,
                    "verdict": verdict,
                    "points": points,
                    "streak": streak,
                    "score": running,
                })

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Dump the replay manifest that sits next to the submissions CSV.

    apps/cli/replay.py fills in run_id, git_commit, the parsed CLI options,
    the dictionary word list report (None for non word-list oracles),
    num_rounds and total_score. Keys are sorted so two manifests diff cleanly.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(manifest, indent=2, sort_keys=True) + "\n", encoding="utf-8")
    return str(p)


def timestamp_id() -> str:
    """UTC run id used in replay_<id>.csv / replay_<id>_manifest.json."""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """Short hash of the checkout that produced a replay, or 'unknown' outside git."""
    try:
        out = subprocess.run(
            ["git", "rev-parse", "--short", "HEAD"],
            capture_output=True, text=True, check=True,
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
    return out.stdout.strip()
