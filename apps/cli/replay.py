# apps/cli/replay.py
"""
Replay recorded rounds through the engine.

Input is a JSON file:
    [{"root": "silkworm", "submissions": ["silk", "worm", "silk"]}, ...]

This script:
  1) Validates the dictionary word list (prints counts + SHA) when the
     word-list oracle is used.
  2) Replays every round with a progress bar.
  3) Writes:
       - CSV:  one row per submission (verdict, points, streak, running score)
       - JSON: manifest with config, word list report, git commit, totals
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from tqdm import tqdm

from packages.datasets import validate_wordlist, pretty_summary, default_dictionary_path
from packages.harness import play_round
from packages.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from packages.oracles import create_oracle, get_oracle_ids


def main():
    ap = argparse.ArgumentParser(description="wordscramble: replay recorded rounds")
    ap.add_argument("rounds", help="JSON file with a list of {root, submissions}")
    ap.add_argument("--oracle", choices=get_oracle_ids(), default="wordlist")
    ap.add_argument("--dictionary", default=None,
                    help="word list for the 'wordlist' oracle (default: bundled list)")
    ap.add_argument("--language", default="en")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    args = ap.parse_args()

    rep = None
    if args.oracle == "wordlist":
        dictionary = args.dictionary or str(default_dictionary_path(args.language))
        rep = validate_wordlist(dictionary)
        print(pretty_summary(rep))
        try:
            oracle = create_oracle("wordlist", language=args.language, path=dictionary)
        except FileNotFoundError:
            if args.dictionary:
                raise SystemExit(f"Dictionary not found: {args.dictionary}")
            raise SystemExit(f"No bundled dictionary for '{args.language}'")
    else:
        oracle = create_oracle(args.oracle, language=args.language)

    rounds = json.loads(Path(args.rounds).read_text(encoding="utf-8"))

    results = []
    for item in tqdm(rounds, ncols=80, desc="Replaying", unit="round"):
        results.append(play_round(item["root"], item["submissions"], oracle=oracle,
                                  language=args.language))

    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"replay_{run_id}.csv"
    manifest_path = outdir / f"replay_{run_id}_manifest.json"

    write_csv(results, str(csv_path))
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlists": rep,
        "num_rounds": len(results),
        "total_score": sum(r["score"] for r in results),
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
