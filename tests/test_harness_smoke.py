import csv
import json
import re

from packages.harness import play_round, run_batch, write_csv, write_manifest
from packages.harness.io import timestamp_id
from packages.oracles import create_oracle


def test_play_round_smoke():
    oracle = create_oracle("wordlist")
    r = play_round("silkworm", ["silk", "worm", "silk", "milk", "qq"], oracle=oracle)
    assert r["words"] == ["milk", "worm", "silk"]
    assert r["score"] == 40 + 80 + 40
    assert r["streak"] == 1 and r["best_streak"] == 2
    assert [h[1] for h in r["history"]] == [
        "accepted", "accepted", "already_used", "accepted", "too_short"]


def test_run_batch_writes_outputs(tmp_path):
    oracle = create_oracle("static", answer=True)
    rounds = [
        {"root": "listen", "submissions": ["net", "tin"]},
        {"root": "silkworm", "submissions": ["silk"]},
    ]
    results = run_batch(rounds, oracle=oracle)
    assert [r["score"] for r in results] == [30 + 60, 40]

    csv_path = write_csv(results, str(tmp_path / "out" / "replay.csv"))
    with open(csv_path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 3
    assert rows[1]["word"] == "tin" and rows[1]["score"] == "90"

    manifest_path = write_manifest({"num_rounds": 2}, str(tmp_path / "m.json"))
    with open(manifest_path, encoding="utf-8") as f:
        assert json.load(f)["num_rounds"] == 2


def test_replay_manifest_is_stable(tmp_path):
    path = write_manifest({"total_score": 90, "num_rounds": 2, "wordlists": None},
                          str(tmp_path / "replay_manifest.json"))
    text = (tmp_path / "replay_manifest.json").read_text(encoding="utf-8")
    assert path.endswith("replay_manifest.json")
    assert text.index("num_rounds") < text.index("total_score") < text.index("wordlists")
    assert re.fullmatch(r"\d{8}T\d{6}Z", timestamp_id())
