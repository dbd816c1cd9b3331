import pytest
import requests

from apps.cli import play, replay
from packages.oracles.remote import RemoteOracle


class _OfflineSession:
    def get(self, url, timeout=None):
        raise requests.ConnectionError("offline")


def _feed(monkeypatch, lines):
    it = iter(lines)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(it))


def test_play_survives_dictionary_outage(tmp_path, monkeypatch, capsys):
    start = tmp_path / "start.txt"
    start.write_text("silkworm\n", encoding="utf-8")
    monkeypatch.setattr("sys.argv", ["play", "--start-words", str(start), "--seed", "1"])
    monkeypatch.setattr(play, "_make_oracle", lambda args: RemoteOracle(session=_OfflineSession()))
    _feed(monkeypatch, ["silk", "sw", ":quit"])

    play.main()

    out = capsys.readouterr().out
    assert "Dictionary unavailable" in out
    assert "Word is too short" in out  # loop kept going after the failure
    assert "Final score: 0" in out


def test_play_unknown_language_exits_cleanly(monkeypatch):
    monkeypatch.setattr("sys.argv", ["play", "--language", "fr"])
    with pytest.raises(SystemExit, match="No bundled dictionary for 'fr'"):
        play.main()


def test_replay_unknown_language_exits_cleanly(tmp_path, monkeypatch):
    rounds = tmp_path / "rounds.json"
    rounds.write_text("[]", encoding="utf-8")
    monkeypatch.setattr("sys.argv", ["replay", str(rounds), "--language", "fr",
                                     "--outdir", str(tmp_path / "out")])
    with pytest.raises(SystemExit, match="No bundled dictionary for 'fr'"):
        replay.main()
