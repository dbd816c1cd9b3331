from pathlib import Path

from packages.datasets import (validate_wordlist, pretty_summary, load_words,
                               default_start_words_path, default_dictionary_path)


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlist_happy_path(tmp_path: Path):
    p = tmp_path / "start.txt"
    _write(p, ["silkworm", "listen", "scramble"])

    rep = validate_wordlist(str(p))
    assert rep["passed"] is True
    assert rep["count"] == 3 and rep["invalid_lines"] == 0
    s = pretty_summary(rep)
    assert "start.txt" in s and "words=3" in s and s.endswith("OK")


def test_validate_wordlist_flags_errors(tmp_path: Path):
    p = tmp_path / "start.txt"
    # 'ab' too short, 'Caps' not lowercase, '???' invalid chars, blank line mid-file
    p.write_text("silkworm\nab\nCaps\n\n???\nlisten\nlisten\n", encoding="utf-8")

    rep = validate_wordlist(str(p))
    assert rep["passed"] is False
    assert rep["invalid_lines"] == 4
    assert any("invalid" in msg for msg in rep["issues"])
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_wordlist_missing_file(tmp_path: Path):
    rep = validate_wordlist(str(tmp_path / "nope.txt"))
    assert rep["exists"] is False and rep["passed"] is False


def test_load_words_normalizes(tmp_path: Path):
    p = tmp_path / "start.txt"
    p.write_text("SilkWorm\r\n  listen \n\n", encoding="utf-8")
    assert load_words(p) == ["silkworm", "listen"]


def test_bundled_wordlists_are_clean():
    assert validate_wordlist(str(default_start_words_path()), min_length=8)["passed"] is True
    assert validate_wordlist(str(default_dictionary_path("en")))["passed"] is True


def test_package_exports_io_helpers():
    import packages.datasets as ds
    for name in ("read_lines", "write_lines", "unique_preserve_order", "load_words"):
        assert name in ds.__all__ and callable(getattr(ds, name))
