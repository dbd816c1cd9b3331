import pytest
import requests

from packages.engine.errors import OracleUnavailableError, UnsupportedLanguageError
from packages.oracles import create_oracle, get_oracle_ids
from packages.oracles.remote import RemoteOracle
from packages.oracles.wordlist import WordListOracle


def test_registry_lists_builtin_oracles():
    assert get_oracle_ids() == ["remote", "static", "wordlist"]


def test_create_oracle_unknown_id():
    with pytest.raises(ValueError, match="Unknown oracle id"):
        create_oracle("nope")


def test_wordlist_oracle_bundled_dictionary():
    oracle = create_oracle("wordlist")
    assert oracle.is_valid_word("silk", "en") is True
    assert oracle.is_valid_word("  Listen ", "en") is True
    assert oracle.is_valid_word("qzxv", "en") is False
    assert oracle.is_valid_word("", "en") is False


def test_wordlist_oracle_from_file(tmp_path):
    p = tmp_path / "words.txt"
    p.write_text("Alpha\nbravo\n\n", encoding="utf-8")
    oracle = WordListOracle(path=p)
    assert len(oracle) == 2
    assert oracle.is_valid_word("alpha", "en")


def test_oracle_rejects_other_language():
    oracle = create_oracle("static", answer=True)
    with pytest.raises(UnsupportedLanguageError):
        oracle.is_valid_word("word", "fr")


class _Resp:
    def __init__(self, status_code):
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


class _Session:
    def __init__(self, codes):
        self.codes = dict(codes)
        self.urls = []

    def get(self, url, timeout=None):
        self.urls.append(url)
        word = url.rsplit("/", 1)[-1]
        code = self.codes.get(word)
        if code is None:
            raise requests.ConnectionError("offline")
        return _Resp(code)


def test_remote_oracle_maps_status_codes_and_caches():
    http = _Session({"silk": 200, "silx": 404})
    oracle = RemoteOracle(session=http)
    assert oracle.is_valid_word("silk", "en") is True
    assert oracle.is_valid_word("silx", "en") is False
    assert oracle.is_valid_word("SILK", "en") is True
    assert http.urls == [
        "https://api.dictionaryapi.dev/api/v2/entries/en/silk",
        "https://api.dictionaryapi.dev/api/v2/entries/en/silx",
    ]


@pytest.mark.parametrize("codes", [{"silk": 500}, {}])
def test_remote_oracle_failures_raise(codes):
    oracle = RemoteOracle(session=_Session(codes))
    with pytest.raises(OracleUnavailableError):
        oracle.is_valid_word("silk", "en")
