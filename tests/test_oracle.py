from pathlib import Path

import pytest
import requests
from wordscramble.oracle import (
    DictionaryOracle, NetworkDictionaryOracle, WordFreqOracle, WordListOracle,
    create_oracle, get_oracle_ids,
)
from wordscramble.oracle import frequency


# --- registry ---
def test_registered_ids():
    assert get_oracle_ids() == ["network", "wordfreq", "wordlist"]


def test_create_oracle_passes_kwargs():
    o = create_oracle("wordlist", words=["silk"])
    assert isinstance(o, WordListOracle)
    assert o.is_real("silk", "en")


def test_create_oracle_unknown_id():
    with pytest.raises(ValueError, match="Unknown oracle id"):
        create_oracle("thesaurus")


def test_oracles_satisfy_protocol():
    assert isinstance(WordListOracle(["silk"]), DictionaryOracle)
    assert isinstance(WordFreqOracle(), DictionaryOracle)


# --- word list ---
def test_wordlist_case_and_language():
    o = WordListOracle(["Silk", " worm "])
    assert len(o) == 2
    assert o.is_real("silk", "en") and o.is_real("WORM", "EN")
    assert not o.is_real("milk", "en")
    assert not o.is_real("silk", "fr")


def test_wordlist_from_file(tmp_path: Path):
    p = tmp_path / "fr.txt"
    p.write_text("soie\nver\n", encoding="utf-8")
    o = WordListOracle.from_file(p, language="fr")
    assert o.is_real("soie", "fr")
    assert not o.is_real("soie", "en")


def test_wordlist_default_is_bundled_english():
    o = WordListOracle()
    assert o.is_real("silkworm", "en") and o.is_real("silent", "en")
    assert not o.is_real("xqzt", "en")


# --- wordfreq ---
def test_wordfreq_threshold(monkeypatch):
    table = {"silk": 3.9, "ilk": 1.6, "wilk": 0.0}
    monkeypatch.setattr(frequency, "zipf_frequency", lambda w, lang: table.get(w, 0.0))
    o = WordFreqOracle(min_zipf=1.5)
    assert o.is_real("Silk", "en")
    assert o.is_real("ilk", "en")
    assert not o.is_real("wilk", "en")
    assert not WordFreqOracle(min_zipf=2.0).is_real("ilk", "en")
    assert not o.is_real("s1lk", "en")


def test_wordfreq_unknown_language(monkeypatch):
    def boom(word, lang):
        raise LookupError(lang)

    monkeypatch.setattr(frequency, "zipf_frequency", boom)
    assert WordFreqOracle().is_real("silk", "xx") is False


# --- network ---
class _Resp:
    def __init__(self, status_code):
        self.status_code = status_code


class FakeSession:
    def __init__(self, statuses=None, exc=None):
        self.statuses = statuses or {}
        self.exc = exc
        self.urls = []

    def get(self, url, timeout):
        self.urls.append(url)
        if self.exc is not None:
            raise self.exc
        word = url.rsplit("/", 1)[-1]
        return _Resp(self.statuses.get(word, 404))


def test_network_status_codes_and_url():
    s = FakeSession({"silk": 200})
    o = NetworkDictionaryOracle(base_url="https://dict.example/api/", session=s)
    assert o.is_real(" Silk ", "en") is True
    assert o.is_real("wilk", "en") is False
    assert s.urls == ["https://dict.example/api/en/silk", "https://dict.example/api/en/wilk"]


def test_network_caches_definite_answers():
    s = FakeSession({"silk": 200})
    o = NetworkDictionaryOracle(session=s)
    for _ in range(3):
        assert o.is_real("silk", "en")
        assert not o.is_real("wilk", "en")
    assert len(s.urls) == 2


def test_network_errors_are_not_cached():
    s = FakeSession({"silk": 503})
    o = NetworkDictionaryOracle(session=s)
    assert o.is_real("silk", "en") is False
    assert o.is_real("silk", "en") is False
    assert len(s.urls) == 2

    down = FakeSession(exc=requests.ConnectionError("offline"))
    o = NetworkDictionaryOracle(session=down)
    assert o.is_real("silk", "en") is False
    assert len(down.urls) == 1


def test_network_skips_non_alpha():
    s = FakeSession()
    assert NetworkDictionaryOracle(session=s).is_real("../etc", "en") is False
    assert s.urls == []
