import random
from pathlib import Path

import pytest
from wordscramble.datasets import (
    FALLBACK_ROOT_WORD, Failed, Ready, WordSourceError, load_start_words, pick_root_word,
)
from wordscramble.datasets.io import read_lines, read_words, write_lines
from wordscramble.oracle import WordListOracle


def test_load_start_words_cleans_lines(tmp_path: Path):
    p = tmp_path / "start.txt"
    p.write_text("Silkworm\n\n  listen  \nrock-n-roll\ncalendar\n", encoding="utf-8")

    result = load_start_words(p)
    assert result == Ready(("silkworm", "listen", "calendar"))


def test_load_start_words_missing_file(tmp_path: Path):
    result = load_start_words(tmp_path / "missing.txt")
    assert isinstance(result, Failed)
    assert "missing.txt" in result.reason


def test_load_start_words_nothing_usable(tmp_path: Path):
    p = tmp_path / "start.txt"
    p.write_text("\n\n123\n", encoding="utf-8")
    assert isinstance(load_start_words(p), Failed)


def test_pick_root_word_from_ready():
    ready = Ready(("silkworm", "listen", "calendar"))
    picks = {pick_root_word(ready, rng=random.Random(i)) for i in range(30)}
    assert picks <= set(ready.root_words)
    assert len(picks) > 1


def test_pick_root_word_fallback():
    assert pick_root_word(Failed("boom"), rng=random.Random(0)) == FALLBACK_ROOT_WORD
    assert pick_root_word(Failed("boom"), rng=random.Random(0), fallback=" Listen ") == "listen"


def test_pick_root_word_strict_raises():
    with pytest.raises(WordSourceError, match="boom"):
        pick_root_word(Failed("boom"), rng=random.Random(0), strict=True)


def test_pick_root_word_never_returns_empty():
    with pytest.raises(WordSourceError):
        pick_root_word(Failed("boom"), rng=random.Random(0), fallback="  ")


def test_bundled_start_words_are_real_words():
    result = load_start_words()
    assert isinstance(result, Ready)
    oracle = WordListOracle()
    assert all(oracle.is_real(w, "en") for w in result.root_words)


def test_io_roundtrip_and_missing(tmp_path: Path):
    p = tmp_path / "sub" / "words.txt"
    write_lines(["Silk", "", "worm"], p)
    assert read_lines(p) == ["Silk", "", "worm"]
    assert read_words(p) == ["silk", "worm"]
    with pytest.raises(FileNotFoundError):
        read_lines(tmp_path / "nope.txt")
