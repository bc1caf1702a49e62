import io
import random

import pytest
from apps.cli import play
from wordscramble.game import RoundState
from wordscramble.oracle import WordListOracle

ORACLE = WordListOracle(["silent", "listen", "tinsel", "list", "silk", "worm", "milk", "or"])


def _session(lines, root="listen", roots=("listen",), **kwargs):
    out = io.StringIO()
    state = play.run_session(
        RoundState(root_word=root), lines, out=out, oracle=ORACLE,
        root_words=list(roots), rng=random.Random(0), **kwargs,
    )
    return state, out.getvalue()


def test_render_shows_title_score_and_lengths():
    out = io.StringIO()
    play.render(RoundState(root_word="listen", used_words=("silent", "list"), score=10), out)
    text = out.getvalue()
    assert "== listen ==" in text
    assert "Current Score: 10" in text
    assert text.index("( 6) silent") < text.index("( 4) list")


def test_session_accepts_and_rejects():
    state, text = _session(["silent\n", "SILENT\n", "silk\n", "tilsen\n", "\n", "list\n"])
    assert state.used_words == ("list", "silent")
    assert state.score == 10
    assert "Word used already: Be more original!" in text
    assert "Word not possible: You can't spell that word from 'listen'!" in text
    assert "Word not recognized" in text


def test_session_too_simple_message():
    _, text = _session(["or\n"], root="silkworm", roots=("silkworm",))
    assert "Word is too simple: Try something longer!" in text


def test_session_new_round_and_quit():
    state, text = _session(["silent\n", ":new\n", "silent\n", ":quit\n", "list\n"])
    assert state.round_number == 2
    assert state.used_words == ("silent",)
    assert state.score == 12  # carried across rounds
    assert "(round 2)" in text


def test_session_reset_score():
    state, _ = _session(["silent\n", ":new\n"], reset_score=True)
    assert state.score == 0


def test_main_strict_aborts_without_start_words(tmp_path):
    with pytest.raises(SystemExit, match="Cannot start"):
        play.main(["--start-words", str(tmp_path / "nope.txt"), "--strict"])


def test_main_falls_back_to_silkworm(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("silk\nworm\n:quit\n"))
    rc = play.main(["--start-words", str(tmp_path / "nope.txt"), "--seed", "1"])
    assert rc == 0
    text = capsys.readouterr().out
    assert "== silkworm ==" in text
    assert "Final score: 8" in text


def test_main_with_custom_dictionary(tmp_path, monkeypatch, capsys):
    start = tmp_path / "start.txt"
    start.write_text("listen\n", encoding="utf-8")
    dictionary = tmp_path / "dict.txt"
    dictionary.write_text("tinsel\n", encoding="utf-8")
    monkeypatch.setattr("sys.stdin", io.StringIO("silent\ntinsel\n"))

    play.main(["--start-words", str(start), "--dictionary", str(dictionary)])
    text = capsys.readouterr().out
    assert "Word not recognized" in text
    assert "Final score: 6" in text
