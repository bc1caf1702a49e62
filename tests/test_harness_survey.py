import csv
import json
from pathlib import Path

from wordscramble.harness import run_survey, survey_root, write_csv, write_manifest
from wordscramble.oracle import WordListOracle

VOCAB = ["silent", "listen", "tinsel", "lens", "list", "lint", "or", "silk", "worm", "milk",
         "elk", "ilk", "Silk", ""]
ORACLE = WordListOracle(VOCAB)


def test_survey_root_finds_all_accepted_words():
    r = survey_root("listen", vocabulary=VOCAB, oracle=ORACLE)
    assert r["root_word"] == "listen"
    # longest first, then alphabetical
    assert r["words"] == ["listen", "silent", "tinsel", "lens", "lint", "list"]
    assert r["count"] == 6
    assert r["max_score"] == 6 * 3 + 4 * 3
    assert r["longest"] == "listen"
    assert r["time_ms"] >= 0.0


def test_survey_root_respects_min_length_and_oracle():
    oracle = WordListOracle(["silk", "worm", "or"])  # "milk" unknown here
    r = survey_root("SilkWorm", vocabulary=VOCAB, oracle=oracle, min_length=2)
    assert r["words"] == ["silk", "worm", "or"]


def test_survey_root_with_nothing_playable():
    r = survey_root("zzz", vocabulary=VOCAB, oracle=ORACLE)
    assert r["count"] == 0 and r["max_score"] == 0 and r["longest"] == ""


def test_run_survey_sample_and_lazy_iteration():
    roots = iter(["listen", "silkworm", "absolute"])
    out = run_survey(roots, vocabulary=VOCAB, oracle=ORACLE, sample=2)
    assert [r["root_word"] for r in out] == ["listen", "silkworm"]
    # no "e" in silkworm, and "or" is too short
    assert out[1]["words"] == ["milk", "silk", "worm", "ilk"]


def test_write_csv_and_manifest(tmp_path: Path):
    results = run_survey(["listen", "zzz"], vocabulary=VOCAB, oracle=ORACLE)
    csv_path = write_csv(results, str(tmp_path / "out" / "survey.csv"))
    with open(csv_path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert [r["root_word"] for r in rows] == ["listen", "zzz"]
    assert rows[0]["words"].split() == results[0]["words"]
    assert rows[1]["count"] == "0"

    m_path = write_manifest({"run_id": "x", "num_roots": 2}, str(tmp_path / "m.json"))
    assert json.loads(Path(m_path).read_text(encoding="utf-8"))["num_roots"] == 2
