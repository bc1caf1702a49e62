"""
Word-list validator for Word Scramble.

What this module does:
- Validate a single word list (the start words or a dictionary list).
- Enforce formatting rules (lowercase, a–z only, at least `min_length` letters, one per line).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from wordscramble.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist("wordscramble/datasets/data/start.txt", min_length=8)
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class WordListReport:
    """Diagnostics and metadata for one word list."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    min_length: int      # shortest acceptable word
    count: int           # number of VALID words after cleaning
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid lines encountered
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, min_length: int) -> Tuple[List[str], int, int]:
    """
    Load words from a text file and validate them.

    Rules:
      - one token per line
      - must be lowercase a–z
      - must have at least `min_length` letters
      - blank lines are skipped but counted (a trailing blank line is common)

    Returns:
      (valid_words, invalid_count, blank_count)
    """
    valid: List[str] = []
    invalid = 0
    blank = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if not w:
                blank += 1
                continue
            if w.islower() and w.isascii() and w.isalpha() and len(w) >= min_length:
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid, blank


# -----------------------------
# Public API
# -----------------------------

def validate_wordlist(path: str, *, min_length: int = 1) -> Dict:
    """
    Validate a one-word-per-line list.

    Parameters
    ----------
    path : str
        Path to the word list.
    min_length : int
        Shortest acceptable word (start words are usually long; dictionaries use 1).

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see WordListReport schema). `passed` is
        strict: non-empty, no invalid lines, no duplicates.
    """
    issues: List[str] = []
    p = Path(path)

    if not p.exists():
        issues.append(f"word list not found: {path}")
        rep = WordListReport(path, False, min_length, 0, "", 0, 0, False, issues)
        return asdict(rep)

    words, invalid, blank = _load_and_check(p, min_length)
    unique = set(words)

    if not words:
        issues.append("word list contains 0 valid words")
    if invalid:
        issues.append(f"word list has {invalid} invalid line(s)")
    if blank:
        issues.append(f"word list has {blank} blank line(s)")
    if len(words) != len(unique):
        issues.append("word list contains duplicate lines")

    passed = bool(words) and invalid == 0 and len(words) == len(unique)

    rep = WordListReport(
        path=str(p),
        exists=True,
        min_length=min_length,
        count=len(words),
        sha256=_sha256_file(p),
        unique_count=len(unique),
        invalid_lines=invalid,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        start.txt | words=120 (uniq=120, sha=abc123...) | min_len=8 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    name = Path(report["path"]).name
    return (
        f"{name} | words={report['count']} (uniq={report['unique_count']}, sha={sha}) "
        f"| min_len={report['min_length']} | {status}"
    )
