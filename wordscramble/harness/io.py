"""
I/O utilities for survey runs.

Responsibilities:
- write_csv:     flatten per-root results into a tidy CSV (one row per root word).
- write_manifest:dump a JSON manifest with config, hashes, and metadata.
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

CSV_FIELDS = ["root_word", "count", "max_score", "longest", "time_ms", "words"]


def write_csv(results: List[Dict], path: str) -> str:
    """
    Serialize survey results to CSV.

    Schema (columns):
      root_word, count, max_score, longest, time_ms, words

    `words` is space-separated, longest first.

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=CSV_FIELDS)
        w.writeheader()

        for r in results:
            w.writerow({
                "root_word": r["root_word"],
                "count": r["count"],
                "max_score": r["max_score"],
                "longest": r["longest"],
                "time_ms": round(float(r["time_ms"]), 3),
                "words": " ".join(r["words"]),
            })

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and word-list validation summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (oracle, language, paths, sample, outdir)
      - wordlists: output of datasets.validate_wordlist(...)
      - num_roots: number of root words surveyed
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
