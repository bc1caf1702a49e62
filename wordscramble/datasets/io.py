from __future__ import annotations
from pathlib import Path
from typing import Iterable, List

# Bundled word lists shipped with the package.
DATA_DIR = Path(__file__).parent / "data"
START_WORDS_PATH = DATA_DIR / "start.txt"
DICTIONARY_EN_PATH = DATA_DIR / "words_en.txt"


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def read_words(p: Path | str) -> List[str]:
    """
    Read a one-word-per-line list: lowercased, stripped, blanks dropped.
    Order is preserved; duplicates are kept (the validator reports them).
    """
    return [w.strip().lower() for w in read_lines(p) if w.strip()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)
