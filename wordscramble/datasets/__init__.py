from .validator import validate_wordlist, pretty_summary
from .io import read_lines, read_words, write_lines
from .source import (
    Ready, Failed, StartupResult, WordSourceError, FALLBACK_ROOT_WORD,
    load_start_words, pick_root_word,
)

__all__ = [
    "validate_wordlist", "pretty_summary",
    "load_start_words", "pick_root_word", "Ready", "Failed", "StartupResult",
    "WordSourceError", "FALLBACK_ROOT_WORD",
]
