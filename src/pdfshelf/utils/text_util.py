"""
Low-level string cleanup and character-class tests.

Letters are Latin or Cyrillic throughout; other scripts are treated as
symbols.
"""
import re

from pdfshelf.utils.constants import LETTER, LOWER, UPPER

_SEPARATOR_RUN = re.compile(r"[_.]+")
_WHITESPACE_RUN = re.compile(r"\s+")
_LETTER = re.compile(f"[{LETTER}]")
_SYMBOLS_ONLY = re.compile(f"^[^{LETTER}0-9]+$")
_INITIAL = re.compile(f"^[{UPPER}]\\.?$")
_CAPITALIZED_WORD = re.compile(f"^[{UPPER}][{LOWER}]+$")
_TRAILING_DASH = re.compile(r"\s*-\s*$")
_LEADING_DASH = re.compile(r"^\s*-\s*")


def cleanup_text(text: str | None) -> str | None:
    """Turn `_`/`.` runs into spaces, collapse whitespace and trim. Falsy input is returned as-is."""
    if not text:
        return text
    text = _SEPARATOR_RUN.sub(" ", text)
    return _WHITESPACE_RUN.sub(" ", text).strip()


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE_RUN.sub(" ", text).strip()


def strip_edge_dashes(text: str) -> str:
    """Remove a stray dash (and its padding) from either end."""
    return _LEADING_DASH.sub("", _TRAILING_DASH.sub("", text))


def has_letter(text: str) -> bool:
    return bool(_LETTER.search(text))


def is_only_symbols(text: str) -> bool:
    """True for non-empty text with no letter and no digit."""
    return bool(_SYMBOLS_ONLY.match(text))


def is_initial(word: str) -> bool:
    """`X` or `X.` with X a capital letter."""
    return bool(_INITIAL.match(word))


def is_capitalized_word(word: str) -> bool:
    """A capital letter followed by at least one lowercase letter."""
    return bool(_CAPITALIZED_WORD.match(word))
