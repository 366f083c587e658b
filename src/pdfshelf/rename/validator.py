"""
Author-name plausibility checks.

`is_valid_author_name` rejects strings that cannot be a person's name:
encoding garbage, bare symbols, usernames, duplicated parts. It is the gate
for putting an author into a filename at all. `is_likely_author` is
stricter and is used by the parser to decide which side of a split filename
holds the author.
"""
import re
from itertools import combinations

from pdfshelf.utils import text_util
from pdfshelf.utils.constants import (
    LETTER,
    LOWER,
    MAX_AUTHOR_LENGTH,
    MAX_AUTHOR_PARTS,
    MIN_AUTHOR_LENGTH,
    SIMILAR_PART_MAX_LENGTH,
    UPPER,
)
from pdfshelf.utils.similarity import edit_distance

_PUNCTUATION = re.compile(r"[.,\s-]")
_TRIPLE_CHAR = re.compile(r"(.)\1{2,}")
_PART_SEPARATOR = re.compile(r"\s*[-,]\s*")
_USERNAME = re.compile(r"^[a-z]+\d+$", re.IGNORECASE)
_NAME_PART = re.compile(
    f"^[{UPPER}][{LOWER}]+$"
    f"|^[{UPPER}]\\.$"
    f"|^[{UPPER}]$"
    f"|^[{UPPER}][{LOWER}]+[{LETTER}\\s]*$"
)
_COMMA_OR_DOT = re.compile(r"[.,]")


def _is_name_shaped(part: str) -> bool:
    if _NAME_PART.match(part):
        return True
    return any(text_util.is_capitalized_word(w) or text_util.is_initial(w) for w in part.split())


def _parts_too_similar(a: str, b: str) -> bool:
    if a.lower() == b.lower():
        return True
    if len(a) < SIMILAR_PART_MAX_LENGTH and len(b) < SIMILAR_PART_MAX_LENGTH:
        return edit_distance(a, b) <= 1
    return False


def is_valid_author_name(text: str | None) -> bool:
    """
    Decide whether `text` is plausibly one or more person names.

    Examples:
      "J.K. Rowling" -> True
      "Smith, J." -> True
      "jross1" -> False (username)
      "John, John" -> False (duplicate parts)
    """
    if not text:
        return False

    stripped = _PUNCTUATION.sub("", text)

    # Repeated characters usually mean an encoding artifact
    if _TRIPLE_CHAR.search(stripped):
        return False
    if text_util.is_only_symbols(stripped) or not text_util.has_letter(stripped):
        return False
    if not MIN_AUTHOR_LENGTH <= len(stripped) <= MAX_AUTHOR_LENGTH:
        return False

    parts = _PART_SEPARATOR.split(text)
    if len({p.lower() for p in parts}) < len(parts):
        return False
    if len(parts) > MAX_AUTHOR_PARTS:
        return False
    if any(_USERNAME.match(p) for p in parts):
        return False
    if not any(_is_name_shaped(p) for p in parts):
        return False

    return not any(_parts_too_similar(a, b) for a, b in combinations(parts, 2))


def is_likely_author(text: str | None) -> bool:
    """
    A valid author name that also looks like one: it carries an initial, or
    it is a short (<= 3 words) name with a comma or dot and a 1-2 letter word.
    """
    if not is_valid_author_name(text):
        return False

    words = text.split()
    has_initial = any(text_util.is_initial(w) for w in words)
    is_short_name = len(words) <= 3 and any(len(w) <= 2 for w in words)
    has_comma_or_dot = bool(_COMMA_OR_DOT.search(text))

    return has_initial or (has_comma_or_dot and is_short_name)
