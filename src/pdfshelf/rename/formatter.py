"""
Builds canonical filenames of the form ``Title - Author [Year].pdf``.

Notes:
- The author is only included when it passes `is_valid_author_name`; it is
  re-punctuated by `format_author_name` so initials always carry a dot and
  multiple authors are comma-separated.
- After sanitization, a result that still looks broken (a doubled dash,
  a known garbage marker, or one character repeated four or more times)
  is rebuilt from the title and year alone.

Example:
    build_filename(DocumentMetadata("Programming Basics", "John R Smith", 2019))
        -> "Programming Basics - John R. Smith [2019].pdf"
"""
import re

from pdfshelf.models import DocumentMetadata
from pdfshelf.rename.validator import is_valid_author_name
from pdfshelf.utils import LogLevel, logger, text_util
from pdfshelf.utils.constants import DEFAULT_EXTENSION, GARBAGE_MARKERS, REPEATED_CHAR_REGEX
from pdfshelf.utils.file_util import sanitize_filename

_AUTHOR_SEPARATOR = re.compile(r"\s*,\s*")


def _format_one_author(name: str) -> str:
    words = name.split()
    return " ".join(w.rstrip(".") + "." if text_util.is_initial(w) else w for w in words)


def format_author_name(author: str) -> str:
    """
    Normalize the punctuation of an author string.

    Rules:
    1. Commas separate authors; everything between two commas is one person,
       so "John Smith" and "Donald E Knuth" stay single names.
    2. Within an author every initial ends in a dot:
       "John R Smith" -> "John R. Smith", "А Б Иванов" -> "А. Б. Иванов".
    3. Authors are joined with ", ": "J Smith, A Jones" -> "J. Smith, A. Jones".
    """
    authors = [_format_one_author(a) for a in _AUTHOR_SEPARATOR.split(author)]
    return ", ".join(a for a in authors if a)


def _is_anomalous(name: str) -> bool:
    lowered = name.lower()
    return (
            " - - " in name
            or any(marker in lowered for marker in GARBAGE_MARKERS)
            or bool(REPEATED_CHAR_REGEX.search(name))
    )


def build_filename(metadata: DocumentMetadata, extension: str = DEFAULT_EXTENSION) -> str | None:
    """
    Format `metadata` as a filesystem-safe filename with `extension` appended.

    Returns None when there is no usable title.
    """
    if not metadata.title:
        return None

    title = text_util.strip_edge_dashes(text_util.cleanup_text(metadata.title))
    if not title:
        return None

    name = title
    author = text_util.cleanup_text(metadata.author)
    if author and is_valid_author_name(author):
        author = text_util.strip_edge_dashes(format_author_name(author))
        if author and not name.endswith("-") and not author.startswith("-"):
            name = f"{name} - {author}"

    year_suffix = f" [{metadata.year}]" if metadata.year is not None else ""
    name = sanitize_filename(name + year_suffix)

    if _is_anomalous(name):
        logger.log("format.fallback", LogLevel.DEBUG, rejected=name, author=metadata.author)
        name = sanitize_filename(title + year_suffix)

    return name + extension
