"""
Module for parsing document filenames into title, author and year.

A filename stem is normalized, stripped of a known publisher prefix and of a
trailing year, then matched against an ordered list of split patterns. The
first pattern that matches decides the split; `is_likely_author` decides which
side of a two-part split is the author.
"""

import re
from dataclasses import dataclass
from pathlib import PurePath
from typing import NamedTuple

from pdfshelf.models import DocumentMetadata
from pdfshelf.rename.validator import is_likely_author
from pdfshelf.utils import LogLevel, logger, text_util
from pdfshelf.utils.constants import LETTER, PUBLISHER_PREFIXES, YEAR_REGEX

# A letter followed by letters, spaces, commas or dots
_AUTHOR_RUN = f"[{LETTER}][{LETTER}\\s,.]"

_PUBLISHER_REGEXES = [
    re.compile("^" + re.escape(publisher) + f"(?![{LETTER}0-9])\\.?\\s*", re.IGNORECASE)
    for publisher in PUBLISHER_PREFIXES
]


@dataclass(frozen=True)
class SplitPattern:
    """A named way of splitting a filename. Single-group patterns yield a title only."""

    name: str
    regex: re.Pattern

    def match(self, text: str) -> tuple[str, ...] | None:
        m = self.regex.match(text)
        if not m:
            return None
        return tuple(group.strip() for group in m.groups())


# Tried in order; the first match wins.
SPLIT_PATTERNS: tuple[SplitPattern, ...] = (
    SplitPattern("author_title", re.compile("^(" + _AUTHOR_RUN + "{0,50}?)\\s+-\\s+(.+?)$")),
    SplitPattern("title_author", re.compile("^(.+?)\\s+-\\s+(" + _AUTHOR_RUN + "{0,50}?)$")),
    SplitPattern("title_by_author", re.compile("^(.+?)\\s+by\\s+(" + _AUTHOR_RUN + "+?)$", re.IGNORECASE)),
    SplitPattern("title_paren_author", re.compile("^(.+?)\\s+\\((" + _AUTHOR_RUN + "+?)\\)$")),
    SplitPattern("title_only", re.compile("^(.+?)$")),
)


class ParsedCandidate(NamedTuple):
    title: str
    author: str | None


def strip_publisher_prefix(name: str) -> str:
    """Remove known publisher names from the start of `name`, each at most once, in list order."""
    for rx in _PUBLISHER_REGEXES:
        name = rx.sub("", name, count=1)
    return name


def extract_year(name: str) -> tuple[str, int | None]:
    """
    Split a trailing four-digit year off `name`.
    Examples:
      "Deep Work (2016)" -> ("Deep Work", 2016)
      "Deep Work [2016]" -> ("Deep Work", 2016)
      "Deep Work" -> ("Deep Work", None)
    """
    m = YEAR_REGEX.search(name)
    if not m:
        return name, None
    return name[: m.start()].strip(), int(m.group(1))


def assign_roles(first: str, second: str) -> ParsedCandidate:
    """
    Decide which half of a two-part split is the author.

    If exactly one side looks like an author it wins. Otherwise the shorter
    side is taken as the author (the first side on a tie), since short
    fragments tend to be surnames or initials.
    """
    first_is_author = is_likely_author(first)
    second_is_author = is_likely_author(second)

    if first_is_author != second_is_author:
        if first_is_author:
            return ParsedCandidate(title=second, author=first)
        return ParsedCandidate(title=first, author=second)

    if len(first) <= len(second):
        return ParsedCandidate(title=second, author=first)
    return ParsedCandidate(title=first, author=second)


def split_title_author(name: str) -> tuple[ParsedCandidate | None, str | None]:
    """Run the split patterns over `name`. Returns (candidate, pattern name) or (None, None)."""
    for pattern in SPLIT_PATTERNS:
        groups = pattern.match(name)
        if groups is None:
            continue
        if len(groups) == 2:
            return assign_roles(*groups), pattern.name
        return ParsedCandidate(title=groups[0], author=None), pattern.name
    return None, None


def parse_filename(filename: str) -> DocumentMetadata:
    """
    Infer title, author and year from a filename (extension included or not).
    Examples:
      "McGraw-Hill.Programming_Basics_-_John_R_Smith_(2019).pdf"
          -> title "Programming Basics", author "John R Smith", year 2019
      "random_document.pdf" -> title "random document"
    """
    name = text_util.cleanup_text(PurePath(filename).stem) or ""
    name = strip_publisher_prefix(name)
    name, year = extract_year(name)

    candidate, pattern_name = split_title_author(name)
    title = candidate.title if candidate else name
    author = candidate.author if candidate else None

    logger.log(
        "parse.filename",
        LogLevel.TRACE,
        file=filename,
        pattern=pattern_name,
        title=title,
        author=author,
        year=year,
    )
    return DocumentMetadata(title=title or None, author=author or None, year=year)
