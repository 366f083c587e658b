"""
Filename sanitization and path helpers used when applying renames.
"""
import os
from pathlib import Path

from pdfshelf.utils.constants import DOUBLE_DASH_REGEX, INVALID_FILENAME_CHARS_REGEX
from pdfshelf.utils.text_util import collapse_whitespace


def sanitize_filename(name: str) -> str:
    """
    Make a filename stem filesystem-safe.

    Invalid characters (`< > : " / \\ | ? *`) become dashes, an accidental
    `" - - "` collapses to `" - "`, whitespace runs collapse and the result is
    trimmed.
    """
    name = INVALID_FILENAME_CHARS_REGEX.sub("-", name)
    name = DOUBLE_DASH_REGEX.sub(" - ", name)
    return collapse_whitespace(name)


def is_same_file(a: Path, b: Path) -> bool:
    """True when both paths exist and refer to the same file (e.g. a case-only rename)."""
    try:
        return os.path.samefile(a, b)
    except OSError:
        return False


def is_collision(source: Path, target: Path) -> bool:
    """A target name that is already taken (a dangling symlink included) by something other than the source."""
    return os.path.lexists(target) and not is_same_file(source, target)
