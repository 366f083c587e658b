"""
Constants, configuration, logging and helper utilities for pdfshelf.

This package collects the constants shared by the parser and formatter,
the structured logger, text normalization and similarity helpers, the
pypdf-backed metadata extractor and progress reporting.
"""

from .constants import (
    DEFAULT_EXTENSION,
    PDF_EXTENSIONS,
    PUBLISHER_PREFIXES,
    STATUS_DRY_RUN,
    STATUS_FAIL,
    STATUS_RENAMED,
    STATUS_SKIP,
    WORKERS,
)
from .logger import LogLevel

__all__ = [
    "DEFAULT_EXTENSION",
    "PDF_EXTENSIONS",
    "PUBLISHER_PREFIXES",
    "STATUS_RENAMED",
    "STATUS_SKIP",
    "STATUS_FAIL",
    "STATUS_DRY_RUN",
    "WORKERS",
    "LogLevel",
]
