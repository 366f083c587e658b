"""
Constants and configuration defaults for PDF organization.

This module contains the environment variable names read at startup, default
worker settings, the accepted document extensions, status codes used in
per-file outcomes and the regular expressions shared by the parser and
formatter. A `.env` file in the working directory is loaded on import.
"""

import os
import re

from dotenv import load_dotenv

load_dotenv()

# Environment variable names
ENV_SOURCE_DIR = "PDF_SOURCE_DIR"
ENV_MAX_CONCURRENT = "MAX_CONCURRENT"
ENV_LOG_LEVEL = "PDFSHELF_LOG_LEVEL"

# Run settings
WORKERS = (os.cpu_count() or 1) * 2

# Accepted document extensions
PDF_EXTENSIONS = {".pdf"}
DEFAULT_EXTENSION = ".pdf"

# Processing status codes
STATUS_RENAMED = "RENAMED"
STATUS_SKIP = "SKIP"
STATUS_FAIL = "FAIL"
STATUS_DRY_RUN = "DRY-RUN"

# Skip reasons
SKIP_NO_TITLE = "no title"
SKIP_NOTHING_INFERRED = "nothing inferred"
SKIP_UNCHANGED = "already canonical"
SKIP_TARGET_EXISTS = "target exists"
SKIP_CANCELLED = "cancelled"

# Publisher prefixes stripped from the start of a filename, tried in order
PUBLISHER_PREFIXES = [
    "Dorling Kindersley",
    "DK",
    "McGraw-Hill",
    "McGraw Hill",
    "O'Reilly",
    "Packt",
    "Apress",
    "Manning",
    "Wiley",
]

# Tokens that only show up in broken author fields
GARBAGE_MARKERS = ("jross",)

# Author validation limits
MIN_AUTHOR_LENGTH = 2
MAX_AUTHOR_LENGTH = 100
MAX_AUTHOR_PARTS = 6
SIMILAR_PART_MAX_LENGTH = 10
MAX_EDIT_DISTANCE_INPUT = 100

# Letter classes (Latin + Cyrillic)
LETTER = "A-Za-zА-Яа-яЁё"
UPPER = "A-ZА-ЯЁ"
LOWER = "a-zа-яё"

# Regex patterns for filename parsing
YEAR_REGEX = re.compile(r"[\[(]?(\d{4})[\])]?\s*$")
INVALID_FILENAME_CHARS_REGEX = re.compile(r'[<>:"/\\|?*]')
DOUBLE_DASH_REGEX = re.compile(r"\s+-\s+-\s+")
REPEATED_CHAR_REGEX = re.compile(r"(.)\1{3,}")
