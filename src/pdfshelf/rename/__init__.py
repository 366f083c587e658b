"""
File renaming functionality for PDF library organization.

This package turns messy document filenames into the canonical
``Title - Author [Year].pdf`` form.

Package organization:
- validator: Author-name plausibility checks (`is_valid_author_name`,
  `is_likely_author`).
- parser: Filename parsing into title, author and year using an ordered list
  of split patterns.
- formatter: Canonical, filesystem-safe filename construction with an
  anomaly fallback.
- core: Metadata resolution (filename vs. embedded metadata), rename
  planning and collision-safe renaming for one file.
- batch: Tree discovery and concurrent processing with progress reporting.

Example:
    from pathlib import Path
    import pdfshelf.rename as rename
    plan, reason = rename.plan_rename(Path("Deep_Work_-_C_Newport_(2016).pdf"))
"""
# Validation
from .validator import (
    is_valid_author_name,
    is_likely_author,
)

# Parsing and formatting
from .parser import parse_filename
from .formatter import build_filename, format_author_name

# Core renaming functions
from .core import (
    resolve_metadata,
    plan_rename,
    process_file,
)

# Batch processing
from .batch import BatchSummary, ConcurrentRenamer, discover_files

__all__ = [
    # Validation
    "is_valid_author_name",
    "is_likely_author",
    # Parsing and formatting
    "parse_filename",
    "build_filename",
    "format_author_name",
    # Core renaming
    "resolve_metadata",
    "plan_rename",
    "process_file",
    # Batch processing
    "BatchSummary",
    "ConcurrentRenamer",
    "discover_files",
]
