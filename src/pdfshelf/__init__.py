"""
A PDF library organizer that renames documents to a canonical filename.

This package walks a directory tree and renames every PDF it finds to the
form ``Title - Author [Year].pdf``. Title, author and year are inferred from
the existing filename first and from the document's embedded metadata when
the filename does not name an author.

The package is organized into two sub-packages:
- rename: filename parsing, author validation, metadata resolution, filename
  formatting and the concurrent batch renamer.
- utils: constants, configuration loading, structured logging, text
  normalization, similarity metrics, PDF metadata extraction and progress
  reporting.
"""

__version__ = "1.0.0"

# Debug flag for controlling verbose output
DEBUG: bool = False

__all__ = ["__version__", "DEBUG"]
