"""
Embedded PDF metadata extraction backed by pypdf.

`PdfMetadataExtractor.extract` reads the document information dictionary and
returns a `DocumentMetadata`. Any failure to open or parse the file is raised
as `ExtractionError` so callers can fall back to filename-only metadata.
"""
import re
from pathlib import Path

from pypdf import PdfReader

from pdfshelf.errors import ExtractionError
from pdfshelf.models import DocumentMetadata
from pdfshelf.utils import LogLevel, logger

_YEAR_IN_DATE = re.compile(r"(19|20)\d{2}")


def _clean_field(value) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _extract_year(info) -> int | None:
    """Year from /CreationDate, falling back to a regex over the raw value when pypdf can't parse it."""
    try:
        created = info.creation_date
    except ValueError:
        created = None
    if created is not None:
        return created.year

    raw = info.get("/CreationDate")
    if raw:
        m = _YEAR_IN_DATE.search(str(raw))
        if m:
            return int(m.group(0))
    return None


class PdfMetadataExtractor:
    """Reads title, author and creation year from a PDF's info dictionary."""

    def extract(self, path: Path) -> DocumentMetadata:
        try:
            info = PdfReader(path).metadata
            if not info:
                logger.log("metadata.empty", LogLevel.TRACE, file=path.name)
                return DocumentMetadata()
            metadata = DocumentMetadata(
                title=_clean_field(info.title),
                author=_clean_field(info.author),
                year=_extract_year(info),
            )
        except Exception as e:
            raise ExtractionError(path, str(e) or type(e).__name__) from e

        logger.log(
            "metadata.read",
            LogLevel.DEBUG,
            file=path.name,
            title=metadata.title,
            author=metadata.author,
            year=metadata.year,
        )
        return metadata
