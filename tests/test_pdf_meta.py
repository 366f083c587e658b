import pytest
from pypdf import PdfWriter

from pdfshelf.errors import ExtractionError
from pdfshelf.models import DocumentMetadata
from pdfshelf.utils.pdf_meta import PdfMetadataExtractor


def _write_pdf(path, metadata=None):
    writer = PdfWriter()
    writer.add_blank_page(width=72, height=72)
    if metadata:
        writer.add_metadata(metadata)
    with open(path, "wb") as f:
        writer.write(f)
    return path


def test_reads_info_dictionary(tmp_path):
    path = _write_pdf(
        tmp_path / "scan.pdf",
        {"/Title": " Deep Work ", "/Author": "C Newport", "/CreationDate": "D:20160105120000"},
    )
    assert PdfMetadataExtractor().extract(path) == DocumentMetadata(title="Deep Work", author="C Newport", year=2016)


def test_missing_fields_are_none(tmp_path):
    path = _write_pdf(tmp_path / "blank.pdf")
    metadata = PdfMetadataExtractor().extract(path)
    assert metadata.title is None
    assert metadata.author is None
    assert metadata.year is None


def test_unreadable_file_raises_extraction_error(tmp_path):
    path = tmp_path / "broken.pdf"
    path.write_bytes(b"this is not a pdf")
    with pytest.raises(ExtractionError) as exc:
        PdfMetadataExtractor().extract(path)
    assert exc.value.path == path
