"""Exception types raised by pdfshelf."""


class PdfShelfError(Exception):
    """Base exception for pdfshelf errors."""

    pass


class ConfigurationError(PdfShelfError):
    """Raised when the source directory or worker settings are missing or invalid."""

    pass


class ExtractionError(PdfShelfError):
    """Raised when embedded document metadata cannot be read from a file."""

    def __init__(self, path, message: str):
        super().__init__(f"{path}: {message}")
        self.path = path
        self.message = message
