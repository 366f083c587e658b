import threading
from pathlib import Path

import pytest

from pdfshelf.errors import ExtractionError
from pdfshelf.models import DocumentMetadata
from pdfshelf.utils import LogLevel, logger


class FakeExtractor:
    """Returns canned metadata per filename; an Exception value is raised instead."""

    def __init__(self, results=None):
        self.results = results or {}
        self.calls: list[str] = []
        self._lock = threading.Lock()

    def extract(self, path: Path) -> DocumentMetadata:
        with self._lock:
            self.calls.append(path.name)
        result = self.results.get(path.name, DocumentMetadata())
        if isinstance(result, Exception):
            raise result
        return result


class RecordingReporter:
    def __init__(self):
        self.events = []
        self._lock = threading.Lock()

    def __call__(self, event):
        with self._lock:
            self.events.append(event)


@pytest.fixture(autouse=True)
def reset_log_level():
    logger.set_log_level(LogLevel.INFO)
    yield
    logger.set_log_level(LogLevel.INFO)


@pytest.fixture
def make_pdf(tmp_path):
    """Create a placeholder PDF (content is irrelevant to filename handling)."""

    def _make(name: str, folder: Path | None = None) -> Path:
        target_dir = folder or tmp_path
        target_dir.mkdir(parents=True, exist_ok=True)
        path = target_dir / name
        path.write_bytes(b"%PDF-1.4\n%%EOF\n")
        return path

    return _make


@pytest.fixture
def fake_extractor():
    return FakeExtractor()


@pytest.fixture
def failing_extractor():
    def _make(*names):
        return FakeExtractor({n: ExtractionError(n, "unreadable") for n in names})

    return _make


@pytest.fixture
def reporter():
    return RecordingReporter()
