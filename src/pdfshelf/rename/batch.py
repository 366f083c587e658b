"""Batch rename of every PDF under a directory tree.

Discovery walks the tree with an explicit stack, listing the pending
directories concurrently on the worker pool one wave at a time. Each
discovered file is then processed on a bounded `ThreadPoolExecutor`;
failures are isolated per file and every finished file is reported to the
progress sink exactly once.
"""
import os
import threading
from concurrent.futures import Executor, ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable

import pdfshelf
from pdfshelf.models import ProcessingOutcome
from pdfshelf.rename import core
from pdfshelf.utils import LogLevel, logger
from pdfshelf.utils.constants import (
    PDF_EXTENSIONS,
    SKIP_CANCELLED,
    STATUS_DRY_RUN,
    STATUS_FAIL,
    STATUS_RENAMED,
    STATUS_SKIP,
    WORKERS,
)
from pdfshelf.utils.progress import ProgressEvent

Reporter = Callable[[ProgressEvent], None]


def _scan_directory(directory: Path, extensions: set[str]) -> tuple[list[Path], list[Path]]:
    """List one directory. Returns (matching files, sub-directories); symlinks are not followed."""
    files: list[Path] = []
    subdirs: list[Path] = []
    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                if entry.is_dir(follow_symlinks=False):
                    subdirs.append(Path(entry.path))
                elif entry.is_file(follow_symlinks=False) and os.path.splitext(entry.name)[1].lower() in extensions:
                    files.append(Path(entry.path))
    except OSError as e:
        logger.log("discover.error", LogLevel.WARN, folder=directory, error=e.strerror or str(e))
    return files, subdirs


def discover_files(
        root: Path, extensions: Iterable[str] = PDF_EXTENSIONS, executor: Executor | None = None
) -> list[Path]:
    """
    Find every regular file under `root` whose extension matches, case-insensitively.

    Args:
        root (Path): Directory to walk.
        extensions: Accepted suffixes including the dot (e.g. {".pdf"}).
        executor: When given, the directories of each wave are listed on it concurrently.

    Returns:
        list[Path]: Matching files in no particular order.
    """
    wanted = {ext.lower() for ext in extensions}
    found: list[Path] = []
    stack = [Path(root)]

    while stack:
        pending, stack = stack, []
        if executor is not None:
            listings = executor.map(lambda d: _scan_directory(d, wanted), pending)
        else:
            listings = (_scan_directory(d, wanted) for d in pending)
        for files, subdirs in listings:
            found.extend(files)
            stack.extend(subdirs)

    return found


@dataclass
class BatchSummary:
    """Outcomes of one batch run with per-status counts."""

    outcomes: list[ProcessingOutcome] = field(default_factory=list)

    def _count(self, status: str) -> int:
        return sum(1 for o in self.outcomes if o.status == status)

    @property
    def total(self) -> int:
        return len(self.outcomes)

    @property
    def renamed(self) -> int:
        return self._count(STATUS_RENAMED)

    @property
    def skipped(self) -> int:
        return self._count(STATUS_SKIP)

    @property
    def failed(self) -> int:
        return self._count(STATUS_FAIL)

    @property
    def planned(self) -> int:
        return self._count(STATUS_DRY_RUN)


class ConcurrentRenamer:
    """
    Applies the rename pipeline to every file in a tree on a bounded worker pool.

    The pool size, progress counter, rename lock and cancellation flag belong
    to the instance and are handed to the worker tasks; nothing is global.
    """

    def __init__(
            self,
            extractor: core.MetadataExtractor | None = None,
            reporter: Reporter | None = None,
            workers: int = WORKERS,
            dry_run: bool = False,
            extensions: Iterable[str] = PDF_EXTENSIONS,
    ):
        if workers < 1:
            raise ValueError(f"workers must be positive, got {workers}")
        self.extractor = extractor
        self.reporter = reporter
        self.workers = workers
        self.dry_run = dry_run
        self.extensions = {ext.lower() for ext in extensions}

        self._rename_lock = threading.Lock()
        self._progress_lock = threading.Lock()
        self._cancel_event = threading.Event()
        self._completed = 0

    def cancel(self) -> None:
        """Stop starting new files. Files already in progress finish normally."""
        self._cancel_event.set()

    @property
    def cancelled(self) -> bool:
        return self._cancel_event.is_set()

    def _executor(self) -> ThreadPoolExecutor:
        return ThreadPoolExecutor(max_workers=self.workers, thread_name_prefix="pdfshelf")

    def run(self, root: Path) -> BatchSummary:
        """Discover every matching file under `root` and process them all."""
        with self._executor() as executor:
            files = discover_files(root, self.extensions, executor)
            logger.log("organize.discovered", LogLevel.INFO, folder=root, files=len(files))
            return self._process_all(files, executor)

    def process_files(self, files: Iterable[Path]) -> BatchSummary:
        """Process an explicit list of files."""
        with self._executor() as executor:
            return self._process_all(list(files), executor)

    def _process_all(self, files: list[Path], executor: Executor) -> BatchSummary:
        summary = BatchSummary()
        total = len(files)
        self._completed = 0

        futs = {executor.submit(self._process_one, f): f for f in files}
        for fut in as_completed(futs):
            outcome = fut.result()
            summary.outcomes.append(outcome)
            self._report(outcome, total)

        return summary

    def _process_one(self, file: Path) -> ProcessingOutcome:
        if self._cancel_event.is_set():
            return ProcessingOutcome.skipped(file, SKIP_CANCELLED)
        try:
            return core.process_file(file, self.extractor, self._rename_lock, self.dry_run)
        except Exception as e:
            # One file must never take the batch down with it
            logger.log("rename.error", LogLevel.ERROR, file=file, error=str(e) or type(e).__name__)
            if pdfshelf.DEBUG:
                logger.log_exception("rename.traceback", file=file)
            return ProcessingOutcome.failed(file, str(e) or type(e).__name__)

    def _report(self, outcome: ProcessingOutcome, total: int) -> None:
        with self._progress_lock:
            self._completed += 1
            event = ProgressEvent(outcome=outcome, completed=self._completed, total=total)

        if self.reporter is None:
            return
        try:
            self.reporter(event)
        except Exception as e:
            logger.log("progress.error", LogLevel.WARN, file=outcome.source.name, error=str(e))
