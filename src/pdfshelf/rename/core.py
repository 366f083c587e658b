"""
Per-file renaming: metadata resolution, rename planning and applying a plan.

This module connects the filename parser, the optional embedded-metadata
extractor and the formatter for a single file, and applies the resulting
rename safely.

Functions:
- resolve_metadata: Merge filename-derived and embedded metadata.
- read_document_metadata: Call the extractor, turning failures into None.
- plan_rename: Compute the RenamePlan for one file, or the reason there is none.
- apply_plan: Perform a rename unless the target is taken by another file.
- process_file: The full per-file pipeline, returning a ProcessingOutcome.
"""

from contextlib import AbstractContextManager, nullcontext
from pathlib import Path
from typing import Protocol

from pdfshelf.errors import ExtractionError
from pdfshelf.models import DocumentMetadata, ProcessingOutcome, RenamePlan
from pdfshelf.rename import formatter, parser
from pdfshelf.utils import LogLevel, file_util, logger
from pdfshelf.utils.constants import (
    DEFAULT_EXTENSION,
    SKIP_NO_TITLE,
    SKIP_NOTHING_INFERRED,
    SKIP_TARGET_EXISTS,
    SKIP_UNCHANGED,
)


class MetadataExtractor(Protocol):
    def extract(self, path: Path) -> DocumentMetadata:
        ...


def resolve_metadata(
        from_filename: DocumentMetadata, embedded: DocumentMetadata | None = None
) -> DocumentMetadata | None:
    """
    Merge filename-derived metadata with embedded document metadata.

    Title and year prefer the filename; embedded fields are often missing or
    wrong in scanned PDFs. Author prefers the embedded value, since a
    positional guess from the filename is less reliable.

    Returns None when neither source provides a title.
    """
    if embedded is None:
        merged = from_filename
    else:
        merged = DocumentMetadata(
            title=from_filename.title or embedded.title,
            author=embedded.author or from_filename.author,
            year=from_filename.year if from_filename.year is not None else embedded.year,
        )
    return merged if merged.title else None


def read_document_metadata(file: Path, extractor: MetadataExtractor | None) -> DocumentMetadata | None:
    """Embedded metadata for `file`, or None when there is no extractor or it fails."""
    if extractor is None:
        return None
    try:
        return extractor.extract(file)
    except ExtractionError as e:
        logger.log("metadata.error", LogLevel.WARN, file=file, error=e.message)
        return None


def plan_rename(file: Path, extractor: MetadataExtractor | None = None) -> tuple[RenamePlan | None, str | None]:
    """
    Compute the rename for `file`.

    Embedded metadata is only read when the filename names no author.

    Returns:
    Tuple[RenamePlan | None, str | None]:
    - plan: The rename to apply, or None when nothing should happen.
    - reason: Why there is no plan (one of the SKIP_* reasons), else None.
    """
    from_filename = parser.parse_filename(file.name)
    embedded = None if from_filename.author else read_document_metadata(file, extractor)

    metadata = resolve_metadata(from_filename, embedded)
    if metadata is None:
        return None, SKIP_NO_TITLE

    # Only the filename's own words are known; rewriting them would just shuffle punctuation.
    if metadata.author is None and metadata.year is None and metadata.title == from_filename.title:
        return None, SKIP_NOTHING_INFERRED

    new_name = formatter.build_filename(metadata, file.suffix or DEFAULT_EXTENSION)
    if not new_name:
        return None, SKIP_NO_TITLE
    if new_name == file.name:
        return None, SKIP_UNCHANGED

    return RenamePlan(source=file, target=file.with_name(new_name)), None


def apply_plan(plan: RenamePlan, rename_lock: AbstractContextManager | None = None) -> ProcessingOutcome:
    """
    Rename `plan.source` to `plan.target` unless another file already holds the target.

    The existence check and the rename happen under `rename_lock`, so two
    workers aiming at the same target cannot both succeed.

    Raises:
        OSError: when the filesystem rejects the rename.
    """
    with rename_lock or nullcontext():
        if file_util.is_collision(plan.source, plan.target):
            logger.log("rename.collision", LogLevel.WARN, file=plan.source, target=plan.target.name)
            return ProcessingOutcome.skipped(plan.source, SKIP_TARGET_EXISTS, target=plan.target)
        plan.source.rename(plan.target)
    return ProcessingOutcome.renamed(plan)


def process_file(
        file: Path,
        extractor: MetadataExtractor | None = None,
        rename_lock: AbstractContextManager | None = None,
        dry_run: bool = False,
) -> ProcessingOutcome:
    """
    Run the whole pipeline for one file: parse, read metadata if needed,
    resolve, format and rename. Filesystem errors become a FAIL outcome and
    leave the file untouched.
    """
    plan, reason = plan_rename(file, extractor)
    if plan is None:
        logger.log("rename.skip", LogLevel.DEBUG, file=file.name, reason=reason)
        return ProcessingOutcome.skipped(file, reason)

    if dry_run:
        if file_util.is_collision(plan.source, plan.target):
            return ProcessingOutcome.skipped(file, SKIP_TARGET_EXISTS, target=plan.target)
        return ProcessingOutcome.dry_run(plan)

    try:
        return apply_plan(plan, rename_lock)
    except OSError as e:
        logger.log("rename.error", LogLevel.ERROR, file=file, target=plan.target.name, error=str(e))
        return ProcessingOutcome.failed(file, str(e))
