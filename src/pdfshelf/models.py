"""
Value types passed between the parsing, formatting and renaming stages.

- DocumentMetadata: title/author/year inferred for one file.
- RenamePlan: the source and target path of a single rename.
- ProcessingOutcome: what happened to one file, used for reporting only.
"""
from dataclasses import dataclass
from pathlib import Path

from pdfshelf.utils.constants import STATUS_DRY_RUN, STATUS_FAIL, STATUS_RENAMED, STATUS_SKIP


@dataclass(frozen=True)
class DocumentMetadata:
    """Metadata inferred for a single document. Every field is optional."""

    title: str | None = None
    author: str | None = None
    year: int | None = None


@dataclass(frozen=True)
class RenamePlan:
    """A rename computed for one file and applied at most once."""

    source: Path
    target: Path


@dataclass(frozen=True)
class ProcessingOutcome:
    """Per-file result of a batch run."""

    source: Path
    status: str
    target: Path | None = None
    reason: str | None = None

    @classmethod
    def renamed(cls, plan: RenamePlan) -> "ProcessingOutcome":
        return cls(plan.source, STATUS_RENAMED, target=plan.target)

    @classmethod
    def dry_run(cls, plan: RenamePlan) -> "ProcessingOutcome":
        return cls(plan.source, STATUS_DRY_RUN, target=plan.target)

    @classmethod
    def skipped(cls, source: Path, reason: str, target: Path | None = None) -> "ProcessingOutcome":
        return cls(source, STATUS_SKIP, target=target, reason=reason)

    @classmethod
    def failed(cls, source: Path, error: str) -> "ProcessingOutcome":
        return cls(source, STATUS_FAIL, reason=error)
