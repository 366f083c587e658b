"""
Progress reporting for batch runs.

A reporter is any callable taking a `ProgressEvent`. The batch renamer calls
it once per finished file. `TqdmReporter` drives a progress bar and logs one
line per renamed file.
"""
from dataclasses import dataclass

from tqdm import tqdm

from pdfshelf.models import ProcessingOutcome
from pdfshelf.utils import LogLevel, logger
from pdfshelf.utils.constants import STATUS_DRY_RUN, STATUS_RENAMED


@dataclass(frozen=True)
class ProgressEvent:
    outcome: ProcessingOutcome
    completed: int
    total: int


class TqdmReporter:
    """Progress bar plus a log line for every rename (or planned rename in dry-run mode)."""

    def __init__(self, desc: str = "Organizing PDFs", disable: bool = False):
        self.desc = desc
        self.disable = disable
        self._bar: tqdm | None = None

    def __call__(self, event: ProgressEvent) -> None:
        if self._bar is None:
            self._bar = tqdm(total=event.total, desc=self.desc, unit="file", disable=self.disable)

        outcome = event.outcome
        if outcome.status in (STATUS_RENAMED, STATUS_DRY_RUN):
            logger.log(
                "rename.renamed" if outcome.status == STATUS_RENAMED else "rename.planned",
                LogLevel.INFO,
                old=outcome.source.name,
                new=outcome.target.name if outcome.target else None,
                folder=outcome.source.parent,
            )

        self._bar.set_postfix_str(outcome.source.name[:40], refresh=False)
        self._bar.update(1)

    def close(self) -> None:
        if self._bar is not None:
            self._bar.close()
            self._bar = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
