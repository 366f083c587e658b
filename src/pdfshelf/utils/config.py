"""
Run configuration for a batch organize.

Settings are resolved from explicit arguments first (the CLI flags), then
from the process environment, which already includes anything loaded from a
`.env` file by `pdfshelf.utils.constants`.
"""
import os
from dataclasses import dataclass
from pathlib import Path

from pdfshelf.errors import ConfigurationError
from pdfshelf.utils import constants


@dataclass(frozen=True)
class Settings:
    """Validated settings for one run."""

    source_dir: Path
    workers: int = constants.WORKERS
    dry_run: bool = False
    use_metadata: bool = True


def _parse_workers(value) -> int:
    try:
        workers = int(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"Worker count must be an integer, got {value!r}") from None
    if workers < 1:
        raise ConfigurationError(f"Worker count must be positive, got {workers}")
    return workers


def load_settings(
        source_dir: str | os.PathLike | None = None,
        workers: int | str | None = None,
        dry_run: bool = False,
        use_metadata: bool = True,
) -> Settings:
    """
    Build `Settings` from arguments with environment fallbacks.

    Raises:
        ConfigurationError: when no source directory is configured, when it
            does not exist or is not a directory, or when the worker count is
            not a positive integer.
    """
    raw_source = source_dir or os.getenv(constants.ENV_SOURCE_DIR)
    if not raw_source:
        raise ConfigurationError(
            f"No source directory given. Pass one on the command line or set {constants.ENV_SOURCE_DIR}."
        )

    root = Path(raw_source).expanduser().resolve()
    if not root.exists():
        raise ConfigurationError(f"Source directory does not exist: {root}")
    if not root.is_dir():
        raise ConfigurationError(f"Source path is not a directory: {root}")

    raw_workers = workers if workers is not None else os.getenv(constants.ENV_MAX_CONCURRENT)
    resolved_workers = _parse_workers(raw_workers) if raw_workers not in (None, "") else constants.WORKERS

    return Settings(source_dir=root, workers=resolved_workers, dry_run=dry_run, use_metadata=use_metadata)
