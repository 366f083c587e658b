"""
Organize a PDF library: rename every PDF in a directory tree to
``Title - Author [Year].pdf``.

The source directory comes from the command line or PDF_SOURCE_DIR; the worker
count from --workers or MAX_CONCURRENT (default: twice the CPU count). Both
may be set in a `.env` file.
"""

import argparse
import os
import signal
import sys
import time

import pdfshelf as pdfshelf_module
from pdfshelf.errors import ConfigurationError
from pdfshelf.rename import ConcurrentRenamer
from pdfshelf.utils import LogLevel, logger
from pdfshelf.utils.config import load_settings
from pdfshelf.utils.constants import ENV_LOG_LEVEL
from pdfshelf.utils.pdf_meta import PdfMetadataExtractor
from pdfshelf.utils.progress import TqdmReporter
from pdfshelf.utils.time_util import format_runtime

EXIT_CONFIG_ERROR = 2


def _install_signal_handlers(renamer: ConcurrentRenamer) -> dict:
    """Stop starting new files on SIGINT/SIGTERM; running renames finish. Returns the previous handlers."""

    def _handler(signum, frame):
        try:
            sig_name = signal.Signals(signum).name
        except ValueError:
            sig_name = str(signum)
        logger.log("organize.shutdown", LogLevel.WARN, signal=sig_name, msg="Finishing files in progress")
        renamer.cancel()

    previous = {}
    for signum in (signal.SIGINT, signal.SIGTERM):
        previous[signum] = signal.signal(signum, _handler)
    return previous


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pdfshelf",
        description="Rename PDF files in a directory tree to 'Title - Author [Year].pdf', using the "
                    "existing filename and, when it names no author, the document's embedded metadata.",
        epilog="Example: pdfshelf ~/Books --workers 8 --dry-run",
    )
    parser.add_argument("root", nargs="?", help="Directory to organize (default: $PDF_SOURCE_DIR)")
    parser.add_argument("--workers", type=int, help="Concurrent files (default: $MAX_CONCURRENT or 2x CPUs)")
    parser.add_argument("--dry-run", action="store_true", help="Show proposed renames without touching files")
    parser.add_argument(
        "--no-metadata", action="store_true", help="Never read embedded PDF metadata; use filenames only"
    )
    parser.add_argument("--log-level", help=f"TRACE, DEBUG, INFO, WARN or ERROR (default: ${ENV_LOG_LEVEL} or INFO)")
    parser.add_argument("--no-progress", action="store_true", help="Hide the progress bar")
    parser.add_argument("--debug", action="store_true", help="Enable debug output")
    parser.add_argument("--version", action="version", version=f"%(prog)s {pdfshelf_module.__version__}")
    return parser


def _configure_logging(args) -> None:
    level_name = args.log_level or os.getenv(ENV_LOG_LEVEL)
    if args.debug:
        level = LogLevel.DEBUG
    elif level_name:
        try:
            level = logger.parse_level(level_name)
        except ValueError as e:
            raise ConfigurationError(str(e)) from None
    else:
        level = LogLevel.INFO
    logger.set_log_level(level)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    pdfshelf_module.DEBUG = args.debug

    try:
        _configure_logging(args)
        settings = load_settings(
            source_dir=args.root,
            workers=args.workers,
            dry_run=args.dry_run,
            use_metadata=not args.no_metadata,
        )
    except ConfigurationError as e:
        logger.log("startup.error", LogLevel.ERROR, msg=str(e))
        return EXIT_CONFIG_ERROR

    logger.log(
        "organize.start",
        LogLevel.INFO,
        source=settings.source_dir,
        workers=settings.workers,
        dry_run=settings.dry_run,
        metadata=settings.use_metadata,
    )

    start_time = time.time()
    with TqdmReporter(disable=args.no_progress) as reporter:
        renamer = ConcurrentRenamer(
            extractor=PdfMetadataExtractor() if settings.use_metadata else None,
            reporter=reporter,
            workers=settings.workers,
            dry_run=settings.dry_run,
        )
        previous_handlers = _install_signal_handlers(renamer)
        try:
            summary = renamer.run(settings.source_dir)
        finally:
            for signum, handler in previous_handlers.items():
                signal.signal(signum, handler)

    logger.log(
        "organize.end",
        LogLevel.INFO,
        runtime=format_runtime(time.time() - start_time),
        total=summary.total,
        renamed=summary.renamed,
        skipped=summary.skipped,
        failed=summary.failed,
        dry_run=summary.planned,
        cancelled=renamer.cancelled,
    )
    if settings.dry_run:
        logger.safe_print(f"\n🧪 Dry-run: {summary.planned} file(s) would be renamed, no changes made.")
    else:
        logger.safe_print(
            f"\n🎉 Finished: {summary.renamed} renamed, {summary.skipped} skipped, {summary.failed} failed."
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
