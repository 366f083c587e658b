"""
Structured, thread-safe logging for the organizer.

Each record is one line, ``timestamp | [LEVEL] | event | key="value" | ...``,
stamped in UTC and tagged with the emitting worker (``main``, ``w1``, ``w2``...).
Records are written with ``tqdm.write`` so they never tear an active progress
bar; WARN and ERROR records go to stderr, the rest to stdout.
"""
import sys
import threading
import traceback
from datetime import datetime, timezone
from enum import Enum
from pathlib import PurePath
from typing import Any, Dict

from tqdm import tqdm

_output_lock = threading.Lock()
_worker_names: Dict[str, str] = {}
_worker_lock = threading.Lock()
_SEP = " | "


class LogLevel(Enum):
    """Log level enumeration."""
    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4


_threshold = LogLevel.INFO


def set_log_level(level: LogLevel) -> None:
    """Only records at `level` or above are written from now on."""
    global _threshold
    _threshold = level


def parse_level(name: str) -> LogLevel:
    """Look up a level by name, accepting WARNING as an alias of WARN."""
    key = name.strip().upper()
    if key == "WARNING":
        key = "WARN"
    try:
        return LogLevel[key]
    except KeyError:
        raise ValueError(f"Unknown log level: {name!r}") from None


def _render(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, PurePath):
        value = str(value)
    if isinstance(value, str):
        # Single line, quotes escaped
        value = value.replace("\r", "\\r").replace("\n", "\\n").replace('"', '\\"')
        return f'"{value}"'
    return str(value)


def worker_tag() -> str:
    """Short tag for the current thread: ``main`` or ``wN`` in first-seen order."""
    thread = threading.current_thread()
    if thread is threading.main_thread():
        return "main"

    with _worker_lock:
        tag = _worker_names.get(thread.name)
        if tag is None:
            tag = f"w{len(_worker_names) + 1}"
            _worker_names[thread.name] = tag
        return tag


def log(event: str, level: LogLevel = LogLevel.INFO, **fields) -> None:
    """
    Write one structured record.

    Args:
        event: Dotted event name, e.g. 'rename.renamed' or 'organize.end'
        level: Severity; records below the configured level are dropped
        **fields: Key-value pairs appended in order, followed by the worker tag
    """
    if level.value < _threshold.value:
        return

    fields.setdefault("worker", worker_tag())
    stamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")
    line = _SEP.join(
        [stamp, f"[{level.name}]", event] + [f"{key}={_render(value)}" for key, value in fields.items()]
    )
    stream = sys.stderr if level.value >= LogLevel.WARN.value else sys.stdout

    with _output_lock:
        tqdm.write(line, file=stream)


def log_exception(event: str, **fields) -> None:
    """Log the traceback of the exception being handled, at DEBUG."""
    log(event, LogLevel.DEBUG, trace=traceback.format_exc(), **fields)


def safe_print(*args, **kwargs) -> None:
    """Thread-safe print for the human-facing run summary."""
    with _output_lock:
        print(*args, **kwargs, flush=True)
