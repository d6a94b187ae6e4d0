from __future__ import annotations

import logging
import sys
import threading
from collections import deque
from typing import List

from .settings import settings

_BUFFER_SIZE = 500
_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(run_id)s | orienteering.%(module)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_buffer_lock = threading.Lock()
_log_buffer: deque[str] = deque(maxlen=_BUFFER_SIZE)
_run_id_lock = threading.Lock()
_CURRENT_RUN_ID = "-"


def _resolve_level(name: str) -> int:
    level = logging.getLevelName(str(name).upper())
    if isinstance(level, str):
        return logging.INFO
    return level


class RunIdFilter(logging.Filter):
    """Inject the run_id into each log record."""
    def filter(self, record):
        record.run_id = _CURRENT_RUN_ID
        return True


class _BufferingHandler(logging.Handler):
    """Capture log records into an in-memory ring buffer."""

    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self._formatter = logging.Formatter(_LOG_FORMAT, _DATE_FORMAT)

    def emit(self, record: logging.LogRecord) -> None:
        message = self._formatter.format(record)
        with _buffer_lock:
            _log_buffer.append(message)


_logging_configured = False
_package_logger = logging.getLogger("orienteering")


def _configure_logging() -> None:
    global _logging_configured
    if _logging_configured:
        return

    level = _resolve_level(settings.LOG_LEVEL)
    formatter = logging.Formatter(_LOG_FORMAT, _DATE_FORMAT)
    run_filter = RunIdFilter()

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    stream_handler.addFilter(run_filter)

    buffer_handler = _BufferingHandler()
    buffer_handler.addFilter(run_filter)

    # Only the package logger is touched so host applications keep their root config.
    _package_logger.setLevel(level)
    _package_logger.addHandler(stream_handler)
    _package_logger.addHandler(buffer_handler)
    _package_logger.propagate = False

    _logging_configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``orienteering`` namespace with the unified format."""
    _configure_logging()
    if not name.startswith("orienteering"):
        name = f"orienteering.{name}"
    return logging.getLogger(name)


def set_level(level: str | int) -> None:
    """Change the package log level at runtime (e.g. from the CLI ``--verbose`` flag)."""
    _configure_logging()
    if isinstance(level, str):
        level = _resolve_level(level)
    _package_logger.setLevel(level)


def set_run_id(run_id: str) -> None:
    """Tag subsequent log records with ``run_id``."""
    global _CURRENT_RUN_ID
    with _run_id_lock:
        _CURRENT_RUN_ID = run_id or "-"


def get_recent_output(limit: int = 200) -> List[str]:
    """Return the most recent log lines up to ``limit`` entries."""
    if limit <= 0:
        return []
    with _buffer_lock:
        return list(_log_buffer)[-limit:]


def clear_recent_output() -> None:
    with _buffer_lock:
        _log_buffer.clear()


__all__ = [
    "RunIdFilter",
    "get_logger",
    "set_level",
    "set_run_id",
    "get_recent_output",
    "clear_recent_output",
]
