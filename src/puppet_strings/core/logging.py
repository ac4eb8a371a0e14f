"""Structured logging for puppet-strings.

Events are rendered as JSON lines on stderr, or appended to a log file.
stdout is never used, since ``--emit-json-stdout`` writes the report there.
"""
import logging
import sys
from typing import IO, Any, List, Optional

import structlog

# Log file opened by the last configure_logging call, if any
_log_stream: Optional[IO[str]] = None


def _level_number(log_level: str) -> int:
    level = logging.getLevelName(log_level.upper())
    return level if isinstance(level, int) else logging.INFO


def close_log_file() -> None:
    """Close the log file opened by configure_logging, if one is open."""
    global _log_stream
    if _log_stream is not None:
        _log_stream.close()
        _log_stream = None


def _open_log_stream(log_file: Optional[str]) -> IO[str]:
    global _log_stream
    close_log_file()
    if log_file is None:
        return sys.stderr
    # Line buffered so each event reaches the file as it is logged
    _log_stream = open(log_file, "a", encoding="utf-8", buffering=1)
    return _log_stream


def configure_logging(log_level: str = "INFO", log_file: Optional[str] = None) -> None:
    """Configure structlog to render JSON events.

    Reconfiguring closes the file opened by the previous call.

    Args:
        log_level: DEBUG, INFO, WARNING or ERROR; unknown names mean INFO
        log_file: File to append events to (stderr by default)
    """
    processors: List[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(_level_number(log_level)),
        context_class=dict,
        logger_factory=structlog.WriteLoggerFactory(file=_open_log_stream(log_file)),
        # Loggers must pick up a reconfigured stream
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> Any:
    """Get a structlog logger whose events carry ``logger=<name>``."""
    return structlog.get_logger(name).bind(logger=name)
