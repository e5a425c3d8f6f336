"""Diagnostics — structured logging and faulthandler.

Layers:
1. Structured JSON logging on stderr, optionally mirrored to a rotating file
2. faulthandler: C-level crash tracebacks (SIGSEGV, SIGABRT) for all threads
"""

import datetime
import faulthandler
import json
import logging
import logging.handlers
import sys

logger = logging.getLogger(__name__)

# Rotating log file limits
LOG_MAX_BYTES = 10_000_000
LOG_BACKUP_COUNT = 7


class JSONFormatter(logging.Formatter):
    """Structured JSON log formatter."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.datetime.fromtimestamp(
                record.created, tz=datetime.timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "thread": record.threadName,
            "message": record.getMessage(),
        }
        if record.exc_info and record.exc_info[1] is not None:
            log_entry["exception"] = {
                "type": type(record.exc_info[1]).__name__,
                "traceback": self.formatException(record.exc_info),
            }
        return json.dumps(log_entry)


def setup_structured_logging(
    level: str = "WARNING", log_file: str | None = None, stream=None
) -> list[logging.Handler]:
    """Configure structured JSON logging.

    Args:
        level:    Root level name; unknown names fall back to WARNING.
        log_file: Also write to this file, rotated at LOG_MAX_BYTES.
        stream:   Console stream (defaults to stderr).

    Returns:
        The handlers installed on the root logger.
    """
    formatter = JSONFormatter()

    console = logging.StreamHandler(stream or sys.stderr)
    console.setFormatter(formatter)
    handlers: list[logging.Handler] = [console]

    if log_file:
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=LOG_MAX_BYTES,
            backupCount=LOG_BACKUP_COUNT,
        )
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))
    for handler in handlers:
        root.addHandler(handler)

    return handlers


def setup_faulthandler(stream=None):
    """Enable faulthandler for C-level crash tracebacks in every thread."""
    try:
        faulthandler.enable(file=stream or sys.stderr, all_threads=True)
    except (OSError, ValueError, AttributeError) as e:
        # stderr replaced by an object without a file descriptor
        logger.warning("Could not enable faulthandler: %s", e)


def init_diagnostics(level: str = "WARNING", log_file: str | None = None):
    """Initialize all diagnostic layers. Call from main.py."""
    handlers = setup_structured_logging(level, log_file)
    setup_faulthandler()
    logger.info("Diagnostics initialized: level=%s, log_file=%s", level, log_file)
    return handlers
