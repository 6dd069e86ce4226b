"""Package logger for buildwatch.

Everything logs under the "buildwatch" logger. Two levels are added around
the standard ones: VERBOSE (15) for evaluator and graph detail, TRACE (5) for
per-file output. Records go to a log file when one is configured, otherwise
to stderr when it is a terminal, otherwise nowhere.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from buildwatch.config.schema import LoggingConfig

TRACE = 5
VERBOSE = 15

logging.addLevelName(TRACE, "TRACE")
logging.addLevelName(VERBOSE, "VERBOSE")

logger = logging.getLogger("buildwatch")

_initialized = False

_LEVEL_MAP = {
    "TRACE": TRACE,
    "DEBUG": logging.DEBUG,
    "VERBOSE": VERBOSE,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

# logging.verbose and the CLI -v count: 0 errors only .. 4 everything
_VERBOSITY_MAP = {
    0: logging.ERROR,
    1: logging.WARNING,
    2: logging.INFO,
    3: VERBOSE,
    4: TRACE,
}


class _LowercaseLevelFormatter(logging.Formatter):
    """Renders levels as compiler-style lowercase tags (``warning:``)."""

    def format(self, record: logging.LogRecord) -> str:
        record.levelname = record.levelname.lower()
        return super().format(record)


def resolve_level(config: LoggingConfig | None) -> int:
    """Compute the effective log level for a logging config.

    The integer ``verbose`` setting takes precedence over the ``level`` name.
    Unknown names fall back to INFO, verbosity above 4 maps to TRACE.
    """
    if config is None:
        return logging.INFO
    if config.verbose is not None:
        return _VERBOSITY_MAP.get(max(config.verbose, 0), TRACE)
    if config.level:
        return _LEVEL_MAP.get(config.level.upper(), logging.INFO)
    return logging.INFO


def setup_logging(config: LoggingConfig | None = None, *, force: bool = False) -> None:
    """Attach file or terminal handlers to the buildwatch logger.

    The CLI calls this before evaluating. Repeat calls keep the first setup
    unless ``force`` is given, which drops the current handlers first.

    Args:
        config: Optional LoggingConfig with level, verbose, and file settings.
        force: Reconfigure even if logging was already initialized.
    """
    global _initialized
    if _initialized and not force:
        return
    _initialized = True

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    log_level = resolve_level(config)
    logger.setLevel(log_level)

    formatter = _LowercaseLevelFormatter(
        "%(asctime)s %(levelname)s: %(message)s", datefmt="%H:%M:%S"
    )

    log_path = config.file if config and config.file else os.environ.get("BUILDWATCH_LOG")

    if log_path:
        log_path = os.path.expanduser(log_path)
        try:
            file_handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
        except OSError as e:
            if sys.stderr.isatty():
                print(f"buildwatch: cannot write log to {log_path}: {e}", file=sys.stderr)
                _add_stderr_handler(formatter, log_level)
    elif sys.stderr.isatty():
        _add_stderr_handler(formatter, log_level)


def _add_stderr_handler(formatter: logging.Formatter, level: int = logging.DEBUG) -> None:
    """Send records to stderr at ``level``."""
    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(level)
    stderr_handler.setFormatter(formatter)
    logger.addHandler(stderr_handler)


def get_logger(name: str | None = None) -> logging.Logger:
    """The package logger, or its child ``name`` (e.g. "graph")."""
    if name:
        return logger.getChild(name)
    return logger
