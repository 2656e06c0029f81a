# Area: Shared
"""
mind_reader._shared.logging_config — Structured logging setup
=============================================================

Configures dual logging: terminal (colored) + file (JSON).
Provides the diagnostic logging used when an advisory falls back.
"""

from __future__ import annotations
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from .logging_formatters import JSONFormatter, QuietFilter, TerminalFormatter

if TYPE_CHECKING:
    from ..errors import MindReaderError

# Package logger
logger = logging.getLogger("mind_reader")


def setup_logging(
    log_file_path: str = "mind_reader.log",
    level: int = logging.INFO,
) -> None:
    """
    Configure logging for the package.

    Parameters
    ----------
    log_file_path : str
        Path to the log file. Defaults to 'mind_reader.log' in current dir.
    level : int
        Logging level. Defaults to INFO.
    """
    pkg_logger = logging.getLogger("mind_reader")
    pkg_logger.setLevel(level)

    # Remove existing handlers
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
        handler.close()

    # Terminal handler with colors
    terminal_handler = logging.StreamHandler(sys.stdout)
    terminal_handler.setLevel(level)
    terminal_handler.setFormatter(TerminalFormatter(
        fmt="%(asctime)s │ %(levelname)s │ %(name)s │ %(message)s",
        datefmt="%H:%M:%S",
    ))
    terminal_handler.addFilter(QuietFilter())
    pkg_logger.addHandler(terminal_handler)

    # File handler with JSON
    try:
        log_path = Path(log_file_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(JSONFormatter())
        pkg_logger.addHandler(file_handler)
    except OSError as e:
        pkg_logger.warning(f"Could not create log file: {e}")

    # Prevent propagation to root logger
    pkg_logger.propagate = False


def log_advisory_error(error: "MindReaderError") -> None:
    """
    Log an advisory failure that was recovered with a fallback.

    The one-line summary goes out at WARNING; the full structured
    block (request context, payload, validation errors) at DEBUG.
    """
    advisory_logger = logging.getLogger("mind_reader.advisory")
    advisory_logger.warning(
        f"[ADVISORY] {error.__class__.__name__}: {error} — using fallback",
        extra={"error_type": error.__class__.__name__},
    )
    if advisory_logger.isEnabledFor(logging.DEBUG) and hasattr(error, "format_error_log"):
        advisory_logger.debug(error.format_error_log())
