# Area: Shared
"""
mind_reader._shared.logging_formatters — Logging formatters and filters
=======================================================================

Contains formatter/filter classes and the quiet-mode flag/functions.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

# Flag to silence terminal logging while an interactive UI owns the terminal
_quiet_mode_enabled = False


class QuietFilter(logging.Filter):
    """Filter that suppresses terminal logs when quiet mode is enabled."""

    def filter(self, record: logging.LogRecord) -> bool:
        return not _quiet_mode_enabled


class TerminalFormatter(logging.Formatter):
    """Colored formatter for terminal output."""

    COLORS = {
        "DEBUG": "\033[36m",     # Cyan
        "INFO": "\033[32m",      # Green
        "WARNING": "\033[33m",   # Yellow
        "ERROR": "\033[31m",     # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        # Color a copy so the file handler still sees the plain level name
        record = logging.makeLogRecord(record.__dict__)
        color = self.COLORS.get(record.levelname, self.RESET)
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


class JSONFormatter(logging.Formatter):
    """JSON formatter for file output."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        error_type = getattr(record, "error_type", None)
        if error_type:
            log_data["error_type"] = error_type
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data, ensure_ascii=False)


def enable_quiet_mode() -> None:
    """Suppress terminal logs. File logging remains unchanged."""
    global _quiet_mode_enabled
    _quiet_mode_enabled = True


def disable_quiet_mode() -> None:
    """Restore terminal logging."""
    global _quiet_mode_enabled
    _quiet_mode_enabled = False


def is_quiet_mode_enabled() -> bool:
    """Check if quiet mode is enabled."""
    return _quiet_mode_enabled
