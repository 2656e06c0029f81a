# Area: Shared
"""
Shared utilities.

This package contains:
- Logging configuration (terminal + JSON file)
- Advisory error logging
- Quiet mode for interactive front ends
"""

from .logging_config import setup_logging, log_advisory_error
from .logging_formatters import (
    enable_quiet_mode,
    disable_quiet_mode,
    is_quiet_mode_enabled,
)

__all__ = [
    "setup_logging",
    "log_advisory_error",
    "enable_quiet_mode",
    "disable_quiet_mode",
    "is_quiet_mode_enabled",
]
