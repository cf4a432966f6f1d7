# Area: Shared
"""
Shared utilities used by the contest engine and its runners.

This package contains:
- Logging configuration
- The status reporter (reporting sink)
"""

from .logging_config import (
    setup_logging,
    enable_status_mode,
    disable_status_mode,
    is_status_mode_enabled,
)
from .status_reporter import StatusKind, StatusLine, StatusReporter, get_status_reporter

__all__ = [
    "setup_logging",
    "enable_status_mode",
    "disable_status_mode",
    "is_status_mode_enabled",
    "StatusKind",
    "StatusLine",
    "StatusReporter",
    "get_status_reporter",
]
