# Area: Shared
"""
photo_contest._shared.logging_config — Structured logging setup
===============================================================

Configures dual logging: terminal (colored) + file (JSON).
Status mode suppresses standard logs on the terminal so that
only contest status lines are printed.
"""

from __future__ import annotations
import logging
import json
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

# Package logger
logger = logging.getLogger("photo_contest")

# Flag to control status-only terminal output
_status_mode_enabled = False


class StatusModeFilter(logging.Filter):
    """Filter that suppresses terminal logs when status mode is enabled.

    In status mode the StatusReporter prints the contest status lines
    directly and the regular log stream only goes to the file.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        return not _status_mode_enabled


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
        color = self.COLORS.get(record.levelname, self.RESET)
        # Color a copy so the file handler still sees the plain level name
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


class JSONFormatter(logging.Formatter):
    """JSON formatter for file output."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


def setup_logging(
    log_file_path: Optional[str] = "photo_contest.log",
    level: int = logging.INFO,
) -> None:
    """
    Configure logging for the package.

    Parameters
    ----------
    log_file_path : str or None
        Path to the log file. None disables the file handler.
    level : int
        Logging level. Defaults to INFO.
    """
    pkg_logger = logging.getLogger("photo_contest")
    pkg_logger.setLevel(level)

    # Remove existing handlers
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
        handler.close()

    terminal_handler = logging.StreamHandler(sys.stdout)
    terminal_handler.setLevel(level)
    terminal_handler.setFormatter(TerminalFormatter(
        fmt="%(asctime)s │ %(levelname)s │ %(name)s │ %(message)s",
        datefmt="%H:%M:%S",
    ))
    terminal_handler.addFilter(StatusModeFilter())
    pkg_logger.addHandler(terminal_handler)

    if log_file_path:
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


def enable_status_mode() -> None:
    """
    Enable status mode.

    In status mode:
    - Standard logs are suppressed from the terminal
    - Only contest status lines are shown
    - File logging remains unchanged for debugging
    """
    global _status_mode_enabled
    _status_mode_enabled = True


def disable_status_mode() -> None:
    """Disable status mode (restore standard logging)."""
    global _status_mode_enabled
    _status_mode_enabled = False


def is_status_mode_enabled() -> bool:
    """Check if status mode is enabled."""
    return _status_mode_enabled
