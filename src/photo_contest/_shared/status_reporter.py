# Area: Shared
"""
photo_contest._shared.status_reporter — Contest status lines
============================================================

The reporting sink of the contest engine. Every meaningful
transition or rejected action produces exactly one status line.
Lines are colored by kind on the terminal, kept in memory for
inspection, and forwarded to the package logger.
"""

from __future__ import annotations
import logging
import sys
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import List, Optional

logger = logging.getLogger("photo_contest.status")


class StatusKind(Enum):
    """Category of a status line sent to the reporting sink."""
    SUCCESS = "SUCCESS"
    REJECTED = "REJECTED"
    NOTICE = "NOTICE"
    WINNER = "WINNER"
    RECOVERED = "RECOVERED"

# ══════════════════════════════════════════════════════════════
# ANSI COLOR CODES
# ══════════════════════════════════════════════════════════════

GREEN = "\033[32m"         # Successful actions
ORANGE = "\033[38;5;208m"  # Rejected actions
CYAN = "\033[36m"          # Contest notices
MAGENTA = "\033[35m"       # Winner announcements
YELLOW = "\033[33m"        # Recovered input errors
RESET = "\033[0m"

KIND_COLORS = {
    StatusKind.SUCCESS: GREEN,
    StatusKind.REJECTED: ORANGE,
    StatusKind.NOTICE: CYAN,
    StatusKind.WINNER: MAGENTA,
    StatusKind.RECOVERED: YELLOW,
}

# Rejected actions are warnings in the log file
KIND_LOG_LEVELS = {
    StatusKind.SUCCESS: logging.INFO,
    StatusKind.REJECTED: logging.WARNING,
    StatusKind.NOTICE: logging.INFO,
    StatusKind.WINNER: logging.INFO,
    StatusKind.RECOVERED: logging.WARNING,
}


@dataclass(frozen=True)
class StatusLine:
    """A single status line emitted by the engine."""
    kind: StatusKind
    message: str


class StatusReporter:
    """Collects and displays status lines."""

    def __init__(self, echo: bool = True):
        self.echo = echo
        self.history: List[StatusLine] = []

    def _now(self) -> str:
        return datetime.now().strftime("%H:%M:%S")

    def emit(self, kind: StatusKind, message: str) -> StatusLine:
        """Record a status line and display it if echo is on."""
        status = StatusLine(kind=kind, message=message)
        self.history.append(status)
        logger.log(KIND_LOG_LEVELS[kind], "%s: %s", kind.value, message)
        if self.echo:
            color = KIND_COLORS.get(kind, RESET)
            print(f"{color}{self._now()} | {kind.value:9} | {message}{RESET}", file=sys.stdout)
        return status

    def success(self, message: str) -> StatusLine:
        return self.emit(StatusKind.SUCCESS, message)

    def rejected(self, message: str) -> StatusLine:
        return self.emit(StatusKind.REJECTED, message)

    def notice(self, message: str) -> StatusLine:
        return self.emit(StatusKind.NOTICE, message)

    def winner(self, message: str) -> StatusLine:
        return self.emit(StatusKind.WINNER, message)

    def recovered(self, message: str) -> StatusLine:
        return self.emit(StatusKind.RECOVERED, message)

    def messages(self, kind: Optional[StatusKind] = None) -> List[str]:
        """Return recorded messages, optionally filtered by kind."""
        return [s.message for s in self.history if kind is None or s.kind == kind]

    def clear(self) -> None:
        self.history.clear()


# Global singleton instance
_status_reporter: Optional[StatusReporter] = None


def get_status_reporter() -> StatusReporter:
    """Get or create the global status reporter instance."""
    global _status_reporter
    if _status_reporter is None:
        _status_reporter = StatusReporter()
    return _status_reporter
