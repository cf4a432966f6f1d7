"""
photo_contest.errors — Custom exception classes
===============================================

Defines the exception hierarchy for the contest engine.
Each exception stores its context for structured logging.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ._contest.enums import ContestPhase


class PhotoContestError(Exception):
    """Base exception for all photo_contest package errors."""
    pass


class IllegalPhaseError(PhotoContestError):
    """Raised when an action is attempted in a phase that does not allow it."""

    def __init__(
        self,
        action: str,
        topic: str,
        current_phase: "ContestPhase",
        required_phase: "ContestPhase",
    ):
        self.action = action
        self.topic = topic
        self.current_phase = current_phase
        self.required_phase = required_phase
        super().__init__(
            f"Cannot run {action}: contest '{topic}' is in "
            f"{current_phase.value} phase, expected {required_phase.value}"
        )

    def to_log_context(self) -> Dict[str, Any]:
        return {
            "action": self.action,
            "topic": self.topic,
            "current_phase": self.current_phase.value,
            "required_phase": self.required_phase.value,
        }


class SubscriptionError(PhotoContestError):
    """Raised when the subscriber list is modified during a broadcast."""

    def __init__(self, subscriber_name: str, phase: "ContestPhase"):
        self.subscriber_name = subscriber_name
        self.phase = phase
        super().__init__(
            f"Cannot subscribe '{subscriber_name}' while broadcasting "
            f"{phase.value}"
        )


class ConfigurationError(PhotoContestError):
    """Raised when settings or a scenario file fail validation."""

    def __init__(self, source: str, errors: List[str], cause: Optional[Exception] = None):
        self.source = source
        self.errors = errors
        self.cause = cause
        super().__init__(f"Invalid configuration in {source}: {errors}")
