# Area: Contest
"""
photo_contest._contest.phase_machine — Contest Phase Machine
============================================================

Tracks the phase of a single contest. Phases only move forward,
one step per advance, and CLOSED is terminal.
"""

import logging
from typing import Callable, Dict, Optional

from .enums import ContestPhase

logger = logging.getLogger("photo_contest.contest.phase")


# Forward chain: {current_phase: next_phase}
PHASE_TRANSITIONS: Dict[ContestPhase, ContestPhase] = {
    ContestPhase.APPLICATION: ContestPhase.REVIEW,
    ContestPhase.REVIEW: ContestPhase.VOTE,
    ContestPhase.VOTE: ContestPhase.AWARDING,
    ContestPhase.AWARDING: ContestPhase.CLOSED,
}

PHASE_ORDER = (
    ContestPhase.APPLICATION,
    ContestPhase.REVIEW,
    ContestPhase.VOTE,
    ContestPhase.AWARDING,
    ContestPhase.CLOSED,
)


class PhaseMachine:
    """
    State machine for contest phase progression.

    Attributes:
        current_phase: The phase the contest is in
    """

    def __init__(self, on_closed: Optional[Callable[[], None]] = None):
        """
        Initialize the machine in APPLICATION.

        Args:
            on_closed: Called every time an advance lands on, or is
                attempted from, CLOSED
        """
        self.current_phase = ContestPhase.APPLICATION
        self._on_closed = on_closed

    @property
    def is_closed(self) -> bool:
        return self.current_phase == ContestPhase.CLOSED

    def can_advance(self) -> bool:
        """Check whether another forward step exists."""
        return self.current_phase in PHASE_TRANSITIONS

    def advance(self) -> ContestPhase:
        """
        Move to the next phase.

        Advancing from CLOSED leaves the phase unchanged and emits
        the closed signal again.

        Returns:
            The phase after the advance
        """
        if self.can_advance():
            previous = self.current_phase
            self.current_phase = PHASE_TRANSITIONS[previous]
            logger.info(f"Phase {previous.value} -> {self.current_phase.value}")
        if self.is_closed and self._on_closed is not None:
            self._on_closed()
        return self.current_phase
