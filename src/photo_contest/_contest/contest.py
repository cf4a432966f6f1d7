# Area: Contest
"""
photo_contest._contest.contest — Contest Aggregate
==================================================

A single contest: its topic, its phase machine, its subscribers
and the winning rating found by the voting session.
"""

import logging
from typing import Dict, Optional, Tuple

from .enums import ContestPhase
from .phase_machine import PhaseMachine
from .broadcast_channel import BroadcastChannel, Subscriber
from .._shared.status_reporter import StatusReporter, get_status_reporter
from ..errors import IllegalPhaseError

logger = logging.getLogger("photo_contest.contest")

CLOSED_NOTICE = "Contest is closed."

# Notice announced when the contest enters a phase
PHASE_NOTICES: Dict[ContestPhase, str] = {
    ContestPhase.REVIEW: "Application session for contest '{topic}' is closed.",
    ContestPhase.VOTE: "Review session for contest '{topic}' is over.",
    ContestPhase.AWARDING: "Voting for contest '{topic}' is over.",
}


class Contest:
    """
    Contest aggregate: phase machine + broadcast channel + winning rating.

    Attributes:
        topic: Contest topic, fixed at creation
        winning_rating: Highest rating of the last voting session
    """

    def __init__(self, topic: str, reporter: Optional[StatusReporter] = None):
        self._topic = topic
        self.reporter = reporter or get_status_reporter()
        self.winning_rating = 0
        self._phase_machine = PhaseMachine(on_closed=self._announce_closed)
        self._channel = BroadcastChannel()

    @property
    def topic(self) -> str:
        return self._topic

    @property
    def phase(self) -> ContestPhase:
        return self._phase_machine.current_phase

    @property
    def subscribers(self) -> Tuple[Subscriber, ...]:
        return self._channel.subscribers

    @property
    def is_closed(self) -> bool:
        return self._phase_machine.is_closed

    def accepts_registrations(self) -> bool:
        return self.phase == ContestPhase.APPLICATION

    def require_phase(self, phase: ContestPhase, action: str) -> None:
        """
        Guard an action that is only valid in one phase.

        Raises:
            IllegalPhaseError: If the contest is in another phase
        """
        if self.phase != phase:
            raise IllegalPhaseError(action, self._topic, self.phase, phase)

    def subscribe(self, subscriber: Subscriber) -> None:
        """Append a subscriber; phase checks belong to the caller."""
        self._channel.subscribe(subscriber)

    def advance(self) -> ContestPhase:
        """Move the contest to its next phase and announce it."""
        previous = self.phase
        phase = self._phase_machine.advance()
        if phase != previous and phase in PHASE_NOTICES:
            self.reporter.notice(PHASE_NOTICES[phase].format(topic=self._topic))
        return phase

    def broadcast(self) -> int:
        """Notify every subscriber of the current phase."""
        return self._channel.broadcast(self.phase)

    def _announce_closed(self) -> None:
        logger.info(f"Contest '{self._topic}' closed")
        self.reporter.notice(CLOSED_NOTICE)

    def __repr__(self) -> str:
        return (
            f"Contest(topic={self._topic!r}, phase={self.phase.value}, "
            f"subscribers={len(self._channel)}, winning_rating={self.winning_rating})"
        )
