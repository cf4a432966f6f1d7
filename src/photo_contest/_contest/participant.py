# Area: Contest
"""
photo_contest._contest.participant — Contest Participant
========================================================

A photographer taking part in contests. Owns its lifecycle machine
and the data the organizer and the phase reactions work on: the
submitted artifact, the eligibility flag and the rating.
"""

import logging
from typing import Optional

from .enums import ContestPhase, Standing
from .lifecycle import LifecycleMachine
from .reactions import DEFAULT_ROUTER, ReactionRouter
from .contest import Contest
from .._shared.status_reporter import StatusReporter, get_status_reporter
from ..types import ParticipantIdentity

logger = logging.getLogger("photo_contest.contest.participant")


class Participant:
    """
    Participant in a contest.

    Attributes:
        identity: Name and contact details
        artifact: Identifier of the submitted photo, None until submitted
        eligible: Cleared when the submission duplicates another one
        rating: Rating recorded by the voting session
    """

    def __init__(
        self,
        identity: ParticipantIdentity,
        reporter: Optional[StatusReporter] = None,
        router: Optional[ReactionRouter] = None,
    ):
        self.identity = identity
        self.reporter = reporter or get_status_reporter()
        self.artifact: Optional[str] = None
        self.eligible = True
        self.rating = 0
        self._lifecycle = LifecycleMachine()
        self._router = router or DEFAULT_ROUTER
        self.report_success("You have been successfully discovered as a photographer.")

    @property
    def name(self) -> str:
        return self.identity.name

    @property
    def standing(self) -> Standing:
        return self._lifecycle.current_standing

    def advance(self) -> Standing:
        """Drive the lifecycle forward; entering REGISTERED starts a new cycle."""
        standing = self._lifecycle.advance()
        if standing == Standing.REGISTERED:
            self._start_participation()
        return standing

    def reject(self) -> Standing:
        return self._lifecycle.reject()

    def _start_participation(self) -> None:
        self.artifact = None
        self.eligible = True
        self.rating = 0

    def register(self, contest: Contest) -> bool:
        """
        Subscribe to a contest that is still accepting applications.

        Args:
            contest: The contest to join

        Returns:
            True if registered, False if the contest is past APPLICATION
        """
        if not contest.accepts_registrations():
            logger.warning(
                f"{self.name} tried to register for '{contest.topic}' in {contest.phase.value}"
            )
            self.reporter.rejected(f"Photographer {self.name} cannot register for the contest.")
            return False
        contest.subscribe(self)
        self.advance()
        self.reporter.success(f"Photographer {self.name} successfully registered.")
        return True

    def submit_artifact(self, artifact_id: str) -> bool:
        """
        Attach a photo to the current participation.

        Args:
            artifact_id: Opaque photo identifier

        Returns:
            True if submitted, False if the participant is not REGISTERED
        """
        if self.standing != Standing.REGISTERED:
            logger.warning(f"{self.name} tried to submit in {self.standing.value}")
            self.report_rejected("You can't submit a photo.")
            return False
        self.artifact = artifact_id
        self.advance()
        self.report_success("You successfully sent a photo.")
        return True

    def notify(self, phase: ContestPhase) -> None:
        """Broadcast entry point: run the reaction for `phase`."""
        self._router.route(self, phase)

    def report_success(self, text: str) -> None:
        self.reporter.success(self.identity.notification_prefix + text)

    def report_rejected(self, text: str) -> None:
        self.reporter.rejected(self.identity.notification_prefix + text)

    def report_notice(self, text: str) -> None:
        self.reporter.notice(self.identity.notification_prefix + text)

    def __repr__(self) -> str:
        return (
            f"Participant(name={self.name!r}, standing={self.standing.value}, "
            f"artifact={self.artifact!r}, eligible={self.eligible}, rating={self.rating})"
        )
