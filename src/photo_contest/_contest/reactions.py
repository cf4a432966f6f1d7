# Area: Contest
"""
photo_contest._contest.reactions — Participant Phase Reactions
==============================================================

Routes a phase notification to the reaction a participant runs
for that phase. Each reaction reads only the participant's own
data, so the outcome of a broadcast does not depend on the order
in which subscribers are visited.
"""

import logging
from typing import TYPE_CHECKING, Callable, Dict, Optional

from .enums import ContestPhase, Standing

if TYPE_CHECKING:
    from .participant import Participant

logger = logging.getLogger("photo_contest.contest.reactions")

Reaction = Callable[["Participant"], None]


def react_to_review(participant: "Participant") -> None:
    """No artifact by the deadline fails the participant."""
    if participant.artifact is None:
        participant.reject()
        participant.report_rejected("You didn't submit a photo. You failed the contest.")
    else:
        participant.report_notice("Your submission is on review.")


def react_to_vote(participant: "Participant") -> None:
    """Submitted participants are promoted unless flagged as duplicates."""
    if participant.standing != Standing.SUBMITTED:
        return
    if participant.eligible:
        participant.advance()
        participant.report_success("Your photo was accepted for voting.")
    else:
        participant.reject()
        participant.report_rejected("You didn't pass the review session.")


def react_to_awarding(participant: "Participant") -> None:
    """Report ratings, announce winners, and reset settled participants."""
    standing = participant.standing
    if standing == Standing.PROMOTED:
        participant.report_notice(f"Your rate is {participant.rating}.")
    elif standing == Standing.WINNER:
        participant.reporter.winner(f"{participant.name} is the winner!")
        participant.advance()
    elif standing == Standing.FAILED:
        participant.advance()
        participant.report_notice("The contest is over for you. You can join the next one.")


class ReactionRouter:
    """
    Maps contest phases to participant reactions.

    Phases without a registered reaction are ignored.

    Usage:
        router = ReactionRouter()
        router.register_reaction(ContestPhase.REVIEW, react_to_review)
        router.route(participant, ContestPhase.REVIEW)
    """

    def __init__(self):
        """Initialize router with empty reaction registry."""
        self._reactions: Dict[ContestPhase, Reaction] = {}

    def register_reaction(self, phase: ContestPhase, reaction: Reaction) -> None:
        self._reactions[phase] = reaction
        logger.debug(f"Registered reaction for {phase.value}")

    def get_reaction(self, phase: ContestPhase) -> Optional[Reaction]:
        return self._reactions.get(phase)

    def route(self, participant: "Participant", phase: ContestPhase) -> bool:
        """
        Run the participant's reaction to `phase`.

        Returns:
            True if a reaction ran, False if none is defined for the phase
        """
        reaction = self._reactions.get(phase)
        if reaction is None:
            logger.debug(f"No reaction for {phase.value} ({participant.name})")
            return False
        reaction(participant)
        return True


def build_default_router() -> ReactionRouter:
    """Router with the standard reactions for REVIEW, VOTE and AWARDING."""
    router = ReactionRouter()
    router.register_reaction(ContestPhase.REVIEW, react_to_review)
    router.register_reaction(ContestPhase.VOTE, react_to_vote)
    router.register_reaction(ContestPhase.AWARDING, react_to_awarding)
    return router


DEFAULT_ROUTER = build_default_router()
