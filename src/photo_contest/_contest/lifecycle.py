# Area: Contest
"""
photo_contest._contest.lifecycle — Participant Lifecycle Machine
================================================================

Implements the state machine that tracks a participant's standing.
Every standing accepts both ADVANCE and REJECT; transitions that
have no effect map a standing onto itself.
"""

import logging
from typing import Dict

from .enums import Standing, LifecycleAction

logger = logging.getLogger("photo_contest.contest.lifecycle")


# Transition table: {current_standing: {action: next_standing}}
TRANSITIONS: Dict[Standing, Dict[LifecycleAction, Standing]] = {
    Standing.INITIAL: {
        LifecycleAction.ADVANCE: Standing.REGISTERED,
        LifecycleAction.REJECT: Standing.INITIAL,
    },
    Standing.REGISTERED: {
        LifecycleAction.ADVANCE: Standing.SUBMITTED,
        LifecycleAction.REJECT: Standing.FAILED,
    },
    Standing.SUBMITTED: {
        LifecycleAction.ADVANCE: Standing.PROMOTED,
        LifecycleAction.REJECT: Standing.FAILED,
    },
    Standing.PROMOTED: {
        LifecycleAction.ADVANCE: Standing.WINNER,
        LifecycleAction.REJECT: Standing.FAILED,
    },
    Standing.WINNER: {
        LifecycleAction.ADVANCE: Standing.INITIAL,
        LifecycleAction.REJECT: Standing.WINNER,
    },
    Standing.FAILED: {
        LifecycleAction.ADVANCE: Standing.INITIAL,
        LifecycleAction.REJECT: Standing.FAILED,
    },
}


def next_standing(standing: Standing, action: LifecycleAction) -> Standing:
    """Look up the standing reached from `standing` by `action`."""
    return TRANSITIONS[standing][action]


class LifecycleMachine:
    """
    State machine for a participant's standing.

    Attributes:
        current_standing: The participant's current standing
    """

    def __init__(self):
        """Initialize the machine in INITIAL."""
        self.current_standing = Standing.INITIAL

    def transition(self, action: LifecycleAction) -> Standing:
        """
        Apply an action to the current standing.

        Args:
            action: ADVANCE or REJECT

        Returns:
            The standing after the transition
        """
        previous = self.current_standing
        self.current_standing = next_standing(previous, action)
        if self.current_standing != previous:
            logger.debug(
                f"{action.value}: {previous.value} -> {self.current_standing.value}"
            )
        return self.current_standing

    def advance(self) -> Standing:
        """Move forward, or recover to INITIAL from WINNER/FAILED."""
        return self.transition(LifecycleAction.ADVANCE)

    def reject(self) -> Standing:
        """Fail the current participation; no-op where already settled."""
        return self.transition(LifecycleAction.REJECT)
