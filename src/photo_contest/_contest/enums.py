# Area: Contest
"""
photo_contest._contest.enums — Contest State Machine Enums
==========================================================

Defines the phases of a contest, the standings of a participant
and the actions that drive a participant's lifecycle.
"""

from enum import Enum


class ContestPhase(Enum):
    """
    Phases of a contest.

    Phase transitions (forward only, one step at a time):
    APPLICATION -> REVIEW (application deadline)
    REVIEW -> VOTE (duplicate check finished)
    VOTE -> AWARDING (ratings collected)
    AWARDING -> CLOSED (winners announced)
    CLOSED is terminal.
    """
    APPLICATION = "APPLICATION"
    REVIEW = "REVIEW"
    VOTE = "VOTE"
    AWARDING = "AWARDING"
    CLOSED = "CLOSED"


class Standing(Enum):
    """
    Standings of a participant within a contest.

    State transitions:
    INITIAL -> REGISTERED (on ADVANCE)
    REGISTERED -> SUBMITTED (on ADVANCE)
    SUBMITTED -> PROMOTED (on ADVANCE)
    PROMOTED -> WINNER (on ADVANCE)
    WINNER -> INITIAL (on ADVANCE)
    FAILED -> INITIAL (on ADVANCE)
    REGISTERED, SUBMITTED, PROMOTED -> FAILED (on REJECT)
    """
    INITIAL = "INITIAL"
    REGISTERED = "REGISTERED"
    SUBMITTED = "SUBMITTED"
    PROMOTED = "PROMOTED"
    WINNER = "WINNER"
    FAILED = "FAILED"


class LifecycleAction(Enum):
    """
    Actions that trigger participant standing transitions.

    Every standing accepts both actions:
    - ADVANCE: forward progress, or recovery back to INITIAL
    - REJECT: failure; absorbed by INITIAL, WINNER and FAILED
    """
    ADVANCE = "ADVANCE"
    REJECT = "REJECT"

