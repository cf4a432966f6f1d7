# Area: Contest
"""
photo_contest._contest.duplicate_detector — Duplicate Submission Check
======================================================================

Pairwise comparison of submitted artifact identifiers. Two
participants sharing an identifier are both made ineligible.
Identifiers are compared for exact equality only.
"""

import logging
from typing import Sequence

from .enums import Standing
from .participant import Participant

logger = logging.getLogger("photo_contest.contest.duplicates")

# Standings whose artifacts take part in the comparison
COMPARED_STANDINGS = frozenset({Standing.SUBMITTED, Standing.PROMOTED})


def check_duplicates(participant: Participant, subscribers: Sequence[Participant]) -> bool:
    """
    Compare one participant's artifact against every other competitor.

    On the first match both participants are marked ineligible and the
    scan stops.

    Args:
        participant: The SUBMITTED participant to check
        subscribers: All subscribers of the contest

    Returns:
        True if the artifact is unique, False if a duplicate was found
    """
    for other in subscribers:
        if other is participant or other.standing not in COMPARED_STANDINGS:
            continue
        if other.artifact == participant.artifact:
            participant.eligible = False
            other.eligible = False
            logger.debug(
                f"Duplicate artifact {participant.artifact!r}: "
                f"{participant.name} / {other.name}"
            )
            return False
    return True


def mark_duplicates(subscribers: Sequence[Participant]) -> int:
    """
    Run the duplicate check for every SUBMITTED subscriber.

    Returns:
        Number of SUBMITTED subscribers whose artifact is not unique
    """
    duplicates = 0
    for participant in subscribers:
        if participant.standing != Standing.SUBMITTED:
            continue
        if not check_duplicates(participant, subscribers):
            duplicates += 1
    logger.info(f"Duplicate check: {duplicates} of {len(subscribers)} flagged")
    return duplicates
