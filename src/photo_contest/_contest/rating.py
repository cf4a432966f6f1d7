# Area: Contest
"""
photo_contest._contest.rating — Rating Collection and Winner Selection
======================================================================

Parses raw ratings (optional sign, ASCII digits), tracks the highest
rating of a voting session and settles promoted participants into
winners and failures.
"""

import logging
import re
from typing import List, Sequence

from .enums import Standing
from .participant import Participant
from .._shared.status_reporter import StatusReporter
from ..rating_providers import RatingProvider

logger = logging.getLogger("photo_contest.contest.rating")

FALLBACK_RATING = 0

# Optional sign followed by ASCII digits only
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_rating(raw: str, artifact: str, reporter: StatusReporter) -> int:
    """
    Parse a raw rating, falling back to 0 when it is not an integer.

    Args:
        raw: Text supplied by the rating provider
        artifact: Photo being rated, used in the status line
        reporter: Sink for the fallback notice

    Returns:
        The parsed rating, or FALLBACK_RATING
    """
    if isinstance(raw, str) and INTEGER_PATTERN.fullmatch(raw):
        return int(raw)
    logger.warning(f"Unparseable rating {raw!r} for {artifact}")
    reporter.recovered(
        f"Accepted only integers. Rating for {artifact} is {FALLBACK_RATING}."
    )
    return FALLBACK_RATING


def promoted(subscribers: Sequence[Participant]) -> List[Participant]:
    return [p for p in subscribers if p.standing == Standing.PROMOTED]


def collect_ratings(
    subscribers: Sequence[Participant],
    provider: RatingProvider,
    reporter: StatusReporter,
) -> int:
    """
    Record a rating for every PROMOTED participant.

    Returns:
        The highest rating recorded, 0 if no rating was above 0
    """
    best = 0
    for participant in promoted(subscribers):
        raw = provider.request_rating(participant)
        participant.rating = parse_rating(raw, participant.artifact, reporter)
        logger.debug(f"{participant.name} rated {participant.rating}")
        if participant.rating > best:
            best = participant.rating
    return best


def select_winners(subscribers: Sequence[Participant], winning_rating: int) -> List[Participant]:
    """
    Advance PROMOTED participants with the winning rating, reject the rest.

    Returns:
        The participants that became WINNER
    """
    winners = []
    for participant in promoted(subscribers):
        if participant.rating == winning_rating:
            participant.advance()
            winners.append(participant)
        else:
            participant.reject()
    logger.info(f"{len(winners)} winner(s) with rating {winning_rating}")
    return winners


def reject_promoted(subscribers: Sequence[Participant]) -> int:
    """Reject every PROMOTED participant; used when a contest has no winner."""
    rejected = promoted(subscribers)
    for participant in rejected:
        participant.reject()
    logger.info(f"No winner, {len(rejected)} promoted participant(s) rejected")
    return len(rejected)
