# Area: Contest
"""Organizer — drives contest phases and runs the per-phase sessions."""
import logging
from typing import List, Optional
from .enums import ContestPhase
from .contest import Contest
from .participant import Participant
from .duplicate_detector import mark_duplicates
from .rating import collect_ratings, reject_promoted, select_winners
from .._shared.status_reporter import StatusReporter, get_status_reporter
from ..errors import IllegalPhaseError
from ..rating_providers import ConsoleRatingProvider, RatingProvider

logger = logging.getLogger("photo_contest.contest.organizer")

class ContestOrganizer:
    def __init__(self, reporter: Optional[StatusReporter] = None,
                 rating_provider: Optional[RatingProvider] = None):
        self.reporter = reporter or get_status_reporter()
        self.rating_provider = rating_provider or ConsoleRatingProvider()
        self.contests: List[Contest] = []
    def create_contest(self, topic: str) -> Contest:
        contest = Contest(topic, reporter=self.reporter)
        self.contests.append(contest)
        logger.info("Created contest '%s'", topic)
        self.reporter.notice(f"New contest about '{topic}' is opened.")
        return contest
    def _reject_session(self, error: IllegalPhaseError) -> bool:
        logger.warning("Session rejected: %s", error.to_log_context())
        self.reporter.rejected(str(error) + ".")
        return False
    def close_application_session(self, contest: Contest) -> bool:
        try:
            contest.require_phase(ContestPhase.APPLICATION, "application session close")
        except IllegalPhaseError as e:
            return self._reject_session(e)
        contest.advance()
        contest.broadcast()
        return True
    def review_session(self, contest: Contest) -> bool:
        try:
            contest.require_phase(ContestPhase.REVIEW, "review session")
        except IllegalPhaseError as e:
            return self._reject_session(e)
        mark_duplicates(contest.subscribers)
        contest.advance()
        contest.broadcast()
        return True
    def voting_session(self, contest: Contest) -> bool:
        try:
            contest.require_phase(ContestPhase.VOTE, "voting session")
        except IllegalPhaseError as e:
            return self._reject_session(e)
        self.reporter.notice("Now we will vote to choose the best one!")
        contest.winning_rating = 0
        contest.winning_rating = collect_ratings(
            contest.subscribers, self.rating_provider, self.reporter)
        logger.info("Winning rating for '%s': %d", contest.topic, contest.winning_rating)
        contest.advance()
        contest.broadcast()
        return True
    def choose_winner(self, contest: Contest) -> List[Participant]:
        """Settle promoted participants, announce winners and close the contest."""
        try:
            contest.require_phase(ContestPhase.AWARDING, "winner selection")
        except IllegalPhaseError as e:
            self._reject_session(e)
            return []
        if contest.winning_rating == 0:
            logger.info("No positive rating in '%s'", contest.topic)
            self.reporter.notice(f"Contest '{contest.topic}' has no winner.")
            reject_promoted(contest.subscribers)
            contest.broadcast()
            contest.advance()
            return []
        winners = select_winners(contest.subscribers, contest.winning_rating)
        contest.broadcast()
        contest.advance()
        return winners
