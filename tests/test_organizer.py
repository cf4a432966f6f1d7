# Area: Contest Tests
"""Tests for ContestOrganizer sessions."""

import pytest
from unittest.mock import patch

from photo_contest._contest.organizer import ContestOrganizer
from photo_contest._contest.participant import Participant
from photo_contest._contest.enums import ContestPhase, Standing
from photo_contest._shared.status_reporter import StatusReporter, StatusKind
from photo_contest.rating_providers import ScriptedRatingProvider
from photo_contest.types import ParticipantIdentity


def create_organizer(ratings=None):
    reporter = StatusReporter(echo=False)
    organizer = ContestOrganizer(
        reporter=reporter,
        rating_provider=ScriptedRatingProvider(ratings or {}),
    )
    return organizer, reporter


def enter(contest, reporter, name, artifact=None):
    p = Participant(ParticipantIdentity(name=name), reporter=reporter)
    p.register(contest)
    if artifact is not None:
        p.submit_artifact(artifact)
    return p


class TestCreateContest:
    """Tests for create_contest()."""

    def test_creates_and_owns_contest(self):
        organizer, reporter = create_organizer()
        contest = organizer.create_contest("Snakes")
        assert contest.phase == ContestPhase.APPLICATION
        assert organizer.contests == [contest]
        assert reporter.messages() == ["New contest about 'Snakes' is opened."]

    def test_contests_are_independent(self):
        organizer, _ = create_organizer()
        first = organizer.create_contest("One")
        organizer.close_application_session(first)
        second = organizer.create_contest("Two")
        assert second.phase == ContestPhase.APPLICATION
        assert first.phase == ContestPhase.REVIEW


class TestCloseApplicationSession:
    """Tests for close_application_session()."""

    def test_closes_and_fails_missing_photos(self):
        """Test that participants without a photo fail at the deadline."""
        organizer, reporter = create_organizer()
        contest = organizer.create_contest("Snakes")
        with_photo = enter(contest, reporter, "a", "x")
        without = enter(contest, reporter, "b")

        assert organizer.close_application_session(contest) is True

        assert contest.phase == ContestPhase.REVIEW
        assert with_photo.standing == Standing.SUBMITTED
        assert without.standing == Standing.FAILED

    def test_rejected_outside_application(self):
        """Test that closing twice is a reported no-op."""
        organizer, reporter = create_organizer()
        contest = organizer.create_contest("Snakes")
        organizer.close_application_session(contest)
        reporter.clear()

        with patch("photo_contest._contest.organizer.logger") as mock_logger:
            assert organizer.close_application_session(contest) is False
            mock_logger.warning.assert_called_once()

        assert contest.phase == ContestPhase.REVIEW
        assert len(reporter.messages(StatusKind.REJECTED)) == 1
        assert len(reporter.history) == 1


class TestReviewAndVote:
    """Tests for review_session() and the VOTE broadcast."""

    def test_shared_artifact_fails_both(self):
        """Test two participants submitting "x" both end FAILED."""
        organizer, reporter = create_organizer()
        contest = organizer.create_contest("Snakes")
        a = enter(contest, reporter, "A", "x")
        b = enter(contest, reporter, "B", "x")
        organizer.close_application_session(contest)

        assert organizer.review_session(contest) is True

        assert a.eligible is False and b.eligible is False
        assert a.standing == Standing.FAILED
        assert b.standing == Standing.FAILED
        assert contest.phase == ContestPhase.VOTE

    def test_unique_artifact_promoted(self):
        organizer, reporter = create_organizer()
        contest = organizer.create_contest("Snakes")
        a = enter(contest, reporter, "A", "x")
        organizer.close_application_session(contest)
        organizer.review_session(contest)
        assert a.eligible is True
        assert a.standing == Standing.PROMOTED

    def test_review_rejected_in_application(self):
        organizer, _ = create_organizer()
        contest = organizer.create_contest("Snakes")
        assert organizer.review_session(contest) is False
        assert contest.phase == ContestPhase.APPLICATION


class TestVotingSession:
    """Tests for voting_session()."""

    def setup_voting(self, ratings, artifacts):
        organizer, reporter = create_organizer(ratings)
        contest = organizer.create_contest("Snakes")
        people = [enter(contest, reporter, name, art) for name, art in artifacts]
        organizer.close_application_session(contest)
        organizer.review_session(contest)
        return organizer, reporter, contest, people

    def test_records_ratings_and_max(self):
        organizer, reporter, contest, people = self.setup_voting(
            {"a": "3", "b": "5"}, [("a", "pa"), ("b", "pb")])

        assert organizer.voting_session(contest) is True

        assert contest.winning_rating == 5
        assert [p.rating for p in people] == [3, 5]
        assert contest.phase == ContestPhase.AWARDING
        assert "Notification for a: Your rate is 3." in reporter.messages()

    def test_winning_rating_reset_each_session(self):
        """Test that a stale winning rating does not survive the session."""
        organizer, _, contest, _ = self.setup_voting({"a": "2"}, [("a", "pa")])
        contest.winning_rating = 99
        organizer.voting_session(contest)
        assert contest.winning_rating == 2

    def test_parse_failure_rates_zero(self):
        organizer, reporter, contest, people = self.setup_voting({"a": "many"}, [("a", "pa")])
        organizer.voting_session(contest)
        assert people[0].rating == 0
        assert reporter.messages(StatusKind.RECOVERED) == [
            "Accepted only integers. Rating for pa is 0."
        ]

    def test_failed_participants_reset_at_awarding(self):
        """Test that the AWARDING broadcast returns FAILED participants to INITIAL."""
        organizer, _, contest, people = self.setup_voting({}, [("a", "x"), ("b", "x")])
        organizer.voting_session(contest)
        assert [p.standing for p in people] == [Standing.INITIAL, Standing.INITIAL]


class TestChooseWinner:
    """Tests for choose_winner()."""

    def run_to_awarding(self, ratings):
        organizer, reporter = create_organizer(ratings)
        contest = organizer.create_contest("Snakes")
        people = [enter(contest, reporter, name, f"photo-{name}") for name in ratings]
        organizer.close_application_session(contest)
        organizer.review_session(contest)
        organizer.voting_session(contest)
        return organizer, reporter, contest, people

    def test_ties_share_the_win(self):
        """Test ratings [3, 5, 5]: two winners announced, the 3 fails."""
        organizer, reporter, contest, people = self.run_to_awarding({"a": "3", "b": "5", "c": "5"})
        assert contest.winning_rating == 5

        winners = organizer.choose_winner(contest)

        assert [w.name for w in winners] == ["b", "c"]
        assert [p.standing for p in people] == [Standing.INITIAL, Standing.INITIAL, Standing.INITIAL]
        assert reporter.messages(StatusKind.WINNER) == ["b is the winner!", "c is the winner!"]
        assert contest.phase == ContestPhase.CLOSED

    def test_winner_standings_before_awarding_broadcast(self):
        """Test the settled standings right after winner selection."""
        organizer, _, contest, people = self.run_to_awarding({"a": "3", "b": "5", "c": "5"})
        seen = {}
        original_broadcast = contest.broadcast

        def capture():
            seen.update({p.name: p.standing for p in people})
            return original_broadcast()

        contest.broadcast = capture
        organizer.choose_winner(contest)
        assert seen == {"a": Standing.FAILED, "b": Standing.WINNER, "c": Standing.WINNER}

    def test_no_positive_rating_means_no_winner(self):
        """Test that nobody wins when every rating is 0."""
        organizer, reporter, contest, people = self.run_to_awarding({"a": "0", "b": "nope"})
        winners = organizer.choose_winner(contest)
        assert winners == []
        assert all(p.standing != Standing.WINNER for p in people)
        assert all(p.standing == Standing.INITIAL for p in people)
        assert "Contest 'Snakes' has no winner." in reporter.messages()
        assert reporter.messages(StatusKind.WINNER) == []
        assert contest.phase == ContestPhase.CLOSED

    def test_participant_rejoins_after_no_winner(self):
        """Test that a no-winner contest returns promoted participants to the cycle."""
        organizer, reporter, contest, people = self.run_to_awarding({"a": "0"})
        organizer.choose_winner(contest)
        participant = people[0]
        assert participant.standing == Standing.INITIAL
        assert "The contest is over for you. You can join the next one." in reporter.messages()

        nxt = organizer.create_contest("Next")
        assert participant.register(nxt) is True
        assert participant.standing == Standing.REGISTERED
        assert participant.submit_artifact("fresh") is True
        organizer.close_application_session(nxt)
        organizer.review_session(nxt)
        organizer.voting_session(nxt)

        assert organizer.choose_winner(nxt) == []
        assert reporter.messages(StatusKind.WINNER) == []
        assert participant.standing == Standing.INITIAL

    def test_nobody_promoted_means_no_winner(self):
        organizer, reporter = create_organizer()
        contest = organizer.create_contest("Empty")
        organizer.close_application_session(contest)
        organizer.review_session(contest)
        organizer.voting_session(contest)
        assert organizer.choose_winner(contest) == []
        assert "Contest 'Empty' has no winner." in reporter.messages()

    def test_rejected_before_awarding(self):
        organizer, _ = create_organizer()
        contest = organizer.create_contest("Snakes")
        assert organizer.choose_winner(contest) == []
        assert contest.phase == ContestPhase.APPLICATION

    def test_winner_can_join_next_contest(self):
        """Test that the lifecycle is a cycle across contests."""
        organizer, reporter, contest, people = self.run_to_awarding({"a": "4"})
        organizer.choose_winner(contest)
        winner = people[0]
        assert winner.standing == Standing.INITIAL

        nxt = organizer.create_contest("Next")
        assert winner.register(nxt) is True
        assert winner.standing == Standing.REGISTERED
