"""
photo_contest — Photo Contest Engine
====================================

Simulates photo contests: an organizer moves a contest through its
phases and every registered photographer reacts to each phase change.

Quick Start:
    from photo_contest import (
        ContestOrganizer, Participant, ParticipantIdentity, ScriptedRatingProvider,
    )

    organizer = ContestOrganizer(rating_provider=ScriptedRatingProvider({"Anna": "5"}))
    contest = organizer.create_contest("Snakes")
    anna = Participant(ParticipantIdentity(name="Anna", email="anna@mail.ru"))
    anna.register(contest)
    anna.submit_artifact("Morning viper")
    organizer.close_application_session(contest)
    organizer.review_session(contest)
    organizer.voting_session(contest)
    organizer.choose_winner(contest)

Scripted runs:
    from photo_contest import DEMO_SCENARIO, run_scenario
    summary = run_scenario(DEMO_SCENARIO)
"""

from ._contest import (
    ContestPhase,
    Standing,
    LifecycleAction,
    Contest,
    Participant,
    ContestOrganizer,
)
from ._shared import StatusKind, StatusReporter, setup_logging
from .config import ContestSettings, load_settings
from .errors import (
    PhotoContestError,
    IllegalPhaseError,
    SubscriptionError,
    ConfigurationError,
)
from .rating_providers import RatingProvider, ConsoleRatingProvider, ScriptedRatingProvider
from .scenario import Scenario, ScenarioParticipant, ContestSummary, DEMO_SCENARIO, run_scenario
from .types import ParticipantIdentity

__all__ = [
    # Engine
    "ContestPhase",
    "Standing",
    "LifecycleAction",
    "Contest",
    "Participant",
    "ContestOrganizer",
    # Collaborators
    "ParticipantIdentity",
    "RatingProvider",
    "ConsoleRatingProvider",
    "ScriptedRatingProvider",
    "StatusKind",
    "StatusReporter",
    # Runner
    "ContestSettings",
    "load_settings",
    "setup_logging",
    "Scenario",
    "ScenarioParticipant",
    "ContestSummary",
    "DEMO_SCENARIO",
    "run_scenario",
    # Errors
    "PhotoContestError",
    "IllegalPhaseError",
    "SubscriptionError",
    "ConfigurationError",
]
__version__ = "1.0.0"
