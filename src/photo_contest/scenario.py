"""
photo_contest.scenario — Scripted contest runs
==============================================

A Scenario describes a whole contest up front: who shows up, what they
submit and how their photos are rated. run_scenario() plays it through
every session and returns a ContestSummary.

Scenario JSON layout:

    {
        "topic": "Snakes",
        "participants": [
            {"name": "Georgy", "contact": "g@mail.ru", "artifact": "sunset", "rating": "5"},
            {"name": "Fedor", "phone": "89224224421", "late": true}
        ]
    }
"""

from __future__ import annotations
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, ValidationError, model_validator

from ._contest.enums import ContestPhase, Standing
from ._contest.organizer import ContestOrganizer
from ._contest.participant import Participant
from ._shared.status_reporter import StatusReporter
from .errors import ConfigurationError
from .rating_providers import ScriptedRatingProvider
from .types import ParticipantIdentity

logger = logging.getLogger("photo_contest.scenario")


class ScenarioParticipant(BaseModel):
    """One photographer in a scenario.

    Fields
    ------
    name : str
        Display name.
    contact : str or None
        Single contact, routed to email or phone.
    email, phone : str or None
        Explicit contacts; ignored when `contact` is given.
    artifact : str or None
        Photo to submit; None means the participant never submits.
    registers : bool
        Whether the participant registers at all.
    late : bool
        Registers and submits only after the application deadline.
    rating : str or None
        Raw rating answer given during voting.
    """

    name: str = Field(min_length=1)
    contact: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    artifact: Optional[str] = None
    registers: bool = True
    late: bool = False
    rating: Optional[str] = None

    def identity(self) -> ParticipantIdentity:
        if self.contact:
            return ParticipantIdentity.from_contact(self.name, self.contact)
        return ParticipantIdentity(name=self.name, email=self.email, phone=self.phone)


class Scenario(BaseModel):
    """A full contest script."""

    topic: str = Field(min_length=1)
    participants: List[ScenarioParticipant] = Field(default_factory=list)

    @model_validator(mode="after")
    def _unique_names(self) -> "Scenario":
        names = [p.name for p in self.participants]
        if len(names) != len(set(names)):
            raise ValueError("participant names must be unique")
        return self

    def ratings(self) -> Dict[str, str]:
        return {p.name: p.rating for p in self.participants if p.rating is not None}


@dataclass
class ContestSummary:
    """Outcome of a scenario run."""

    topic: str
    final_phase: ContestPhase
    winning_rating: int
    winners: List[str]
    standings: Dict[str, Standing]
    status_lines: List[str] = field(default_factory=list)


def load_scenario(path: str) -> Scenario:
    """
    Read and validate a scenario JSON file.

    Raises:
        ConfigurationError: If the file is unreadable or invalid
    """
    try:
        with open(Path(path), encoding="utf-8") as f:
            data = json.load(f)
        return Scenario.model_validate(data)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(path, [str(e)], cause=e) from e
    except ValidationError as e:
        errors = [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()]
        raise ConfigurationError(path, errors, cause=e) from e


def run_scenario(
    scenario: Scenario,
    organizer: Optional[ContestOrganizer] = None,
    reporter: Optional[StatusReporter] = None,
) -> ContestSummary:
    """
    Play a scenario through every contest session.

    Args:
        scenario: The contest script
        organizer: Organizer to use; by default one with scripted ratings
        reporter: Sink for status lines when building the default organizer

    Returns:
        ContestSummary of the finished contest
    """
    if organizer is None:
        organizer = ContestOrganizer(
            reporter=reporter or StatusReporter(),
            rating_provider=ScriptedRatingProvider(scenario.ratings()),
        )
    reporter = organizer.reporter
    first_line = len(reporter.history)
    logger.info(f"Running scenario '{scenario.topic}' with {len(scenario.participants)} participants")

    contest = organizer.create_contest(scenario.topic)
    cast = [
        (entry, Participant(entry.identity(), reporter=reporter))
        for entry in scenario.participants
    ]

    def show_up(entry: ScenarioParticipant, participant: Participant) -> None:
        if entry.registers:
            participant.register(contest)
        if entry.artifact is not None:
            participant.submit_artifact(entry.artifact)

    for entry, participant in cast:
        if not entry.late:
            show_up(entry, participant)

    organizer.close_application_session(contest)

    for entry, participant in cast:
        if entry.late:
            show_up(entry, participant)

    organizer.review_session(contest)
    organizer.voting_session(contest)
    winners = organizer.choose_winner(contest)

    return ContestSummary(
        topic=contest.topic,
        final_phase=contest.phase,
        winning_rating=contest.winning_rating,
        winners=[w.name for w in winners],
        standings={p.name: p.standing for _, p in cast},
        status_lines=[s.message for s in reporter.history[first_line:]],
    )


DEMO_SCENARIO = Scenario(
    topic="Snakes",
    participants=[
        ScenarioParticipant(name="Anna", contact="anna@mail.ru", artifact="Morning viper", rating="7"),
        ScenarioParticipant(name="Fedor", contact="89224224421", artifact="Grass snake", rating="9"),
        ScenarioParticipant(name="Petr I", email="velikiy@russia.rf", phone="00000000000",
                            artifact="Copied photo", rating="10"),
        ScenarioParticipant(name="Olga", contact="olga@mail.ru", artifact="Copied photo", rating="10"),
        ScenarioParticipant(name="Georgy", contact="g@mail.ru"),
        ScenarioParticipant(name="Maria", contact="maria@mail.ru", artifact="Python at dusk",
                            rating="lots"),
        ScenarioParticipant(name="Ivan", contact="ivan@mail.ru", artifact="Too late", late=True),
    ],
)
