"""
photo_contest.rating_providers — Sources of raw rating input
============================================================

The voting session asks a RatingProvider for one raw answer per
promoted participant. Providers only supply text; parsing and the
fallback to 0 happen in the engine.

    from photo_contest import ContestOrganizer, ScriptedRatingProvider

    ratings = ScriptedRatingProvider({"Fedor": "5", "Georgy": "3"})
    organizer = ContestOrganizer(rating_provider=ratings)
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable, Dict, Optional

if TYPE_CHECKING:
    from ._contest.participant import Participant


class RatingProvider(ABC):
    """
    Abstract source of ratings.

    Subclass this and implement request_rating(). The organizer calls it
    once per PROMOTED participant during the voting session.
    """

    @abstractmethod
    def request_rating(self, participant: "Participant") -> str:
        """
        Return the raw rating for a participant's photo.

        Parameters
        ----------
        participant : Participant
            The promoted participant being rated. `participant.artifact`
            identifies the photo.

        Returns
        -------
        str
            Raw text, e.g. "5". Anything that is not an integer is
            rated 0 by the engine.
        """
        ...


class ConsoleRatingProvider(RatingProvider):
    """Asks for each rating on the terminal."""

    def __init__(self, read: Callable[[str], str] = input):
        self._read = read

    def request_rating(self, participant: "Participant") -> str:
        return self._read(f"How many likes does {participant.artifact} have? ")


class ScriptedRatingProvider(RatingProvider):
    """
    Replays pre-recorded ratings.

    Answers are looked up by participant name first, then by artifact;
    anything not recorded gets `default`.
    """

    def __init__(self, answers: Optional[Dict[str, str]] = None, default: str = "0"):
        self._answers = dict(answers or {})
        self._default = default

    def request_rating(self, participant: "Participant") -> str:
        if participant.name in self._answers:
            return self._answers[participant.name]
        return self._answers.get(participant.artifact or "", self._default)
