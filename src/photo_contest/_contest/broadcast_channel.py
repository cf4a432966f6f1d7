# Area: Contest
"""
photo_contest._contest.broadcast_channel — Phase Broadcast Channel
==================================================================

Holds the ordered subscribers of one contest and delivers phase
notifications to each of them, synchronously, in subscription order.
"""

import logging
from typing import List, Protocol, Tuple

from .enums import ContestPhase
from ..errors import SubscriptionError

logger = logging.getLogger("photo_contest.contest.broadcast")


class Subscriber(Protocol):
    """Protocol for objects that receive phase notifications."""

    name: str

    def notify(self, phase: ContestPhase) -> None:
        """React to the contest entering `phase`."""
        ...


class BroadcastChannel:
    """
    Append-only, ordered list of subscribers.

    The list cannot change while a broadcast is being delivered.

    Usage:
        channel = BroadcastChannel()
        channel.subscribe(participant)
        channel.broadcast(ContestPhase.REVIEW)
    """

    def __init__(self):
        """Initialize channel with no subscribers."""
        self._subscribers: List[Subscriber] = []
        self._broadcasting = False
        self._current_phase = ContestPhase.APPLICATION

    @property
    def subscribers(self) -> Tuple[Subscriber, ...]:
        return tuple(self._subscribers)

    @property
    def is_broadcasting(self) -> bool:
        return self._broadcasting

    def __len__(self) -> int:
        return len(self._subscribers)

    def __contains__(self, subscriber: object) -> bool:
        return any(s is subscriber for s in self._subscribers)

    def subscribe(self, subscriber: Subscriber) -> None:
        """
        Append a subscriber.

        Args:
            subscriber: The subscriber to append

        Raises:
            SubscriptionError: If called while a broadcast is in progress
        """
        if self._broadcasting:
            raise SubscriptionError(subscriber.name, self._current_phase)
        self._subscribers.append(subscriber)
        logger.debug(f"Subscribed {subscriber.name} (#{len(self._subscribers)})")

    def broadcast(self, phase: ContestPhase) -> int:
        """
        Notify every subscriber of `phase` in subscription order.

        Args:
            phase: The phase to deliver

        Returns:
            Number of subscribers notified
        """
        logger.info(f"Broadcasting {phase.value} to {len(self._subscribers)} subscribers")
        self._broadcasting = True
        self._current_phase = phase
        try:
            for subscriber in self._subscribers:
                subscriber.notify(phase)
        finally:
            self._broadcasting = False
        return len(self._subscribers)
