# Area: Contest
"""
Contest engine - phase machine, participant lifecycle and sessions.

This package handles:
- Contest phase progression
- Participant standings and phase reactions
- Synchronous phase broadcasts
- Duplicate detection, rating collection and winner selection
"""

from .enums import ContestPhase, Standing, LifecycleAction
from .phase_machine import PhaseMachine
from .lifecycle import LifecycleMachine
from .broadcast_channel import BroadcastChannel
from .contest import Contest
from .participant import Participant
from .reactions import ReactionRouter
from .organizer import ContestOrganizer

__all__ = [
    "ContestPhase",
    "Standing",
    "LifecycleAction",
    "PhaseMachine",
    "LifecycleMachine",
    "BroadcastChannel",
    "Contest",
    "Participant",
    "ReactionRouter",
    "ContestOrganizer",
]
