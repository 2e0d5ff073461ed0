"""
Engine Core - Deterministic client state management.

The engine is the pure part of the client that:
1. Holds LocalState
2. Reconciles server snapshots with optimistic local edits
3. Guards user intents by session phase
4. Returns side effects as data for the runtime to execute
"""

from .state import CARD_VALUES, CARD_TITLES, LocalState, Participant, ServerSnapshot, normalize_card
from .action import (
    Action,
    ActionType,
    CallTransport,
    Effect,
    ScheduleAction,
    Transition,
    TransportOperation,
)
from .reconciler import CLEAR_UNLOCK_DELAY, reconcile
from .reducer import Reducer, apply_action
from .session import SessionPhase, can_choose, can_clear, can_reveal, phase_of

__all__ = [
    "CARD_VALUES",
    "CARD_TITLES",
    "LocalState",
    "Participant",
    "ServerSnapshot",
    "normalize_card",
    "Action",
    "ActionType",
    "CallTransport",
    "Effect",
    "ScheduleAction",
    "Transition",
    "TransportOperation",
    "CLEAR_UNLOCK_DELAY",
    "reconcile",
    "Reducer",
    "apply_action",
    "SessionPhase",
    "can_choose",
    "can_clear",
    "can_reveal",
    "phase_of",
]
