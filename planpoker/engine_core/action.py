"""
Action System - Actions, effects, and transitions.

Actions represent:
1. User intents (register, choose a card, reveal, clear)
2. Server input (a new status snapshot)
3. Follow-ups (a failed registration, the delayed clear unlock)

All state changes flow through actions. Side effects are never performed
by the reducer; it returns them as Effect values for the runtime to execute.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

from .state import LocalState, ServerSnapshot


class ActionType(Enum):
    """Types of actions in the system."""
    # User intents
    REGISTER = "register"
    CHOOSE_CARD = "choose_card"
    REVEAL = "reveal"
    CLEAR = "clear"

    # Server input
    SNAPSHOT = "snapshot"

    # Follow-ups
    REGISTER_FAILED = "register_failed"
    UNLOCK_CLEAR = "unlock_clear"


@dataclass(frozen=True)
class Action:
    """
    A complete action to be applied to the local state.

    payload holds the action parameter: a name, a card token,
    a ServerSnapshot or an error message.
    """
    action_type: ActionType
    payload: Any = None

    @classmethod
    def register(cls, name: str) -> Action:
        return cls(ActionType.REGISTER, name)

    @classmethod
    def choose_card(cls, value: str) -> Action:
        return cls(ActionType.CHOOSE_CARD, value)

    @classmethod
    def reveal(cls) -> Action:
        return cls(ActionType.REVEAL)

    @classmethod
    def clear(cls) -> Action:
        return cls(ActionType.CLEAR)

    @classmethod
    def snapshot(cls, snapshot: ServerSnapshot) -> Action:
        return cls(ActionType.SNAPSHOT, snapshot)

    @classmethod
    def register_failed(cls, message: str) -> Action:
        return cls(ActionType.REGISTER_FAILED, message)

    @classmethod
    def unlock_clear(cls) -> Action:
        return cls(ActionType.UNLOCK_CLEAR)


class TransportOperation(Enum):
    """Mutating server calls an effect can request."""
    REGISTER = "register"
    CHOOSE = "choose"
    REVEAL = "reveal"
    CLEAR = "clear"


@dataclass(frozen=True)
class CallTransport:
    """Issue one mutating server call. Fire-and-forget."""
    operation: TransportOperation
    argument: str | None = None


@dataclass(frozen=True)
class ScheduleAction:
    """
    Dispatch an action after a wall-clock delay (seconds).

    The action is applied to whatever state is current when the delay
    elapses, not to the state at scheduling time.
    """
    delay: float
    action: Action


Effect = Union[CallTransport, ScheduleAction]


@dataclass(frozen=True)
class Transition:
    """
    Result of applying an action.

    Contains:
    - The complete next state
    - Effects for the runtime to execute
    - Why the action was ignored, if it was
    """
    state: LocalState
    effects: tuple[Effect, ...] = field(default_factory=tuple)
    rejected: str | None = None

    @classmethod
    def unchanged(cls, state: LocalState, reason: str | None = None) -> Transition:
        """A no-op transition."""
        return cls(state=state, rejected=reason)

    @property
    def accepted(self) -> bool:
        return self.rejected is None
