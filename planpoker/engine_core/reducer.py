"""
Reducer - Applies actions to local state.

The reducer is the single point of state change.
All state changes must go through apply_action().

Design principles:
- Pure function: (state, action) -> Transition(next_state, effects)
- Guards user intents with the session phase rules
- Never assumes a mutating call succeeded; the next snapshot decides
- Delegates snapshots to the reconciler
"""

from __future__ import annotations
from dataclasses import dataclass
import logging

from .action import Action, ActionType, CallTransport, Transition, TransportOperation
from .reconciler import CLEAR_UNLOCK_DELAY, reconcile
from .session import can_choose, can_clear, can_reveal
from .state import LocalState, normalize_card

logger = logging.getLogger(__name__)


@dataclass
class Reducer:
    """
    Reducer applies actions to local state.

    Stateless - all state is in LocalState.
    """
    unlock_delay: float = CLEAR_UNLOCK_DELAY

    def apply(self, state: LocalState, action: Action) -> Transition:
        """
        Apply an action to the local state.

        Returns a Transition with the next state and any effects.
        """
        handler = self._get_handler(action.action_type)
        if not handler:
            raise ValueError(f"No handler for action type: {action.action_type}")

        transition = handler(state, action)
        if transition.rejected:
            logger.debug("%s ignored: %s", action.action_type.value, transition.rejected)
        return transition

    def _get_handler(self, action_type: ActionType):
        """Get the handler function for an action type."""
        handlers = {
            ActionType.REGISTER: self._handle_register,
            ActionType.CHOOSE_CARD: self._handle_choose_card,
            ActionType.REVEAL: self._handle_reveal,
            ActionType.CLEAR: self._handle_clear,
            ActionType.SNAPSHOT: self._handle_snapshot,
            ActionType.REGISTER_FAILED: self._handle_register_failed,
            ActionType.UNLOCK_CLEAR: self._handle_unlock_clear,
        }
        return handlers.get(action_type)

    def _handle_register(self, state: LocalState, action: Action) -> Transition:
        """
        Handle a registration request.

        Registration is confirmed only by a snapshot carrying our
        username. Until then the form is only marked pending, which also
        keeps a second submit from sending a duplicate call.
        """
        name = action.payload or ""
        if not name.strip():
            return Transition.unchanged(state, "empty name")
        if state.register_pending:
            return Transition.unchanged(state, "registration pending")

        return Transition(
            state=state._copy_with(register_pending=True),
            effects=(CallTransport(TransportOperation.REGISTER, name),),
        )

    def _handle_choose_card(self, state: LocalState, action: Action) -> Transition:
        """
        Handle a card pick.

        Optimistic: the selection is shown before the server confirms it.
        A later snapshot corrects it if the server disagrees.
        """
        value = normalize_card(action.payload)
        if value == state.selected_card:
            return Transition.unchanged(state, "card already selected")
        if not can_choose(state):
            return Transition.unchanged(state, "cards are not selectable")

        return Transition(
            state=state._copy_with(selected_card=value),
            effects=(CallTransport(TransportOperation.CHOOSE, value),),
        )

    def _handle_reveal(self, state: LocalState, action: Action) -> Transition:
        """Reveal is a shared event; the result arrives with a snapshot."""
        if not can_reveal(state):
            return Transition.unchanged(state, "no card to reveal")
        return Transition(state=state, effects=(CallTransport(TransportOperation.REVEAL),))

    def _handle_clear(self, state: LocalState, action: Action) -> Transition:
        if not can_clear(state):
            return Transition.unchanged(state, "clear is locked")
        return Transition(state=state, effects=(CallTransport(TransportOperation.CLEAR),))

    def _handle_snapshot(self, state: LocalState, action: Action) -> Transition:
        return reconcile(state, action.payload, unlock_delay=self.unlock_delay)

    def _handle_register_failed(self, state: LocalState, action: Action) -> Transition:
        return Transition(state=state._copy_with(
            register_error_message=action.payload,
            register_pending=False,
        ))

    def _handle_unlock_clear(self, state: LocalState, action: Action) -> Transition:
        # Unconditional: acts on whatever state is current when the timer fires
        return Transition(state=state._copy_with(clear_button_disabled=False))


def apply_action(state: LocalState, action: Action) -> Transition:
    """
    Convenience function to apply an action with default timings.

    Usage:
        transition = apply_action(state, Action.choose_card("5"))
        state = transition.state
    """
    return Reducer().apply(state, action)
