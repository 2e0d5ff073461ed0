"""
Session phases and intent guards.

Phases are observed, never commanded: they are derived from the
last reconciled state, so a phase only changes once a snapshot
confirms it.
"""

from __future__ import annotations
from enum import Enum

from .state import LocalState


class SessionPhase(Enum):
    """Observable phase of the session for this client."""
    UNREGISTERED = "unregistered"
    VOTING = "voting"  # Registered, no result yet
    REVEALED = "revealed"  # Registered, result published


def phase_of(state: LocalState) -> SessionPhase:
    """Derive the session phase from local state."""
    if not state.is_registered:
        return SessionPhase.UNREGISTERED
    if state.is_revealed:
        return SessionPhase.REVEALED
    return SessionPhase.VOTING


def can_choose(state: LocalState) -> bool:
    """The card grid is interactive only while voting."""
    return phase_of(state) == SessionPhase.VOTING


def can_reveal(state: LocalState) -> bool:
    """Reveal needs an open round with at least one card on the table."""
    return not state.is_revealed and state.any_card_chosen


def can_clear(state: LocalState) -> bool:
    return state.is_revealed and not state.clear_button_disabled
