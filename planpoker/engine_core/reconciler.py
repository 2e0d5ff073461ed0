"""
State Reconciler - Merges a server snapshot into local state.

The reconciler is the bridge between the server (authoritative) and
the optimistic local state. It:

1. Mirrors counter, users, username and result from the snapshot
2. Keeps the optimistic card selection until a result supersedes it
3. Releases a pending registration once our username shows up
4. Locks the clear control on the transition that reveals a result
5. Schedules the unlock of that control

Key principle: the SERVER owns session state. The client only overlays
what the server has not caught up with yet.
"""

from __future__ import annotations

from .action import Action, ScheduleAction, Transition
from .state import LocalState, ServerSnapshot

# Seconds the clear control stays locked after a reveal
CLEAR_UNLOCK_DELAY = 1.0


def reconcile(
    prev: LocalState,
    snapshot: ServerSnapshot,
    unlock_delay: float = CLEAR_UNLOCK_DELAY,
) -> Transition:
    """
    Reconcile a snapshot with the previous local state.

    Pure: the only side effect is returned as a ScheduleAction, emitted
    at most once per reveal edge (result absent -> present).
    """
    just_revealed = prev.result is None and snapshot.result is not None

    state = prev._copy_with(
        counter=snapshot.counter,
        users=snapshot.users,
        username=snapshot.username,
        result=snapshot.result,
        # A reveal always supersedes a pending selection
        selected_card=None if snapshot.result is not None else prev.selected_card,
        clear_button_disabled=prev.clear_button_disabled or just_revealed,
        register_pending=prev.register_pending and snapshot.username is None,
    )

    if not just_revealed:
        return Transition(state=state)

    return Transition(
        state=state,
        effects=(ScheduleAction(delay=unlock_delay, action=Action.unlock_clear()),),
    )
