"""
Tests for the reconciler (snapshot merging).

Tests:
- Snapshot fields are mirrored
- Optimistic selection survives until a result supersedes it
- The clear lock and its single delayed unlock on the reveal edge
- Reconciling the same snapshot twice is a fixed point
"""

import pytest

from ..engine_core.action import ActionType, ScheduleAction
from ..engine_core.reconciler import CLEAR_UNLOCK_DELAY, reconcile
from ..engine_core.state import LocalState, Participant, ServerSnapshot


class TestMirroring:
    """Tests for copying server state."""

    def test_copies_snapshot_fields(self, alice_voted):
        """counter, users, username and result come from the snapshot."""
        transition = reconcile(LocalState(), alice_voted)

        assert transition.state.counter == 3
        assert transition.state.users == alice_voted.users
        assert transition.state.username == "Alice"
        assert transition.state.result is None

    def test_server_can_drop_username(self, alice_joined):
        """A snapshot without username means we are not registered anymore."""
        prev = LocalState.from_snapshot(alice_joined)
        transition = reconcile(prev, ServerSnapshot(counter=2))

        assert transition.state.username is None
        assert transition.state.users == ()

    def test_register_error_is_kept(self, empty_snapshot):
        """Snapshots never touch the registration error."""
        prev = LocalState(register_error_message="Name taken")
        transition = reconcile(prev, empty_snapshot)

        assert transition.state.register_error_message == "Name taken"

    def test_pending_registration_waits_for_username(self, empty_snapshot, alice_joined):
        """The form stays pending through snapshots that do not know us yet."""
        prev = LocalState(register_pending=True)

        lagging = reconcile(prev, empty_snapshot).state
        assert lagging.register_pending

        joined = reconcile(lagging, alice_joined).state
        assert not joined.register_pending
        assert joined.username == "Alice"


class TestSelection:
    """Tests for the optimistic card selection."""

    def test_selection_survives_lagging_snapshot(self, alice_joined):
        """A snapshot that has not caught up yet keeps our pick."""
        prev = LocalState.from_snapshot(alice_joined)._copy_with(selected_card="8")
        transition = reconcile(prev, alice_joined)

        assert transition.state.selected_card == "8"

    def test_result_clears_selection(self, voting_state, revealed):
        """A reveal supersedes any pending selection."""
        transition = reconcile(voting_state, revealed)

        assert transition.state.selected_card is None

    @pytest.mark.parametrize("selected", ["0", "13", "?", "☕"])
    def test_selection_is_none_whenever_result_present(self, revealed, selected):
        """Even an already-revealed state drops a stray selection."""
        prev = LocalState.from_snapshot(revealed)._copy_with(selected_card=selected)
        transition = reconcile(prev, revealed)

        assert transition.state.selected_card is None


class TestClearLock:
    """Tests for the clear control lock around a reveal."""

    def test_reveal_edge_locks_clear(self, voting_state, revealed):
        """The transition that reveals the result also locks clear."""
        transition = reconcile(voting_state, revealed)

        assert transition.state.clear_button_disabled is True

    def test_reveal_edge_schedules_one_unlock(self, voting_state, revealed):
        """Exactly one delayed unlock is scheduled."""
        transition = reconcile(voting_state, revealed)

        assert len(transition.effects) == 1
        effect = transition.effects[0]
        assert isinstance(effect, ScheduleAction)
        assert effect.delay == CLEAR_UNLOCK_DELAY == 1.0
        assert effect.action.action_type == ActionType.UNLOCK_CLEAR

    def test_unlock_delay_is_configurable(self, voting_state, revealed):
        transition = reconcile(voting_state, revealed, unlock_delay=0.25)

        assert transition.effects[0].delay == 0.25

    def test_no_effect_while_result_stays(self, revealed):
        """Polls after the reveal do not reschedule the unlock."""
        prev = LocalState.from_snapshot(revealed)
        transition = reconcile(prev, revealed)

        assert transition.effects == ()
        assert transition.state.clear_button_disabled is False

    def test_lock_is_sticky_until_unlocked(self, revealed):
        """Only the unlock action releases the lock, not later polls."""
        prev = LocalState.from_snapshot(revealed)._copy_with(clear_button_disabled=True)
        transition = reconcile(prev, revealed)

        assert transition.state.clear_button_disabled is True

    def test_no_effect_without_result(self, voting_state, alice_voted):
        transition = reconcile(voting_state, alice_voted)

        assert transition.effects == ()
        assert transition.state.clear_button_disabled is False

    def test_clear_then_reveal_again_schedules_again(self, revealed, alice_voted):
        """Each reveal edge gets its own unlock."""
        state = LocalState.from_snapshot(revealed)
        state = reconcile(state, alice_voted).state
        transition = reconcile(state, revealed)

        assert len(transition.effects) == 1


class TestIdempotence:
    """Reconciling the same snapshot twice."""

    @pytest.mark.parametrize("snapshot_name", ["empty_snapshot", "alice_joined", "alice_voted", "revealed"])
    def test_fixed_point(self, request, voting_state, snapshot_name):
        """The second reconcile changes nothing and emits nothing."""
        snapshot = request.getfixturevalue(snapshot_name)
        first = reconcile(voting_state, snapshot)
        second = reconcile(first.state, snapshot)

        assert second.state == first.state
        assert second.effects == ()

    def test_users_keep_server_order(self):
        snapshot = ServerSnapshot(
            counter=9,
            users=(Participant("Zoe"), Participant("Adam", "3"), Participant("Mia")),
        )
        transition = reconcile(LocalState(), snapshot)

        assert [u.name for u in transition.state.users] == ["Zoe", "Adam", "Mia"]
