"""
Tests for the view projector.

Tests:
- Registration form vs. card grid
- Reveal and clear controls
- Card selection and locking
- Determinism of the projection
"""

from ..engine_core.state import CARD_VALUES, LocalState, Participant
from ..view.projector import CLEAR_LABEL, NAME_MAX_LENGTH, project


class TestRegistration:
    """Tests for the unregistered view."""

    def test_initial_view(self, empty_snapshot):
        """A fresh session shows the form and hides the cards."""
        view = project(LocalState.from_snapshot(empty_snapshot))

        assert view.register_form is not None
        assert view.card_grid is None
        assert view.register_form.error_text is None
        assert view.register_form.max_length == NAME_MAX_LENGTH
        assert view.players == ()

    def test_error_text(self, empty_snapshot):
        state = LocalState.from_snapshot(empty_snapshot)._copy_with(register_error_message="Name taken")

        assert project(state).register_form.error_text == "Name taken"

    def test_form_length_follows_config(self, empty_snapshot):
        view = project(LocalState.from_snapshot(empty_snapshot), name_max_length=12)

        assert view.register_form.max_length == 12

    def test_pending_registration_disables_form(self, empty_snapshot):
        state = LocalState.from_snapshot(empty_snapshot)._copy_with(register_pending=True)
        form = project(state).register_form

        assert form.disabled
        assert form.submit_button.disabled

    def test_form_enabled_when_idle(self, empty_snapshot):
        form = project(LocalState.from_snapshot(empty_snapshot)).register_form

        assert not form.disabled
        assert not form.submit_button.disabled


class TestVoting:
    """Tests for the voting view."""

    def test_registered_without_cards(self, alice_joined):
        """Cards shown, reveal present but disabled."""
        view = project(LocalState.from_snapshot(alice_joined))

        assert view.register_form is None
        assert view.card_grid is not None
        assert [c.value for c in view.card_grid.cards] == list(CARD_VALUES)
        assert view.center.reveal_button is not None
        assert view.center.reveal_button.disabled
        assert view.center.clear_button is None
        assert view.center.result_text == ""

    def test_reveal_enabled_once_someone_voted(self, alice_voted):
        view = project(LocalState.from_snapshot(alice_voted))

        assert not view.center.reveal_button.disabled

    def test_selected_card_is_marked(self, voting_state):
        view = project(voting_state)

        selected = [c.value for c in view.card_grid.cards if c.selected]
        assert selected == ["5"]
        assert not any(c.disabled for c in view.card_grid.cards)

    def test_player_list(self, alice_voted):
        view = project(LocalState.from_snapshot(alice_voted))

        assert [(p.name, p.card) for p in view.players] == [("Alice", "5"), ("Bob", None)]

    def test_coffee_card_has_title(self, alice_joined):
        view = project(LocalState.from_snapshot(alice_joined))
        titles = {c.value: c.title for c in view.card_grid.cards}

        assert titles["☕"] == "Hot beverage"
        assert titles["5"] is None


class TestRevealed:
    """Tests for the revealed view."""

    def test_result_and_clear_control(self, revealed):
        state = LocalState.from_snapshot(revealed)._copy_with(clear_button_disabled=True)
        view = project(state)

        assert view.center.result_text == "6.5"
        assert view.center.reveal_button is None
        assert view.center.clear_button.label == CLEAR_LABEL
        assert view.center.clear_button.disabled

    def test_clear_enabled_after_unlock(self, revealed):
        view = project(LocalState.from_snapshot(revealed))

        assert not view.center.clear_button.disabled

    def test_cards_disabled(self, revealed):
        view = project(LocalState.from_snapshot(revealed))

        assert all(c.disabled for c in view.card_grid.cards)
        assert not any(c.selected for c in view.card_grid.cards)


class TestDeterminism:
    """Same state, same view."""

    def test_equal_states_equal_views(self, alice_voted):
        a = LocalState.from_snapshot(alice_voted)
        b = LocalState.from_snapshot(alice_voted)

        assert project(a) == project(b)

    def test_view_changes_with_state(self, voting_state):
        other = voting_state._copy_with(users=(Participant("Alice", "5"), Participant("Bob", "1")))

        assert project(voting_state) != project(other)
