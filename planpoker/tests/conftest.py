"""
Pytest fixtures for planpoker tests.
"""

import pytest

from ..engine_core.state import LocalState, Participant, ServerSnapshot
from .fakes import FakeClock, FakeTransport


@pytest.fixture
def empty_snapshot() -> ServerSnapshot:
    """A fresh session nobody has joined yet."""
    return ServerSnapshot(counter=0)


@pytest.fixture
def alice_joined() -> ServerSnapshot:
    """Alice is registered and has not picked a card."""
    return ServerSnapshot(
        counter=1,
        users=(Participant(name="Alice"),),
        username="Alice",
    )


@pytest.fixture
def alice_voted() -> ServerSnapshot:
    """Alice picked 5, Bob has not voted yet."""
    return ServerSnapshot(
        counter=3,
        users=(Participant(name="Alice", card="5"), Participant(name="Bob")),
        username="Alice",
    )


@pytest.fixture
def revealed() -> ServerSnapshot:
    """The round has been revealed."""
    return ServerSnapshot(
        counter=4,
        users=(Participant(name="Alice", card="5"), Participant(name="Bob", card="8")),
        username="Alice",
        result="6.5",
    )


@pytest.fixture
def voting_state(alice_voted: ServerSnapshot) -> LocalState:
    """Local state while voting, with Alice's pick confirmed."""
    return LocalState.from_snapshot(alice_voted)._copy_with(selected_card="5")


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def transport(empty_snapshot: ServerSnapshot) -> FakeTransport:
    return FakeTransport(empty_snapshot)
