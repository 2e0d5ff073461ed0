"""
Client State - Server snapshots and the locally-held session state.

Design principles:
- Immutable: every transition returns a new LocalState
- The server is authoritative: snapshot fields are mirrored verbatim
- Optimistic overlay: selected_card may run ahead of the server
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Union


# Estimate cards, in display order. Values are opaque tokens.
CARD_VALUES: tuple[str, ...] = ("0", "1", "2", "3", "5", "8", "13", "99", "?", "☕")

CARD_TITLES: dict[str, str] = {
    "☕": "Hot beverage",
}


def normalize_card(value: Union[int, str]) -> str:
    """
    Return the card token for a value.

    Integers are accepted for numeric cards (5 -> "5").
    Raises ValueError for anything outside the card set.
    """
    if isinstance(value, bool):
        raise ValueError(f"Not a card value: {value!r}")
    token = str(value)
    if token not in CARD_VALUES:
        raise ValueError(f"Not a card value: {value!r}")
    return token


@dataclass(frozen=True)
class Participant:
    """A registered user as reported by the server."""
    name: str
    card: str | None = None

    @property
    def has_card(self) -> bool:
        return self.card is not None


@dataclass(frozen=True)
class ServerSnapshot:
    """
    Authoritative session state reported by one status poll.

    counter is the server revision token, users are in registration order.
    """
    counter: int
    users: tuple[Participant, ...] = ()
    username: str | None = None  # Name the server associates with this client
    result: str | None = None  # Revealed summary, None until revealed


@dataclass(frozen=True)
class LocalState:
    """
    Everything the client knows about the session.

    Mirrored from the last accepted snapshot:
        counter, users, username, result
    Client-owned:
        selected_card, clear_button_disabled, register_error_message,
        register_pending (a register call is awaiting its outcome)
    """
    counter: int = 0
    users: tuple[Participant, ...] = field(default_factory=tuple)
    username: str | None = None
    result: str | None = None

    selected_card: str | None = None
    clear_button_disabled: bool = False
    register_error_message: str | None = None
    register_pending: bool = False

    @classmethod
    def from_snapshot(cls, snapshot: ServerSnapshot) -> LocalState:
        """Build the initial state from the first status fetch."""
        return cls(
            counter=snapshot.counter,
            users=snapshot.users,
            username=snapshot.username,
            result=snapshot.result,
            selected_card=None,
        )

    @property
    def is_registered(self) -> bool:
        return self.username is not None

    @property
    def is_revealed(self) -> bool:
        return self.result is not None

    @property
    def any_card_chosen(self) -> bool:
        return any(user.has_card for user in self.users)

    def _copy_with(self, **kwargs) -> LocalState:
        """Create a copy with some fields replaced."""
        return replace(self, **kwargs)
