"""
View Projector - Maps local state to a UI description.

The projection is a plain data tree; rendering it (DOM, terminal,
widgets) is up to whoever mounts the client. project() holds no state
and performs no I/O, so the same LocalState always yields an equal
ViewModel.

Layout:
    player list      every participant with their card or a placeholder
    center area      result text plus either the reveal or the clear control
    register form    only while unregistered
    card grid        only once registered
"""

from __future__ import annotations
from dataclasses import dataclass, field

from ..engine_core.session import can_reveal
from ..engine_core.state import CARD_TITLES, CARD_VALUES, LocalState

NAME_MAX_LENGTH = 20

REVEAL_LABEL = ""  # Rendered as a checkmark on hover
CLEAR_LABEL = "♻"
SUBMIT_LABEL = "⏎"


# =============================================================================
# View Models
# =============================================================================

@dataclass(frozen=True)
class PlayerView:
    """One entry of the player list."""
    name: str
    card: str | None = None  # None renders as a placeholder


@dataclass(frozen=True)
class ButtonView:
    label: str
    disabled: bool = False


@dataclass(frozen=True)
class CenterView:
    """Result text plus exactly one of the reveal/clear controls."""
    result_text: str = ""
    reveal_button: ButtonView | None = None
    clear_button: ButtonView | None = None


@dataclass(frozen=True)
class RegisterFormView:
    """Name input plus submit; disabled while a register call is pending."""
    submit_button: ButtonView = field(default_factory=lambda: ButtonView(SUBMIT_LABEL))
    max_length: int = NAME_MAX_LENGTH
    error_text: str | None = None
    disabled: bool = False


@dataclass(frozen=True)
class CardView:
    value: str
    selected: bool = False
    disabled: bool = False
    title: str | None = None


@dataclass(frozen=True)
class CardGridView:
    cards: tuple[CardView, ...] = ()


@dataclass(frozen=True)
class ViewModel:
    """Everything visible on screen."""
    players: tuple[PlayerView, ...] = ()
    center: CenterView = field(default_factory=CenterView)
    register_form: RegisterFormView | None = None
    card_grid: CardGridView | None = None


# =============================================================================
# Projection
# =============================================================================

def project(state: LocalState, name_max_length: int = NAME_MAX_LENGTH) -> ViewModel:
    """Project local state onto the UI description."""
    return ViewModel(
        players=tuple(PlayerView(name=u.name, card=u.card) for u in state.users),
        center=_project_center(state),
        register_form=_project_register_form(state, name_max_length),
        card_grid=_project_card_grid(state),
    )


def _project_center(state: LocalState) -> CenterView:
    if state.is_revealed:
        return CenterView(
            result_text=state.result,
            clear_button=ButtonView(CLEAR_LABEL, disabled=state.clear_button_disabled),
        )
    return CenterView(
        reveal_button=ButtonView(REVEAL_LABEL, disabled=not can_reveal(state)),
    )


def _project_register_form(state: LocalState, max_length: int) -> RegisterFormView | None:
    if state.is_registered:
        return None
    return RegisterFormView(
        submit_button=ButtonView(SUBMIT_LABEL, disabled=state.register_pending),
        max_length=max_length,
        error_text=state.register_error_message,
        disabled=state.register_pending,
    )


def _project_card_grid(state: LocalState) -> CardGridView | None:
    if not state.is_registered:
        return None
    return CardGridView(cards=tuple(
        CardView(
            value=value,
            selected=value == state.selected_card,
            disabled=state.is_revealed,
            title=CARD_TITLES.get(value),
        )
        for value in CARD_VALUES
    ))
