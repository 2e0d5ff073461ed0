"""
Client App - The running planning poker client.

A client represents one participant's view of one session:
- Created with a server base URL and a render callback (the mount point)
- Seeded from the first status fetch
- Kept current by the poller
- Changed by user intents through dispatch()
- Destroyed on close(); nothing is persisted

LocalState is the only mutable value and it is always replaced whole.
"""

from __future__ import annotations
from typing import Callable, Union
import asyncio
import logging

from ..api.transport import Transport
from ..config import ClientConfig
from ..engine_core.action import Action, Transition
from ..engine_core.reducer import Reducer
from ..engine_core.session import SessionPhase, phase_of
from ..engine_core.state import LocalState, ServerSnapshot
from ..view.projector import ViewModel, project
from .effect_runner import EffectRunner, Sleep
from .poller import Poller

logger = logging.getLogger(__name__)


class ClientError(Exception):
    """Raised when the client is used outside its lifecycle."""


class ClientApp:
    """
    The planning poker client.

    Usage:
        async with ClientApp(ClientConfig(base_url=url), on_render=draw) as app:
            app.register("Alice")
            ...
            app.choose_card(5)

    on_render receives a ViewModel whenever the visible UI changes.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        transport: Transport | None = None,
        on_render: Callable[[ViewModel], object] | None = None,
        sleep: Sleep = asyncio.sleep,
    ):
        self.config = config or ClientConfig()
        self.transport = transport or Transport(self.config)
        self.on_render = on_render
        self.reducer = Reducer(unlock_delay=self.config.clear_unlock_delay)
        self.effects = EffectRunner(self.transport, self.dispatch, sleep)
        self.poller = Poller(
            self.transport,
            get_counter=lambda: self.state.counter,
            on_snapshot=self._on_snapshot,
            config=self.config,
            sleep=sleep,
        )

        self._state: LocalState | None = None
        self._view: ViewModel | None = None

    async def __aenter__(self) -> ClientApp:
        await self.start()
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    # =========================================================================
    # Lifecycle
    # =========================================================================

    @property
    def started(self) -> bool:
        return self._state is not None

    @property
    def state(self) -> LocalState:
        if self._state is None:
            raise ClientError("Client not started")
        return self._state

    @property
    def view(self) -> ViewModel:
        if self._view is None:
            raise ClientError("Client not started")
        return self._view

    @property
    def phase(self) -> SessionPhase:
        return phase_of(self.state)

    async def start(self) -> None:
        """Fetch the initial snapshot, render, then keep polling."""
        if self.started:
            raise ClientError("Client already started")

        snapshot = await self.poller.fetch_initial()
        self._state = LocalState.from_snapshot(snapshot)
        self._render()
        self.poller.start(self.config.poll_interval)

    async def close(self) -> None:
        """Stop polling, drop pending effects and release the HTTP client."""
        await self.poller.stop()
        await self.effects.aclose()
        await self.transport.aclose()

    # =========================================================================
    # State transitions
    # =========================================================================

    def dispatch(self, action: Action) -> Transition:
        """Apply an action, run its effects and re-render if needed."""
        transition = self.reducer.apply(self.state, action)
        if transition.state != self._state:
            logger.debug("%s applied, phase %s", action.action_type.value, phase_of(transition.state).value)
        self._state = transition.state
        self.effects.run(transition.effects)
        self._render()
        return transition

    def register(self, name: str) -> Transition:
        return self.dispatch(Action.register(name))

    def choose_card(self, value: Union[int, str]) -> Transition:
        return self.dispatch(Action.choose_card(value))

    def reveal(self) -> Transition:
        return self.dispatch(Action.reveal())

    def clear(self) -> Transition:
        return self.dispatch(Action.clear())

    def _on_snapshot(self, snapshot: ServerSnapshot) -> None:
        self.dispatch(Action.snapshot(snapshot))

    def _render(self) -> None:
        view = project(self.state, self.config.name_max_length)
        if view == self._view:
            return
        self._view = view
        if self.on_render is not None:
            self.on_render(view)
