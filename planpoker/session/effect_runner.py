"""
Effect Runner - Executes the effects returned by the reducer.

Each effect runs as its own asyncio task so nothing blocks the
caller or the poller:
- CallTransport: one fire-and-forget server call
- ScheduleAction: sleep, then dispatch the action against the
  state current at that moment

Only a failed registration is reported back (as REGISTER_FAILED).
Failures of choose, reveal and clear are dropped; the next snapshot
shows the true state.
"""

from __future__ import annotations
from typing import Awaitable, Callable, Iterable
import asyncio
import logging

from ..api.transport import Transport, TransportResult
from ..engine_core.action import Action, CallTransport, Effect, ScheduleAction, TransportOperation

logger = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[None]]
Dispatch = Callable[[Action], object]


class EffectRunner:
    """
    Runs effects on the current event loop.

    Pending tasks are only cancelled on close(); a superseded timer is
    left to fire and its action must be harmless on any state.
    """

    def __init__(self, transport: Transport, dispatch: Dispatch, sleep: Sleep = asyncio.sleep):
        self.transport = transport
        self.dispatch = dispatch
        self.sleep = sleep
        self._tasks: set[asyncio.Task] = set()

    @property
    def pending(self) -> int:
        """Number of effects still in flight."""
        return len(self._tasks)

    def run(self, effects: Iterable[Effect]) -> None:
        for effect in effects:
            self._spawn(self._execute(effect))

    async def aclose(self) -> None:
        """Cancel everything still pending. Called on teardown only."""
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        self._tasks.clear()

    def _spawn(self, coro: Awaitable[None]) -> None:
        task = asyncio.ensure_future(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _execute(self, effect: Effect) -> None:
        if isinstance(effect, ScheduleAction):
            await self.sleep(effect.delay)
            self.dispatch(effect.action)
        elif isinstance(effect, CallTransport):
            await self._call(effect)
        else:
            raise TypeError(f"Unknown effect: {effect!r}")

    async def _call(self, effect: CallTransport) -> None:
        operation = effect.operation
        result = await self._send(effect)
        if result.success:
            return

        if operation == TransportOperation.REGISTER:
            self.dispatch(Action.register_failed(result.failure.message))
        else:
            logger.info("%s failed, dropped: %s", operation.value, result.failure.message)

    async def _send(self, effect: CallTransport) -> TransportResult:
        calls = {
            TransportOperation.REGISTER: lambda: self.transport.register(effect.argument),
            TransportOperation.CHOOSE: lambda: self.transport.choose_card(effect.argument),
            TransportOperation.REVEAL: self.transport.reveal,
            TransportOperation.CLEAR: self.transport.clear,
        }
        return await calls[effect.operation]()
