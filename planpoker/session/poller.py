"""
Poller - The perpetual status loop.

The loop:
1. Fetch status with the counter of the current local state
2. On success, hand the snapshot over, then wait poll_interval
3. On failure, wait retry_interval
4. Repeat until the client is closed

A failed poll is never shown to the user; the UI keeps the last
good state until a poll succeeds again.
"""

from __future__ import annotations
from enum import Enum
from typing import Callable
import asyncio
import logging

from ..api.transport import Transport
from ..config import ClientConfig
from ..engine_core.state import ServerSnapshot
from .effect_runner import Sleep

logger = logging.getLogger(__name__)


class PollerState(Enum):
    """State of the poll loop."""
    IDLE = "idle"  # Not started, or stopped
    POLLING = "polling"  # Request in flight
    WAITING = "waiting"  # Next attempt scheduled


class Poller:
    """
    Drives status polling.

    Usage:
        poller = Poller(transport, get_counter, on_snapshot)
        first = await poller.fetch_initial()
        poller.start()
        ...
        await poller.stop()
    """

    def __init__(
        self,
        transport: Transport,
        get_counter: Callable[[], int],
        on_snapshot: Callable[[ServerSnapshot], object],
        config: ClientConfig | None = None,
        sleep: Sleep = asyncio.sleep,
    ):
        self.transport = transport
        self.get_counter = get_counter
        self.on_snapshot = on_snapshot
        self.config = config or ClientConfig()
        self.sleep = sleep

        self.state = PollerState.IDLE
        self.consecutive_failures = 0
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def fetch_initial(self, counter: int = 0) -> ServerSnapshot:
        """
        Fetch the first snapshot, retrying until the server answers.

        The snapshot is returned rather than handed to on_snapshot: it
        seeds the local state instead of being reconciled into one.
        """
        while True:
            self.state = PollerState.POLLING
            result = await self.transport.fetch_status(counter)
            if result.success:
                self.consecutive_failures = 0
                self.state = PollerState.IDLE
                return result.payload
            self._record_failure(result.failure.message)
            self.state = PollerState.WAITING
            await self.sleep(self.config.retry_interval)

    async def poll_once(self) -> bool:
        """Run one attempt. Returns True if a snapshot was delivered."""
        self.state = PollerState.POLLING
        result = await self.transport.fetch_status(self.get_counter())
        if not result.success:
            self._record_failure(result.failure.message)
            return False

        try:
            self.on_snapshot(result.payload)
        except Exception:
            self.consecutive_failures += 1
            logger.exception("Snapshot handling failed (%d in a row)", self.consecutive_failures)
            return False

        self.consecutive_failures = 0
        return True

    async def run(self, initial_delay: float = 0.0) -> None:
        """Poll forever. Only cancellation ends the loop."""
        delay = initial_delay
        while True:
            self.state = PollerState.WAITING
            await self.sleep(delay)
            ok = await self.poll_once()
            delay = self.config.poll_interval if ok else self.config.retry_interval

    def start(self, initial_delay: float | None = None) -> None:
        """Start polling in the background."""
        if self.running:
            return
        if initial_delay is None:
            initial_delay = self.config.poll_interval
        self._task = asyncio.ensure_future(self.run(initial_delay))

    async def stop(self) -> None:
        task, self._task = self._task, None
        if task is not None:
            task.cancel()
            await asyncio.gather(task, return_exceptions=True)
        self.state = PollerState.IDLE

    def _record_failure(self, message: str) -> None:
        self.consecutive_failures += 1
        logger.warning(
            "Status poll failed (%d in a row): %s",
            self.consecutive_failures,
            message,
        )
