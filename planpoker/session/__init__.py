"""
Session Module - Runs one client against one planning poker session.

A session is EPHEMERAL:
- Seeded from the first status fetch
- Kept current by a perpetual poller
- Ends when the client is closed

Nothing is persisted.
"""

from .app import ClientApp, ClientError
from .effect_runner import EffectRunner
from .poller import Poller, PollerState

__all__ = [
    "ClientApp",
    "ClientError",
    "EffectRunner",
    "Poller",
    "PollerState",
]
