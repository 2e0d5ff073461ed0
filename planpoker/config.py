"""
Client configuration.

All timings are in seconds.
"""

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class ClientConfig:
    """Configuration for a planning poker client."""
    base_url: str = "http://localhost:8080/"

    # Poll cadence
    poll_interval: float = 0.2  # after a successful poll
    retry_interval: float = 5.0  # after a failed poll

    # How long the clear control stays locked after a reveal
    clear_unlock_delay: float = 1.0

    request_timeout: float = 10.0
    # Status may be held open by a long-poll server; None waits indefinitely
    status_timeout: float | None = None
    name_max_length: int = 20
