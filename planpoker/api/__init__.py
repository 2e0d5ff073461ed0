"""
API Module - The server as seen from the client.

The client talks to one planning poker server through five calls:
1. status   - fetch the session snapshot
2. register - claim a display name
3. choose   - pick a card
4. reveal   - publish everyone's cards
5. clear    - start a new round

All state is owned by the server; this module only moves it.
"""

from .schemas import (
    # Requests
    StatusRequest,
    RegisterRequest,
    ChooseRequest,
    # Responses
    StatusResponse,
    UserInfo,
    ErrorBody,
)
from .transport import Transport, TransportFailure, TransportResult, UNKNOWN_ERROR

__all__ = [
    # Requests
    "StatusRequest",
    "RegisterRequest",
    "ChooseRequest",
    # Responses
    "StatusResponse",
    "UserInfo",
    "ErrorBody",
    # Transport
    "Transport",
    "TransportFailure",
    "TransportResult",
    "UNKNOWN_ERROR",
]
