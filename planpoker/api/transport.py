"""
Transport - The five server calls over HTTP.

Every call issues exactly one request and returns a TransportResult.
HTTP errors, non-2xx statuses, undecodable JSON and malformed status
payloads all become a TransportFailure; nothing here raises for them.

Wire contract (paths are relative to the configured base URL):
    POST status    {"lastCounter": int}  -> status snapshot
    POST register  {"username": str}     -> empty, or {"error": str}
    POST choose    {"value": str}
    GET  reveal
    GET  clear
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any
import logging

import httpx
from pydantic import ValidationError

from ..config import ClientConfig
from ..engine_core.state import ServerSnapshot
from .schemas import ChooseRequest, ErrorBody, RegisterRequest, StatusRequest, StatusResponse

logger = logging.getLogger(__name__)

UNKNOWN_ERROR = "Unknown error"


@dataclass(frozen=True)
class TransportFailure:
    """
    A failed server call.

    message is the server-supplied error when one could be decoded,
    otherwise UNKNOWN_ERROR. status_code is None for network errors.
    """
    message: str = UNKNOWN_ERROR
    status_code: int | None = None


@dataclass(frozen=True)
class TransportResult:
    """Outcome of a server call: a decoded payload or a failure."""
    success: bool
    payload: Any = None
    failure: TransportFailure | None = None

    @classmethod
    def ok(cls, payload: Any = None) -> TransportResult:
        return cls(success=True, payload=payload)

    @classmethod
    def failed(cls, message: str = UNKNOWN_ERROR, status_code: int | None = None) -> TransportResult:
        return cls(success=False, failure=TransportFailure(message=message, status_code=status_code))


class Transport:
    """
    HTTP client for the planning poker server.

    Usage:
        transport = Transport(ClientConfig(base_url="http://poker.local/"))
        result = await transport.fetch_status(0)
        if result.success:
            snapshot = result.payload

    The underlying httpx client keeps cookies, which is how the
    server recognizes this client between calls.
    """

    def __init__(self, config: ClientConfig | None = None, client: httpx.AsyncClient | None = None):
        self.config = config or ClientConfig()
        self.client = client or httpx.AsyncClient(
            base_url=self.config.base_url,
            timeout=self.config.request_timeout,
        )

    async def aclose(self) -> None:
        await self.client.aclose()

    async def fetch_status(self, counter: int) -> TransportResult:
        """Fetch the session snapshot. The payload is a ServerSnapshot."""
        body = StatusRequest(last_counter=counter).model_dump(by_alias=True)
        result = await self._request("POST", "status", body, timeout=self.config.status_timeout)
        if not result.success:
            return result

        try:
            snapshot: ServerSnapshot = StatusResponse.model_validate(result.payload.json()).to_snapshot()
        except (ValueError, ValidationError) as e:
            logger.debug("Undecodable status payload: %s", e)
            return TransportResult.failed(status_code=result.payload.status_code)
        return TransportResult.ok(snapshot)

    async def register(self, name: str) -> TransportResult:
        return await self._request("POST", "register", RegisterRequest(username=name).model_dump())

    async def choose_card(self, value: str) -> TransportResult:
        return await self._request("POST", "choose", ChooseRequest(value=str(value)).model_dump())

    async def reveal(self) -> TransportResult:
        return await self._request("GET", "reveal")

    async def clear(self) -> TransportResult:
        return await self._request("GET", "clear")

    async def _request(
        self,
        method: str,
        path: str,
        body: dict | None = None,
        timeout: Any = httpx.USE_CLIENT_DEFAULT,
    ) -> TransportResult:
        """Issue one request. The success payload is the raw httpx.Response."""
        try:
            response = await self.client.request(method, path, json=body, timeout=timeout)
        except httpx.HTTPError as e:
            logger.debug("%s %s failed: %s", method, path, e)
            return TransportResult.failed()

        if response.is_success:
            return TransportResult.ok(response)

        return TransportResult.failed(
            message=_error_message(response),
            status_code=response.status_code,
        )


def _error_message(response: httpx.Response) -> str:
    """Extract {"error": ...} from a failed response, if present."""
    try:
        error = ErrorBody.model_validate(response.json()).error
    except (ValueError, ValidationError):
        return UNKNOWN_ERROR
    return error or UNKNOWN_ERROR
