"""
Pydantic Schemas for the wire - request and response bodies.

These models define the exact contract with the planning poker server.
Field names on the wire are camelCase where the server expects it
(lastCounter); Python attribute names stay snake_case.
"""

from typing import Optional, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..engine_core.state import Participant, ServerSnapshot


# =============================================================================
# Request Models
# =============================================================================

class StatusRequest(BaseModel):
    """Body of POST status."""
    model_config = ConfigDict(populate_by_name=True)

    last_counter: int = Field(0, alias="lastCounter", description="Counter of the last accepted snapshot")


class RegisterRequest(BaseModel):
    """Body of POST register."""
    username: str


class ChooseRequest(BaseModel):
    """Body of POST choose. Card values always travel as strings."""
    value: str


# =============================================================================
# Response Models
# =============================================================================

class UserInfo(BaseModel):
    """A participant in the status response."""
    name: str
    card: Optional[str] = None

    @field_validator("name", "card", mode="before")
    @classmethod
    def _as_text(cls, value: Union[int, str, None]) -> Optional[str]:
        # Servers may echo numeric names or cards as JSON numbers
        if value is None or isinstance(value, str):
            return value
        return str(value)


class StatusResponse(BaseModel):
    """Body of a successful status response."""
    counter: int = 0
    users: list[UserInfo] = Field(default_factory=list)
    username: Optional[str] = None
    result: Optional[str] = None

    @field_validator("users", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Optional[list]) -> list:
        # Some servers send null for an empty table
        return [] if value is None else value

    @field_validator("username", "result", mode="before")
    @classmethod
    def _empty_as_absent(cls, value: Union[int, str, None]) -> Optional[str]:
        # An empty string means "not set" on the wire
        if value is None or value == "":
            return None
        return value if isinstance(value, str) else str(value)

    def to_snapshot(self) -> ServerSnapshot:
        return ServerSnapshot(
            counter=self.counter,
            users=tuple(Participant(name=u.name, card=u.card) for u in self.users),
            username=self.username,
            result=self.result,
        )


class ErrorBody(BaseModel):
    """Structured error body a server may attach to a non-2xx response."""
    error: Optional[str] = None
