"""Shared typing helpers and wire-level value types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Credentials:
    """Porkbun API key pair."""

    api_key: str
    api_secret: str = field(repr=False)

    def to_payload(self) -> dict[str, str]:
        """Request body fields, named the way the Porkbun API expects them."""
        return {"apikey": self.api_key, "secretapikey": self.api_secret}


@dataclass(frozen=True)
class PingSuccess:
    status: str
    your_ip: str


@dataclass(frozen=True)
class PingFailure:
    status: str
    message: str


PingResponse = Union[PingSuccess, PingFailure]


@dataclass
class ExecuteResult(Generic[T]):
    ok: bool
    data: T | None = None
    error: Exception | None = None


__all__ = ["Credentials", "ExecuteResult", "PingFailure", "PingResponse", "PingSuccess"]
