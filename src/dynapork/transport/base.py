"""Common transport abstractions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Protocol, runtime_checkable


@dataclass
class TransportResponse:
    status: int
    body: bytes
    headers: Mapping[str, str]


@runtime_checkable
class Transport(Protocol):
    """Sends one JSON POST and hands back the raw response.

    Implementations raise :class:`dynapork.errors.WebRequestError` when no
    response could be obtained, and never inspect the HTTP status.
    """

    def post_json(self, url: str, body: Mapping[str, Any]) -> TransportResponse: ...

    def close(self) -> None: ...


__all__ = ["Transport", "TransportResponse"]
