"""Response decoding and error classification for the Porkbun ping endpoint."""

from __future__ import annotations

import json
from typing import Any, Callable

from .errors import APIError, InvalidCredentialsError, PorkbunError, ResponseDecodeError
from .transport.base import TransportResponse
from .types import PingFailure, PingResponse, PingSuccess

# Exact provider messages with a dedicated error kind. Anything else is an APIError.
KNOWN_ERRORS: dict[str, Callable[[], PorkbunError]] = {
    "Invalid API key. (002)": InvalidCredentialsError,
}


def decode_ping_response(body: bytes | str) -> PingResponse:
    """Decode a ping response body into its success or failure shape.

    The body carries no discriminant, so the success shape (``status`` and
    ``yourIp``) is tried before the failure shape (``status`` and
    ``message``). A body matching neither raises :class:`ResponseDecodeError`.
    """
    try:
        parsed = json.loads(body)
    except (ValueError, RecursionError):
        raise ResponseDecodeError() from None

    if not isinstance(parsed, dict):
        raise ResponseDecodeError()

    success = _probe_success(parsed)
    if success is not None:
        return success
    failure = _probe_failure(parsed)
    if failure is not None:
        return failure
    raise ResponseDecodeError()


def decode_response(response: TransportResponse) -> PingResponse:
    # Porkbun error bodies arrive with 4xx statuses; only the body is consulted.
    return decode_ping_response(response.body or b"")


def classify_error(message: str) -> PorkbunError:
    """Map a provider error message onto the most specific error kind."""
    known = KNOWN_ERRORS.get(message)
    if known is not None:
        return known()
    return APIError(message)


def _probe_success(parsed: dict[str, Any]) -> PingSuccess | None:
    status = parsed.get("status")
    your_ip = parsed.get("yourIp")
    if isinstance(status, str) and isinstance(your_ip, str):
        return PingSuccess(status=status, your_ip=your_ip)
    return None


def _probe_failure(parsed: dict[str, Any]) -> PingFailure | None:
    status = parsed.get("status")
    message = parsed.get("message")
    if isinstance(status, str) and isinstance(message, str):
        return PingFailure(status=status, message=message)
    return None


__all__ = ["KNOWN_ERRORS", "classify_error", "decode_ping_response", "decode_response"]
