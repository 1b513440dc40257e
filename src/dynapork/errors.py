"""Custom exceptions raised by the dynapork client."""

from __future__ import annotations

from typing import Any


class DynaporkError(Exception):
    """Base error for all dynapork failures."""

    def __init__(self, message: str, *, context: Any | None = None) -> None:
        super().__init__(message)
        self.context = context


class ConfigError(DynaporkError):
    """Raised when configuration cannot be loaded or is incomplete."""


class PorkbunError(DynaporkError):
    """Base for the closed set of failures a ping request can end in.

    Two errors are equal when they are the same kind carrying the same text,
    so the outcome of repeated requests can be compared directly.
    """

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PorkbunError):
            return NotImplemented
        return type(self) is type(other) and self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class WebRequestError(PorkbunError):
    """Raised when the request never produced an HTTP response."""

    def __init__(self, diagnostic: str, *, context: Any | None = None) -> None:
        super().__init__(diagnostic, context=context)
        self.diagnostic = diagnostic


class ResponseDecodeError(PorkbunError):
    """Raised when the response body matches no known response shape."""

    def __init__(self, *, context: Any | None = None) -> None:
        super().__init__("Could not decode the Porkbun API response", context=context)


class InvalidCredentialsError(PorkbunError):
    """Raised when Porkbun rejects the API key or secret."""

    def __init__(self, *, context: Any | None = None) -> None:
        super().__init__("Invalid API credentials", context=context)


class APIError(PorkbunError):
    """Raised for any other error Porkbun reports; keeps the provider's text."""

    def __init__(self, message: str, *, context: Any | None = None) -> None:
        super().__init__(message, context=context)
        self.message = message


__all__ = [
    "APIError",
    "ConfigError",
    "DynaporkError",
    "InvalidCredentialsError",
    "PorkbunError",
    "ResponseDecodeError",
    "WebRequestError",
]
