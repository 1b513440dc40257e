"""Transport implementations exposed to users."""

from .base import Transport, TransportResponse
from .http import HttpTransport

__all__ = [
    "HttpTransport",
    "Transport",
    "TransportResponse",
]
