"""Public surface for the dynapork Porkbun client."""

from .client import PING_URL, PorkbunClient, request_ip, request_ip_safe
from .config import Config, read_config
from .errors import (
    APIError,
    ConfigError,
    DynaporkError,
    InvalidCredentialsError,
    PorkbunError,
    ResponseDecodeError,
    WebRequestError,
)
from .transport import HttpTransport, Transport, TransportResponse
from .types import Credentials, ExecuteResult, PingFailure, PingResponse, PingSuccess
from .version import __version__

__all__ = [
    "__version__",
    "APIError",
    "Config",
    "ConfigError",
    "Credentials",
    "DynaporkError",
    "ExecuteResult",
    "HttpTransport",
    "InvalidCredentialsError",
    "PING_URL",
    "PingFailure",
    "PingResponse",
    "PingSuccess",
    "PorkbunClient",
    "PorkbunError",
    "ResponseDecodeError",
    "Transport",
    "TransportResponse",
    "WebRequestError",
    "read_config",
    "request_ip",
    "request_ip_safe",
]
