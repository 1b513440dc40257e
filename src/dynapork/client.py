"""Porkbun API client: asks the ping endpoint for the caller's public IP."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .errors import PorkbunError
from .logger import BoundLogger, LogLevel, create_logger
from .parser import classify_error, decode_response
from .transport import HttpTransport, Transport
from .types import Credentials, ExecuteResult, PingSuccess

PING_URL = "https://api-ipv4.porkbun.com/api/json/v3/ping"


def request_ip(
    transport: Transport,
    credentials: Credentials,
    *,
    logger: BoundLogger | None = None,
) -> str:
    """Request the current public IP address from Porkbun.

    Sends exactly one request. Raises :class:`WebRequestError` when the
    transport fails, :class:`ResponseDecodeError` when the body matches no
    known shape, and :class:`InvalidCredentialsError` or :class:`APIError`
    when Porkbun reports an error.
    """
    log = (logger or create_logger()).child("ping")
    log.debug("Requesting public IP from %s", PING_URL)
    response = transport.post_json(PING_URL, credentials.to_payload())
    decoded = decode_response(response)

    if isinstance(decoded, PingSuccess):
        log.debug("Ping succeeded status=%s ip=%s", decoded.status, decoded.your_ip)
        return decoded.your_ip

    log.debug("Porkbun reported an error status=%s message=%s", decoded.status, decoded.message)
    raise classify_error(decoded.message)


def request_ip_safe(
    transport: Transport,
    credentials: Credentials,
    *,
    logger: BoundLogger | None = None,
) -> ExecuteResult[str]:
    try:
        return ExecuteResult(ok=True, data=request_ip(transport, credentials, logger=logger))
    except PorkbunError as exc:
        return ExecuteResult(ok=False, error=exc)


@dataclass
class ClientOptions:
    credentials: Credentials
    read_timeout: float = 60.0
    transport: Transport | None = None
    logger: object | None = None
    log_level: LogLevel = "info"


class PorkbunClient:
    """Primary entry point for talking to the Porkbun API."""

    def __init__(
        self,
        credentials: Credentials,
        *,
        read_timeout: float = 60.0,
        transport: Transport | None = None,
        logger: object | None = None,
        log_level: LogLevel = "info",
    ) -> None:
        options = ClientOptions(
            credentials=credentials,
            read_timeout=read_timeout,
            transport=transport,
            logger=logger,
            log_level=log_level,
        )
        self.credentials = options.credentials
        self._logger = create_logger(logger=options.logger, level=options.log_level)
        self._transport = options.transport or HttpTransport(
            read_timeout=options.read_timeout, logger=self._logger
        )

    def request_ip(self) -> str:
        return request_ip(self._transport, self.credentials, logger=self._logger)

    def request_ip_safe(self) -> ExecuteResult[str]:
        return request_ip_safe(self._transport, self.credentials, logger=self._logger)

    def close(self) -> None:
        self._transport.close()

    def __enter__(self) -> "PorkbunClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


__all__ = ["PING_URL", "ClientOptions", "PorkbunClient", "request_ip", "request_ip_safe"]
