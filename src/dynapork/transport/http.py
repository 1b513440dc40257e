"""HTTPS transport built on top of httpx."""

from __future__ import annotations

from typing import Any, Mapping

import httpx

from ..errors import WebRequestError
from ..logger import BoundLogger, create_logger
from .base import TransportResponse


class HttpTransport:
    def __init__(
        self,
        *,
        read_timeout: float = 60.0,
        client: httpx.Client | None = None,
        logger: BoundLogger | None = None,
    ) -> None:
        self._read_timeout = read_timeout
        self._client = client or httpx.Client(timeout=httpx.Timeout(read_timeout))
        self._owns_client = client is None
        self._logger = (logger or create_logger()).child("http")

    def post_json(self, url: str, body: Mapping[str, Any]) -> TransportResponse:
        try:
            self._logger.debug("HTTP POST %s", url)
            response = self._client.post(
                url,
                json=dict(body),
                headers={"Content-Type": "application/json"},
            )
            content = response.content
            self._logger.debug(
                "HTTP <- %s status=%s bytes=%d",
                url,
                response.status_code,
                len(content),
            )
            return TransportResponse(
                status=response.status_code,
                body=content,
                headers={k.lower(): v for k, v in response.headers.items()},
            )
        except httpx.TimeoutException as exc:
            raise WebRequestError(f"HTTP request to {url} timed out after {self._read_timeout}s") from exc
        except httpx.RequestError as exc:
            raise WebRequestError(f"Cannot connect to {url}: {exc}") from exc

    def close(self) -> None:
        if self._owns_client:
            self._client.close()


__all__ = ["HttpTransport"]
