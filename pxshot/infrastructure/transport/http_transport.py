from __future__ import annotations

import logging
import time
from collections.abc import Mapping

import httpx

from pxshot.application.ports import Transport, TransportError, TransportResponse

logger = logging.getLogger("pxshot.transport")


class HttpxTransport(Transport):
    def __init__(
        self,
        base_url: str,
        timeout_seconds: float,
        client: httpx.Client | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = httpx.Timeout(timeout_seconds)
        self._client = client or httpx.Client(follow_redirects=True, verify=True)

    def post(self, path: str, headers: Mapping[str, str], body: bytes) -> TransportResponse:
        return self._send("POST", path, headers, body)

    def get(self, path: str, headers: Mapping[str, str]) -> TransportResponse:
        return self._send("GET", path, headers, None)

    def close(self) -> None:
        self._client.close()

    def _send(
        self, method: str, path: str, headers: Mapping[str, str], body: bytes | None
    ) -> TransportResponse:
        start = time.perf_counter()
        try:
            response = self._client.request(
                method,
                f"{self._base_url}{path}",
                headers=dict(headers),
                content=body,
                timeout=self._timeout,
                follow_redirects=True,
            )
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            raise TransportError(f"{type(exc).__name__}: {exc}") from exc
        duration_ms = (time.perf_counter() - start) * 1000
        logger.debug("%s %s -> %s (%.2fms)", method, path, response.status_code, duration_ms)
        return TransportResponse(
            status_code=response.status_code,
            headers=dict(response.headers),
            content=response.content,
        )
