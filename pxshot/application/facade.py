from __future__ import annotations

from pxshot.adapters.schemas import ClientConfig, ScreenshotOptions, Usage
from pxshot.application.ports import Transport, TransportError, TransportResponse
from pxshot.domain.errors import ApiError, HttpError, PxshotError, ValidationError
from pxshot.domain.payload import (
    decode_error_envelope,
    decode_stored_screenshot,
    decode_usage,
    dump_payload,
    encode_screenshot_options,
)
from pxshot.domain.result import ScreenshotResult
from pxshot.domain.validation import validate_screenshot_options
from pxshot.infrastructure.transport.http_transport import HttpxTransport
from pxshot.version import __version__

SCREENSHOT_PATH = "/v1/screenshot"
USAGE_PATH = "/v1/usage"
DEFAULT_USER_AGENT = f"pxshot-python/{__version__}"


class Client:
    """Synchronous client for the Pxshot screenshot API.

    The client owns its transport and releases it on ``close()`` or when used
    as a context manager. It keeps no per-request state, so one instance may
    be shared between threads.

    Usage:
        with Client("px_live_...") as client:
            result = client.screenshot(ScreenshotOptions(url="https://example.com"))
            result.save("screenshot.png")
    """

    def __init__(
        self,
        config: ClientConfig | str,
        transport: Transport | None = None,
    ) -> None:
        if isinstance(config, str):
            config = ClientConfig(api_key=config)
        if not config.api_key.get_secret_value():
            raise ValidationError("API key is required")
        # Header values are sent as ASCII.
        if not config.api_key.get_secret_value().isascii():
            raise ValidationError("API key must contain only ASCII characters")
        if config.user_agent is not None and not config.user_agent.isascii():
            raise ValidationError("User agent must contain only ASCII characters")
        if config.timeout_seconds <= 0:
            raise ValidationError("Timeout must be positive")
        self._config = config
        self._transport = transport or HttpxTransport(
            base_url=config.base_url,
            timeout_seconds=config.timeout_seconds,
        )
        self._closed = False

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def base_url(self) -> str:
        return self._config.base_url

    @property
    def closed(self) -> bool:
        return self._closed

    def screenshot(self, options: ScreenshotOptions) -> ScreenshotResult:
        validate_screenshot_options(options)
        self._ensure_open()
        body = dump_payload(encode_screenshot_options(options))
        try:
            response = self._transport.post(SCREENSHOT_PATH, self._build_headers(True), body)
        except TransportError as exc:
            raise HttpError(0, f"Screenshot request failed: {exc}") from exc
        self._check_response(response, "Screenshot request failed")

        if options.store is True or "application/json" in response.content_type:
            return ScreenshotResult.from_stored(decode_stored_screenshot(response.content))
        return ScreenshotResult.from_bytes(response.content)

    def usage(self) -> Usage:
        self._ensure_open()
        try:
            response = self._transport.get(USAGE_PATH, self._build_headers(False))
        except TransportError as exc:
            raise HttpError(0, f"Usage request failed: {exc}") from exc
        self._check_response(response, "Usage request failed")
        return decode_usage(response.content)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._transport.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # type: ignore[no-untyped-def]
        self.close()

    def __copy__(self) -> Client:
        raise TypeError("Client owns its transport and cannot be copied")

    def __deepcopy__(self, memo: dict) -> Client:
        raise TypeError("Client owns its transport and cannot be copied")

    def __repr__(self) -> str:
        return f"Client(base_url={self.base_url!r}, closed={self._closed})"

    def _ensure_open(self) -> None:
        if self._closed:
            raise PxshotError("Client is closed")

    def _build_headers(self, json_content: bool) -> dict[str, str]:
        headers = {"Authorization": f"Bearer {self._config.api_key.get_secret_value()}"}
        if json_content:
            headers["Content-Type"] = "application/json"
        headers["User-Agent"] = self._config.user_agent or DEFAULT_USER_AGENT
        return headers

    @staticmethod
    def _check_response(response: TransportResponse, context: str) -> None:
        if response.status_code < 400:
            return
        envelope = decode_error_envelope(response.content)
        if envelope is None:
            raise HttpError(response.status_code, f"{context}: HTTP {response.status_code}")
        raise ApiError(envelope.code, envelope.message or "")
