from __future__ import annotations

import json

from pydantic import ValidationError as PydanticValidationError

from pxshot.adapters.schemas import ErrorEnvelope, ScreenshotOptions, StoredScreenshot, Usage
from pxshot.domain.errors import PxshotError


def encode_screenshot_options(options: ScreenshotOptions) -> dict:
    """Wire payload for ``POST /v1/screenshot``.

    ``url`` is always present. Other keys appear only when the caller set the
    field; the service treats a missing key differently from an explicit
    default, so nothing is filled in here.
    """
    return options.model_dump(mode="json", exclude_none=True)


def dump_payload(payload: dict) -> bytes:
    return json.dumps(payload, separators=(",", ":"), allow_nan=False).encode("utf-8")


def decode_stored_screenshot(body: bytes) -> StoredScreenshot:
    try:
        return StoredScreenshot.model_validate_json(body)
    except PydanticValidationError as exc:
        raise PxshotError(f"Failed to parse stored screenshot response: {exc}") from exc


def decode_usage(body: bytes) -> Usage:
    try:
        return Usage.model_validate_json(body)
    except PydanticValidationError as exc:
        raise PxshotError(f"Failed to parse usage response: {exc}") from exc


def decode_error_envelope(body: bytes) -> ErrorEnvelope | None:
    try:
        envelope = ErrorEnvelope.model_validate_json(body)
    except PydanticValidationError:
        return None
    if envelope.message is None:
        raw = body.decode("utf-8", errors="replace")
        envelope = envelope.model_copy(update={"message": raw})
    return envelope
