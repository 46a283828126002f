from pxshot.adapters.schemas.v1 import (
    ClientConfig,
    ErrorEnvelope,
    Format,
    ScreenshotOptions,
    StoredScreenshot,
    Usage,
    WaitUntil,
)

__all__ = [
    "ClientConfig",
    "ErrorEnvelope",
    "Format",
    "ScreenshotOptions",
    "StoredScreenshot",
    "Usage",
    "WaitUntil",
]
