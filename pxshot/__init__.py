from pxshot.adapters.schemas import (
    ClientConfig,
    Format,
    ScreenshotOptions,
    StoredScreenshot,
    Usage,
    WaitUntil,
)
from pxshot.application.facade import Client
from pxshot.domain.errors import ApiError, HttpError, PxshotError, ValidationError
from pxshot.domain.result import ResultKind, ScreenshotResult
from pxshot.version import __version__

__all__ = [
    "ApiError",
    "Client",
    "ClientConfig",
    "Format",
    "HttpError",
    "PxshotError",
    "ResultKind",
    "ScreenshotOptions",
    "ScreenshotResult",
    "StoredScreenshot",
    "Usage",
    "ValidationError",
    "WaitUntil",
    "__version__",
]
