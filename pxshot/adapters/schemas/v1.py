from enum import Enum

from pydantic import BaseModel, Field, SecretStr


class Format(str, Enum):
    png = "png"
    jpeg = "jpeg"
    webp = "webp"


class WaitUntil(str, Enum):
    load = "load"
    domcontentloaded = "domcontentloaded"
    networkidle = "networkidle"
    commit = "commit"


class ScreenshotOptions(BaseModel):
    url: str
    format: Format | None = None
    quality: int | None = None
    width: int | None = None
    height: int | None = None
    full_page: bool | None = None
    wait_until: WaitUntil | None = None
    wait_for_selector: str | None = None
    wait_for_timeout: int | None = None
    device_scale_factor: float | None = None
    store: bool | None = None
    block_ads: bool | None = None

    model_config = {"extra": "forbid"}


class StoredScreenshot(BaseModel):
    url: str
    expires_at: str
    width: int = Field(gt=0)
    height: int = Field(gt=0)
    size_bytes: int = Field(ge=0)

    model_config = {"extra": "ignore", "strict": True, "frozen": True}


class Usage(BaseModel):
    screenshots_taken: int
    screenshots_limit: int
    storage_bytes_used: int
    storage_bytes_limit: int
    period_start: str
    period_end: str

    model_config = {"extra": "ignore", "strict": True, "frozen": True}


class ErrorEnvelope(BaseModel):
    code: str = "unknown"
    message: str | None = None

    model_config = {"extra": "ignore", "strict": True}


class ClientConfig(BaseModel):
    api_key: SecretStr
    base_url: str = "https://api.pxshot.com"
    timeout_seconds: float = 60
    user_agent: str | None = None

    model_config = {"extra": "forbid", "frozen": True}
