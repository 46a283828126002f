from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from pxshot.adapters.schemas import ClientConfig
from pxshot.domain.errors import ValidationError


class PxshotSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        populate_by_name=True,
        extra="ignore",
    )

    api_key: str | None = Field(default=None, alias="PXSHOT_API_KEY")
    base_url: str = Field(default="https://api.pxshot.com", alias="PXSHOT_BASE_URL")
    timeout_seconds: float = Field(default=60, alias="PXSHOT_TIMEOUT_SECONDS")
    user_agent: str | None = Field(default=None, alias="PXSHOT_USER_AGENT")

    def to_client_config(self) -> ClientConfig:
        if not self.api_key:
            raise ValidationError("PXSHOT_API_KEY environment variable not set")
        return ClientConfig(
            api_key=self.api_key,
            base_url=self.base_url,
            timeout_seconds=self.timeout_seconds,
            user_agent=self.user_agent,
        )


def get_pxshot_settings() -> PxshotSettings:
    return PxshotSettings()
