"""Application configuration and settings management."""

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="TURF_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    api_url: str = Field(
        default="https://api.turfgame.com/v4/zones",
        description="Bulk zone metadata endpoint of the Turf API.",
    )
    timeout_seconds: float = Field(default=30.0, ge=0.0)
    max_retries: int = Field(
        default=0,
        ge=0,
        description="Extra attempts after a failed bulk request. Zero sends exactly one request.",
    )
    backoff_seconds: float = Field(default=1.0, ge=0.0)
    exclude_self_loops: bool = Field(
        default=False,
        description="Drop connections whose endpoints resolve to the same zone when building graphs.",
    )

    @field_validator("api_url", mode="before")
    @classmethod
    def _normalise_url(cls, value: Any) -> str:
        url = str(value).strip()
        if not url:
            raise ValueError("api_url must not be empty")
        return url.rstrip("/")


settings = Settings()
