"""Application configuration."""
from __future__ import annotations

from functools import lru_cache
from typing import Annotated, List

from pydantic import AliasChoices, Field, PositiveInt, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Central application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    api_version: str = Field(default="0.1.0", alias="API_VERSION")
    api_host: str = Field(default="127.0.0.1", alias="API_HOST")
    api_port: int = Field(default=8000, alias="API_PORT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Trend tracking
    trend_window: PositiveInt = Field(default=2, alias="TREND_WINDOW")
    max_history: PositiveInt = Field(default=50, alias="MAX_HISTORY")

    cors_allow_origins: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: ["*"],
        alias=AliasChoices("CORS_ALLOW_ORIGINS", "ALLOWED_ORIGINS"),
    )

    @field_validator("cors_allow_origins", mode="before")
    @classmethod
    def _split_origins(cls, value: object) -> List[str]:  # noqa: D401 - simple normalisation
        if value is None:
            return ["*"]
        if isinstance(value, str):
            if not value or value.strip() == "*":
                return ["*"]
            items = [item.strip() for item in value.split(",") if item.strip()]
            return items or ["*"]
        if isinstance(value, (list, tuple, set)):
            return [str(item).strip() for item in value if str(item).strip()]
        return ["*"]

    @field_validator("log_level", mode="after")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.strip().upper() or "INFO"

    @field_validator("trend_window", mode="after")
    @classmethod
    def _min_window(cls, value: int) -> int:
        return max(2, value)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
