# app/core/config.py
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

PROJECT_ROOT = Path(__file__).resolve().parents[2]


class Settings(BaseSettings):
    # In-memory SQLite: tickets live only as long as the process
    DATABASE_URL: str = Field(default="sqlite://")
    APP_NAME: str = "Helpdesk Ticket Tracker"
    APP_DESC: str = "Submit and track helpdesk tickets"
    APP_VERSION: str = "1.0.0"
    LOG_LEVEL: str = "INFO"

    # Comma-separated list; unset means every origin
    CORS_ORIGINS: str | None = None

    STATIC_DIR: str = Field(default=str(PROJECT_ROOT / "static"))
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    TICKET_NUMBER_MAX_ATTEMPTS: int = Field(default=100, ge=1)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def cors_origins(self) -> list[str]:
        if not self.CORS_ORIGINS:
            return ["*"]
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()


__all__ = ["Settings", "get_settings"]
