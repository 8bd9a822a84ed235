# existence/config.py
from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    DISCORD_BOT_TOKEN: str = ""

    # 0 => not configured, publisher skips that target
    DISCORD_CHANNEL_ID: int = 0  # catalog menu
    STATUS_CHANNEL_ID: int = 0
    NEWS_CHANNEL_ID: int = 0

    DATABASE_URL: str = "sqlite+aiosqlite:///./existence.db"

    HISTORY_SCAN_LIMIT: int = 10
    STATUS_REFRESH_SECONDS: int = 5 * 60 * 60
    STATUS_SEND_DELAY: float = 0.5

    PORT: int = 8080
    DEBUG: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
