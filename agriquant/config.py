"""Application settings loaded from environment variables via pydantic-settings."""

from enum import StrEnum
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class ChatReplyMode(StrEnum):
    classifier = "classifier"
    plan_summary = "plan_summary"


class LogFormat(StrEnum):
    json = "json"
    console = "console"


class Settings(BaseSettings):
    """Central configuration — all values sourced from env vars or .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # ── Redis (logbook persistence) ─────────────────────────────────────────
    redis_url: str = "redis://localhost:6379/0"
    logbook_persistence_enabled: bool = True
    logbook_storage_key: str = "agriquant:logbook"

    # ── Chat ────────────────────────────────────────────────────────────────
    chat_reply_delay_seconds: float = 0.6
    chat_reply_mode: ChatReplyMode = ChatReplyMode.classifier

    # ── Alerts ──────────────────────────────────────────────────────────────
    alert_history_limit: int = 10

    # ── Observability ───────────────────────────────────────────────────────
    log_level: str = "info"
    log_format: LogFormat = LogFormat.json


@lru_cache
def get_settings() -> Settings:
    """Singleton settings instance (cached after first call)."""
    return Settings()
