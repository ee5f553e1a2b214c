"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    picpeak_api_url: str
    picpeak_admin_token: str
    gallery_path_prefix: str = "/gallery"
    expiring_threshold_days: int = 7
    extension_days: int = 7
    autosave_interval_seconds: float = 2.0
    http_timeout_seconds: float = 15
    enabled_theme_presets: str | None = None
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_preset_allowlist(raw: str | None) -> set[str] | None:
    """Parse the enabled theme preset keys from env."""
    if raw is None:
        return None
    cleaned = raw.strip()
    if cleaned in {"", "*"}:
        return None
    keys: set[str] = set()
    for chunk in cleaned.split(","):
        value = chunk.strip()
        if value:
            keys.add(value)
    return keys or None
