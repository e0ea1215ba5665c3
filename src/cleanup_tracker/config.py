"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    cors_origins: str | None = None
    host: str = "0.0.0.0"  # noqa: S104
    port: int = 5000
    firebase_service_account: str | None = None
    firebase_credentials_file: str = "serviceAccountKey.json"
    firestore_project_id: str | None = None
    waste_collection: str = "wasteEntries"
    events_collection: str = "events"
    tips_collection: str = "tips"
    change_poll_interval_seconds: float = 10.0
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_cors_origins(raw: str | None) -> list[str]:
    """Parse allowed cross-origin callers from env."""
    if raw is None:
        return ["*"]
    cleaned = raw.strip()
    if cleaned in {"", "*"}:
        return ["*"]
    origins = [chunk.strip().rstrip("/") for chunk in cleaned.split(",")]
    return [origin for origin in origins if origin] or ["*"]
