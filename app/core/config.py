"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Everything has a default so the service starts with
no environment at all; model validation runs at load time.
"""

from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env."""

    # App
    app_name: str = "document-hub"
    app_version: str = "1.0.0"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 3001
    api_prefix: str = "/api"

    # CORS
    allowed_origins: str = "*"

    # Storage
    storage_backend: str = "local"
    storage_root: str = "uploads"
    serve_uploads: bool = True
    max_upload_size: int = 100 * 1024 * 1024  # 100MB

    # Request / middleware
    request_id_header: str = "X-Request-ID"

    # Mock actor attributed to every change until authentication exists.
    mock_actor: str = "Ahmed Mohamud"

    # Dashboard
    active_users_placeholder: int = 5
    recent_activity_limit: int = 5

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_storage_and_limits(self) -> "Settings":
        """Validate storage backend and numeric limits."""
        if self.storage_backend != "local":
            raise ValueError(
                f"Invalid storage_backend '{self.storage_backend}'. Must be: 'local'"
            )
        if not self.storage_root:
            raise ValueError("STORAGE_ROOT is required for the local storage backend")
        if self.recent_activity_limit < 1:
            raise ValueError("recent_activity_limit must be at least 1")
        if self.max_upload_size < 1:
            raise ValueError("max_upload_size must be at least 1 byte")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    In tests, call get_settings.cache_clear() before overriding env vars
    so the next get_settings() uses the new values.
    """
    return Settings()
