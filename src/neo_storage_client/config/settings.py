"""
Client configuration for the storage service client.

Values are read from ``STORAGE_CLIENT_*`` environment variables (or a ``.env``
file) and fall back to documented defaults.
"""
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_BASE = "http://localhost:8000"
DEFAULT_MAX_FILE_SIZE_BYTES = 50 * 1024 * 1024  # 50 MiB


class ClientSettings(BaseSettings):
    """Settings consumed by the storage client core."""

    model_config = SettingsConfigDict(
        env_prefix="STORAGE_CLIENT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Remote service
    api_base: str = Field(default=DEFAULT_API_BASE, description="Base API origin")
    request_timeout_seconds: float = Field(default=30.0, gt=0)

    # Upload limits
    max_file_size_bytes: int = Field(default=DEFAULT_MAX_FILE_SIZE_BYTES)

    # Session expiry debounce window
    unauthorized_cooldown_seconds: float = Field(default=0.5, ge=0)

    # Listing defaults
    default_page_size: int = Field(default=10, gt=0)
    default_sort: str = Field(default="desc", pattern="^(asc|desc)$")

    # Local persistence
    token_store_path: Path = Field(
        default_factory=lambda: Path.home() / ".neo_storage_client" / "session.json"
    )
    download_dir: Path = Field(default_factory=lambda: Path.home() / "Downloads")

    @field_validator("api_base")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        value = value.strip()
        return value.rstrip("/") or DEFAULT_API_BASE

    @field_validator("max_file_size_bytes", mode="before")
    @classmethod
    def _fallback_max_size(cls, value: Any) -> int:
        """Unparseable or non-positive sizes fall back to the default."""
        try:
            parsed = int(float(value))
        except (TypeError, ValueError, OverflowError):
            return DEFAULT_MAX_FILE_SIZE_BYTES
        return parsed if parsed > 0 else DEFAULT_MAX_FILE_SIZE_BYTES

    def endpoint(self, path: str) -> str:
        """Build an absolute service URL for ``path``."""
        return f"{self.api_base}/{path.lstrip('/')}"


@lru_cache()
def get_settings() -> ClientSettings:
    """Get cached client settings."""
    return ClientSettings()
