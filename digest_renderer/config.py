"""
Renderer settings.

Values come from the environment (``DIGEST_*``) or a local ``.env`` file.
Everything here can also be passed explicitly to ``DigestRenderer``.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from digest_renderer.logging_config import LogLevel


class Settings(BaseSettings):
    """Global renderer configuration."""

    model_config = SettingsConfigDict(
        env_prefix="DIGEST_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    theme: str = Field("web", description="Default theme name")
    currency: str = Field("CZK", description="Currency code for bare amounts")
    decimal_separator: str = Field(",", description="Decimal separator for bare amounts")
    thousands_separator: str = Field(" ", description="Thousands separator for bare amounts")
    custom_css: str = Field("", description="CSS appended after the theme stylesheet")
    template_path: Path | None = Field(None, description="Custom Jinja2 document template")
    log_level: LogLevel = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()
