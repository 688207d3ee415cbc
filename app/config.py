from __future__ import annotations

from functools import lru_cache
from typing import Literal, Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from a .env file if present (local dev only)
load_dotenv()


class Settings(BaseSettings):
    """Application configuration loaded from environment variables or .env file."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Backend API
    api_base_url: str = Field("https://app.disco.pics", description="Base URL of the Disco.pics backend API.")
    get_key: str = Field(..., description="Service key sent with owner preference lookups.")
    api_timeout: float = Field(5.0, description="Timeout (seconds) for backend API calls.")

    # Hostname resolution
    hostname_override: Optional[str] = Field(
        default=None,
        description="Fixed hostname used instead of the Host header, e.g. 'disco.pics' in development.",
    )

    # Site
    app_url: str = Field("https://app.disco.pics", description="Where the index page sends visitors.")
    site_url: str = Field("https://disco.pics", description="Marketing link shown in the page footer.")
    site_name: str = Field("Disco.pics")
    default_theme_colour: str = Field("#000000", description="Theme colour used when the uploader has none.")
    not_found_path: str = Field("/404")

    # Logging
    log_level: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = Field("INFO")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value


@lru_cache()
def get_settings() -> Settings:  # pragma: no cover
    """Return a cached Settings instance so it is only parsed once."""

    return Settings()
