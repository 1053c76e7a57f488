"""Application configuration and settings management."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="DOC2JSON_", extra="ignore")

    app_name: str = Field(default="doc2json", description="Human readable application name.")
    environment: Literal["local", "development", "staging", "production"] = Field(
        default="local",
        description="Deployment environment name.",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Logging level for the command line and the API.",
    )
    json_indent: int | None = Field(
        default=None,
        ge=0,
        description="Indentation of the JSON output; unset produces minified JSON.",
    )
    escape_html: bool = Field(
        default=True,
        description="Escape <, > and & inside JSON strings the way Go's encoder does.",
    )
    max_upload_bytes: int = Field(
        default=5 * 1024 * 1024,
        gt=0,
        description="Largest document the HTTP API accepts, in bytes.",
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings."""

    return Settings()
