"""Common dependency functions for API routes."""

from typing import Generator

from doc2json.core.config import Settings, get_settings


def get_app_settings() -> Generator[Settings, None, None]:
    yield get_settings()
