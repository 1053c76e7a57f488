from __future__ import annotations

from typing import Iterator

import pytest

from doc2json.core.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Drop cached settings and ambient DOC2JSON_* variables around each test."""

    monkeypatch.delenv("DOC2JSON_JSON_INDENT", raising=False)
    monkeypatch.delenv("DOC2JSON_ESCAPE_HTML", raising=False)
    monkeypatch.delenv("DOC2JSON_MAX_UPLOAD_BYTES", raising=False)
    monkeypatch.delenv("DOC2JSON_LOG_LEVEL", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
