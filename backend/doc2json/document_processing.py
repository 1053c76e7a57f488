"""Utility helpers for reading documents into blocks."""
from __future__ import annotations

from .document_models import Document
from .document_text import decode_text
from .segmenter import segment


def load_blocks(payload: bytes) -> Document:
    """Decode ``payload`` and return its blocks."""

    return segment(decode_text(payload))


__all__ = ["load_blocks"]
