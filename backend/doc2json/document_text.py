"""Utilities for turning raw input bytes into document text."""
from __future__ import annotations

import logging
from typing import BinaryIO

from .errors import DocumentDecodeError, InputReadError

logger = logging.getLogger("doc2json.document_text")


def decode_text(payload: bytes) -> str:
    """Decode ``payload`` as strict UTF-8.

    Nothing is normalised: a byte order mark or carriage returns survive
    into the returned text unchanged.
    """

    try:
        return payload.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DocumentDecodeError(
            f"input is not valid UTF-8 (byte {exc.start}: {exc.reason})",
            position=exc.start,
        ) from exc


def read_payload(stream: BinaryIO) -> bytes:
    try:
        payload = stream.read()
    except OSError as exc:
        raise InputReadError(f"failed to read input: {exc}") from exc
    logger.debug("Read %d bytes of input", len(payload))
    return payload


def read_text(stream: BinaryIO) -> str:
    """Read ``stream`` to the end and return its contents as text."""

    return decode_text(read_payload(stream))


__all__ = ["decode_text", "read_payload", "read_text"]
