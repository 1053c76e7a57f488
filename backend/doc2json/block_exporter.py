"""Helpers for converting segmented documents into their JSON exchange form."""
from __future__ import annotations

import logging
from typing import BinaryIO, Iterable

from pydantic import TypeAdapter

from .document_models import Block, BlockKind
from .errors import OutputWriteError, UnrecognizedBlockError
from .schemas import BlockSchema, BlockTag

logger = logging.getLogger("doc2json.block_exporter")

KIND_TAGS: dict[BlockKind, BlockTag] = {
    "paragraph": "p",
    "heading": "h",
    "preformatted": "pre",
}

_HTML_UNSAFE = ("<", ">", "&", chr(0x2028), chr(0x2029))
_HTML_ESCAPES = [
    (char.encode("utf-8"), ("\\u%04x" % ord(char)).encode("ascii")) for char in _HTML_UNSAFE
]

_blocks_adapter = TypeAdapter(list[BlockSchema])


def kind_tag(kind: str) -> BlockTag:
    try:
        return KIND_TAGS[kind]  # type: ignore[index]
    except KeyError:
        raise UnrecognizedBlockError(kind) from None


def _make_block(block: Block) -> BlockSchema:
    return BlockSchema(kind=kind_tag(block.kind), lines=list(block.lines))


def build_blocks_response(document: Iterable[Block]) -> list[BlockSchema]:
    """Convert segmented blocks to their exchange schemas, keeping order."""

    return [_make_block(block) for block in document]


def _escape_html(payload: bytes) -> bytes:
    # JSON keys are fixed ASCII words, so these bytes only occur inside line strings.
    for raw, escaped in _HTML_ESCAPES:
        payload = payload.replace(raw, escaped)
    return payload


def dump_blocks(
    document: Iterable[Block],
    *,
    indent: int | None = None,
    escape_html: bool = True,
) -> bytes:
    """Serialize ``document`` to a JSON array of ``{"Kind", "Lines"}`` objects.

    The output is minified unless ``indent`` is given. With ``escape_html``
    the characters ``<``, ``>``, ``&`` and the Unicode line and paragraph
    separators are written as escape sequences.
    """

    schemas = build_blocks_response(document)
    payload = _blocks_adapter.dump_json(schemas, by_alias=True, indent=indent)
    if escape_html:
        payload = _escape_html(payload)
    return payload


def write_all(stream: BinaryIO, payload: bytes) -> None:
    """Write ``payload`` to ``stream`` and flush, failing on a short write."""

    try:
        written = stream.write(payload)
        stream.flush()
    except OSError as exc:
        raise OutputWriteError(f"failed to write output: {exc}") from exc
    if written is not None and written < len(payload):
        raise OutputWriteError(f"short write: {written} of {len(payload)} bytes")
    logger.debug("Wrote %d bytes of output", len(payload))


__all__ = [
    "KIND_TAGS",
    "build_blocks_response",
    "dump_blocks",
    "kind_tag",
    "write_all",
]
