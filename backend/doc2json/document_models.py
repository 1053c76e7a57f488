"""Common document model definitions used across segmentation utilities."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Literal

BlockKind = Literal["paragraph", "heading", "preformatted"]

BLOCK_KINDS: tuple[BlockKind, ...] = ("paragraph", "heading", "preformatted")


@dataclass(slots=True, frozen=True)
class Block:
    """A typed run of source lines.

    Parameters
    ----------
    kind:
        The kind of block recognised in the source text.
    lines:
        Original input lines in source order, each including its trailing
        line terminator when the input had one.
    """

    kind: BlockKind
    lines: tuple[str, ...]

    def __post_init__(self) -> None:
        if self.kind not in BLOCK_KINDS:
            raise ValueError(f"Unknown block kind: {self.kind!r}")
        if not self.lines:
            raise ValueError("A block must contain at least one line")
        if self.kind == "heading" and len(self.lines) != 1:
            raise ValueError("A heading block must contain exactly one line")


Document = list[Block]


def document_lines(document: Iterable[Block]) -> str:
    """Return every retained line of ``document`` joined in source order."""

    return "".join(line for block in document for line in block.lines)


__all__ = [
    "BLOCK_KINDS",
    "Block",
    "BlockKind",
    "Document",
    "document_lines",
]
