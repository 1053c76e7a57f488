"""Split doc-comment style plain text into paragraph, heading and preformatted blocks."""
from __future__ import annotations

import logging
from typing import Literal

from .document_models import Block, BlockKind, Document

logger = logging.getLogger("doc2json.segmenter")

_State = Literal["none", "paragraph", "preformatted"]

# Punctuation a heading may contain besides letters, digits and spaces.
_HEADING_PUNCTUATION = frozenset("'-(),.")


def split_lines(text: str) -> list[str]:
    """Split ``text`` after every newline, keeping the terminators.

    Only ``\\n`` ends a line; a carriage return in front of it stays part of
    the line. A final fragment without a terminator is kept as its own line.
    """

    pieces = text.split("\n")
    tail = pieces.pop()
    lines = [piece + "\n" for piece in pieces]
    if tail:
        lines.append(tail)
    return lines


def is_blank(line: str) -> bool:
    return not line.strip()


def is_indented(line: str) -> bool:
    return line[:1].isspace() and not is_blank(line)


def _strip_terminator(line: str) -> str:
    return line.removesuffix("\n").removesuffix("\r")


def is_heading(line: str) -> bool:
    """Return ``True`` when ``line`` reads like a section title.

    The line (terminator and trailing whitespace excluded) must start with
    an upper-case letter, end with a letter or digit, and contain only
    letters, digits, spaces and ``'-(),.``. An apostrophe is accepted only
    as a possessive ``'s`` and a period only when something other than a
    space follows it, so ``Go 1.2 Release`` qualifies while ``Don't panic``
    and ``Done. Next`` do not.
    """

    text = _strip_terminator(line)
    if not text or text[0].isspace():
        return False
    text = text.rstrip()

    first, last = text[0], text[-1]
    if not (first.isalpha() and first.isupper()):
        return False
    if not (last.isalpha() or last.isdigit()):
        return False

    for index, char in enumerate(text):
        if char.isalpha() or char.isdigit() or char == " ":
            continue
        if char not in _HEADING_PUNCTUATION:
            return False
        following = text[index + 1 : index + 2]
        if char == "'" and (following != "s" or text[index + 2 : index + 3] not in ("", " ")):
            return False
        if char == "." and following in ("", " "):
            return False
    return True


def segment(text: str) -> Document:
    """Return the ordered blocks found in ``text``.

    Blank lines separate blocks and are dropped. Indented lines form
    preformatted blocks, every other line belongs to a paragraph. A
    one-line paragraph bounded by blank lines (or the edges of the input)
    becomes a heading when :func:`is_heading` accepts it.
    """

    lines = split_lines(text)
    blocks: Document = []
    current: list[str] = []
    state: _State = "none"
    after_blank = True
    opened_after_blank = False

    def close(*, by_separator: bool) -> None:
        nonlocal current, state
        if state == "none":
            return
        kind: BlockKind = "preformatted"
        if state == "paragraph":
            kind = "paragraph"
            if (
                by_separator
                and opened_after_blank
                and len(current) == 1
                and is_heading(current[0])
            ):
                kind = "heading"
        blocks.append(Block(kind=kind, lines=tuple(current)))
        current = []
        state = "none"

    for line in lines:
        if is_blank(line):
            close(by_separator=True)
            after_blank = True
            continue

        if is_indented(line):
            if state != "preformatted":
                close(by_separator=False)
                state = "preformatted"
        elif state != "paragraph":
            close(by_separator=False)
            state = "paragraph"
            opened_after_blank = after_blank

        current.append(line)
        after_blank = False

    close(by_separator=True)

    logger.debug("Segmented %d lines into %d blocks", len(lines), len(blocks))
    return blocks


__all__ = ["is_blank", "is_heading", "is_indented", "segment", "split_lines"]
