"""Exception hierarchy for the conversion boundary layers.

Segmentation itself never fails; everything here belongs to reading the
input, serializing the result, or writing it out.
"""
from __future__ import annotations

EXIT_INPUT_ERROR = 1
EXIT_USAGE_ERROR = 2
EXIT_OUTPUT_ERROR = 3


class Doc2JsonError(RuntimeError):
    """Base class for all conversion errors.

    Attributes:
        exit_code: Process status the command line reports for this error.
    """

    exit_code = EXIT_INPUT_ERROR


class InputReadError(Doc2JsonError):
    """Raised when the input stream cannot be read."""


class DocumentDecodeError(Doc2JsonError, ValueError):
    """Raised when the input is not valid UTF-8.

    Attributes:
        position: Byte offset of the first malformed sequence.
    """

    def __init__(self, message: str, position: int | None = None) -> None:
        self.position = position
        super().__init__(message)


class UnrecognizedBlockError(Doc2JsonError):
    """Raised when a block carries a kind that has no output tag."""

    exit_code = EXIT_OUTPUT_ERROR

    def __init__(self, kind: object) -> None:
        self.kind = kind
        super().__init__(f"segmenter returned unrecognized block kind {kind!r}")


class OutputWriteError(Doc2JsonError):
    """Raised when the serialized output cannot be written in full."""

    exit_code = EXIT_OUTPUT_ERROR


__all__ = [
    "Doc2JsonError",
    "DocumentDecodeError",
    "EXIT_INPUT_ERROR",
    "EXIT_OUTPUT_ERROR",
    "EXIT_USAGE_ERROR",
    "InputReadError",
    "OutputWriteError",
    "UnrecognizedBlockError",
]
