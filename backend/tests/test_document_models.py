from __future__ import annotations

import dataclasses

import pytest

from doc2json.document_models import Block, document_lines
from doc2json.errors import (
    EXIT_INPUT_ERROR,
    EXIT_OUTPUT_ERROR,
    Doc2JsonError,
    InputReadError,
    OutputWriteError,
    UnrecognizedBlockError,
)


def test_block_requires_lines() -> None:
    with pytest.raises(ValueError, match="at least one line"):
        Block(kind="paragraph", lines=())


def test_heading_holds_one_line() -> None:
    with pytest.raises(ValueError, match="exactly one line"):
        Block(kind="heading", lines=("A\n", "B\n"))


def test_unknown_kind_is_rejected() -> None:
    with pytest.raises(ValueError, match="Unknown block kind"):
        Block(kind="table", lines=("x\n",))  # type: ignore[arg-type]


def test_block_is_immutable() -> None:
    block = Block(kind="paragraph", lines=("x\n",))

    with pytest.raises(dataclasses.FrozenInstanceError):
        block.kind = "heading"  # type: ignore[misc]


def test_document_lines_concatenates_in_order() -> None:
    blocks = [
        Block(kind="heading", lines=("Title\n",)),
        Block(kind="preformatted", lines=("\ta\n", "\tb\n")),
    ]

    assert document_lines(blocks) == "Title\n\ta\n\tb\n"


def test_error_exit_codes() -> None:
    assert InputReadError("x").exit_code == EXIT_INPUT_ERROR
    assert OutputWriteError("x").exit_code == EXIT_OUTPUT_ERROR
    assert UnrecognizedBlockError("table").exit_code == EXIT_OUTPUT_ERROR
    assert "table" in str(UnrecognizedBlockError("table"))
    assert isinstance(OutputWriteError("x"), Doc2JsonError)
