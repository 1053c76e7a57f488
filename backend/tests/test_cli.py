"""Tests for the doc2json command line entry point."""

from __future__ import annotations

import json
import logging

import pytest
from click.testing import CliRunner

from doc2json import cli
from doc2json.errors import OutputWriteError


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def test_converts_stdin_to_minified_json(runner: CliRunner) -> None:
    result = runner.invoke(cli.main, input=b"Overview\n\nThis is text.\n")

    assert result.exit_code == 0
    assert result.stdout_bytes == (
        b'[{"Kind":"h","Lines":["Overview\\n"]},{"Kind":"p","Lines":["This is text.\\n"]}]'
    )


def test_empty_input_writes_empty_array(runner: CliRunner) -> None:
    result = runner.invoke(cli.main, input=b"")

    assert result.exit_code == 0
    assert result.stdout_bytes == b"[]"


def test_rejects_arguments(runner: CliRunner) -> None:
    result = runner.invoke(cli.main, ["input.txt"], input=b"Overview\n")

    assert result.exit_code == 2
    assert "does not take any arguments" in result.output
    assert "Kind" not in result.output


def test_rejects_unknown_options(runner: CliRunner) -> None:
    result = runner.invoke(cli.main, ["--pretty"], input=b"Overview\n")

    assert result.exit_code == 2
    assert "does not take any arguments" in result.output


@pytest.mark.parametrize("args", [["--"], ["--", "input.txt"], ["-"]])
def test_rejects_separator_and_dash_arguments(runner: CliRunner, args: list[str]) -> None:
    result = runner.invoke(cli.main, args, input=b"Overview\n")

    assert result.exit_code == 2
    assert "does not take any arguments" in result.output
    assert "Kind" not in result.output


def test_help_is_still_available(runner: CliRunner) -> None:
    result = runner.invoke(cli.main, ["--help"])

    assert result.exit_code == 0
    assert "Usage:" in result.output


def test_invalid_utf8_exits_with_input_error(
    runner: CliRunner, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.ERROR, logger="doc2json.cli"):
        result = runner.invoke(cli.main, input=b"bad \xff byte\n")

    assert result.exit_code == 1
    assert result.stdout_bytes == b""
    assert "not valid UTF-8" in caplog.text


def test_write_failure_exits_with_output_error(
    runner: CliRunner, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    def broken_write(stream, payload: bytes) -> None:
        raise OutputWriteError("short write: 0 of 2 bytes")

    monkeypatch.setattr(cli, "write_all", broken_write)

    with caplog.at_level(logging.ERROR, logger="doc2json.cli"):
        result = runner.invoke(cli.main, input=b"Text.\n")

    assert result.exit_code == 3
    assert "short write" in caplog.text


def test_indent_from_environment(runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DOC2JSON_JSON_INDENT", "2")

    result = runner.invoke(cli.main, input=b"Overview\n")

    assert result.exit_code == 0
    assert result.stdout_bytes.startswith(b"[\n  {")
    assert json.loads(result.stdout_bytes) == [{"Kind": "h", "Lines": ["Overview\n"]}]


def test_invalid_configuration_is_a_usage_error(
    runner: CliRunner, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("DOC2JSON_JSON_INDENT", "wide")

    result = runner.invoke(cli.main, input=b"Overview\n")

    assert result.exit_code == 2
