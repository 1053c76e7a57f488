"""Command line entry point: documentation text on stdin, JSON blocks on stdout.

Usage::

    $ doc2json < README.txt > blocks.json

The command takes no arguments. It exits with 0 on success, 1 when the
input cannot be read or is not UTF-8, 2 on a usage or configuration error
and 3 when the output cannot be produced or written.
"""
from __future__ import annotations

import logging
import sys

import click
from pydantic import ValidationError

from .block_exporter import dump_blocks, write_all
from .core.config import Settings, get_settings
from .document_text import read_text
from .errors import EXIT_USAGE_ERROR, Doc2JsonError
from .segmenter import segment

logger = logging.getLogger("doc2json.cli")


def _configure_logging(level: str) -> None:
    logging.basicConfig(level=level, format="doc2json: %(message)s")


def _load_settings() -> Settings:
    try:
        return get_settings()
    except ValidationError as exc:
        _configure_logging("WARNING")
        logger.error("invalid configuration: %s", exc)
        raise SystemExit(EXIT_USAGE_ERROR) from exc


class NoArgumentsCommand(click.Command):
    """A command that refuses every argument except the help option.

    The raw argument list is checked before click parses it, so even a bare
    ``--`` separator counts as an argument.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        if any(arg not in ctx.help_option_names for arg in args):
            raise click.UsageError(f"{ctx.info_name} does not take any arguments", ctx=ctx)
        return super().parse_args(ctx, args)


@click.command(cls=NoArgumentsCommand)
@click.pass_context
def main(ctx: click.Context) -> None:
    """Read doc-comment formatted text from stdin and write JSON blocks to stdout.

    Each block is an object with a Kind ("p" paragraph, "h" heading, "pre"
    preformatted text) and the list of original Lines.
    """

    settings = _load_settings()
    _configure_logging(settings.log_level)

    try:
        text = read_text(sys.stdin.buffer)
        document = segment(text)
        payload = dump_blocks(
            document,
            indent=settings.json_indent,
            escape_html=settings.escape_html,
        )
        write_all(sys.stdout.buffer, payload)
    except Doc2JsonError as exc:
        logger.error("%s", exc)
        ctx.exit(exc.exit_code)

    logger.info("Converted %d blocks", len(document))


if __name__ == "__main__":  # pragma: no cover
    main()
