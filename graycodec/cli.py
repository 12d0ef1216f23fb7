"""Command-line interface for graycodec using Click command groups."""

from __future__ import annotations

import logging
from typing import NoReturn

import click

from graycodec import __version__


@click.group()
@click.version_option(version=__version__)
@click.option("verbose", "--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """graycodec: fixed-width binary <-> Gray code conversion."""

    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# Register subcommands
from graycodec.commands.convert import encode, decode  # noqa: E402
from graycodec.commands.table import table  # noqa: E402
from graycodec.commands.verify import verify  # noqa: E402

cli.add_command(encode)
cli.add_command(decode)
cli.add_command(table)
cli.add_command(verify)


def main() -> NoReturn:
    """Entry point for the CLI."""
    cli()
