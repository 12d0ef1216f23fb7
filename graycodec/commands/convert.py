"""CLI commands for single-value conversion.

VALUE may be decimal, ``0x`` hexadecimal or ``0b`` binary; the result is
printed in the same base. Out-of-range values are rejected before any
transformation.

Examples
--------
  graycodec encode 7
  graycodec encode 0xff --width 8
  graycodec decode 0b100 --width 3
"""

from __future__ import annotations

from collections.abc import Callable

import click

from graycodec.bits import format_int, parse_int_literal
from graycodec.codec import GrayCodec
from graycodec.config import Config
from graycodec.errors import GrayCodecError


class IntLiteral(click.ParamType):
    """Unsigned integer literal that remembers its base."""

    name = "integer"

    def convert(self, value, param, ctx):
        if isinstance(value, tuple):
            return value
        try:
            return parse_int_literal(str(value))
        except ValueError as e:
            self.fail(str(e), param, ctx)


INT_LITERAL = IntLiteral()

_width_option = click.option(
    "width",
    "--width",
    "-w",
    type=int,
    default=Config.DEFAULT_WIDTH,
    show_default=True,
    help=f"Bit width (1..{Config.MAX_WIDTH})",
)


def _run(literal: tuple[int, int], width: int, pick: Callable[[GrayCodec], Callable[[int], int]]) -> None:
    value, base = literal
    try:
        codec = GrayCodec(width)
        result = pick(codec)(value)
    except GrayCodecError as e:
        raise click.ClickException(str(e))
    except Exception as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        raise SystemExit(1)
    click.echo(format_int(result, base, codec.width))


@click.command(name="encode")
@click.argument("value", type=INT_LITERAL)
@_width_option
def encode(value: tuple[int, int], width: int) -> None:
    """Convert binary VALUE to Gray code."""

    _run(value, width, lambda c: c.encode)


@click.command(name="decode")
@click.argument("value", type=INT_LITERAL)
@_width_option
def decode(value: tuple[int, int], width: int) -> None:
    """Convert Gray-code VALUE back to binary."""

    _run(value, width, lambda c: c.decode)
