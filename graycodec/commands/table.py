"""CLI command listing the full Gray sequence for a small width.

Examples
--------
  graycodec table --width 3
  graycodec table --width 4 --format csv
"""

from __future__ import annotations

import json
from typing import Any

import click

from graycodec.bits import to_bitstring
from graycodec.codec import GrayCodec
from graycodec.config import Config
from graycodec.errors import GrayCodecError


def gray_table_rows(codec: GrayCodec) -> list[dict[str, Any]]:
    """One row per value in counting order: index, binary and Gray forms."""

    rows: list[dict[str, Any]] = []
    for a, g in enumerate(codec.sequence()):
        rows.append(
            {
                "index": a,
                "binary": to_bitstring(a, codec.width),
                "gray": to_bitstring(g, codec.width),
                "gray_value": g,
            }
        )
    return rows


def format_rows_ascii(rows: list[dict[str, Any]]) -> str:
    headers = ["index", "binary", "gray", "gray_value"]
    cells = [[str(r[h]) for h in headers] for r in rows]
    widths = [max(len(h), *(len(c[i]) for c in cells)) if cells else len(h) for i, h in enumerate(headers)]

    def _fmt_row(cols: list[str]) -> str:
        return " | ".join(col.rjust(widths[i]) for i, col in enumerate(cols))

    sep = "-+-".join("-" * w for w in widths)
    lines = [_fmt_row(headers), sep]
    for c in cells:
        lines.append(_fmt_row(c))
    return "\n".join(lines)


def format_rows_csv(rows: list[dict[str, Any]]) -> str:
    headers = ["index", "binary", "gray", "gray_value"]
    out_lines = [",".join(headers)]
    for r in rows:
        out_lines.append(",".join(str(r[h]) for h in headers))
    return "\n".join(out_lines)


@click.command(name="table")
@click.option(
    "width",
    "--width",
    "-w",
    type=int,
    default=Config.DEFAULT_TABLE_WIDTH,
    show_default=True,
    help=f"Bit width (1..{Config.MAX_TABLE_WIDTH})",
)
@click.option(
    "output_format",
    "--format",
    type=click.Choice(["table", "json", "csv"], case_sensitive=False),
    default="table",
    show_default=True,
    help="Output format",
)
def table(width: int, output_format: str) -> None:
    """Print binary and Gray code for every WIDTH-bit value."""

    if width > Config.MAX_TABLE_WIDTH:
        raise click.ClickException(
            f"--width must be <= {Config.MAX_TABLE_WIDTH} for table output (got {width})."
        )
    try:
        codec = GrayCodec(width)
    except GrayCodecError as e:
        raise click.ClickException(str(e))

    rows = gray_table_rows(codec)
    fmt = output_format.lower()
    if fmt == "json":
        click.echo(json.dumps({"codec": codec.to_dict(), "rows": rows}, indent=2))
    elif fmt == "csv":
        click.echo(format_rows_csv(rows))
    else:
        click.echo(format_rows_ascii(rows))
