"""CLI command running the Gray code property suite.

Widths up to ``--exhaustive-max-width`` are enumerated completely; wider codecs
are checked on ``--samples`` seeded random values. Exits with status 1 when any
property fails.

Examples
--------
  graycodec verify
  graycodec verify --min-width 1 --max-width 16 --format json
  graycodec verify --samples 10000 --seed 7
"""

from __future__ import annotations

import json

import click

from graycodec.config import Config
from graycodec.validation import format_property_results, run_property_suite


@click.command(name="verify")
@click.option(
    "min_width",
    "--min-width",
    type=click.IntRange(Config.MIN_WIDTH, Config.MAX_WIDTH),
    default=Config.MIN_WIDTH,
    show_default=True,
    help="Smallest width to check",
)
@click.option(
    "max_width",
    "--max-width",
    type=click.IntRange(Config.MIN_WIDTH, Config.MAX_WIDTH),
    default=Config.MAX_WIDTH,
    show_default=True,
    help="Largest width to check",
)
@click.option(
    "exhaustive_max_width",
    "--exhaustive-max-width",
    type=click.IntRange(0, Config.EXHAUSTIVE_LIMIT),
    default=Config.EXHAUSTIVE_MAX_WIDTH,
    show_default=True,
    help="Enumerate every value up to this width",
)
@click.option(
    "samples",
    "--samples",
    type=click.IntRange(min=1),
    default=Config.SAMPLE_COUNT,
    show_default=True,
    help="Random values per width above the exhaustive limit",
)
@click.option(
    "seed",
    "--seed",
    type=int,
    default=Config.RANDOM_SEED,
    show_default=True,
    help="Random seed",
)
@click.option(
    "output_format",
    "--format",
    type=click.Choice(["table", "json"], case_sensitive=False),
    default="table",
    show_default=True,
    help="Output format",
)
def verify(
    min_width: int,
    max_width: int,
    exhaustive_max_width: int,
    samples: int,
    seed: int,
    output_format: str,
) -> None:
    """Check round-trip, bijectivity, single-bit change and top-bit identity."""

    if max_width < min_width:
        raise click.ClickException("--max-width must be >= --min-width.")

    try:
        summary = run_property_suite(
            widths=range(min_width, max_width + 1),
            exhaustive_max_width=exhaustive_max_width,
            samples=samples,
            seed=seed,
        )
    except click.ClickException:
        raise
    except Exception as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        raise SystemExit(1)

    fmt = output_format.lower()
    rendered = format_property_results(summary, output_format=fmt)
    if isinstance(rendered, dict):
        click.echo(json.dumps(rendered, indent=2))
    else:
        click.echo(rendered)

    if summary["passed"]:
        if fmt == "json":
            return
        click.secho(f"OK: all properties hold for widths {min_width}..{max_width}", fg="green")
    else:
        click.secho("FAIL: one or more properties do not hold", fg="red", err=True)
        raise SystemExit(1)
