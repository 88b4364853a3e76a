"""CLI command: objtasks rectangle -- show a rectangle as JSON with its area."""

from __future__ import annotations

from dataclasses import replace

import click

from objtasks.config import ObjtasksConfig
from objtasks.serialization import get_json
from objtasks.shapes import Rectangle


@click.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
@click.option("--indent", type=int, default=None, help="Pretty-print with this indent")
@click.option("--sort-keys", is_flag=True, default=False, help="Sort JSON keys")
@click.pass_obj
def rectangle(
    config: ObjtasksConfig, width: float, height: float, indent: int | None, sort_keys: bool
) -> None:
    """Print a WIDTH x HEIGHT rectangle as JSON followed by its area."""
    if indent is not None:
        config = replace(config, json_indent=indent)
    if sort_keys:
        config = replace(config, json_sort_keys=True)

    rect = Rectangle(width, height)
    click.echo(get_json(rect, indent=config.json_indent, sort_keys=config.json_sort_keys))
    click.echo(f"Area: {rect.get_area():g}")
