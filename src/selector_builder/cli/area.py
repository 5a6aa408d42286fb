"""CLI command: selector-builder area -- show a rectangle record and its area."""

from __future__ import annotations

import click

from selector_builder.records import Rectangle, to_json


@click.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
def area(width: float, height: float) -> None:
    """Print a WIDTH x HEIGHT rectangle as JSON, followed by its area."""
    rect = Rectangle(width=width, height=height)
    click.echo(to_json(rect))
    value = rect.area()
    click.echo(f"Area: {int(value) if value.is_integer() else value}")
