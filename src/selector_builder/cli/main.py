"""Selector builder CLI entry point: Click group with subcommands."""

import logging

import click

from selector_builder import __version__


@click.group()
@click.version_option(version=__version__, prog_name="selector-builder")
@click.option("--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Selector builder - assemble CSS selectors from their parts."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


# Import and register subcommands
from selector_builder.cli.build import build  # noqa: E402
from selector_builder.cli.area import area  # noqa: E402

cli.add_command(build)
cli.add_command(area)
