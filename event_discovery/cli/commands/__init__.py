"""CLI commands package."""

import click

from ..ui.logging import setup_logging
from .analyze import analyze
from .search import search


@click.group()
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v, -vv)")
def cli(verbose: int) -> None:
    """Event Discovery Search CLI."""
    setup_logging(verbose)


cli.add_command(analyze)
cli.add_command(search)
