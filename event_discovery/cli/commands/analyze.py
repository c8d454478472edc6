"""Analyze command: show the intent extracted from a prompt."""

import json
import logging
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from ...integrations.intent import get_intent_provider

logger = logging.getLogger(__name__)
console = Console()


@click.command()
@click.argument("prompt")
@click.option("--service-url", default=None, help="Intent service URL")
@click.option("--format", "output_format", type=click.Choice(["table", "json"]),
              default="table", help="Output format")
def analyze(prompt: str, service_url: Optional[str], output_format: str) -> None:
    """Extract categories, keywords, price and time hints from a prompt."""
    analysis = get_intent_provider(service_url).analyze(prompt)

    if output_format == "json":
        click.echo(json.dumps(analysis.to_dict(), indent=2))
        return

    table = Table(title=f"Intent for: {prompt}", show_header=True, header_style="bold")
    table.add_column("Field", style="cyan")
    table.add_column("Value")

    price = analysis.price_range
    table.add_row("Categories", ", ".join(analysis.categories) or "-")
    table.add_row("Keywords", ", ".join(analysis.keywords) or "-")
    table.add_row("Price", f"{price.min:g} - {price.max:g}" if price else "any")
    table.add_row("Time", analysis.time_preference)
    table.add_row("Location", analysis.location)
    console.print(table)

    if analysis.is_fallback:
        console.print("[yellow]Intent service unavailable, showing fallback analysis[/yellow]")
