"""
Search Command for Event Discovery CLI

This module provides the search command: it loads the event catalog, runs a
free-text search with optional filters and prints the ranked results.

Command Options:
1. Search Parameters:
   - Query text
   - Category filter (repeatable)
   - Price range
   - Date range
   - Result limit

2. Display Options:
   - Output format (table/json)

3. Intent Options:
   - Run intent extraction first (--ai)
   - Intent service URL

Example Usage:
    $ event-discovery search "jazz music tonight"
    $ event-discovery search "fitness" --max-price 200
    $ event-discovery search "yoga" --category fitness --format json
    $ event-discovery search "games this weekend" --ai
"""

import json
import logging
import sys
from datetime import datetime
from typing import List, Optional, Tuple

import click
from rich.console import Console
from rich.table import Table

from ...catalog import load_catalog
from ...config import config
from ...errors import EventDiscoveryError
from ...integrations.intent import explain_results, get_intent_provider
from ...search import EventSearcher, PriceWindow, ScoredEvent, SearchOptions, TimeWindow

logger = logging.getLogger(__name__)
console = Console()


def build_options(
    categories: Tuple[str, ...],
    min_price: Optional[float],
    max_price: Optional[float],
    date_from: Optional[datetime],
    date_to: Optional[datetime],
) -> SearchOptions:
    """Build explicit search options from command line filters."""
    price_range = None
    if min_price is not None or max_price is not None:
        price_range = PriceWindow(min=min_price, max=max_price)

    time_window = None
    if date_from is not None or date_to is not None:
        time_window = TimeWindow(start=date_from, end=date_to)

    return SearchOptions.create(
        categories=categories, price_range=price_range, time_window=time_window
    )


def merge_options(explicit: SearchOptions, hinted: SearchOptions) -> SearchOptions:
    """Explicit command line filters win over intent hints."""
    return SearchOptions(
        categories=explicit.categories or hinted.categories,
        price_range=explicit.price_range or hinted.price_range,
        time_window=explicit.time_window or hinted.time_window,
    )


def render_table(query: str, results: List[ScoredEvent]) -> None:
    table = Table(
        title=f"Search Results for: {query}",
        show_header=True,
        header_style="bold magenta",
    )

    table.add_column("Score", justify="right", style="cyan")
    table.add_column("Title", justify="left", style="green")
    table.add_column("Category", justify="left", style="blue")
    table.add_column("Venue", justify="left")
    table.add_column("Date", justify="left")
    table.add_column("Price", justify="right")
    table.add_column("Title Match", justify="center")

    for item in results:
        event = item.event
        table.add_row(
            f"{item.score:.1f}",
            event.title,
            event.category,
            f"{event.venue}, {event.city}",
            event.date.strftime("%Y-%m-%d %H:%M"),
            f"{event.price:g}",
            "yes" if item.has_title_match else "",
        )

    console.print(table)


@click.command()
@click.argument("query")
@click.option("--catalog", "catalog_file", type=click.Path(dir_okay=False),
              default=None, help="Event catalog file (YAML or JSON)")
@click.option("--category", "categories", multiple=True, help="Only these categories")
@click.option("--min-price", type=float, default=None, help="Minimum price")
@click.option("--max-price", type=float, default=None, help="Maximum price")
@click.option("--from", "date_from", type=click.DateTime(), default=None,
              help="Earliest event date")
@click.option("--to", "date_to", type=click.DateTime(), default=None,
              help="Latest event date")
@click.option("--top-k", type=int, default=None, help="Number of results to show")
@click.option("--format", "output_format", type=click.Choice(["table", "json"]),
              default="table", help="Output format")
@click.option("--ai/--no-ai", default=False, help="Run intent extraction first")
@click.option("--service-url", default=None, help="Intent service URL")
def search(
    query: str,
    catalog_file: Optional[str],
    categories: Tuple[str, ...],
    min_price: Optional[float],
    max_price: Optional[float],
    date_from: Optional[datetime],
    date_to: Optional[datetime],
    top_k: Optional[int],
    output_format: str,
    ai: bool,
    service_url: Optional[str],
) -> None:
    """Search events.

    Args:
        query: Search query
    """
    try:
        events = load_catalog(catalog_file or config.catalog_file)
        now = datetime.now()

        options = build_options(categories, min_price, max_price, date_from, date_to)
        analysis = None
        if ai:
            analysis = get_intent_provider(service_url).analyze(query)
            options = merge_options(options, analysis.to_search_options(now))

        results = EventSearcher().search_scored(events, query, options, now)
        shown = results[: top_k or config.top_k]

        if output_format == "json":
            click.echo(json.dumps([item.to_dict() for item in shown], indent=2))
            return

        if not results:
            console.print("No results found.")
            return

        render_table(query, shown)
        if analysis is not None:
            console.print(
                explain_results(
                    len(results), query, analysis.categories, analysis.time_preference
                )
            )

    except EventDiscoveryError as e:
        logger.error(f"Search failed: {e}")
        console.print(f"[red]Error:[/red] {str(e)}")
        sys.exit(1)
