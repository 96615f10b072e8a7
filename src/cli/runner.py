# src/cli/runner.py

"""Headless CLI that prints a stored market catalog."""

import json
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table

from src.models.market_item import MarketItem
from src.storage.catalog_store import CatalogStore

logger = logging.getLogger("market_catalog.cli")

# Stderr console for status messages so stdout stays clean for JSON
_err = Console(stderr=True)


def _print_table(items: list[MarketItem]) -> None:
    """Render a Rich table of market items to stdout."""
    table = Table(
        title="Market Catalog",
        show_lines=True,
        title_style="bold cyan",
    )
    table.add_column("#", style="dim", width=4)
    table.add_column("Product ID", style="bold")
    table.add_column("Type", style="magenta")
    table.add_column("Price", justify="right", style="green")
    table.add_column("Market Price", justify="right")
    table.add_column("Title", max_width=40)

    for idx, item in enumerate(items, 1):
        market_price = item.market_price_and_currency or "—"
        if item.market_price_and_currency and not item.price_successfully_parsed:
            market_price = f"[yellow]{market_price}[/yellow]"
        table.add_row(
            str(idx),
            item.product_id or "[red]missing[/red]",
            item.managed.name.lower(),
            f"{item.price:,.2f}",
            market_price,
            item.market_title or "—",
        )

    Console().print(table)


def show_catalog(catalog_path: str | None, output_format: str) -> int:
    """Print the catalog and return an exit code (0=ok, 1=empty)."""
    store = CatalogStore(Path(catalog_path) if catalog_path else None)
    items, skipped = store.load()

    if skipped:
        _err.print(f"[yellow]Skipped {skipped} invalid entries[/yellow]")
    if not items:
        _err.print(f"[yellow]No market items found in {store.path}[/yellow]")
        return 1

    _err.print(f"[green]✓ {len(items)} market items[/green]")

    if output_format == "table":
        _print_table(items)
    else:
        json.dump(
            [item.to_json_object().to_dict() for item in items],
            sys.stdout,
            ensure_ascii=False,
            indent=2,
        )
        sys.stdout.write("\n")

    logger.info("Displayed %d market items from %s", len(items), store.path)
    return 0
