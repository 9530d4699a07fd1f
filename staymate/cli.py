"""Command line browsing of the property catalog.

Usage:
    staymate search --type Flat --max-price 400000
    staymate show prop3
    staymate validate --dataset path/to/properties.json
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from staymate.schemas.property import Property
from staymate.schemas.search import SearchCriteria
from staymate.services.catalog import DatasetError, PropertyCatalog, load_catalog
from staymate.services.dependencies import build_presentation_service
from staymate.services.filters import NO_MATCHES_MESSAGE, apply_search_criteria
from staymate.settings import get_settings

console = Console()

_dataset_option = click.option(
    "--dataset",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Property dataset to read (defaults to STAYMATE_DATASET_PATH).",
)


def _load(dataset: Path | None) -> PropertyCatalog:
    path = dataset or get_settings().dataset_path
    try:
        return load_catalog(path)
    except DatasetError as exc:
        raise click.ClickException(str(exc)) from exc


def _listing_table(listings: list[Property]) -> Table:
    table = Table(title=f"Available Properties ({len(listings)})")
    table.add_column("ID", style="cyan")
    table.add_column("Type")
    table.add_column("Bedrooms", justify="right")
    table.add_column("Price", justify="right", style="green")
    table.add_column("Postal Code")
    table.add_column("Added")
    for listing in listings:
        table.add_row(
            listing.id,
            listing.type,
            str(listing.bedrooms),
            f"${listing.price:,}",
            listing.postal_code_area,
            listing.added.display(),
        )
    return table


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Browse the StayMate property catalog."""

    logging.basicConfig(
        level=logging.DEBUG if verbose else get_settings().log_level_numeric,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@cli.command()
@click.option("--type", "property_type", default=None, help="House, Flat, ... or Any.")
@click.option("--min-price", default=None, help="Inclusive lower price bound.")
@click.option("--max-price", default=None, help="Inclusive upper price bound.")
@click.option("--min-bedrooms", default=None, help="Inclusive lower bedroom bound.")
@click.option("--max-bedrooms", default=None, help="Inclusive upper bedroom bound.")
@click.option("--postal-code", default=None, help="Postal code area fragment, e.g. NW1.")
@click.option(
    "--added-after",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Only listings added on or after this date (YYYY-MM-DD).",
)
@_dataset_option
def search(
    property_type: str | None,
    min_price: str | None,
    max_price: str | None,
    min_bedrooms: str | None,
    max_bedrooms: str | None,
    postal_code: str | None,
    added_after: datetime | None,
    dataset: Path | None,
) -> None:
    """Filter the catalog and print the matching listings."""

    catalog = _load(dataset)
    criteria = SearchCriteria(
        type=property_type,
        min_price=min_price,
        max_price=max_price,
        min_bedrooms=min_bedrooms,
        max_bedrooms=max_bedrooms,
        postal_code_area=postal_code,
        added_after=added_after,
    )
    results = apply_search_criteria(catalog, criteria)
    if not results:
        console.print(f"[yellow]{NO_MATCHES_MESSAGE}[/yellow]")
        return
    console.print(_listing_table(results))


@cli.command()
@click.argument("property_id")
@_dataset_option
def show(property_id: str, dataset: Path | None) -> None:
    """Print the full detail of one listing."""

    catalog = _load(dataset)
    listing = catalog.get(property_id)
    if listing is None:
        raise click.ClickException(f"Property not found: {property_id}")

    detail = build_presentation_service(get_settings()).detail(listing)
    console.print(f"[bold cyan]{listing.type} - {listing.location}[/bold cyan]\n")
    console.print(f"[bold]Price:[/bold] {detail.price_display}")
    console.print(f"[bold]Bedrooms:[/bold] {listing.bedrooms}")
    console.print(f"[bold]Tenure:[/bold] {listing.tenure}")
    console.print(f"[bold]Postal Code:[/bold] {listing.postal_code_area}")
    console.print(f"[bold]Added:[/bold] {detail.added_display}\n")
    console.print(listing.description, "\n")
    console.print(f"[bold]Gallery:[/bold] {', '.join(detail.gallery)}")
    console.print(f"[bold]Floor Plan:[/bold] {detail.floor_plan}")
    console.print(f"[bold]Map:[/bold] {detail.map_url}")


@cli.command()
@_dataset_option
def validate(dataset: Path | None) -> None:
    """Load the dataset and report listings with unresolvable added dates."""

    catalog = _load(dataset)
    flagged = catalog.unresolved_date_ids
    console.print(f"[green]✅ {len(catalog)} listing(s) loaded[/green]")
    if not flagged:
        return
    console.print(
        f"[yellow]⚠ {len(flagged)} listing(s) excluded from 'added after' searches:[/yellow]"
    )
    for property_id in flagged:
        console.print(f"  • {property_id}: {catalog.require(property_id).added.display()}")


if __name__ == "__main__":
    cli()
