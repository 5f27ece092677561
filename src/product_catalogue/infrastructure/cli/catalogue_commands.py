"""CLI commands for the Catalogue aggregate."""

from __future__ import annotations

from pathlib import Path

import click

from product_catalogue.application.check_reorders import CheckReordersHandler
from product_catalogue.application.load_catalogue import LoadCatalogueHandler
from product_catalogue.domain.exceptions import DomainException
from product_catalogue.infrastructure.bootstrap import DEFAULT_CATALOGUE_NAME, new_catalogue
from product_catalogue.infrastructure.product_file import read_product_file

_FILE_ARG = click.Path(exists=True, dir_okay=False, path_type=Path)


@click.command("load")
@click.argument("file", type=_FILE_ARG)
@click.option("--name", default=DEFAULT_CATALOGUE_NAME, show_default=True, help="Catalogue name.")
@click.option("--batch", "as_batch", is_flag=True, default=False, help="Add all products as one batch.")
def catalogue_load(file: Path, name: str, as_batch: bool) -> None:
    """Load products from a JSON file and report what was accepted."""
    handler = LoadCatalogueHandler(catalogue=new_catalogue(name))

    try:
        summary = handler.handle(read_product_file(file), as_batch=as_batch)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Catalogue '{summary.catalogue_name}': {summary.added} added, {summary.rejected} rejected")
    for product_id in summary.rejected_ids:
        click.echo(f"  rejected: {product_id}")


@click.command("reorders")
@click.argument("file", type=_FILE_ARG)
def catalogue_reorders(file: Path) -> None:
    """List products at or below their reorder level."""
    catalogue = new_catalogue()

    try:
        LoadCatalogueHandler(catalogue=catalogue).handle(read_product_file(file))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    lines = CheckReordersHandler(catalogue=catalogue).handle()
    if not lines:
        click.echo("No products need reordering.")
        return

    click.echo(f"{'ID':<10} {'Name':<20} {'Stock':>8} {'Reorder':>8}")
    click.echo("-" * 49)
    for line in lines:
        click.echo(
            f"{line.product_id:<10} {line.product_name:<20} "
            f"{line.quantity_in_stock:>8} {line.reorder_level:>8}"
        )
