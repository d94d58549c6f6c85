"""CLI commands for inspecting the catalog."""

from __future__ import annotations

import click

from stockroom.application.get_item import GetItemHandler
from stockroom.application.list_inventory import ListInventoryHandler
from stockroom.domain.exceptions import DomainException
from stockroom.infrastructure.bootstrap import item_repository


@click.command("catalog")
@click.option("--search", default=None, help="Show one item by code or name.")
def catalog_show(search: str | None) -> None:
    """Show the catalog a fresh server starts with."""
    repo = item_repository()

    if search is not None:
        try:
            items = [GetItemHandler(repo).handle(search)]
        except DomainException as exc:
            raise click.ClickException(str(exc))
    else:
        items = ListInventoryHandler(repo).handle()

    click.echo(f"{'Code':<20} {'Name':<20} {'Price':>8} {'Qty':>6}  Attributes")
    click.echo("-" * 76)
    for item in items:
        click.echo(
            f"{item.code:<20} {item.name:<20} {item.price:>8.2f} {item.quantity:>6}  "
            f"{', '.join(item.attributes)}"
        )
