"""CLI commands for browsing the catalog."""

from __future__ import annotations

import click

from carconfig.application.show_catalog import ShowCatalogHandler
from carconfig.domain.exceptions import DomainException
from carconfig.infrastructure.bootstrap import catalog


@click.command("list")
@click.option("--category", default=None, help="Only list one category (e.g. add_ons).")
def catalog_list(category: str | None) -> None:
    """List catalog options with their prices."""
    try:
        lines = ShowCatalogHandler(catalog()).handle(category)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{'Category':<12} {'ID':<22} {'Name':<34} {'Price':>12}  Fits")
    click.echo("-" * 92)
    for line in lines:
        click.echo(
            f"{line.category:<12} {line.id:<22} {line.name:<34} {line.price:>12}  {line.compatible_with}"
        )
