"""CLI commands that edit the current configuration.

Each invocation restores the working session, applies one intent to the
store and writes the session back.
"""

from __future__ import annotations

from typing import Callable

import click

from carconfig.application.configuration_store import ConfigurationStore
from carconfig.application.dto import ConfigurationView
from carconfig.domain.exceptions import DomainException
from carconfig.domain.model.configuration import MAX_CUSTOM_PLATE_LENGTH
from carconfig.infrastructure.bootstrap import configuration_store, session_repository


def _mutate(apply: Callable[[ConfigurationStore], ConfigurationView]) -> None:
    """Run one intent against the session store and report the outcome."""
    try:
        session_repo = session_repository()
        store = configuration_store(session_repo)
        view = apply(store)
        session_repo.save(store.session_state())
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Total: {view.formatted_price}")
    display_validation(view)


def display_validation(view: ConfigurationView) -> None:
    """Shared formatting for validation errors and warnings."""
    for error in view.validation.errors:
        click.echo(f"  ERROR    {error}")
    for warning in view.validation.warnings:
        click.echo(f"  WARNING  {warning}")
    if view.validation.is_valid and not view.validation.warnings:
        click.echo("  Configuration is valid.")


def display_view(view: ConfigurationView) -> None:
    """Shared formatting for displaying a configuration."""
    summary = view.summary
    click.echo(f"Configuration {summary.config_id}")
    click.echo(f"  Variant:  {summary.variant}")
    click.echo(f"  Color:    {summary.color}")
    click.echo(f"  Roof:     {summary.roof}")
    click.echo(f"  Wheels:   {summary.wheels}")
    if summary.custom_plate:
        click.echo(f"  Plate:    {summary.custom_plate}")
    click.echo()

    click.echo(f"  {'Item':<36} {'Price':>14}")
    click.echo(f"  {'-'*51}")
    for item in view.line_items:
        click.echo(f"  {item.label:<36} {str(item.amount):>14}")
    click.echo(f"  {'-'*51}")
    click.echo(f"  {'Total':<36} {view.formatted_price:>14}")
    click.echo()

    display_validation(view)
    click.echo()

    options = view.compatible_options
    click.echo(f"Compatible roofs:   {', '.join(r.id for r in options.roofs)}")
    click.echo(f"Compatible add-ons: {', '.join(a.id for a in options.add_ons)}")


@click.command("show")
def config_show() -> None:
    """Show the current configuration, its price and validation."""
    try:
        store = configuration_store(session_repository())
    except DomainException as exc:
        raise click.ClickException(str(exc))
    display_view(store.view)


@click.command("variant")
@click.argument("variant_id")
def config_variant(variant_id: str) -> None:
    """Select a variant (repairs roof and add-ons)."""
    _mutate(lambda store: store.set_variant(store.catalog.variant(variant_id)))


@click.command("color")
@click.argument("color_id")
def config_color(color_id: str) -> None:
    """Select a color."""
    _mutate(lambda store: store.set_color(store.catalog.color(color_id)))


@click.command("roof")
@click.argument("roof_id")
def config_roof(roof_id: str) -> None:
    """Select a roof (drops the roof carrier unless hardtop)."""
    _mutate(lambda store: store.set_roof(store.catalog.roof(roof_id)))


@click.command("wheels")
@click.argument("wheel_id")
def config_wheels(wheel_id: str) -> None:
    """Select wheels."""
    _mutate(lambda store: store.set_wheels(store.catalog.wheel(wheel_id)))


@click.command("interior")
@click.argument("option_id")
def config_interior(option_id: str) -> None:
    """Toggle an interior option."""
    _mutate(lambda store: store.toggle_interior(store.catalog.interior_option(option_id)))


@click.command("addon")
@click.argument("add_on_id")
def config_addon(add_on_id: str) -> None:
    """Toggle an add-on."""
    _mutate(lambda store: store.toggle_add_on(store.catalog.add_on(add_on_id)))


@click.command("techpack")
@click.argument("tech_pack_id")
def config_techpack(tech_pack_id: str) -> None:
    """Toggle a tech pack."""
    _mutate(lambda store: store.toggle_tech_pack(store.catalog.tech_pack(tech_pack_id)))


@click.command("decal")
@click.argument("decal_id")
def config_decal(decal_id: str) -> None:
    """Toggle a decal."""
    _mutate(lambda store: store.toggle_decal(store.catalog.decal(decal_id)))


@click.command("plate")
@click.argument("text", default="")
def config_plate(text: str) -> None:
    """Set the custom number plate text (empty to remove it)."""
    if len(text) > MAX_CUSTOM_PLATE_LENGTH:
        raise click.BadParameter(
            f"Plate text is limited to {MAX_CUSTOM_PLATE_LENGTH} characters."
        )
    _mutate(lambda store: store.set_custom_plate(text))


@click.command("reset")
def config_reset() -> None:
    """Reset to the factory default configuration."""
    _mutate(lambda store: store.reset_configuration())
