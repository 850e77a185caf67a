"""CLI commands for saved configurations."""

from __future__ import annotations

import click

from carconfig.application.list_saved_configurations import ListSavedConfigurationsHandler
from carconfig.domain.exceptions import DomainException
from carconfig.infrastructure.bootstrap import configuration_store, session_repository
from carconfig.infrastructure.cli.configuration_commands import display_view


@click.command("save")
def saved_save() -> None:
    """Save the current configuration."""
    try:
        session_repo = session_repository()
        store = configuration_store(session_repo)
        saved = store.save_configuration()
        session_repo.save(store.session_state())
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Configuration {saved.id} saved ({store.view.formatted_price}).")
    if not store.view.validation.is_valid:
        click.echo("  Note: this configuration has validation errors.")


def _display_saved(history_only: bool) -> None:
    try:
        store = configuration_store(session_repository())
        lines = ListSavedConfigurationsHandler(store).handle(history_only=history_only)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not lines:
        click.echo("No saved configurations found.")
        return

    click.echo(f"{'ID':<34} {'Created':<22} {'Variant':<16} {'Color':<18} {'Total':>14}")
    click.echo("-" * 108)
    for line in lines:
        click.echo(
            f"{line.id:<34} {line.created_at:<22} {line.variant:<16} "
            f"{line.color:<18} {line.formatted_price:>14}"
        )


@click.command("list")
def saved_list() -> None:
    """List every saved configuration."""
    _display_saved(history_only=False)


@click.command("history")
def saved_history() -> None:
    """List the configurations saved recently in this session."""
    _display_saved(history_only=True)


@click.command("load")
@click.option("--id", "config_id", required=True, help="Saved configuration ID.")
def saved_load(config_id: str) -> None:
    """Load a saved configuration as the current one."""
    try:
        session_repo = session_repository()
        store = configuration_store(session_repo)
        view = store.load_configuration_by_id(config_id)
        if view is not None:
            session_repo.save(store.session_state())
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if view is None:
        click.echo(f"No saved configuration '{config_id}'; nothing loaded.")
        return
    display_view(view)


@click.command("delete")
@click.option("--id", "config_id", required=True, help="Saved configuration ID.")
def saved_delete(config_id: str) -> None:
    """Delete a saved configuration."""
    try:
        session_repo = session_repository()
        store = configuration_store(session_repo)
        deleted = store.delete_configuration(config_id)
        if deleted:
            session_repo.save(store.session_state())
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if deleted:
        click.echo(f"Configuration {config_id} deleted.")
    else:
        click.echo(f"No saved configuration '{config_id}'.")


@click.command("compare")
@click.option(
    "--id", "config_ids", required=True, multiple=True,
    help="Saved configuration ID; give two, or one to compare with the current configuration.",
)
def saved_compare(config_ids: tuple[str, ...]) -> None:
    """Compare two saved configurations (or one with the current one)."""
    if len(config_ids) > 2:
        raise click.BadParameter("Give at most two --id options.")

    try:
        store = configuration_store(session_repository())
        configs = []
        for config_id in config_ids:
            saved = store.get_saved_configuration(config_id)
            if saved is None:
                raise click.ClickException(f"Saved configuration '{config_id}' not found")
            configs.append(saved)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    first = configs[0]
    second = configs[1] if len(configs) == 2 else store.configuration
    second_label = config_ids[1] if len(configs) == 2 else "current"

    result = store.compare_configurations(first, second)
    if result.price_difference == 0:
        click.echo(f"{config_ids[0]} and {second_label} cost the same.")
    else:
        relation = "more" if result.is_more_expensive else "less"
        click.echo(
            f"{config_ids[0]} costs {result.formatted_price_difference} {relation} than {second_label}."
        )
    differing = result.differing_fields
    click.echo(f"Differs in: {', '.join(differing) if differing else 'nothing'}")
