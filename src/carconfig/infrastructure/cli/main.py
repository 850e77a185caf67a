import click

from carconfig.infrastructure.bootstrap import log_level
from carconfig.infrastructure.cli.catalog_commands import catalog_list
from carconfig.infrastructure.cli.configuration_commands import (
    config_addon,
    config_color,
    config_decal,
    config_interior,
    config_plate,
    config_reset,
    config_roof,
    config_show,
    config_techpack,
    config_variant,
    config_wheels,
)
from carconfig.infrastructure.cli.saved_commands import (
    saved_compare,
    saved_delete,
    saved_history,
    saved_list,
    saved_load,
    saved_save,
)
from carconfig.infrastructure.logging_config import setup_logging


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log debug output.")
def cli(verbose: bool) -> None:
    """carconfig — Vehicle Configurator"""
    setup_logging("DEBUG" if verbose else log_level())


@cli.group()
def catalog() -> None:
    """Browse the option catalog."""


@cli.group()
def config() -> None:
    """Edit the current configuration."""


@cli.group()
def saved() -> None:
    """Manage saved configurations."""


# Register subcommands
catalog.add_command(catalog_list)
config.add_command(config_show)
config.add_command(config_variant)
config.add_command(config_color)
config.add_command(config_roof)
config.add_command(config_wheels)
config.add_command(config_interior)
config.add_command(config_addon)
config.add_command(config_techpack)
config.add_command(config_decal)
config.add_command(config_plate)
config.add_command(config_reset)
saved.add_command(saved_save)
saved.add_command(saved_list)
saved.add_command(saved_load)
saved.add_command(saved_delete)
saved.add_command(saved_compare)
saved.add_command(saved_history)
