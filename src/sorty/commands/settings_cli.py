"""Click handlers for listing, enabling and disabling sort commands."""

import click

from sorty.commands.options import load_settings, settings_option
from sorty.commands.registry import SORT_COMMANDS
from sorty.file_io import with_error_handling


@click.command("commands")
@settings_option
def list_commands_cmd(settings_file):
    """List the sort commands and whether each is enabled."""
    settings = load_settings(settings_file)
    for command in SORT_COMMANDS:
        state = "enabled" if settings.is_enabled(command.id) else "disabled"
        click.echo(f"{command.id}: {command.name} ({state})")


def _set_enabled(settings_file, command_id, enabled):
    with with_error_handling():
        settings = load_settings(settings_file)
        settings.set_enabled(command_id, enabled)
        settings.save()


@click.command("enable")
@click.argument("command_id")
@settings_option
def enable_cmd(command_id, settings_file):
    """Enable a sort command."""
    _set_enabled(settings_file, command_id, True)
    click.echo(f"Enabled {command_id}")


@click.command("disable")
@click.argument("command_id")
@settings_option
def disable_cmd(command_id, settings_file):
    """Disable a sort command."""
    _set_enabled(settings_file, command_id, False)
    click.echo(f"Disabled {command_id}")


def register(group):
    """Register the settings commands with the given Click group."""
    group.add_command(list_commands_cmd)
    group.add_command(enable_cmd)
    group.add_command(disable_cmd)
