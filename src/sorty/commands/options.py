"""Click options shared by the sort and settings commands."""

import os

import click

from sorty.commands.settings import DEFAULT_SETTINGS_FILE, SortySettings


def settings_option(fn):
    return click.option(
        "--settings", "settings_file",
        envvar="SORTY_SETTINGS",
        default=DEFAULT_SETTINGS_FILE,
        show_default=True,
        help="Settings file holding which commands are enabled",
    )(fn)


def load_settings(settings_file) -> SortySettings:
    return SortySettings.load(os.path.expanduser(settings_file))
