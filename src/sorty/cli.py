"""Top-level Click group for the sorty CLI."""

import logging

import click

from sorty.commands.settings_cli import register as register_settings_commands
from sorty.commands.sort_cli import register as register_sort_commands


@click.group()
@click.option("--verbose", is_flag=True, help="Log diagnostics to stderr")
def main(verbose):
    """sorty - sort selected lines and Markdown task lists."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


register_sort_commands(main)
register_settings_commands(main)
