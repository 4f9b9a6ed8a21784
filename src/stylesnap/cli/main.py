"""stylesnap CLI entry point: Click group with subcommands."""

import logging

import click

from stylesnap import __version__


@click.group()
@click.version_option(version=__version__, prog_name="stylesnap")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
def cli(verbose: bool) -> None:
    """stylesnap - print styled component trees as stable snapshots."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


# Import and register subcommands
from stylesnap.cli.render import render  # noqa: E402
from stylesnap.cli.css import css  # noqa: E402

cli.add_command(render)
cli.add_command(css)
