"""Elementary CLI entry point: Click group with subcommands."""

import logging

import click

from elementary import __version__


@click.group()
@click.version_option(version=__version__, prog_name="elementary")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Elementary - list design-system classes and tokens, install assets."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from elementary.cli.listing import list_command  # noqa: E402
from elementary.cli.install import install  # noqa: E402

cli.add_command(list_command)
cli.add_command(install)


def main() -> None:
    cli()
