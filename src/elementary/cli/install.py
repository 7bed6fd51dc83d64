"""CLI command: elementary install -- copy design-system assets into a project."""

from __future__ import annotations

import sys

import click

from elementary.errors import InstallError
from elementary.install import install_assets


@click.command()
@click.argument("target_dir", type=click.Path(file_okay=False))
@click.option(
    "--skill-root",
    envvar="ELEMENTARY_SKILL_ROOT",
    default=".",
    type=click.Path(file_okay=False),
    help="Directory containing assets/elementary",
)
def install(target_dir: str, skill_root: str) -> None:
    """Install Elementary assets into TARGET_DIR/assets/elementary."""
    try:
        paths = install_assets(skill_root, target_dir)
    except InstallError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(f"Elementary assets installed to: {paths.destination}")
    click.echo()
    click.echo("Import in your CSS:")
    click.echo("  @import './assets/elementary/tokens/polished.css';")
    click.echo("  @import './assets/elementary/components.css';")
