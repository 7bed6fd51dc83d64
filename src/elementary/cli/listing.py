"""CLI command: elementary list -- show component classes and design tokens."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from elementary.config import OUTPUT_FORMATS, ElementaryConfig
from elementary.errors import ConfigError
from elementary.extraction import extract_design_data
from elementary.formatting import format_human, format_json
from elementary.model.result import ExtractionOptions

log = logging.getLogger(__name__)


def _read_text(path: Path) -> str | None:
    """Read *path* as UTF-8, or return None (with a message) if it can't be read."""
    if not path.exists():
        click.echo(f"Error: File not found: {path}", err=True)
        return None
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        click.echo(f"Error: Failed to read {path}: {exc}", err=True)
        return None


@click.command("list")
@click.argument("css_file")
@click.option("--include-tokens", is_flag=True, help="Also list design tokens from the theme")
@click.option("--theme", default="polished", show_default=True, help="Theme to read tokens from")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default="human",
    show_default=True,
    help="Output format",
)
@click.option(
    "--skill-root",
    envvar="ELEMENTARY_SKILL_ROOT",
    default=".",
    type=click.Path(file_okay=False),
    help="Directory containing assets/elementary",
)
def list_command(
    css_file: str,
    include_tokens: bool,
    theme: str,
    output_format: str,
    skill_root: str,
) -> None:
    """List component classes in CSS_FILE, optionally with design tokens.

    CSS_FILE is resolved relative to the skill root. Exits with code 1 if the
    stylesheet cannot be read or yields no content.
    """
    try:
        config = ElementaryConfig(
            skill_root=skill_root,
            theme=theme,
            output_format=output_format,
            include_tokens=include_tokens,
        )
    except ConfigError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    css_content = _read_text(config.resolve_css_path(css_file))
    if css_content is None:
        sys.exit(1)

    theme_content = None
    if config.include_tokens:
        theme_path = config.theme_path()
        log.debug("Reading theme %s from %s", config.theme, theme_path)
        theme_content = _read_text(theme_path)
        if not theme_content:
            click.echo("Warning: Could not read theme file, skipping token extraction", err=True)

    result = extract_design_data(
        ExtractionOptions(
            css_content=css_content,
            css_file=css_file,
            include_tokens=config.include_tokens,
            theme=config.theme,
            theme_content=theme_content,
        )
    )

    formatter = format_json if config.output_format == "json" else format_human
    click.echo(formatter(result))

    sys.exit(0 if result.ok else 1)
