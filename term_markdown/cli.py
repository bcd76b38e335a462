"""
Renders a Markdown file (or standard input) as styled terminal output.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click
from .config import ConfigError, build_config
from .exceptions import RenderError
from .filesystem import (
    ReadFileError,
    collect_file_stat,
    enforce_file_size,
    get_max_file_size,
    get_render_width,
    normalize_filepath,
    read_markdown,
)
from .renderer import render_markdown
from .terminal import format_nodes

__all__ = ["cli"]

LOG_LEVELS = ["debug", "info", "warning", "error"]


def _read_source(filepath: Path, max_file_size: int) -> str:
    initial_stat = collect_file_stat(filepath)
    enforce_file_size(initial_stat, max_file_size, filepath)
    return read_markdown(filepath)


@click.command()
@click.version_option()
@click.option("--width", type=int, help="Display width in columns (defaults to the terminal width)")
@click.option("--color/--no-color", default=None, help="Enable or disable ANSI styling")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="warning",
    show_default=True,
    help="Logging verbosity",
)
@click.argument("filepath", required=False, default="-")
def cli(
    filepath: str,
    width: int | None = None,
    color: bool | None = None,
    log_level: str = "warning",
):
    """
    Render Markdown as styled blocks sized to the terminal.

    Args:
        filepath: Markdown file to render, or ``-`` for standard input.
        width: Override for the display width.
        color: Override for ANSI styling.
        log_level: Logging verbosity.

    Returns:
        None.

    Raises:
        click.BadParameter: If the path or configuration overrides are invalid.
        click.ClickException: If the file cannot be read or exceeds size limits.

    Examples:
        term-markdown README.md --width 100
        cat notes.md | term-markdown --no-color
    """
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    base_dir = Path.cwd().resolve()
    from_stdin = filepath == "-"
    if not from_stdin:
        try:
            filepath = normalize_filepath(filepath, base_dir)
        except ValueError as error:
            raise click.BadParameter(str(error)) from error

    try:
        config = build_config(
            base_dir if from_stdin else filepath.parent,
            width=width,
            color=color,
        )
    except ConfigError as error:
        raise click.BadParameter(str(error)) from error

    try:
        render_width = get_render_width(config.width)
        max_file_size = get_max_file_size(default=config.max_file_size)
    except ValueError as error:
        raise click.ClickException(str(error)) from error

    if from_stdin:
        text = click.get_text_stream("stdin").read()
    else:
        try:
            text = _read_source(filepath, max_file_size)
        except (ReadFileError, IOError) as error:
            raise click.ClickException(str(error)) from error

    if not text.strip():
        click.echo("Warning: nothing to render", err=True)
        return

    try:
        nodes = render_markdown(text, render_width, config)
    except RenderError as error:
        raise click.ClickException(str(error)) from error

    # Without an explicit --color, click strips styling when stdout is not a terminal.
    for line in format_nodes(nodes, config):
        click.echo(line, color=True if color else None)


if __name__ == "__main__":
    cli()
