"""
Click-based CLI for sqlscript.
"""

import sys
from pathlib import Path

import click
from rich.console import Console

from . import __version__
from .commands import (
    LiteralError,
    SplitError,
    check_script,
    encode_literal,
    split_script,
)
from .commands.literal import VALUE_TYPES
from .domain.errors import SettingsError
from .models import DEFAULT_SETTINGS, ScriptSettings, load_settings

console = Console()


def _resolve_settings(
    config: str | None,
    encoding: str | None = None,
    trigger_blocks: bool | None = None,
    dialect: str | None = None,
) -> ScriptSettings:
    """Load settings from --config, then apply command-line overrides."""
    settings = load_settings(Path(config)) if config else DEFAULT_SETTINGS
    overrides = {
        key: value
        for key, value in (
            ("encoding", encoding),
            ("trigger_blocks", trigger_blocks),
            ("dialect", dialect),
        )
        if value is not None
    }
    return settings.model_copy(update=overrides) if overrides else settings


@click.group()
@click.version_option(version=__version__, prog_name="sqlscript")
def cli() -> None:
    """sqlscript CLI for splitting and checking SQLite scripts"""
    pass


@cli.command()
@click.argument("source")
@click.option("--json", "json_output", is_flag=True, help="Output results as JSON")
@click.option("--full", is_flag=True, help="Print long statements in full")
@click.option("--encoding", help="Script file encoding (default: utf-8)")
@click.option(
    "--trigger-blocks/--no-trigger-blocks",
    default=None,
    help="Keep CREATE TRIGGER ... BEGIN ... END bodies in one statement",
)
@click.option(
    "--config",
    "-c",
    type=click.Path(),
    help="Settings JSON file",
)
def split(
    source: str,
    json_output: bool,
    full: bool,
    encoding: str | None,
    trigger_blocks: bool | None,
    config: str | None,
) -> None:
    """Split a SQL script into statements

    SOURCE is a file path, a file:// URL, or '-' for stdin.

    Examples:
        sqlscript split schema.sql
        sqlscript split schema.sql --json
        cat schema.sql | sqlscript split -
    """
    try:
        settings = _resolve_settings(config, encoding=encoding, trigger_blocks=trigger_blocks)
        split_script(source, settings, json_output=json_output, full=full)

    except (SplitError, SettingsError) as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        sys.exit(1)
    except Exception as e:
        console.print(f"[red]✗ Unexpected error:[/red] {e}")
        sys.exit(1)


@cli.command()
@click.argument("source")
@click.option("--dialect", "-d", help="SQLGlot dialect (default: sqlite)")
@click.option("--json", "json_output", is_flag=True, help="Output results as JSON")
@click.option("--encoding", help="Script file encoding (default: utf-8)")
@click.option(
    "--config",
    "-c",
    type=click.Path(),
    help="Settings JSON file",
)
def check(
    source: str,
    dialect: str | None,
    json_output: bool,
    encoding: str | None,
    config: str | None,
) -> None:
    """Check that every statement of a SQL script parses

    Exits with status 1 if any statement fails to parse.
    """
    try:
        settings = _resolve_settings(config, encoding=encoding, dialect=dialect)
        issues = check_script(source, settings, json_output=json_output)

    except (SplitError, SettingsError) as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        sys.exit(1)
    except Exception as e:
        console.print(f"[red]✗ Unexpected error:[/red] {e}")
        sys.exit(1)

    if issues:
        sys.exit(1)


@cli.command()
@click.argument("value", required=False)
@click.option(
    "--type",
    "-t",
    "value_type",
    type=click.Choice(VALUE_TYPES),
    default="text",
    show_default=True,
    help="Value type (blob values are given as hex)",
)
def literal(value: str | None, value_type: str) -> None:
    """Print VALUE as a SQLite literal

    Examples:
        sqlscript literal "O'Reilly"            # 'O''Reilly'
        sqlscript literal -t blob deadbeef      # X'DEADBEEF'
        sqlscript literal -t null               # NULL
    """
    try:
        click.echo(encode_literal(value, value_type))
    except LiteralError as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        sys.exit(1)


if __name__ == "__main__":
    cli()
