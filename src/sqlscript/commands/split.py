"""
Split Command

Parses a SQL script and lists its statements.
"""

import sys

import click
from rich.console import Console

from sqlscript.core.script import SQLScript
from sqlscript.domain.errors import SourceUnreadableError
from sqlscript.domain.results import CommandResult
from sqlscript.models import ScriptSettings

from ._preview import print_sql_statements_preview

console = Console()

STDIN_SOURCE = "-"


class SplitError(Exception):
    """Raised when a script cannot be loaded"""


def load_script(source: str, settings: ScriptSettings) -> SQLScript:
    """Load a script from a path, a ``file://`` URL, or ``-`` for stdin.

    Raises:
        SplitError: If the source cannot be read or decoded
    """
    if source == STDIN_SOURCE:
        return SQLScript(sys.stdin.read(), settings)
    try:
        return SQLScript.from_url(source, settings=settings)
    except SourceUnreadableError as err:
        raise SplitError(str(err)) from err


def split_script(
    source: str,
    settings: ScriptSettings,
    json_output: bool = False,
    full: bool = False,
) -> SQLScript:
    """Split a script into statements and print them.

    Args:
        source: Script path, ``file://`` URL, or ``-`` for stdin
        settings: Parse settings
        json_output: Print a machine-readable result instead of a preview
        full: Print every line of long statements

    Returns:
        The parsed script

    Raises:
        SplitError: If the script cannot be loaded
    """
    script = load_script(source, settings)

    if json_output:
        click.echo(CommandResult.for_split(source, script).to_json())
        return script

    if script.is_empty:
        console.print("[yellow]No statements found[/yellow]")
        return script

    print_sql_statements_preview(
        list(script), title=f"{len(script)} statement(s)", max_lines=None if full else 5
    )
    return script
