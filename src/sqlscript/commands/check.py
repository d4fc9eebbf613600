"""
Check Command

Parses every statement of a script with SQLGlot and reports the ones that fail.
"""

import click
from rich.console import Console

from sqlscript.core.sql_parser import StatementIssue, find_syntax_issues
from sqlscript.domain.results import CommandResult
from sqlscript.models import ScriptSettings

from .split import load_script

console = Console()


def check_script(
    source: str, settings: ScriptSettings, json_output: bool = False
) -> list[StatementIssue]:
    """Check the syntax of each statement in a script.

    Args:
        source: Script path, ``file://`` URL, or ``-`` for stdin
        settings: Parse settings (``dialect`` selects the SQLGlot dialect)
        json_output: Print a machine-readable result

    Returns:
        Issues for statements that failed to parse (empty if all parsed)

    Raises:
        SplitError: If the script cannot be loaded
    """
    script = load_script(source, settings)
    issues = find_syntax_issues(script, dialect=settings.dialect)

    if json_output:
        result = CommandResult.for_check(source, settings.dialect, len(script), issues)
        click.echo(result.to_json())
        return issues

    if not issues:
        console.print(
            f"[green]✓[/green] {len(script)} statement(s) parsed ({settings.dialect})"
        )
        return issues

    for issue in issues:
        first_line = issue.statement.split("\n", 1)[0]
        console.print(f"[red]✗[/red] Statement {issue.index + 1}: ", end="")
        console.print(first_line, markup=False, highlight=False)
        console.print(f"    {issue.error}", markup=False, highlight=False)
    console.print(f"\n[red]{len(issues)} of {len(script)} statement(s) failed to parse[/red]")
    return issues
