"""Shared CLI preview helpers (SQL statement listing, etc.)."""

from rich.console import Console

console = Console()


def print_sql_statements_preview(
    statements: list[str], title: str = "SQL Preview", max_lines: int | None = 5
) -> None:
    """Print a listing of SQL statements, truncating long ones.

    Args:
        statements: List of SQL statement strings.
        title: Section title (e.g. "SQL Preview").
        max_lines: Statements longer than this are shown as their first three
            lines and last line; None prints every line.
    """
    console.print()
    console.print(f"[bold]{title}:[/bold]")
    console.print("─" * 60)
    for i, stmt in enumerate(statements, 1):
        console.print(f"\n[cyan]Statement {i}/{len(statements)}:[/cyan]")
        stmt_lines = stmt.split("\n")
        if max_lines is None or len(stmt_lines) <= max_lines:
            for line in stmt_lines:
                console.print(f"  {line}", markup=False, highlight=False)
        else:
            for line in stmt_lines[:3]:
                console.print(f"  {line}", markup=False, highlight=False)
            console.print(f"  ... ({len(stmt_lines) - 4} more lines)")
            console.print(f"  {stmt_lines[-1]}", markup=False, highlight=False)
    console.print()
