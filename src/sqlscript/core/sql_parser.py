"""
SQL syntax checks with SQLGlot

Parses each statement of a script on its own so a broken statement can be
reported by position before the script reaches a database.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

import sqlglot
from sqlglot.errors import SqlglotError

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class StatementIssue:
    """A statement SQLGlot could not parse"""

    index: int
    statement: str
    error: str

    def to_dict(self) -> dict[str, object]:
        return {"index": self.index, "statement": self.statement, "error": self.error}


def validate_sql_syntax(sql: str, dialect: str = "sqlite") -> tuple[bool, str]:
    """
    Validate SQL syntax using SQLGlot.

    Args:
        sql: A single SQL statement
        dialect: SQL dialect (default: sqlite)

    Returns:
        Tuple of (is_valid, error_message)
    """
    try:
        parsed = sqlglot.parse_one(sql, dialect=dialect)
    except SqlglotError as e:
        return False, f"SQL parsing error: {e}"
    if parsed is None:
        return False, "SQLGlot returned None (invalid SQL)"
    return True, ""


def find_syntax_issues(statements: Iterable[str], dialect: str = "sqlite") -> list[StatementIssue]:
    """Return an issue for every statement that fails to parse, in order."""
    issues: list[StatementIssue] = []
    for index, statement in enumerate(statements):
        is_valid, error = validate_sql_syntax(statement, dialect=dialect)
        if not is_valid:
            logger.debug("Statement %d failed to parse: %s", index, error)
            issues.append(StatementIssue(index=index, statement=statement, error=error))
    return issues
