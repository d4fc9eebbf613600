"""JSON result envelopes printed by ``sqlscript split --json`` and ``check --json``."""

from __future__ import annotations

import json
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from sqlscript.core.sql_parser import StatementIssue


@dataclass(slots=True)
class CommandResult:
    """Outcome of a CLI command as a stable JSON payload.

    ``code`` is ``ok`` on success; ``syntax_errors`` when ``check`` finds
    statements SQLGlot cannot parse.
    """

    success: bool
    code: str = "ok"
    message: str = ""
    data: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def for_split(cls, source: str, statements: Sequence[str]) -> CommandResult:
        """Result listing the statements a script split into."""
        return cls(
            success=True,
            message=f"{len(statements)} statement(s)",
            data={"source": source, "count": len(statements), "statements": list(statements)},
        )

    @classmethod
    def for_check(
        cls,
        source: str,
        dialect: str,
        statement_count: int,
        issues: Sequence[StatementIssue],
    ) -> CommandResult:
        """Result of a syntax check; fails if any statement has an issue."""
        return cls(
            success=not issues,
            code="syntax_errors" if issues else "ok",
            message=f"{len(issues)} of {statement_count} statement(s) failed to parse",
            data={
                "source": source,
                "dialect": dialect,
                "count": statement_count,
                "issues": [issue.to_dict() for issue in issues],
            },
        )

    def as_json_dict(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "code": self.code,
            "message": self.message,
            "data": self.data,
        }

    def to_json(self) -> str:
        return json.dumps(self.as_json_dict(), indent=2)
