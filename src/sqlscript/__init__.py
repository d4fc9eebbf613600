"""
sqlscript

Split SQLite scripts into executable statements and render values as SQL
literals.
"""

__version__ = "0.1.0"

from .core import (
    ScanState,
    SQLScript,
    remove_comments,
    split_sql_statements,
    split_statements,
    trim_lines,
)
from .domain import SettingsError, SourceUnreadableError, SQLScriptError
from .models import ScriptSettings, load_settings
from .values import (
    Blob,
    Integer,
    Null,
    Real,
    ScalarValue,
    Text,
    literal,
    sql_literal,
    to_scalar,
)

__all__ = [
    "__version__",
    "SQLScript",
    "ScanState",
    "remove_comments",
    "trim_lines",
    "split_statements",
    "split_sql_statements",
    "ScriptSettings",
    "load_settings",
    "SQLScriptError",
    "SourceUnreadableError",
    "SettingsError",
    "Integer",
    "Real",
    "Text",
    "Blob",
    "Null",
    "ScalarValue",
    "sql_literal",
    "to_scalar",
    "literal",
]
