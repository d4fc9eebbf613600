"""Domain types shared by the sqlscript library and CLI."""

from .errors import SettingsError, SourceUnreadableError, SQLScriptError
from .results import CommandResult

__all__ = [
    "CommandResult",
    "SQLScriptError",
    "SourceUnreadableError",
    "SettingsError",
]
