"""Unified error taxonomy for script loading and parsing."""

from dataclasses import dataclass


@dataclass(slots=True)
class SQLScriptError(Exception):
    """Base class for sqlscript failures."""

    message: str
    code: str

    def __str__(self) -> str:
        return self.message


class SourceUnreadableError(SQLScriptError):
    """Raised when a script file or URL cannot be read or decoded as text."""


class SettingsError(SQLScriptError):
    """Raised when a settings file is missing or invalid."""
