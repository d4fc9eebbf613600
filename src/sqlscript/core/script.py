"""
SQLScript - an immutable, ordered collection of SQL statements.

A script is parsed once, at construction: comments are removed, blank lines
trimmed and the text split at top-level semicolons. Statements can then be
indexed and iterated but never changed.

Example:
    script = SQLScript(
        '''
        -- Create users table
        CREATE TABLE users (id INTEGER PRIMARY KEY, username TEXT NOT NULL);
        INSERT INTO users (id, username) VALUES (1, 'john_doe');
        '''
    )
    for statement in script:
        executor.execute(statement)

Each statement is meant to run on its own in autocommit mode. Wrap the whole
script in an explicit transaction if it must apply atomically; transaction
statements inside the text are passed through untouched.

Never build scripts by pasting untrusted input into SQL text; bind
parameters instead.
"""

from collections.abc import Iterator, Sequence
from pathlib import Path
from typing import overload

from sqlscript.models import DEFAULT_SETTINGS, ScriptSettings

from .sql_utils import split_sql_statements
from .storage import (
    ResourceLocation,
    find_resource,
    path_from_url,
    read_script_text,
)


class SQLScript(Sequence[str]):
    """Ordered, read-only sequence of SQL statements parsed from script text"""

    __slots__ = ("_statements",)

    def __init__(self, text: str = "", settings: ScriptSettings | None = None) -> None:
        settings = settings or DEFAULT_SETTINGS
        self._statements: tuple[str, ...] = tuple(
            split_sql_statements(text, trigger_blocks=settings.trigger_blocks)
        )

    @classmethod
    def from_file(
        cls,
        path: str | Path,
        *,
        encoding: str | None = None,
        settings: ScriptSettings | None = None,
    ) -> "SQLScript":
        """
        Load and parse a script file.

        Args:
            path: Script file path
            encoding: Text encoding (defaults to the settings encoding, utf-8)
            settings: Parse settings

        Raises:
            SourceUnreadableError: If the file cannot be read or decoded
        """
        settings = settings or DEFAULT_SETTINGS
        text = read_script_text(Path(path), encoding or settings.encoding)
        return cls(text, settings)

    @classmethod
    def from_url(
        cls,
        url: str,
        *,
        encoding: str | None = None,
        settings: ScriptSettings | None = None,
    ) -> "SQLScript":
        """Load and parse a script from a ``file://`` URL or plain path."""
        return cls.from_file(path_from_url(url), encoding=encoding, settings=settings)

    @classmethod
    def from_resource(
        cls,
        name: str | None,
        extension: str | None = None,
        package: ResourceLocation = None,
        *,
        encoding: str | None = None,
        settings: ScriptSettings | None = None,
    ) -> "SQLScript | None":
        """
        Load and parse a script shipped as a resource.

        Args:
            name: Resource name without extension; None picks the first file
                with ``extension``
            extension: File extension (e.g. "sql"); None or "" matches ``name`` exactly
            package: Package (name or module), directory, or None for the
                current working directory

        Returns:
            The parsed script, or None if no resource matches

        Raises:
            SourceUnreadableError: If the resource exists but cannot be read or decoded
        """
        resource = find_resource(name, extension, package)
        if resource is None:
            return None
        settings = settings or DEFAULT_SETTINGS
        text = read_script_text(resource, encoding or settings.encoding)
        return cls(text, settings)

    @property
    def is_empty(self) -> bool:
        return not self._statements

    @property
    def statements(self) -> tuple[str, ...]:
        return self._statements

    @overload
    def __getitem__(self, index: int) -> str: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[str, ...]: ...

    def __getitem__(self, index: int | slice) -> str | tuple[str, ...]:
        return self._statements[index]

    def __len__(self) -> int:
        return len(self._statements)

    def __iter__(self) -> Iterator[str]:
        return iter(self._statements)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SQLScript):
            return NotImplemented
        return self._statements == other._statements

    def __hash__(self) -> int:
        return hash(self._statements)

    def __repr__(self) -> str:
        return f"SQLScript({list(self._statements)!r})"
