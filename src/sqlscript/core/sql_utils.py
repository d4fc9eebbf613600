"""
SQL utilities - text passes that turn a script into executable statements.

Single source of truth for comment removal, blank-line trimming and statement
splitting. Every pass runs on spans from the scanner, so quoted literals are
never mistaken for comments or terminators.
"""

import re

from .scanner import ScanState, scan

_WORD_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_$]*")
_TRIGGER_PREFIXES = (
    ("CREATE", "TRIGGER"),
    ("CREATE", "TEMP", "TRIGGER"),
    ("CREATE", "TEMPORARY", "TRIGGER"),
)


def remove_comments(text: str) -> str:
    """Remove ``--`` and ``/* */`` comments, keeping code and literals verbatim.

    Comments are replaced by nothing; the line break that ends a line comment
    is kept. Unterminated comments run to end of input.

    Args:
        text: Raw SQL script

    Returns:
        Script text without comments
    """
    return "".join(span.text(text) for span in scan(text) if not span.state.is_comment)


def trim_lines(text: str) -> str:
    """Drop blank lines and trailing whitespace outside string literals.

    Line breaks inside quoted literals do not start a new line, and whitespace
    inside literals is never stripped.

    Args:
        text: Comment-free SQL script

    Returns:
        Script text with only non-blank lines, joined by newlines
    """
    lines: list[tuple[str, bool]] = []
    current: list[str] = []
    ends_in_code = True

    for span in scan(text, comments=False):
        chunk = span.text(text)
        if span.state is not ScanState.CODE:
            current.append(chunk)
            ends_in_code = False
            continue

        pieces = chunk.split("\n")
        current.append(pieces[0])
        for piece in pieces[1:]:
            lines.append(("".join(current), True))
            current = [piece]
        ends_in_code = True

    lines.append(("".join(current), ends_in_code))

    kept: list[str] = []
    for line, line_ends_in_code in lines:
        if not line.strip():
            continue
        kept.append(line.rstrip(" \t\r") if line_ends_in_code else line)
    return "\n".join(kept)


def _is_trigger_definition(words: list[str]) -> bool:
    return any(tuple(words[: len(prefix)]) == prefix for prefix in _TRIGGER_PREFIXES)


def _cut_points(text: str, trigger_blocks: bool) -> list[int]:
    """Return offsets of the terminators that end a statement."""
    cuts: list[int] = []
    words: list[str] = []
    depth = 0

    for span in scan(text, comments=False):
        if span.terminator:
            if depth == 0:
                cuts.append(span.start)
                words = []
            continue
        if not trigger_blocks or span.state is not ScanState.CODE:
            continue

        for match in _WORD_PATTERN.finditer(text, span.start, span.end):
            word = match.group().upper()
            if len(words) < 3:
                words.append(word)
            if not _is_trigger_definition(words):
                continue
            if word == "BEGIN" or (word == "CASE" and depth > 0):
                depth += 1
            elif word == "END" and depth > 0:
                depth -= 1

    return cuts


def split_statements(text: str, *, trigger_blocks: bool = True) -> list[str]:
    """Split SQL text into statements at top-level semicolons.

    Semicolons inside single- or double-quoted literals never split. Input is
    expected to be comment-free, so ``--`` and ``/*`` are treated as code. Each
    statement is stripped; empty statements (``;;``, trailing ``;``) are
    dropped. Text after the last terminator is the final statement.

    Args:
        text: Comment-free SQL script
        trigger_blocks: Keep ``BEGIN ... END`` bodies of ``CREATE TRIGGER``
            statements together instead of splitting on their inner semicolons

    Returns:
        List of non-empty statement strings, in order
    """
    statements: list[str] = []
    start = 0
    for cut in [*_cut_points(text, trigger_blocks), len(text)]:
        statement = text[start:cut].strip()
        if statement:
            statements.append(statement)
        start = cut + 1
    return statements


def split_sql_statements(sql_text: str, *, trigger_blocks: bool = True) -> list[str]:
    """Split a raw SQL script (comments, blank lines and all) into statements.

    Args:
        sql_text: Raw SQL script content (e.g. from a file)
        trigger_blocks: See :func:`split_statements`

    Returns:
        List of non-empty statement strings, in order
    """
    cleaned = trim_lines(remove_comments(sql_text))
    return split_statements(cleaned, trigger_blocks=trigger_blocks)
