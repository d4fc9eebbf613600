"""
SQL lexical scanner

Character-level state machine that tells comments and quoted literals apart
from plain code. Shared by the comment stripper, the line trimmer and the
statement splitter so quote tracking lives in exactly one place.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum


class ScanState(Enum):
    """Lexical state active at a position of a SQL script"""

    CODE = "code"
    LINE_COMMENT = "line_comment"
    BLOCK_COMMENT = "block_comment"
    SINGLE_QUOTED = "single_quoted"
    DOUBLE_QUOTED = "double_quoted"

    @property
    def is_comment(self) -> bool:
        return self in (ScanState.LINE_COMMENT, ScanState.BLOCK_COMMENT)

    @property
    def is_quoted(self) -> bool:
        return self in (ScanState.SINGLE_QUOTED, ScanState.DOUBLE_QUOTED)


_QUOTES = {
    ScanState.SINGLE_QUOTED: "'",
    ScanState.DOUBLE_QUOTED: '"',
}

_LINE_BREAKS = ("\n", "\r")


@dataclass(slots=True, frozen=True)
class Span:
    """Maximal run of input scanned in a single state.

    Comment and quoted spans include their delimiters. A top-level ``;`` is
    reported as its own one-character CODE span with ``terminator`` set.
    """

    state: ScanState
    start: int
    end: int
    terminator: bool = False

    def text(self, source: str) -> str:
        return source[self.start : self.end]


def transition(
    state: ScanState, char: str, lookahead: str = "", *, comments: bool = True
) -> tuple[ScanState, int]:
    """
    Advance the state machine by one step.

    Args:
        state: State active before ``char`` is consumed
        char: Current character
        lookahead: Following character, or "" at end of input
        comments: Recognize comment markers in CODE; when False only quotes
            change state

    Returns:
        Tuple of (next_state, consumed). ``consumed`` is the number of input
        characters the step swallows; it is 0 only when a line comment hands
        its terminating line break back to CODE.
    """
    if state is ScanState.CODE:
        if comments and char == "-" and lookahead == "-":
            return ScanState.LINE_COMMENT, 2
        if comments and char == "/" and lookahead == "*":
            return ScanState.BLOCK_COMMENT, 2
        if char == "'":
            return ScanState.SINGLE_QUOTED, 1
        if char == '"':
            return ScanState.DOUBLE_QUOTED, 1
        return ScanState.CODE, 1

    if state is ScanState.LINE_COMMENT:
        if char in _LINE_BREAKS:
            return ScanState.CODE, 0
        return ScanState.LINE_COMMENT, 1

    if state is ScanState.BLOCK_COMMENT:
        if char == "*" and lookahead == "/":
            return ScanState.CODE, 2
        return ScanState.BLOCK_COMMENT, 1

    quote = _QUOTES[state]
    if char == quote:
        if lookahead == quote:
            # Doubled quote is escaped content
            return state, 2
        return ScanState.CODE, 1
    return state, 1


def scan(
    text: str, state: ScanState = ScanState.CODE, *, comments: bool = True
) -> Iterator[Span]:
    """
    Split text into spans of uniform lexical state.

    Unterminated comments and literals close implicitly at end of input, so
    every input scans without error and the spans cover it exactly.

    Args:
        text: SQL script text
        state: State to start in (CODE for a fresh scan)
        comments: Recognize comments; pass False for text already stripped of
            them, where a ``-`` or ``/`` left next to another must stay code

    Yields:
        Span objects in source order
    """
    length = len(text)
    start = 0
    pos = 0

    while pos < length:
        char = text[pos]

        if state is ScanState.CODE and char == ";":
            if start < pos:
                yield Span(ScanState.CODE, start, pos)
            yield Span(ScanState.CODE, pos, pos + 1, terminator=True)
            pos += 1
            start = pos
            continue

        lookahead = text[pos + 1] if pos + 1 < length else ""
        next_state, consumed = transition(state, char, lookahead, comments=comments)

        if next_state is state:
            pos += consumed
            continue

        if state is ScanState.CODE:
            # Entering a comment or literal: flush pending code
            if start < pos:
                yield Span(ScanState.CODE, start, pos)
            start = pos
            pos += consumed
        else:
            pos += consumed
            yield Span(state, start, pos)
            start = pos
        state = next_state

    if start < length:
        yield Span(state, start, length)


def classify(text: str, state: ScanState = ScanState.CODE) -> list[ScanState]:
    """Return the state each character of text belongs to (delimiters count as their span)."""
    states: list[ScanState] = []
    for span in scan(text, state):
        states.extend([span.state] * (span.end - span.start))
    return states
