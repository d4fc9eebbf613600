"""
SQLite scalar values and their literal form.

A ScalarValue is one of Integer, Real, Text, Blob or Null, mirroring SQLite's
storage classes (https://www.sqlite.org/datatype3.html). ``sql_literal``
renders a value as the exact text SQLite parses back to that value.

Example:
    >>> sql_literal(Text("O'Reilly"))
    "'O''Reilly'"
    >>> literal(b"\\xde\\xad")
    "X'DEAD'"
"""

import math
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any
from uuid import UUID

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


@dataclass(slots=True, frozen=True)
class Integer:
    """64-bit signed integer"""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"Integer value must be an int, not {type(self.value).__name__}")
        # int subclasses (IntEnum, IntFlag) render as plain digits
        object.__setattr__(self, "value", int(self.value))
        if not INT64_MIN <= self.value <= INT64_MAX:
            raise ValueError(f"Integer out of 64-bit range: {self.value}")

    @property
    def sql_literal(self) -> str:
        return sql_literal(self)

    def __str__(self) -> str:
        return self.sql_literal


@dataclass(slots=True, frozen=True)
class Real:
    """64-bit floating point number"""

    value: float

    @property
    def sql_literal(self) -> str:
        return sql_literal(self)

    def __str__(self) -> str:
        return self.sql_literal


@dataclass(slots=True, frozen=True)
class Text:
    """Text string"""

    value: str

    @property
    def sql_literal(self) -> str:
        return sql_literal(self)

    def __str__(self) -> str:
        return self.sql_literal


@dataclass(slots=True, frozen=True)
class Blob:
    """Binary large object"""

    value: bytes

    @property
    def sql_literal(self) -> str:
        return sql_literal(self)

    def __str__(self) -> str:
        return self.sql_literal


@dataclass(slots=True, frozen=True)
class Null:
    """SQL NULL"""

    @property
    def sql_literal(self) -> str:
        return sql_literal(self)

    def __str__(self) -> str:
        return self.sql_literal


ScalarValue = Integer | Real | Text | Blob | Null

_SCALAR_TYPES = (Integer, Real, Text, Blob, Null)


def escape_string(value: str) -> str:
    """Helper to escape SQL string literal content"""
    return value.replace("'", "''")


def _real_literal(value: float) -> str:
    if math.isnan(value):
        # SQLite stores NaN as NULL
        return "NULL"
    if math.isinf(value):
        # Out-of-range literal, parsed by SQLite as +/-Inf
        return "9e999" if value > 0 else "-9e999"
    return repr(float(value))


def sql_literal(value: ScalarValue) -> str:
    """
    Render a scalar value as SQLite literal text.

    - Integer: decimal digits with optional leading ``-``
    - Real: shortest repr that round-trips to the same float
    - Text: single-quoted, embedded ``'`` doubled
    - Blob: ``X'...'`` with upper-case hex, one pair per byte
    - Null: ``NULL``

    Args:
        value: Value to render

    Returns:
        SQL literal text
    """
    if isinstance(value, Integer):
        return str(value.value)
    if isinstance(value, Real):
        return _real_literal(value.value)
    if isinstance(value, Text):
        return f"'{escape_string(value.value)}'"
    if isinstance(value, Blob):
        return f"X'{bytes(value.value).hex().upper()}'"
    if isinstance(value, Null):
        return "NULL"
    raise TypeError(f"Not a scalar value: {value!r}")


def to_scalar(obj: Any) -> ScalarValue:
    """
    Convert a Python value to its SQLite scalar value.

    bool maps to Integer 1/0, datetime/date to ISO 8601 text, UUID to its
    canonical text, Enum members to their value.

    Raises:
        ValueError: If an int does not fit in 64 bits
        TypeError: If the type has no SQLite representation
    """
    if isinstance(obj, _SCALAR_TYPES):
        return obj
    if obj is None:
        return Null()
    if isinstance(obj, bool):
        return Integer(1 if obj else 0)
    if isinstance(obj, Enum):
        return to_scalar(obj.value)
    if isinstance(obj, int):
        return Integer(obj)
    if isinstance(obj, float):
        return Real(obj)
    if isinstance(obj, str):
        return Text(obj)
    if isinstance(obj, (bytes, bytearray, memoryview)):
        return Blob(bytes(obj))
    if isinstance(obj, (datetime, date)):
        return Text(obj.isoformat())
    if isinstance(obj, UUID):
        return Text(str(obj))
    raise TypeError(f"Cannot represent {type(obj).__name__} as an SQLite value")


def literal(obj: Any) -> str:
    """Render a Python value as SQLite literal text."""
    return sql_literal(to_scalar(obj))
