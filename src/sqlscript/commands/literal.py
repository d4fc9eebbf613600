"""
Literal Command

Renders a value given on the command line as SQLite literal text.
"""

from sqlscript.values import Blob, Integer, Null, Real, ScalarValue, Text, sql_literal

VALUE_TYPES = ("integer", "real", "text", "blob", "null")


class LiteralError(Exception):
    """Raised when a value cannot be read as the requested type"""


def parse_value(raw: str | None, value_type: str) -> ScalarValue:
    """Build a scalar value from its command-line form (blobs are hex)."""
    if value_type == "null":
        return Null()
    if raw is None:
        raise LiteralError(f"A value is required for type '{value_type}'")

    try:
        if value_type == "integer":
            return Integer(int(raw))
        if value_type == "real":
            return Real(float(raw))
        if value_type == "blob":
            return Blob(bytes.fromhex(raw))
    except ValueError as err:
        raise LiteralError(f"Invalid {value_type} value '{raw}': {err}") from err

    if value_type == "text":
        return Text(raw)
    raise LiteralError(f"Unknown value type '{value_type}'. Expected one of: {', '.join(VALUE_TYPES)}")


def encode_literal(raw: str | None, value_type: str = "text") -> str:
    """Return the SQLite literal for a command-line value."""
    return sql_literal(parse_value(raw, value_type))
