"""
sqlscript CLI Commands

Command implementations for the sqlscript CLI. The CLI layer (cli.py) is a
thin routing layer over these functions.
"""

from .check import check_script
from .literal import LiteralError, encode_literal
from .split import SplitError, load_script, split_script

__all__ = [
    "check_script",
    "encode_literal",
    "LiteralError",
    "load_script",
    "split_script",
    "SplitError",
]
