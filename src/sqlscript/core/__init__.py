"""
Core Infrastructure

Dependency-free building blocks for SQL script handling:
- Scanner: lexical state machine over comments and quoted literals
- SQL utils: comment removal, line trimming, statement splitting
- Storage: reading scripts from files, URLs and package resources
- Script: the SQLScript statement collection
"""

# Scanner exports
from .scanner import ScanState, Span, classify, scan, transition

# Script exports
from .script import SQLScript

# SQL utils exports
from .sql_utils import remove_comments, split_sql_statements, split_statements, trim_lines

# Storage exports
from .storage import find_resource, path_from_url, read_script_text

__all__ = [
    # Scanner
    "ScanState",
    "Span",
    "classify",
    "scan",
    "transition",
    # SQL utils
    "remove_comments",
    "split_sql_statements",
    "split_statements",
    "trim_lines",
    # Storage
    "find_resource",
    "path_from_url",
    "read_script_text",
    # Script
    "SQLScript",
]
