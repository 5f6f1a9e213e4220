"""Parsing, resolution and execution of shell lines."""

from .builtins import builtin_names
from .engine import ExecutionEngine
from .output import OutputManager
from .parser import parse_line
from .resolver import CommandResolver
from .types import (
    Builtin,
    Classification,
    ExecutionOutcome,
    External,
    NotFound,
    ParsedLine,
    RedirectMode,
    Redirection,
    Stream,
)

__all__ = [
    "Builtin",
    "Classification",
    "CommandResolver",
    "ExecutionEngine",
    "ExecutionOutcome",
    "External",
    "NotFound",
    "OutputManager",
    "ParsedLine",
    "RedirectMode",
    "Redirection",
    "Stream",
    "builtin_names",
    "parse_line",
]
