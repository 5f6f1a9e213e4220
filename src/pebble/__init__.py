"""Pebble - a small interactive shell."""

from .cli.session import ShellSession
from .core import CommandResolver, ExecutionEngine, parse_line

__version__ = "0.1.0"

__all__ = ["CommandResolver", "ExecutionEngine", "ShellSession", "parse_line"]
