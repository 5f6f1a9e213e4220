"""Application-level exception types for Pebble."""

from __future__ import annotations


class PebbleError(Exception):
    """Base exception for Pebble."""


class ConfigurationError(PebbleError):
    """Raised when settings cannot be applied at startup."""


class RedirectionError(PebbleError):
    """Raised when a redirection target cannot be opened or written."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path or '<empty>'}: {reason}")
        self.path = path
        self.reason = reason
