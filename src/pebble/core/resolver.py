"""Command name resolution."""

from __future__ import annotations

import os
from collections.abc import Callable, Collection
from pathlib import Path

from loguru import logger

from .types import Builtin, Classification, External, NotFound


def _environ_path() -> str:
    return os.environ.get("PATH", "")


def is_executable(path: Path) -> bool:
    return path.is_file() and os.access(path, os.X_OK)


class CommandResolver:
    """Classify a command name as builtin, external executable or unknown.

    The search path is fetched on every call, so a changed ``PATH`` is
    honoured by the very next command.
    """

    def __init__(
        self,
        builtins: Collection[str],
        search_path: Callable[[], str] = _environ_path,
    ) -> None:
        self._builtins = frozenset(builtins)
        self._search_path = search_path

    @property
    def builtins(self) -> frozenset[str]:
        return self._builtins

    def classify(self, name: str) -> Classification:
        if name in self._builtins:
            return Builtin(name)
        if os.sep in name or (os.altsep and os.altsep in name):
            return self._classify_path(name)

        for directory in self.directories():
            try:
                entries = [entry.name for entry in directory.iterdir()]
            except OSError:
                logger.debug("resolver.skip_dir dir={}", directory)
                continue
            if name not in entries:
                continue
            candidate = directory / name
            if is_executable(candidate):
                logger.debug("resolver.hit name={} path={}", name, candidate)
                return External(name=name, path=str(candidate))
            logger.debug("resolver.not_executable path={}", candidate)
        return NotFound(name)

    def directories(self) -> list[Path]:
        """Search path entries in lookup order, empty entries dropped."""
        return [Path(part) for part in self._search_path().split(os.pathsep) if part]

    def _classify_path(self, name: str) -> Classification:
        candidate = Path(name)
        if is_executable(candidate):
            return External(name=name, path=str(candidate))
        return NotFound(name)
