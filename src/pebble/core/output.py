"""Routing of command output to the terminal or a redirection file."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger

from pebble.errors import RedirectionError

from .types import Redirection, Stream

if TYPE_CHECKING:
    from pebble.cli.render import Renderer


def normalize(text: str) -> str:
    """End non-empty text with exactly one newline; leave empty text empty."""
    if not text:
        return ""
    return text.rstrip("\n") + "\n"


class OutputManager:
    """Emit one line's stdout/stderr text.

    With no redirection both streams go to the terminal. Otherwise the
    redirected stream is written to the target file and the other one
    still reaches the terminal.
    """

    def __init__(self, redirection: Redirection | None, renderer: Renderer) -> None:
        self._redirection = redirection
        self._renderer = renderer

    def emit(self, stdout: str = "", stderr: str = "") -> None:
        stdout = normalize(stdout)
        stderr = normalize(stderr)
        redirection = self._redirection
        if redirection is None:
            self._renderer.write(stdout)
            self._renderer.write_error(stderr)
            return

        if redirection.stream is Stream.STDOUT:
            self._renderer.write_error(stderr)
            self._write_file(redirection, stdout)
        else:
            self._renderer.write(stdout)
            self._write_file(redirection, stderr)

    def _write_file(self, redirection: Redirection, text: str) -> None:
        # the file is opened even for empty text so truncation still happens
        target = Path(redirection.path)
        logger.debug("output.redirect path={} mode={}", target, redirection.mode.value)
        try:
            if not redirection.path:
                raise FileNotFoundError("no redirection target given")
            if not target.parent.exists():
                target.parent.mkdir(parents=True, exist_ok=True)
            with target.open(redirection.mode.file_mode, encoding="utf-8") as handle:
                handle.write(text)
        except OSError as exc:
            logger.opt(exception=True).warning("output.redirect.failed path={}", redirection.path)
            raise RedirectionError(redirection.path, exc.strerror or str(exc)) from exc
