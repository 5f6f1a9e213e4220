"""Interactive read-execute loop."""

from __future__ import annotations

import sys

from loguru import logger

from pebble.completion import Trie
from pebble.config import Settings
from pebble.core import CommandResolver, ExecutionEngine, ExecutionOutcome, builtin_names
from pebble.errors import PebbleError

from .editor import LineEditor
from .keys import ENTER, KeyKind, KeyReader, StreamKeyReader, TerminalKeyReader
from .render import Renderer, create_cli_renderer


class ShellSession:
    """One interactive session: prompt, read a line, execute, repeat."""

    def __init__(
        self,
        reader: KeyReader,
        renderer: Renderer,
        *,
        prompt: str = "$ ",
        echo: bool = True,
        resolver: CommandResolver | None = None,
    ) -> None:
        self._reader = reader
        self._renderer = renderer
        self._resolver = resolver or CommandResolver(builtin_names())
        self._editor = LineEditor(Trie(self._resolver.builtins), renderer, prompt=prompt, echo=echo)
        self._engine = ExecutionEngine(self._resolver, renderer)

    def run(self) -> int:
        """Run until ``exit`` or end of input; return the exit status."""
        logger.debug("session.start")
        while True:
            self._editor.prompt()
            line = self._read_line()
            if line is None:
                logger.debug("session.eof")
                return 0
            outcome = self.execute(line)
            if outcome.exit_requested:
                logger.debug("session.exit status={}", outcome.status)
                return outcome.status

    def execute(self, line: str) -> ExecutionOutcome:
        try:
            return self._engine.execute(line)
        except PebbleError as exc:
            self._renderer.error(str(exc))
        except Exception as exc:
            logger.opt(exception=True).error("session.line.error line={!r}", line)
            self._renderer.error(f"{type(exc).__name__}: {exc}")
        return ExecutionOutcome(status=1)

    def _read_line(self) -> str | None:
        with self._reader.raw_mode():
            while True:
                event = self._reader.read_event()
                if event.kind is KeyKind.CLOSED:
                    # input is gone: run what was typed, then stop on the next read
                    return self._editor.feed(ENTER) if self._editor.buffer else None
                if event.kind is KeyKind.EOF:
                    if self._editor.buffer:
                        continue
                    return None
                line = self._editor.feed(event)
                if line is not None:
                    return line


def create_session(settings: Settings, renderer: Renderer | None = None) -> ShellSession:
    renderer = renderer or create_cli_renderer()
    raw = settings.raw_mode if settings.raw_mode is not None else sys.stdin.isatty()
    reader: KeyReader = TerminalKeyReader() if raw else StreamKeyReader(sys.stdin)
    return ShellSession(reader, renderer, prompt=settings.prompt, echo=raw)
