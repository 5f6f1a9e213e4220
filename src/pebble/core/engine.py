"""Execution of parsed lines."""

from __future__ import annotations

import subprocess
from typing import TYPE_CHECKING

from loguru import logger

from .builtins import BuiltinContext, get_handler
from .output import OutputManager
from .parser import parse_line
from .resolver import CommandResolver
from .types import Builtin, CapturedOutput, ExecutionOutcome, External, ParsedLine

if TYPE_CHECKING:
    from pebble.cli.render import Renderer

NOT_FOUND_STATUS = 127


class ExecutionEngine:
    """Parse, classify and run one line at a time.

    External commands run to completion before the engine returns; there is
    never more than one command in flight.
    """

    def __init__(self, resolver: CommandResolver, renderer: Renderer) -> None:
        self._resolver = resolver
        self._renderer = renderer

    def execute(self, line: str) -> ExecutionOutcome:
        return self.run(parse_line(line))

    def run(self, parsed: ParsedLine) -> ExecutionOutcome:
        output = OutputManager(parsed.redirection, self._renderer)
        if not parsed.tokens:
            if parsed.redirection is not None:
                output.emit()
            return ExecutionOutcome()

        match = self._resolver.classify(parsed.name)
        if isinstance(match, Builtin):
            return self._run_builtin(match, parsed, output)
        if isinstance(match, External):
            return self._spawn(match, parsed, output)
        return self._not_found(parsed.name)

    def _run_builtin(self, match: Builtin, parsed: ParsedLine, output: OutputManager) -> ExecutionOutcome:
        handler = get_handler(match.name)
        if handler is None:
            return self._not_found(match.name)
        captured = CapturedOutput()
        outcome = handler(parsed.args, BuiltinContext(resolver=self._resolver, output=captured))
        if outcome is None:
            outcome = ExecutionOutcome()
        if not outcome.exit_requested:
            output.emit(captured.stdout_text, captured.stderr_text)
        return outcome

    def _spawn(self, match: External, parsed: ParsedLine, output: OutputManager) -> ExecutionOutcome:
        logger.debug("engine.spawn name={} path={} args={}", match.name, match.path, parsed.args)
        try:
            result = subprocess.run(  # noqa: S603
                [match.name, *parsed.args],
                executable=match.path,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as exc:
            logger.warning("engine.spawn.failed name={} path={} error={}", match.name, match.path, exc)
            return self._not_found(match.name)
        output.emit(result.stdout, result.stderr)
        return ExecutionOutcome(status=result.returncode)

    def _not_found(self, name: str) -> ExecutionOutcome:
        self._renderer.write(f"{name}: command not found\n")
        return ExecutionOutcome(status=NOT_FOUND_STATUS)
