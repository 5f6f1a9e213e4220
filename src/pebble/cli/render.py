"""Terminal renderer for Pebble."""

from __future__ import annotations

import threading
from typing import TextIO

from rich.console import Console
from rich.markup import escape


class Renderer:
    """Terminal output.

    Command output and echoed keystrokes are written verbatim to the
    console's underlying file: rich would strip the control characters
    (backspace, carriage return) the line editor relies on. Only the
    shell's own diagnostics go through rich markup.
    """

    def __init__(self, console: Console | None = None, error_console: Console | None = None) -> None:
        self.console: Console = console or Console(highlight=False)
        self.error_console: Console = error_console or Console(stderr=True, highlight=False)
        self._print_lock = threading.Lock()

    def write(self, text: str) -> None:
        """Write text to standard output as-is."""
        self._write(self.console.file, text)

    def write_error(self, text: str) -> None:
        """Write text to standard error as-is."""
        self._write(self.error_console.file, text)

    def error(self, message: str) -> None:
        with self._print_lock:
            self.error_console.print(f"[bold red]Error:[/bold red] {escape(message)}")

    def _write(self, stream: TextIO, text: str) -> None:
        if not text:
            return
        with self._print_lock:
            stream.write(text)
            stream.flush()


def create_cli_renderer() -> Renderer:
    """Create and return a Renderer instance."""
    return Renderer()
