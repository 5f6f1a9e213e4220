"""Keystroke-level line editing with tab completion."""

from __future__ import annotations

from loguru import logger

from pebble.completion import Trie

from .keys import KeyEvent, KeyKind
from .render import Renderer

ERASE = "\b \b"


class LineEditor:
    """Accumulate one line from key events.

    Characters are echoed as they are typed when ``echo`` is on, which is
    the case in raw terminal mode where the terminal itself stays silent.
    """

    def __init__(self, trie: Trie, renderer: Renderer, *, prompt: str = "$ ", echo: bool = True) -> None:
        self._trie = trie
        self._renderer = renderer
        self._prompt = prompt
        self._echo = echo
        self._buffer: list[str] = []

    @property
    def buffer(self) -> str:
        return "".join(self._buffer)

    def prompt(self) -> None:
        self._renderer.write(self._prompt)

    def feed(self, event: KeyEvent) -> str | None:
        """Apply one event; return the submitted line on enter."""
        if event.kind is KeyKind.ENTER:
            return self._submit()
        if event.kind is KeyKind.TAB:
            self._complete()
        elif event.kind is KeyKind.BACKSPACE:
            if self._buffer:
                self._buffer.pop()
                self._show(ERASE)
        elif event.kind is KeyKind.CHAR:
            self._buffer.append(event.char)
            self._show(event.char)
        return None

    def current_word(self) -> str:
        return self.buffer.rsplit(" ", 1)[-1]

    def _submit(self) -> str:
        line = self.buffer
        self._buffer.clear()
        self._show("\n")
        return line

    def _complete(self) -> None:
        word = self.current_word()
        completion = self._trie.unique_completion(word)
        if completion is None:
            logger.debug("editor.complete.none word={!r}", word)
            return
        self._buffer.extend(completion)
        self._show(completion)

    def _show(self, text: str) -> None:
        if self._echo:
            self._renderer.write(text)
