"""Keystroke events and the readers that produce them."""

from __future__ import annotations

import asyncio
import contextlib
from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Protocol, TextIO

from prompt_toolkit.input import Input, create_input
from prompt_toolkit.key_binding import KeyPress
from prompt_toolkit.keys import Keys


class KeyKind(str, Enum):
    CHAR = "char"
    BACKSPACE = "backspace"
    TAB = "tab"
    ENTER = "enter"
    EOF = "eof"
    CLOSED = "closed"


@dataclass(frozen=True)
class KeyEvent:
    kind: KeyKind
    char: str = ""

    @classmethod
    def of(cls, char: str) -> KeyEvent:
        return cls(KeyKind.CHAR, char)


ENTER = KeyEvent(KeyKind.ENTER)
TAB = KeyEvent(KeyKind.TAB)
BACKSPACE = KeyEvent(KeyKind.BACKSPACE)
EOF = KeyEvent(KeyKind.EOF)
CLOSED = KeyEvent(KeyKind.CLOSED)

_CONTROL_CHARS = {
    "\r": ENTER,
    "\n": ENTER,
    "\t": TAB,
    "\x7f": BACKSPACE,
    "\x08": BACKSPACE,
    "\x04": EOF,
}

_KEY_EVENTS = {
    Keys.ControlM: ENTER,
    Keys.ControlJ: ENTER,
    Keys.ControlI: TAB,
    Keys.ControlH: BACKSPACE,
    Keys.ControlD: EOF,
}


class KeyReader(Protocol):
    def raw_mode(self) -> contextlib.AbstractContextManager[None]: ...

    def read_event(self) -> KeyEvent: ...


def event_from_char(char: str) -> KeyEvent | None:
    """Map one input character to an event; None for anything unhandled."""
    if char in _CONTROL_CHARS:
        return _CONTROL_CHARS[char]
    if char.isprintable():
        return KeyEvent.of(char)
    return None


def event_from_key_press(key_press: KeyPress) -> KeyEvent | None:
    key = key_press.key
    if isinstance(key, Keys):
        return _KEY_EVENTS.get(key)
    if len(key) == 1 and key.isprintable():
        return KeyEvent.of(key)
    return None


class StreamKeyReader:
    """Read events character by character from a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def raw_mode(self) -> contextlib.AbstractContextManager[None]:
        return contextlib.nullcontext()

    def read_event(self) -> KeyEvent:
        while True:
            char = self._stream.read(1)
            if not char:
                return CLOSED
            event = event_from_char(char)
            if event is not None:
                return event


class TerminalKeyReader:
    """Read events from a terminal switched into raw mode."""

    def __init__(self, terminal_input: Input | None = None) -> None:
        self._input = terminal_input or create_input()
        self._pending: deque[KeyEvent] = deque()

    @contextlib.contextmanager
    def raw_mode(self) -> Iterator[None]:
        with self._input.raw_mode():
            yield

    def read_event(self) -> KeyEvent:
        while not self._pending:
            if self._input.closed:
                return CLOSED
            for key_press in asyncio.run(self._next_keys()):
                event = event_from_key_press(key_press)
                if event is not None:
                    self._pending.append(event)
        return self._pending.popleft()

    async def _next_keys(self) -> list[KeyPress]:
        """Block until the input is readable, then drain it."""
        ready = asyncio.Event()
        with self._input.attach(ready.set):
            await ready.wait()
        return [*self._input.read_keys(), *self._input.flush_keys()]
