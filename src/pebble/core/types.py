"""Shared core dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union


class Stream(str, Enum):
    """Standard stream a redirection applies to."""

    STDOUT = "stdout"
    STDERR = "stderr"


class RedirectMode(str, Enum):
    """How a redirection target file is opened."""

    TRUNCATE = "truncate"
    APPEND = "append"

    @property
    def file_mode(self) -> str:
        return "a" if self is RedirectMode.APPEND else "w"


@dataclass(frozen=True)
class Redirection:
    """One redirection target for a line."""

    stream: Stream
    mode: RedirectMode
    path: str


@dataclass(frozen=True)
class ParsedLine:
    """Tokens of one input line plus its optional redirection."""

    tokens: tuple[str, ...]
    redirection: Redirection | None = None

    @property
    def name(self) -> str:
        return self.tokens[0] if self.tokens else ""

    @property
    def args(self) -> list[str]:
        return list(self.tokens[1:])


@dataclass(frozen=True)
class Builtin:
    name: str


@dataclass(frozen=True)
class External:
    name: str
    path: str


@dataclass(frozen=True)
class NotFound:
    name: str


Classification = Union[Builtin, External, NotFound]


@dataclass(frozen=True)
class ExecutionOutcome:
    """Result of executing one line."""

    status: int = 0
    exit_requested: bool = False


@dataclass
class CapturedOutput:
    """Text produced by one command, before routing."""

    stdout: list[str] = field(default_factory=list)
    stderr: list[str] = field(default_factory=list)

    def out(self, text: str) -> None:
        self.stdout.append(text)

    def err(self, text: str) -> None:
        self.stderr.append(text)

    @property
    def stdout_text(self) -> str:
        return "\n".join(self.stdout)

    @property
    def stderr_text(self) -> str:
        return "\n".join(self.stderr)
