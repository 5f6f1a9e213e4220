"""Input line tokenizer.

A single left-to-right scan turns one line into positional tokens and at
most one redirection. Malformed input (an unterminated quote, a dangling
escape, an operator without a path) never raises: the scan produces the
best token stream it can.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from loguru import logger

from .types import ParsedLine, RedirectMode, Redirection, Stream

SPACE = " "
BACKSLASH = "\\"
REDIRECT = ">"
QUOTES = frozenset("'\"")
DOUBLE_QUOTE_ESCAPES = frozenset('"\\$`')
FD_SELECTORS = {"": Stream.STDOUT, "1": Stream.STDOUT, "2": Stream.STDERR}


@dataclass
class _Scan:
    args: list[str] = field(default_factory=list)
    buffer: list[str] = field(default_factory=list)
    quote: str | None = None
    escaping: bool = False
    quoted_token: bool = False
    after_operator: bool = False
    stream: Stream = Stream.STDOUT
    mode: RedirectMode = RedirectMode.TRUNCATE
    path_chunks: list[str] | None = None
    ignored: list[str] | None = None

    @property
    def target(self) -> list[str]:
        if self.ignored is not None:
            return self.ignored
        if self.path_chunks is not None:
            return self.path_chunks
        return self.args

    def flush(self) -> None:
        if self.buffer or self.quoted_token:
            self.target.append("".join(self.buffer))
        self.buffer.clear()
        self.quoted_token = False


def parse_line(line: str) -> ParsedLine:
    """Split ``line`` into tokens and an optional redirection."""

    scan = _Scan()
    for char in line:
        _feed(scan, char)

    if scan.escaping:
        scan.buffer.append(BACKSLASH)
    if scan.quote is not None:
        logger.debug("parser.unterminated_quote quote={} line={!r}", scan.quote, line)
    scan.flush()

    redirection = None
    if scan.path_chunks is not None:
        path = "".join(scan.path_chunks)
        if not path:
            logger.debug("parser.empty_redirect_path line={!r}", line)
        redirection = Redirection(stream=scan.stream, mode=scan.mode, path=path)
    if scan.ignored:
        logger.debug("parser.extra_redirect_ignored chunks={}", scan.ignored)
    return ParsedLine(tokens=tuple(scan.args), redirection=redirection)


def _feed(scan: _Scan, char: str) -> None:
    if scan.escaping:
        scan.escaping = False
        scan.after_operator = False
        if scan.quote == '"' and char not in DOUBLE_QUOTE_ESCAPES:
            scan.buffer.append(BACKSLASH)
        scan.buffer.append(char)
        return

    if char == BACKSLASH and scan.quote != "'":
        scan.escaping = True
        return

    if scan.quote is not None and char == scan.quote:
        scan.quote = None
        return

    if scan.quote is None and char in QUOTES:
        scan.quote = char
        scan.quoted_token = True
        scan.after_operator = False
        return

    if scan.quote is None and char == SPACE:
        scan.flush()
        scan.after_operator = False
        return

    if scan.quote is None and char == REDIRECT:
        _operator(scan)
        return

    scan.after_operator = False
    scan.buffer.append(char)


def _operator(scan: _Scan) -> None:
    if scan.after_operator and not scan.buffer:
        # second character of ">>"
        scan.after_operator = False
        if scan.ignored is None:
            scan.mode = RedirectMode.APPEND
        return

    selector = "".join(scan.buffer)
    if not scan.quoted_token and selector in FD_SELECTORS:
        stream = FD_SELECTORS[selector]
        scan.buffer.clear()
    else:
        scan.flush()
        stream = Stream.STDOUT

    if scan.path_chunks:
        # a completed target is kept; text after a later operator is dropped
        scan.ignored = []
    else:
        scan.stream = stream
        scan.mode = RedirectMode.TRUNCATE
        scan.path_chunks = []
    scan.after_operator = True
