"""Commands implemented inside the shell."""

from __future__ import annotations

import os
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from .resolver import CommandResolver
from .types import Builtin, CapturedOutput, ExecutionOutcome, External


@dataclass(frozen=True)
class BuiltinContext:
    resolver: CommandResolver
    output: CapturedOutput


BuiltinHandler = Callable[[list[str], BuiltinContext], "ExecutionOutcome | None"]

_HANDLERS: dict[str, BuiltinHandler] = {}


def builtin(name: str) -> Callable[[BuiltinHandler], BuiltinHandler]:
    def decorator(func: BuiltinHandler) -> BuiltinHandler:
        _HANDLERS[name] = func
        return func

    return decorator


def builtin_names() -> tuple[str, ...]:
    return tuple(_HANDLERS)


def get_handler(name: str) -> BuiltinHandler | None:
    return _HANDLERS.get(name)


@builtin("exit")
def exit_(args: list[str], ctx: BuiltinContext) -> ExecutionOutcome:
    status = 0
    if args:
        try:
            status = int(args[0])
        except ValueError:
            logger.warning("builtin.exit.bad_status value={}", args[0])
    return ExecutionOutcome(status=status, exit_requested=True)


@builtin("echo")
def echo(args: list[str], ctx: BuiltinContext) -> None:
    ctx.output.out(" ".join(args))


@builtin("type")
def type_(args: list[str], ctx: BuiltinContext) -> ExecutionOutcome | None:
    if not args:
        return None
    status = 0
    for name in args:
        match = ctx.resolver.classify(name)
        if isinstance(match, Builtin):
            ctx.output.out(f"{name} is a shell builtin")
        elif isinstance(match, External):
            ctx.output.out(f"{name} is {match.path}")
        else:
            ctx.output.err(f"{name}: not found")
            status = 1
    return ExecutionOutcome(status=status)


@builtin("pwd")
def pwd(args: list[str], ctx: BuiltinContext) -> None:
    ctx.output.out(os.getcwd())


@builtin("cd")
def cd(args: list[str], ctx: BuiltinContext) -> ExecutionOutcome | None:
    target = args[0] if args else "~"
    path = Path(target).expanduser()
    try:
        os.chdir(path)
    except FileNotFoundError:
        ctx.output.err(f"cd: {target}: No such file or directory")
        return ExecutionOutcome(status=1)
    except NotADirectoryError:
        ctx.output.err(f"cd: {target}: Not a directory")
        return ExecutionOutcome(status=1)
    except PermissionError:
        ctx.output.err(f"cd: {target}: Permission denied")
        return ExecutionOutcome(status=1)
    return None
