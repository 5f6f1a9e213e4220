"""CLI main module for Pebble."""

from __future__ import annotations

import sys
from typing import Optional

import typer
from loguru import logger

from pebble.config import Settings, load_settings
from pebble.core import CommandResolver, ExecutionEngine, builtin_names
from pebble.errors import ConfigurationError, PebbleError
from pebble.logging_utils import configure_logging

from .render import create_cli_renderer
from .session import create_session

app = typer.Typer(
    name="pebble",
    help="A small interactive shell.",
    add_completion=False,
    rich_markup_mode="rich",
)


@app.callback(invoke_without_command=True)
def main_callback(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        # Default to the interactive shell
        shell(prompt=None, raw=None, log_level=None)


def _exit_with_error() -> None:
    """Exit with error code."""
    raise typer.Exit(1)


def _setup(**overrides: object) -> Settings:
    try:
        settings = load_settings(**overrides)
        profile = "console" if sys.stderr.isatty() else "default"
        configure_logging(settings.log_level, log_file=settings.log_file, profile=profile)
    except (ConfigurationError, ValueError) as exc:
        create_cli_renderer().error(f"Invalid configuration: {exc}")
        _exit_with_error()
    return settings


@app.command()
def shell(
    prompt: Optional[str] = typer.Option(None, "--prompt", help="Prompt text"),
    raw: Optional[bool] = typer.Option(None, "--raw/--no-raw", help="Force keystroke mode on or off"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Log level"),
) -> None:
    """Start the interactive shell."""
    settings = _setup(prompt=prompt, raw_mode=raw, log_level=log_level)
    session = create_session(settings)
    status = session.run()
    raise typer.Exit(status)


@app.command()
def run(
    line: str = typer.Argument(..., help="Command line to execute"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Log level"),
) -> None:
    """Execute a single command line and exit with its status."""
    _setup(log_level=log_level)
    renderer = create_cli_renderer()
    engine = ExecutionEngine(CommandResolver(builtin_names()), renderer)
    try:
        outcome = engine.execute(line)
    except PebbleError as exc:
        logger.debug("run.failed line={!r}", line)
        renderer.error(str(exc))
        _exit_with_error()
    raise typer.Exit(outcome.status)


if __name__ == "__main__":
    app()
