# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_console

import sys
from typing import Annotated, Optional

import typer

from coreason_console import __version__
from coreason_console.config import ConsoleSettings
from coreason_console.factory import LogFactory
from coreason_console.levels import InvalidLevelError, Level
from coreason_console.normalizer import Untraceable
from coreason_console.utils.logger import logger

app = typer.Typer(
    name="coreason-console",
    help="CLI for coreason-console: aligned, deduplicated console logging.",
    add_completion=False,
)


@app.command()
def demo(
    color: Annotated[bool, typer.Option("--color/--no-color", help="Colour the output")] = True,
) -> None:
    """
    Show what the console logger's output looks like.
    """
    factory = LogFactory(ConsoleSettings(colorize=color, synchronous=True))

    log = factory.module("demo")
    log.info("Logging without source tracing")
    log.notice("Initializing application...\nwow\nsuch application")
    try:
        raise RuntimeError("Logging an exception instance.")
    except RuntimeError as e:
        log.critical(e)

    log.with_source()
    log.info("Logging WITH source tracing")
    log.notice(Untraceable("You'll never know where this was logged from!"))

    root = factory.instance()
    root.warn("We don't need no prefix!")

    factory.module("something weird").warn("...or do we?")
    root.notice("You're using a longer prefix? I'll adjust.")

    factory.module().error("ouch")


@app.command()
def emit(
    message: Annotated[str, typer.Argument(help="Message to log")],
    level: Annotated[str, typer.Option("--level", "-l", help="Level name (debug, info, notice, warn, error, critical)")] = "info",
    name: Annotated[Optional[str], typer.Option("--name", "-n", help="Prefix of the logger")] = None,
    source: Annotated[bool, typer.Option("--source", help="Append the call site")] = False,
    color: Annotated[bool, typer.Option("--color/--no-color", help="Colour the output")] = True,
) -> None:
    """
    Log a single message to stdout.
    """
    try:
        resolved = Level.parse(level)
    except InvalidLevelError:
        logger.exception("Emit Failed")
        sys.exit(1)

    factory = LogFactory(ConsoleSettings(colorize=color, synchronous=True, trace_source=source))
    log = factory.instance(name)
    getattr(log, resolved.name.lower())(message)


@app.command()
def version() -> None:
    """Print the version of coreason-console."""
    typer.echo(f"coreason-console v{__version__}")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()  # pragma: no cover
