"""CLI interface for toru using Typer.

This module provides the command-line interface for toru,
a personal hierarchical task manager.

Usage:
    toru                    # Open the full-screen interface
    toru list               # Show the current task's pending children
    toru add "Buy milk"     # Add a task under the current one
    toru done 1             # Complete the first listed task
    toru shell              # Interactive prompt

The CLI is structured as:
- app: Main Typer application
- common.py: Shared utilities for CLI commands
- shell.py: The interactive ``toru>`` prompt
- main.py: Entry point that runs the app
"""

import logging
from pathlib import Path
from typing import Optional

import typer

from toru import __version__
from toru.config import ToruConfig, load_config, parse_due, parse_name
from toru.domain.shared import Err
from toru.interfaces.cli.common import (
    open_session,
    print_error,
    print_info,
    print_listing,
    print_success,
    save_session,
)
from toru.interfaces.cli.shell import Shell
from toru.logging_setup import setup_logging

logger = logging.getLogger(__name__)

# Create the main Typer application
app = typer.Typer(
    name="toru",
    help="Personal hierarchical task manager",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"toru version {__version__}")
        raise typer.Exit()


def _config(ctx: typer.Context) -> ToruConfig:
    return ctx.obj


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    file: Optional[Path] = typer.Option(
        None,
        "--file",
        "-f",
        help="Task file (or set TORU_FILE env var)",
        envvar="TORU_FILE",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Log activity to stderr"),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """toru - a tree of tasks, one level at a time.

    Run without a command to open the full-screen interface.
    """
    config = load_config(save_path=file)
    ctx.obj = config

    if ctx.invoked_subcommand is None:
        _run_tui(config, verbose)
        return

    setup_logging(config.log_path, verbose=verbose)
    logger.debug(f"Using task file {config.save_path}")


def _run_tui(config: ToruConfig, verbose: bool) -> None:
    setup_logging(config.log_path, verbose=verbose, console=False)

    # Textual is only needed for full-screen mode
    from toru.tui import ToruApp

    session = open_session(config)
    tui_app = ToruApp(session, config.date_format)
    tui_app.run()
    if tui_app.return_code:
        raise typer.Exit(tui_app.return_code)


# =============================================================================
# Commands
# =============================================================================


@app.command("list")
def list_tasks(ctx: typer.Context) -> None:
    """Show the current task and its pending children."""
    session = open_session(_config(ctx))
    print_listing(session.listing())


@app.command("add")
def add(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Task name"),
    due: Optional[str] = typer.Option(
        None,
        "--due",
        "-d",
        help='Due date, e.g. "2024-05-01 09:30 AM"',
    ),
) -> None:
    """Add a task under the current one."""
    config = _config(ctx)
    try:
        task_name = parse_name(name)
    except ValueError as e:
        print_error(str(e))
        raise typer.Exit(1)
    try:
        due_at = parse_due(due or "", config.date_format)
    except ValueError:
        print_error(f"Could not read '{due}' as a date ({config.date_format})")
        raise typer.Exit(1)

    session = open_session(config)
    event = session.add(task_name, due_at)
    save_session(session)
    print_success(f"Added: {event.name}")


@app.command("done")
def done(
    ctx: typer.Context,
    position: int = typer.Argument(..., help="Position in the listing"),
) -> None:
    """Complete a task and everything below it."""
    session = open_session(_config(ctx))
    result = session.done(position)
    if isinstance(result, Err):
        print_error(str(result.error))
        raise typer.Exit(1)

    save_session(session)
    event = result.value
    print_success(f"Completed: {event.name} ({event.cascaded} marked)")


@app.command("del")
def delete(
    ctx: typer.Context,
    position: int = typer.Argument(..., help="Position in the listing"),
) -> None:
    """Delete a task and everything below it."""
    session = open_session(_config(ctx))
    result = session.delete(position)
    if isinstance(result, Err):
        print_error(str(result.error))
        raise typer.Exit(1)

    save_session(session)
    event = result.value
    print_success(f"Deleted: {event.name} ({event.removed} removed)")


@app.command("down")
def down(
    ctx: typer.Context,
    position: int = typer.Argument(..., help="Position in the listing"),
) -> None:
    """Move into a child task."""
    session = open_session(_config(ctx))
    result = session.down(position)
    if isinstance(result, Err):
        print_error(str(result.error))
        raise typer.Exit(1)

    save_session(session)
    print_listing(session.listing())


@app.command("up")
def up(ctx: typer.Context) -> None:
    """Move to the current task's parent."""
    session = open_session(_config(ctx))
    session.up()
    save_session(session)
    print_listing(session.listing())


@app.command("status")
def status(ctx: typer.Context) -> None:
    """Show progress over the whole tree."""
    config = _config(ctx)
    session = open_session(config)
    stats = session.stats()

    typer.echo(f"Task file: {config.save_path}")
    typer.echo(f"Progress: {stats.complete}/{stats.total} tasks complete ({stats.progress_percent:.0f}%)")
    if stats.pending:
        print_info(f"{stats.pending} pending")


@app.command("shell")
def shell(ctx: typer.Context) -> None:
    """Start the interactive prompt."""
    config = _config(ctx)
    session = open_session(config)
    if not Shell(session, date_format=config.date_format).run():
        raise typer.Exit(1)


@app.command("tui")
def tui(ctx: typer.Context) -> None:
    """Open the full-screen interface."""
    _run_tui(_config(ctx), verbose=False)
