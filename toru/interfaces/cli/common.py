"""Shared utilities for toru CLI commands.

This module provides common utilities used across CLI commands:
- Formatted output helpers (error, success, info)
- Listing rendering shared by one-shot commands and the shell
- Opening the session from the resolved configuration
"""

import typer

from toru.application import Listing, TaskSession
from toru.config import ToruConfig
from toru.domain.shared import Err
from toru.infrastructure.storage import TreeRepository

PARENT_INDICATOR = "↑"


def print_error(msg: str) -> None:
    """Print a formatted error message.

    Args:
        msg: Error message to display
    """
    typer.echo(typer.style(f"Error: {msg}", fg=typer.colors.RED), err=True)


def print_success(msg: str) -> None:
    """Print a formatted success message."""
    typer.echo(typer.style(msg, fg=typer.colors.GREEN))


def print_info(msg: str) -> None:
    """Print a formatted info message."""
    typer.echo(typer.style(msg, fg=typer.colors.BLUE))


def format_listing(listing: Listing) -> list[str]:
    """Render a listing as plain lines.

    The header is an up-arrow when there is a parent to go back to, the
    title, and a dashed underline of the title's length. Each pending
    child follows as ``"<position>. <marker> <task>"``, where the marker is
    ``+`` if that child still has pending work below it.

    Args:
        listing: Listing from the session.

    Returns:
        Lines to print, without trailing newlines.
    """
    lines = [
        "" if listing.at_root else PARENT_INDICATOR,
        listing.title,
        "-" * len(listing.title),
    ]
    for entry in listing.entries:
        marker = "+" if entry.has_pending else " "
        lines.append(f"{entry.position}. {marker} {entry.label}")
    return lines


def print_listing(listing: Listing) -> None:
    """Print a listing followed by a blank line."""
    for line in format_listing(listing):
        typer.echo(line)
    typer.echo("")


def open_session(config: ToruConfig) -> TaskSession:
    """Open the session backed by the configured save file.

    Raises:
        typer.Exit: If the save file exists but can't be loaded.
    """
    result = TaskSession.open(TreeRepository(config.save_path))
    if isinstance(result, Err):
        print_error(result.error)
        raise typer.Exit(1)
    return result.value


def save_session(session: TaskSession) -> None:
    """Save the session, exiting with status 1 on failure."""
    result = session.save()
    if isinstance(result, Err):
        print_error(result.error)
        raise typer.Exit(1)
