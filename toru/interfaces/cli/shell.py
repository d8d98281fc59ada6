"""Interactive line-oriented shell.

Reads one command per line at the ``toru> `` prompt, asks for whatever
arguments the command needs, and saves when the user leaves with ``exit``
or end of input.
"""

import logging
from collections.abc import Callable
from datetime import datetime
from enum import Enum

import typer

from toru.application import TaskCapabilities
from toru.config import DUE_INPUT_FORMAT, parse_due, parse_name
from toru.domain.shared import Err
from toru.interfaces.cli.common import print_error, print_listing

logger = logging.getLogger(__name__)

PROMPT = "toru> "

HELP_LINES = [
    "add - Add a task.",
    "del - Delete a task.",
    "done - Complete a task.",
    "down - Traverse 'down' into a task.",
    "exit - Exit toru.",
    "help - Show the help message.",
    "list - Print current task and its children",
    "up - Traverse 'up' to a tasks' parent",
]


class Command(str, Enum):
    """Shell commands, valued by the word the user types."""

    ADD = "add"
    UP = "up"
    DELETE = "del"
    DONE = "done"
    DOWN = "down"
    LIST = "list"
    HELP = "help"
    EXIT = "exit"

    @classmethod
    def parse(cls, line: str) -> "Command":
        """Map an input line to a command. Anything unrecognized is HELP."""
        try:
            return cls(line.strip())
        except ValueError:
            return cls.HELP


def print_help() -> None:
    typer.echo("\nToru help:")
    for line in HELP_LINES:
        typer.echo(line)
    typer.echo("")


class Shell:
    """REPL over a task session.

    Args:
        session: Anything offering the task capabilities.
        date_format: ``strptime`` format for due dates typed at ``Due``.
        read_line: Prompt-and-read function. Raises EOFError at end of input.
        now: Clock used for the due-date hint.
    """

    def __init__(
        self,
        session: TaskCapabilities,
        *,
        date_format: str = DUE_INPUT_FORMAT,
        read_line: Callable[[str], str] = input,
        now: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._session = session
        self._date_format = date_format
        self._read_line = read_line
        self._now = now

    def run(self) -> bool:
        """Run until ``exit`` or end of input, then save.

        Returns:
            True if the tree was saved.
        """
        while True:
            try:
                line = self._read_line(PROMPT)
            except EOFError:
                typer.echo("")
                break

            command = Command.parse(line)
            if command is Command.EXIT:
                break
            try:
                self.dispatch(command)
            except EOFError:
                typer.echo("")
                break

        typer.echo("Saving...")
        result = self._session.save()
        if isinstance(result, Err):
            print_error(result.error)
            return False
        return True

    def dispatch(self, command: Command) -> None:
        """Execute a single command other than EXIT."""
        logger.debug(f"Shell command: {command.value}")
        if command is Command.ADD:
            self._add()
        elif command is Command.UP:
            self._session.up()
        elif command is Command.DELETE:
            self._with_position(self._session.delete)
        elif command is Command.DONE:
            self._with_position(self._session.done)
        elif command is Command.DOWN:
            self._with_position(self._session.down)
        elif command is Command.LIST:
            print_listing(self._session.listing())
        else:
            print_help()

    def _add(self) -> None:
        try:
            name = parse_name(self._read_line("Name> "))
        except ValueError as e:
            print_error(str(e))
            return

        hint = self._now().strftime(self._date_format)
        raw_due = self._read_line(f"Due [{hint}]> ")

        try:
            due = parse_due(raw_due, self._date_format)
        except ValueError:
            print_error(f"Could not read '{raw_due.strip()}' as a date ({self._date_format})")
            return

        self._session.add(name, due)

    def _with_position(self, action: Callable[[int], object]) -> None:
        raw = self._read_line("Index> ").strip()
        try:
            position = int(raw)
        except ValueError:
            print_error(f"Not a number: '{raw}'")
            return

        result = action(position)
        if isinstance(result, Err):
            print_error(str(result.error))
