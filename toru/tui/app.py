"""Main toru TUI application.

The ToruApp class is the entry point for the terminal user interface.
It owns the session for the lifetime of the app and saves it on quit.
"""

import logging
from typing import Optional

from textual.app import App
from textual.binding import Binding

from toru.application import TaskCapabilities
from toru.config import DUE_INPUT_FORMAT
from toru.domain.shared import Err
from toru.tui.screens import TaskScreen

logger = logging.getLogger(__name__)


class ToruApp(App):
    """toru task tree TUI application."""

    TITLE = "toru"

    CSS = """
    Screen {
        background: $surface;
    }

    Footer {
        dock: bottom;
        height: 1;
    }
    """

    BINDINGS = [
        Binding("q", "save_and_quit", "Quit", show=True),
    ]

    def __init__(
        self,
        session: TaskCapabilities,
        date_format: str = DUE_INPUT_FORMAT,
    ) -> None:
        """Initialize the toru TUI application.

        Args:
            session: Session to browse and edit.
            date_format: Format for due dates typed into the add dialog.
        """
        super().__init__()
        self._session = session
        self._date_format = date_format
        self.save_error: Optional[str] = None

    def on_mount(self) -> None:
        """Handle app mount - show the task screen."""
        self.push_screen(TaskScreen(self._session, self._date_format))

    def action_save_and_quit(self) -> None:
        """Save the tree and exit."""
        result = self._session.save()
        if isinstance(result, Err):
            self.save_error = result.error
            logger.error(f"Save on quit failed: {result.error}")
            self.exit(return_code=1, message=f"Save failed: {result.error}")
            return

        logger.debug("Saved on quit")
        self.exit()
