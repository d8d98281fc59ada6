"""Task screen for the toru TUI.

Shows the task under the cursor and its pending children, one level at a
time, and maps keys onto the session's operations.

Layout:
+------------------------------------------+
| Header: current task                     |
| ↑ parent hint (hidden at Home)           |
| 1. + Pending child with subtasks         |
| 2.   Pending leaf                        |
| Footer with keybindings                  |
+------------------------------------------+
"""

import logging

from textual.app import ComposeResult
from textual.binding import Binding
from textual.screen import Screen
from textual.widgets import Footer, Header, Label

from toru.application import TaskCapabilities
from toru.config import DUE_INPUT_FORMAT
from toru.domain.shared import Err
from toru.tui.screens.modals import AddTaskModal, HelpModal, NewTask
from toru.tui.widgets import TaskListWidget

logger = logging.getLogger(__name__)


class TaskScreen(Screen):
    """Browse and edit one level of the tree."""

    BINDINGS = [
        Binding("a", "add_task", "Add", show=True),
        Binding("c", "complete", "Complete", show=True),
        Binding("d", "delete", "Delete", show=True),
        Binding("l", "descend", "Open", show=True),
        Binding("right", "descend", "Open", show=False),
        Binding("enter", "descend", "Open", show=False),
        Binding("h", "ascend", "Back", show=True),
        Binding("left", "ascend", "Back", show=False),
        Binding("j", "cursor_down", "Down", show=False),
        Binding("down", "cursor_down", "Down", show=False),
        Binding("k", "cursor_up", "Up", show=False),
        Binding("up", "cursor_up", "Up", show=False),
        Binding("question_mark", "show_help", "Help", show=True, key_display="?"),
    ]

    CSS = """
    #parent-hint {
        color: $text-muted;
        padding: 0 1;
    }
    """

    def __init__(
        self,
        session: TaskCapabilities,
        date_format: str = DUE_INPUT_FORMAT,
    ) -> None:
        super().__init__()
        self._session = session
        self._date_format = date_format
        self.selected = 0
        self.entry_count = 0

    def compose(self) -> ComposeResult:
        """Compose the task screen."""
        yield Header()
        yield Label("", id="parent-hint")
        yield TaskListWidget(id="task-list")
        yield Footer()

    def on_mount(self) -> None:
        self.rebuild()

    def rebuild(self) -> None:
        """Reload the listing and clamp the selection to it."""
        listing = self._session.listing()
        self.entry_count = len(listing.entries)
        if self.entry_count == 0:
            self.selected = 0
        elif self.selected >= self.entry_count:
            self.selected = self.entry_count - 1

        stats = self._session.stats()
        self.app.title = listing.title
        self.app.sub_title = f"{stats.pending} pending"

        hint = self.query_one("#parent-hint", Label)
        hint.update("" if listing.at_root else "↑ h to go back")
        hint.display = not listing.at_root

        self.query_one(TaskListWidget).show(listing, self.selected)

    # =========================================================================
    # Actions
    # =========================================================================

    def action_cursor_down(self) -> None:
        if self.selected < self.entry_count - 1:
            self.selected += 1
            self.rebuild()

    def action_cursor_up(self) -> None:
        if self.selected > 0:
            self.selected -= 1
            self.rebuild()

    def action_descend(self) -> None:
        """Open the selected task."""
        if not self.entry_count:
            return
        if isinstance(self._session.down(self.selected + 1), Err):
            self.notify("Nothing to open", severity="warning")
            return
        self.selected = 0
        self.rebuild()

    def action_ascend(self) -> None:
        """Go back to the parent task."""
        self._session.up()
        self.selected = 0
        self.rebuild()

    def action_complete(self) -> None:
        """Complete the selected task and everything below it."""
        if not self.entry_count:
            self.notify("No task selected", severity="warning")
            return

        result = self._session.done(self.selected + 1)
        if isinstance(result, Err):
            self.notify(str(result.error), severity="error")
            return

        self.notify(f"Completed: {result.value.name}", severity="information")
        self.rebuild()

    def action_delete(self) -> None:
        """Delete the selected task and everything below it."""
        if not self.entry_count:
            self.notify("No task selected", severity="warning")
            return

        result = self._session.delete(self.selected + 1)
        if isinstance(result, Err):
            self.notify(str(result.error), severity="error")
            return

        self.notify(f"Deleted: {result.value.name}", severity="information")
        self.rebuild()

    def action_add_task(self) -> None:
        """Ask for a new task to add under the current one."""
        self.app.push_screen(AddTaskModal(self._date_format), self._add_entered)

    def action_show_help(self) -> None:
        """Show the help modal with keybinding reference."""
        self.app.push_screen(HelpModal())

    def _add_entered(self, new_task: NewTask | None) -> None:
        if new_task is None:
            return

        name, due = new_task
        self._session.add(name, due)
        self.rebuild()
