"""Pending-children list widget for the toru TUI."""

from rich.text import Text
from textual.widgets import Static

from toru.application import Listing, ListingEntry

SUBTASK_MARKER = "+"


class TaskListWidget(Static):
    """Numbered list of the current task's pending children.

    The widget only draws; the app owns the selected row.
    """

    DEFAULT_CSS = """
    TaskListWidget {
        background: $surface;
        padding: 0 1;
        height: 1fr;
    }
    """

    def __init__(self, id: str | None = None, classes: str | None = None) -> None:
        super().__init__("", id=id, classes=classes)
        self.lines: list[str] = []

    def show(self, listing: Listing, selected: int) -> None:
        """Redraw for a listing with row ``selected`` highlighted."""
        self.lines = [self._format_entry(entry) for entry in listing.entries]

        text = Text()
        if not self.lines:
            text.append("No pending tasks. Press a to add one.", style="dim")
        for row, line in enumerate(self.lines):
            if row:
                text.append("\n")
            text.append(line, style="reverse bold" if row == selected else "")
        self.update(text)

    def _format_entry(self, entry: ListingEntry) -> str:
        marker = SUBTASK_MARKER if entry.has_pending else " "
        return f"{entry.position}. {marker} {entry.label}"
