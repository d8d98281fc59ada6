"""Modal dialogs for the toru TUI."""

from datetime import datetime

from textual.app import ComposeResult
from textual.containers import Container, Horizontal
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label

from toru.config import DUE_INPUT_FORMAT, parse_due, parse_name

NewTask = tuple[str, datetime | None]


class AddTaskModal(ModalScreen[NewTask | None]):
    """Ask for a task name and optional due date.

    Dismisses with ``(name, due)``, or None when cancelled.
    """

    BINDINGS = [
        ("escape", "dismiss", "Close"),
    ]

    CSS = """
    AddTaskModal {
        align: center middle;
    }

    #add-modal {
        width: 60;
        height: auto;
        max-height: 20;
        border: thick $primary;
        background: $surface;
        padding: 1 2;
    }

    #add-modal-title {
        text-style: bold;
        text-align: center;
        margin-bottom: 1;
    }

    #add-modal Input {
        margin: 0 0 1 0;
    }

    #add-buttons {
        layout: horizontal;
        height: auto;
        align: center middle;
    }

    #add-buttons Button {
        margin: 0 1;
    }
    """

    def __init__(self, date_format: str = DUE_INPUT_FORMAT, now: datetime | None = None) -> None:
        super().__init__()
        self._date_format = date_format
        self._now = now or datetime.now()

    def compose(self) -> ComposeResult:
        """Compose the add-task modal."""
        with Container(id="add-modal"):
            yield Label("New Task", id="add-modal-title")
            yield Label("Name")
            yield Input(placeholder="What needs doing?", id="task-name")
            yield Label("Due (leave empty for none)")
            yield Input(placeholder=self._now.strftime(self._date_format), id="task-due")
            with Horizontal(id="add-buttons"):
                yield Button("Add", variant="primary", id="btn-add")
                yield Button("Cancel", variant="default", id="btn-cancel")

    def on_mount(self) -> None:
        self.query_one("#task-name", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Enter in the name field moves on to the due field."""
        if event.input.id == "task-name":
            self.query_one("#task-due", Input).focus()
        else:
            self._submit()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button presses."""
        if event.button.id == "btn-cancel":
            self.dismiss(None)
        elif event.button.id == "btn-add":
            self._submit()

    def _submit(self) -> None:
        try:
            name = parse_name(self.query_one("#task-name", Input).value)
        except ValueError as e:
            self.app.notify(str(e), severity="warning")
            self.query_one("#task-name", Input).focus()
            return

        raw_due = self.query_one("#task-due", Input).value
        try:
            due = parse_due(raw_due, self._date_format)
        except ValueError:
            self.app.notify(f"Due date must look like {self._date_format}", severity="warning")
            return

        self.dismiss((name, due))


class HelpModal(ModalScreen):
    """Modal dialog showing keybinding help."""

    BINDINGS = [
        ("escape", "dismiss", "Close"),
        ("question_mark", "dismiss", "Close"),
    ]

    CSS = """
    HelpModal {
        align: center middle;
    }

    #help-modal {
        width: 70;
        height: auto;
        max-height: 30;
        border: thick $primary;
        background: $surface;
        padding: 1 2;
    }

    #help-title {
        text-style: bold;
        text-align: center;
        margin-bottom: 1;
        color: $primary;
    }

    .help-section-title {
        text-style: bold;
        color: $secondary;
    }

    .help-row {
        layout: horizontal;
        height: 1;
    }

    .help-key {
        width: 20;
        color: $warning;
    }

    .help-desc {
        width: 100%;
    }
    """

    def compose(self) -> ComposeResult:
        """Compose the help modal content."""
        with Container(id="help-modal"):
            yield Label("toru - Keyboard Shortcuts", id="help-title")

            yield Label("Tasks", classes="help-section-title")
            yield self._help_row("a", "Add a task here")
            yield self._help_row("c", "Complete selected task and its subtasks")
            yield self._help_row("d", "Delete selected task and its subtasks")

            yield Label("Navigation", classes="help-section-title")
            yield self._help_row("j/k, Up/Down", "Move selection")
            yield self._help_row("l, Right, Enter", "Open selected task")
            yield self._help_row("h, Left", "Back to parent")

            yield Label("Application", classes="help-section-title")
            yield self._help_row("?", "Show this help")
            yield self._help_row("q", "Save and quit")

            yield Label("")
            yield Label("Press Escape or ? to close", id="help-footer")

    def _help_row(self, key: str, description: str) -> Horizontal:
        """Create a help row with key and description."""
        return Horizontal(
            Label(f"  {key}", classes="help-key"),
            Label(description, classes="help-desc"),
            classes="help-row",
        )
