"""TUI screens for toru."""

from .modals import AddTaskModal, HelpModal
from .tasks import TaskScreen

__all__ = [
    "AddTaskModal",
    "HelpModal",
    "TaskScreen",
]
