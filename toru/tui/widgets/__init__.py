"""TUI widgets for toru."""

from .task_list import TaskListWidget

__all__ = [
    "TaskListWidget",
]
