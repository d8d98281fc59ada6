"""Task domain models.

A ``TaskNode`` never holds references to other nodes. Its parent and
children are integer indices into the ``tasks`` list of the owning
``Tree``, so a node on its own means very little and must be read through
the tree. Nodes are frozen: every transformation returns a new node.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

DUE_DISPLAY_FORMAT = "%I:%M %p %Y-%m-%d"


class TaskStatus(str, Enum):
    """Status of a task. Only moves from PENDING to COMPLETE."""

    PENDING = "pending"
    COMPLETE = "complete"


@dataclass(frozen=True, slots=True)
class InvalidIndex:
    """A user-visible position that names no pending child of the cursor.

    Attributes:
        requested: The position that was asked for.
    """

    requested: int

    def __str__(self) -> str:
        return f"Child at index {self.requested} does not exist"


class TreeInvariantError(RuntimeError):
    """Raised when the tree's index references are inconsistent.

    A conforming caller never triggers this; it signals a programming error
    and is not meant to be recovered from.
    """


class TaskNode(BaseModel):
    """A single task in the arena.

    Attributes:
        parent: Index of the parent task. ``None`` only for the root.
        name: Display name.
        due: Optional due timestamp.
        status: PENDING or COMPLETE.
        children: Indices of child tasks, in display order.
    """

    parent: int | None = None
    name: str = "Root"
    due: datetime | None = None
    status: TaskStatus = TaskStatus.PENDING
    children: list[int] = Field(default_factory=list)

    model_config = {"frozen": True}

    def set_parent(self, parent_index: int) -> "TaskNode":
        return self.model_copy(update={"parent": parent_index})

    def set_name(self, name: str) -> "TaskNode":
        return self.model_copy(update={"name": name})

    def set_due(self, due: datetime | None) -> "TaskNode":
        return self.model_copy(update={"due": due})

    def complete(self) -> "TaskNode":
        return self.model_copy(update={"status": TaskStatus.COMPLETE})

    def add_child(self, child_index: int) -> "TaskNode":
        return self.model_copy(update={"children": [*self.children, child_index]})

    def remove_child(self, child_index: int) -> "TaskNode":
        """Drop every occurrence of ``child_index``. No-op if absent."""
        if child_index not in self.children:
            return self
        return self.model_copy(
            update={"children": [i for i in self.children if i != child_index]}
        )

    def replace_child(self, old_child: int, new_child: int) -> "TaskNode":
        """Substitute every occurrence of ``old_child`` with ``new_child``."""
        if old_child not in self.children:
            return self
        return self.model_copy(
            update={
                "children": [new_child if i == old_child else i for i in self.children]
            }
        )

    def has_children(self) -> bool:
        return len(self.children) > 0

    def is_child(self, index: int) -> bool:
        return index in self.children

    def is_complete(self) -> bool:
        return self.status == TaskStatus.COMPLETE

    def __str__(self) -> str:
        if self.due is None:
            return self.name
        return f"{self.name} | {self.due.strftime(DUE_DISPLAY_FORMAT)}"
