"""Task domain - the index-addressed task tree.

All exports are pure (no I/O, no side effects).

Key Types:
    TaskStatus - PENDING or COMPLETE
    TaskNode - Immutable task referring to others by index
    Tree - Arena of tasks plus the cursor
    InvalidIndex - Error value for an out-of-range visible position
    TreeInvariantError - Raised on inconsistent index references

Operations:
    add - Append a task under the cursor
    ascend - Move the cursor to its parent
    descend - Move the cursor to a child
    complete - Mark a subtree complete
    delete - Remove a subtree, compacting the arena

Domain Events:
    TaskAdded, TaskCompleted, TaskDeleted
"""

from .events import DomainEvent, TaskAdded, TaskCompleted, TaskDeleted
from .models import (
    DUE_DISPLAY_FORMAT,
    InvalidIndex,
    TaskNode,
    TaskStatus,
    TreeInvariantError,
)
from .operations import add, ascend, complete, delete, descend
from .tree import Tree

__all__ = [
    # Models
    "DUE_DISPLAY_FORMAT",
    "TaskStatus",
    "TaskNode",
    "Tree",
    "InvalidIndex",
    "TreeInvariantError",
    # Operations
    "add",
    "ascend",
    "descend",
    "complete",
    "delete",
    # Events
    "DomainEvent",
    "TaskAdded",
    "TaskCompleted",
    "TaskDeleted",
]
