"""Task domain events.

Immutable records of what a mutation did to the tree. The application
service returns them next to the updated tree; the session logs them.
"""

from toru.domain.shared.events import DomainEvent


class TaskAdded(DomainEvent):
    """A task was appended under the current task."""

    index: int
    parent: int
    name: str


class TaskCompleted(DomainEvent):
    """A task and its subtree were marked complete.

    ``cascaded`` counts the tasks whose status actually changed, the named
    task included.
    """

    index: int
    name: str
    cascaded: int


class TaskDeleted(DomainEvent):
    """A task and its subtree were removed from the arena.

    ``index`` is the arena index the task had before removal.
    """

    index: int
    name: str
    removed: int
