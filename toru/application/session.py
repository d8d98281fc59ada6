"""The task session: single owner of the current tree.

Every front end (shell, one-shot CLI, TUI) drives the tree through a
``TaskSession``. The session holds the only live ``Tree`` value, swaps in
the result of each mutation, logs the resulting domain event, and saves
through the repository it was opened with.

Positions accepted here are one-based, exactly as shown in a listing.
"""

import logging
from datetime import datetime
from typing import Protocol

from toru.application.task_service import (
    Listing,
    TreeStats,
    add_task,
    ascend_task,
    complete_task,
    delete_task,
    descend_task,
    get_listing,
    get_tree_stats,
)
from toru.domain.shared import Err, Ok, Result
from toru.domain.task import InvalidIndex, TaskAdded, TaskCompleted, TaskDeleted, Tree
from toru.infrastructure.storage import TreeRepository

logger = logging.getLogger(__name__)


class TaskCapabilities(Protocol):
    """What a front end may ask of the task tree."""

    def listing(self) -> Listing: ...

    def stats(self) -> TreeStats: ...

    def add(self, name: str, due: datetime | None = None) -> TaskAdded: ...

    def up(self) -> None: ...

    def down(self, position: int) -> Result[None, InvalidIndex]: ...

    def done(self, position: int) -> Result[TaskCompleted, InvalidIndex]: ...

    def delete(self, position: int) -> Result[TaskDeleted, InvalidIndex]: ...

    def save(self) -> Result[None, str]: ...


class TaskSession:
    """Holds the tree value between interactions.

    Not thread-safe: exactly one caller may drive a session at a time.
    """

    def __init__(self, tree: Tree | None = None, repository: TreeRepository | None = None) -> None:
        self._tree = tree if tree is not None else Tree.new()
        self._repository = repository

    @classmethod
    def open(cls, repository: TreeRepository) -> Result["TaskSession", str]:
        """Load the saved tree and wrap it in a session.

        Args:
            repository: Where the tree is loaded from and saved to.

        Returns:
            Ok(TaskSession) or Err(str) if the save file is unusable.
        """
        result = repository.load()
        if isinstance(result, Err):
            logger.error(f"Could not load {repository.path}: {result.error}")
            return result

        logger.debug(f"Loaded {result.value.size()} tasks from {repository.path}")
        return Ok(cls(result.value, repository))

    @property
    def tree(self) -> Tree:
        return self._tree

    def listing(self) -> Listing:
        return get_listing(self._tree)

    def stats(self) -> TreeStats:
        return get_tree_stats(self._tree)

    def add(self, name: str, due: datetime | None = None) -> TaskAdded:
        self._tree, event = add_task(self._tree, name, due)
        logger.info(f"Added task {event.index} '{event.name}' under {event.parent}")
        return event

    def up(self) -> None:
        self._tree = ascend_task(self._tree)
        logger.debug(f"Cursor at {self._tree.cursor}")

    def down(self, position: int) -> Result[None, InvalidIndex]:
        result = descend_task(self._tree, position - 1)
        if isinstance(result, Err):
            return self._rejected(position)

        self._tree = result.value
        logger.debug(f"Cursor at {self._tree.cursor}")
        return Ok(None)

    def done(self, position: int) -> Result[TaskCompleted, InvalidIndex]:
        result = complete_task(self._tree, position - 1)
        if isinstance(result, Err):
            return self._rejected(position)

        self._tree, event = result.value
        logger.info(f"Completed task {event.index} '{event.name}' ({event.cascaded} marked)")
        return Ok(event)

    def delete(self, position: int) -> Result[TaskDeleted, InvalidIndex]:
        result = delete_task(self._tree, position - 1)
        if isinstance(result, Err):
            return self._rejected(position)

        self._tree, event = result.value
        logger.info(f"Deleted task {event.index} '{event.name}' ({event.removed} removed)")
        return Ok(event)

    def save(self) -> Result[None, str]:
        """Persist the current tree through the repository, if there is one."""
        if self._repository is None:
            return Err("No save file configured")

        result = self._repository.save(self._tree)
        if isinstance(result, Err):
            logger.error(f"Save failed: {result.error}")
        else:
            logger.debug(f"Saved {self._tree.size()} tasks to {self._repository.path}")
        return result

    def _rejected(self, position: int) -> Err[InvalidIndex]:
        logger.warning(f"No pending task at position {position}")
        return Err(InvalidIndex(position))
