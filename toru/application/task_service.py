"""Task application service.

Combines the position resolver with the structural operations and emits
domain events. All functions are pure - no I/O, no side effects.

Positions here are the zero-based positions of ``Tree.nth_child``; the
session translates the one-based numbers users see.
"""

from datetime import datetime

from pydantic import BaseModel

from toru.domain.shared import Ok, Result, flat_map, map_result
from toru.domain.task import (
    InvalidIndex,
    TaskAdded,
    TaskCompleted,
    TaskDeleted,
    TaskNode,
    Tree,
    add,
    ascend,
    complete,
    delete,
    descend,
)

HOME_TITLE = "Home"


class ListingEntry(BaseModel):
    """One pending child of the current task, as shown to the user."""

    position: int
    name: str
    label: str
    due: datetime | None = None
    has_pending: bool = False


class Listing(BaseModel):
    """The current task and its pending children."""

    title: str
    at_root: bool
    entries: list[ListingEntry]


class TreeStats(BaseModel):
    """Counts of non-root tasks by status."""

    total: int
    pending: int
    complete: int

    @property
    def progress_percent(self) -> float:
        """Calculate completion percentage."""
        if self.total == 0:
            return 0.0
        return round(self.complete / self.total * 100, 1)


def add_task(
    tree: Tree,
    name: str,
    due: datetime | None = None,
) -> tuple[Tree, TaskAdded]:
    """Add a new pending task under the current task.

    Args:
        tree: The tree to update.
        name: Name of the new task.
        due: Optional due timestamp.

    Returns:
        The updated tree and a TaskAdded event.
    """
    index = tree.size()
    updated = add(tree, TaskNode(name=name, due=due))
    return updated, TaskAdded(index=index, parent=tree.cursor, name=name)


def complete_task(
    tree: Tree,
    position: int,
) -> Result[tuple[Tree, TaskCompleted], InvalidIndex]:
    """Complete the pending child at ``position`` and everything under it.

    Returns:
        Ok((updated_tree, TaskCompleted)) on success, or
        Err(InvalidIndex) if no pending child sits at that position.
    """

    def run(index: int) -> Ok[tuple[Tree, TaskCompleted]]:
        subtree = tree.subtree(index)
        cascaded = sum(1 for i in subtree if not tree.tasks[i].is_complete())
        event = TaskCompleted(index=index, name=tree.tasks[index].name, cascaded=cascaded)
        return Ok((complete(tree, index), event))

    return flat_map(tree.nth_child(position), run)


def delete_task(
    tree: Tree,
    position: int,
) -> Result[tuple[Tree, TaskDeleted], InvalidIndex]:
    """Delete the pending child at ``position`` together with its subtree.

    Returns:
        Ok((updated_tree, TaskDeleted)) on success, or
        Err(InvalidIndex) if no pending child sits at that position.
    """

    def run(index: int) -> Ok[tuple[Tree, TaskDeleted]]:
        event = TaskDeleted(
            index=index,
            name=tree.tasks[index].name,
            removed=len(tree.subtree(index)),
        )
        return Ok((delete(tree, index), event))

    return flat_map(tree.nth_child(position), run)


def descend_task(tree: Tree, position: int) -> Result[Tree, InvalidIndex]:
    """Move the cursor into the pending child at ``position``."""
    return map_result(tree.nth_child(position), lambda index: descend(tree, index))


def ascend_task(tree: Tree) -> Tree:
    """Move the cursor to the current task's parent."""
    return ascend(tree)


def get_listing(tree: Tree) -> Listing:
    """Build the listing of the current task's pending children.

    Positions are one-based, matching what the user types back.
    """
    title = HOME_TITLE if tree.at_root() else tree.current().name
    entries = [
        ListingEntry(
            position=position,
            name=child.name,
            due=child.due,
            has_pending=child.has_children() and tree.has_pending(child),
            label=str(child),
        )
        for position, child in enumerate(tree.pending_children(), start=1)
    ]
    return Listing(title=title, at_root=tree.at_root(), entries=entries)


def get_tree_stats(tree: Tree) -> TreeStats:
    """Count every task except the root by status."""
    tasks = tree.tasks[1:]
    done = sum(1 for task in tasks if task.is_complete())
    return TreeStats(total=len(tasks), pending=len(tasks) - done, complete=done)
