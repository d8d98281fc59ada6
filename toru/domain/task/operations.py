"""Structural mutations on the task arena.

All functions in this module are pure: they take a ``Tree`` and return a
new ``Tree``, leaving the input untouched. Callers pass arena indices,
never user-visible positions; resolve those first with ``Tree.nth_child``.

Deletion compacts the arena with swap-remove: the last task moves into the
freed slot and every reference to its old index is rewritten. Because any
surviving task can move on any step, indices are re-resolved from the
current arena after each removal instead of being collected up front.
"""

from .models import TaskNode, TreeInvariantError
from .tree import Tree


def add(tree: Tree, task: TaskNode) -> Tree:
    """Append ``task`` as the last child of the current task.

    The new task always lands at index ``tree.size()``. The cursor does
    not move.
    """
    index = tree.size()
    tasks = list(tree.tasks)
    tasks[tree.cursor] = tasks[tree.cursor].add_child(index)
    tasks.append(task.set_parent(tree.cursor))
    return tree.model_copy(update={"tasks": tasks})


def ascend(tree: Tree) -> Tree:
    """Move the cursor to the current task's parent. No-op at the root."""
    if tree.at_root():
        return tree

    parent = tree.current().parent
    if parent is None:
        raise TreeInvariantError(f"Task {tree.cursor} is not the root but has no parent")
    return tree.model_copy(update={"cursor": parent})


def descend(tree: Tree, index: int) -> Tree:
    """Move the cursor to ``index`` if it is a direct child of the current task."""
    if not tree.current().is_child(index):
        return tree
    return tree.model_copy(update={"cursor": index})


def complete(tree: Tree, index: int) -> Tree:
    """Mark ``index`` and every task below it complete. No-op for the root."""
    if index == 0:
        return tree

    tasks = list(tree.tasks)
    for i in tree.subtree(index):
        tasks[i] = tasks[i].complete()
    return tree.model_copy(update={"tasks": tasks})


def delete(tree: Tree, index: int) -> Tree:
    """Remove ``index`` and its whole subtree from the arena. No-op for the root.

    Leaves are removed one at a time, always before their ancestors. If the
    cursor was inside the removed subtree it moves to the parent of
    ``index``.
    """
    if index == 0:
        return tree

    doomed = set(tree.subtree(index))
    cursor = tree.cursor
    if cursor in doomed:
        cursor = _parent_of(tree.tasks, index)

    tasks = list(tree.tasks)
    target = index
    while True:
        leaf = _find_leaf(tasks, target)
        moved_from = _swap_remove(tasks, leaf)
        if leaf == target:
            if cursor == moved_from:
                cursor = leaf
            break
        if moved_from is not None:
            if target == moved_from:
                target = leaf
            if cursor == moved_from:
                cursor = leaf

    return tree.model_copy(update={"tasks": tasks, "cursor": cursor})


def _parent_of(tasks: list[TaskNode], index: int) -> int:
    parent = tasks[index].parent
    if parent is None or not 0 <= parent < len(tasks):
        raise TreeInvariantError(f"Task {index} has no valid parent")
    return parent


def _find_leaf(tasks: list[TaskNode], start: int) -> int:
    """Follow last children down from ``start`` until reaching a leaf."""
    index = start
    while tasks[index].children:
        child = tasks[index].children[-1]
        if not 0 <= child < len(tasks):
            raise TreeInvariantError(f"Invalid access of task {child}")
        index = child
    return index


def _swap_remove(tasks: list[TaskNode], leaf: int) -> int | None:
    """Remove childless task ``leaf`` in place, filling its slot from the end.

    Returns:
        The former index of the task moved into ``leaf``'s slot, or None if
        ``leaf`` was already the last slot.
    """
    parent = _parent_of(tasks, leaf)
    tasks[parent] = tasks[parent].remove_child(leaf)

    last = len(tasks) - 1
    moved = tasks.pop()
    if leaf == last:
        return None

    tasks[leaf] = moved
    moved_parent = _parent_of(tasks, leaf)
    tasks[moved_parent] = tasks[moved_parent].replace_child(last, leaf)
    for child in moved.children:
        tasks[child] = tasks[child].set_parent(leaf)
    return last
