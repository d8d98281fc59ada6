"""The task arena.

``Tree`` is a flat list of ``TaskNode`` values addressed by position, plus
a cursor naming the node the user is currently looking at. Index 0 is the
root and is never removed.

Everything in this module is a read-only query. Mutations live in
``toru.domain.task.operations`` and return new ``Tree`` values.
"""

from collections import deque
from collections.abc import Iterator

from pydantic import BaseModel, Field, model_validator

from toru.domain.shared.result import Err, Ok, Result

from .models import InvalidIndex, TaskNode, TreeInvariantError


class Tree(BaseModel):
    """Arena of tasks plus the cursor.

    Attributes:
        cursor: Index of the current task.
        tasks: All tasks; ``tasks[0]`` is the root.
    """

    cursor: int = 0
    tasks: list[TaskNode] = Field(default_factory=lambda: [TaskNode()])

    @model_validator(mode="after")
    def check_references(self) -> "Tree":
        # Only runs on construction from raw data; operations use model_copy.
        if not self.tasks:
            raise ValueError("tree has no root task")
        if self.tasks[0].parent is not None:
            raise ValueError("root task must not have a parent")
        if not 0 <= self.cursor < len(self.tasks):
            raise ValueError(f"cursor {self.cursor} is out of range")

        size = len(self.tasks)
        for index, task in enumerate(self.tasks):
            for child in task.children:
                if not 0 <= child < size:
                    raise ValueError(f"task {index} lists missing child {child}")
                if self.tasks[child].parent != index:
                    raise ValueError(f"task {child} is listed under {index} but not parented there")
            if index == 0:
                continue
            if task.parent is None or not 0 <= task.parent < size:
                raise ValueError(f"task {index} has an invalid parent {task.parent}")
            if self.tasks[task.parent].children.count(index) != 1:
                raise ValueError(f"task {index} must appear exactly once under {task.parent}")

        # Links can agree pairwise and still form a loop detached from the root
        unreachable = sorted(set(range(size)) - set(self.subtree(0)))
        if unreachable:
            raise ValueError(f"tasks {unreachable} cannot be reached from the root")
        return self

    @classmethod
    def new(cls) -> "Tree":
        """Create a tree holding only the root task."""
        return cls(cursor=0, tasks=[TaskNode()])

    def ptr(self) -> int:
        return self.cursor

    def at_root(self) -> bool:
        return self.cursor == 0

    def size(self) -> int:
        return len(self.tasks)

    def current(self) -> TaskNode:
        return self.tasks[self.cursor]

    def task(self, index: int) -> TaskNode | None:
        """Look up a task by arena index, or None if there is no such slot."""
        if 0 <= index < len(self.tasks):
            return self.tasks[index]
        return None

    def children_of(self, task: TaskNode) -> Iterator[TaskNode]:
        """Iterate over the direct children of ``task`` in display order."""
        for index in task.children:
            yield self.tasks[index]

    def children(self) -> Iterator[TaskNode]:
        """Iterate over the direct children of the current task."""
        return self.children_of(self.current())

    def pending_children(self) -> Iterator[TaskNode]:
        """Iterate over the current task's children that are not complete."""
        return (child for child in self.children() if not child.is_complete())

    def has_pending(self, task: TaskNode) -> bool:
        """True if ``task`` has at least one direct child still pending."""
        return any(not child.is_complete() for child in self.children_of(task))

    def subtree(self, index: int) -> list[int]:
        """Return ``index`` followed by all of its descendants, breadth first.

        Raises:
            TreeInvariantError: If ``index`` or any child reference points at
                a missing slot.
        """
        if self.task(index) is None:
            raise TreeInvariantError(f"No task at index {index}")

        found = [index]
        seen = {index}
        queue = deque([index])
        while queue:
            for child in self.tasks[queue.popleft()].children:
                if self.task(child) is None:
                    raise TreeInvariantError(f"Invalid access of task {child}")
                if child not in seen:
                    seen.add(child)
                    found.append(child)
                    queue.append(child)
        return found

    def nth_child(self, position: int) -> Result[int, InvalidIndex]:
        """Resolve a position among the current task's pending children.

        Completed children are skipped and take up no position.

        Args:
            position: Zero-based position in the pending-children listing.

        Returns:
            Ok(arena index) of that child, or Err(InvalidIndex) if the
            position is out of range.
        """
        if position >= 0:
            pending = (i for i in self.current().children if not self.tasks[i].is_complete())
            for seen, index in enumerate(pending):
                if seen == position:
                    return Ok(index)
        return Err(InvalidIndex(position))
