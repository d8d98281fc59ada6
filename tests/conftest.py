from collections.abc import Callable
from pathlib import Path

import pytest

from toru.domain.task import TaskNode, Tree, add, ascend, descend


def _add_named(tree: Tree, *names: str) -> Tree:
    for name in names:
        tree = add(tree, TaskNode(name=name))
    return tree


def assert_consistent(tree: Tree) -> None:
    """Fail unless every index reference in ``tree`` is sound."""
    size = tree.size()
    assert size >= 1
    assert tree.tasks[0].parent is None
    assert 0 <= tree.cursor < size

    for index, task in enumerate(tree.tasks):
        for child in task.children:
            assert 0 <= child < size, f"task {index} lists missing child {child}"
            assert tree.tasks[child].parent == index
        if index:
            parent = task.parent
            assert parent is not None and 0 <= parent < size
            assert tree.tasks[parent].children.count(index) == 1

    # Every task hangs off the root.
    assert sorted(tree.subtree(0)) == list(range(size))


@pytest.fixture
def check_tree() -> Callable[[Tree], None]:
    return assert_consistent


@pytest.fixture
def spawn_tree() -> Tree:
    """Ten tasks: 1,2 under root; 3,4 under 1; 5,6 under 2; 7,8 under 3; 9 under 4."""
    tree = _add_named(Tree.new(), "Task 1", "Task 2")
    tree = _add_named(descend(tree, 1), "Task 3", "Task 4")
    tree = _add_named(descend(ascend(tree), 2), "Task 5", "Task 6")
    tree = _add_named(descend(descend(ascend(tree), 1), 3), "Task 7", "Task 8")
    tree = _add_named(descend(ascend(tree), 4), "Task 9")
    tree = ascend(ascend(ascend(tree)))
    assert tree.at_root()
    return tree


@pytest.fixture
def save_file(tmp_path: Path) -> Path:
    return tmp_path / "tasks.json"
