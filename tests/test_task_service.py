from datetime import datetime

from toru.application import (
    add_task,
    ascend_task,
    complete_task,
    delete_task,
    descend_task,
    get_listing,
    get_tree_stats,
)
from toru.domain.shared import Err, Ok
from toru.domain.task import InvalidIndex, Tree


def test_add_task_returns_event() -> None:
    due = datetime(2024, 5, 1, 9, 30)

    tree, event = add_task(Tree.new(), "Buy milk", due)

    assert tree.size() == 2
    assert tree.tasks[1].due == due
    assert event.index == 1
    assert event.parent == 0
    assert event.name == "Buy milk"


def test_complete_task_counts_newly_completed(spawn_tree: Tree) -> None:
    # Complete Task 3 first so only the rest of Task 1's subtree changes.
    step = complete_task(descend_task(spawn_tree, 0).value, 0)
    assert isinstance(step, Ok)
    tree = ascend_task(step.value[0])

    result = complete_task(tree, 0)

    assert isinstance(result, Ok)
    tree, event = result.value
    assert event.name == "Task 1"
    assert event.index == 1
    assert event.cascaded == 3
    assert [entry.name for entry in get_listing(tree).entries] == ["Task 2"]


def test_complete_task_rejects_bad_position(spawn_tree: Tree) -> None:
    assert complete_task(spawn_tree, 2) == Err(InvalidIndex(2))


def test_delete_task_reports_removed_count(spawn_tree: Tree) -> None:
    result = delete_task(spawn_tree, 0)

    assert isinstance(result, Ok)
    tree, event = result.value
    assert event.name == "Task 1"
    assert event.removed == 6
    assert tree.size() == 4


def test_delete_task_rejects_bad_position(spawn_tree: Tree) -> None:
    assert delete_task(spawn_tree, 7) == Err(InvalidIndex(7))


def test_descend_task_by_position(spawn_tree: Tree) -> None:
    result = descend_task(spawn_tree, 1)

    assert isinstance(result, Ok)
    assert result.value.cursor == 2
    assert descend_task(spawn_tree, 3) == Err(InvalidIndex(3))


def test_listing_at_root(spawn_tree: Tree) -> None:
    listing = get_listing(spawn_tree)

    assert listing.title == "Home"
    assert listing.at_root
    assert [(e.position, e.name, e.has_pending) for e in listing.entries] == [
        (1, "Task 1", True),
        (2, "Task 2", True),
    ]


def test_listing_inside_task(spawn_tree: Tree) -> None:
    tree = descend_task(spawn_tree, 0).value
    listing = get_listing(tree)

    assert listing.title == "Task 1"
    assert not listing.at_root
    assert [e.name for e in listing.entries] == ["Task 3", "Task 4"]


def test_listing_marker_drops_when_subtasks_are_done(spawn_tree: Tree) -> None:
    tree = descend_task(spawn_tree, 0).value
    tree = complete_task(tree, 1).value[0]
    tree = ascend_task(tree)
    tree = descend_task(tree, 1).value
    tree = complete_task(tree, 0).value[0]
    tree = complete_task(tree, 0).value[0]
    tree = ascend_task(tree)

    entries = get_listing(tree).entries
    assert [(e.name, e.has_pending) for e in entries] == [("Task 1", True), ("Task 2", False)]


def test_listing_label_includes_due() -> None:
    tree, _ = add_task(Tree.new(), "Dentist", datetime(2024, 5, 1, 15, 0))

    (entry,) = get_listing(tree).entries

    assert entry.label == "Dentist | 03:00 PM 2024-05-01"


def test_tree_stats(spawn_tree: Tree) -> None:
    tree = complete_task(spawn_tree, 1).value[0]

    stats = get_tree_stats(tree)

    assert stats.total == 9
    assert stats.complete == 3
    assert stats.pending == 6
    assert stats.progress_percent == 33.3


def test_tree_stats_for_empty_tree() -> None:
    stats = get_tree_stats(Tree.new())
    assert stats.total == 0
    assert stats.progress_percent == 0.0
