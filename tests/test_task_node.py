from datetime import datetime

import pytest
from pydantic import ValidationError

from toru.domain.task import InvalidIndex, TaskNode, TaskStatus


def test_default_node_is_pending_root() -> None:
    node = TaskNode()

    assert node.parent is None
    assert node.name == "Root"
    assert node.due is None
    assert node.status is TaskStatus.PENDING
    assert node.children == []


def test_setters_return_new_nodes() -> None:
    node = TaskNode(name="Old")
    due = datetime(2024, 5, 1, 9, 30)

    renamed = node.set_name("New").set_parent(3).set_due(due)

    assert node.name == "Old"
    assert node.parent is None
    assert renamed.name == "New"
    assert renamed.parent == 3
    assert renamed.due == due


def test_nodes_are_frozen() -> None:
    node = TaskNode()
    with pytest.raises(ValidationError):
        node.name = "Changed"  # type: ignore[misc]


def test_setters_are_idempotent() -> None:
    node = TaskNode(name="A")
    assert node.set_parent(2).set_parent(2) == node.set_parent(2)
    assert node.complete().complete() == node.complete()


def test_complete_marks_status() -> None:
    node = TaskNode(name="A")
    assert not node.is_complete()
    assert node.complete().is_complete()
    assert node.complete().status is TaskStatus.COMPLETE


def test_child_list_edits() -> None:
    node = TaskNode().add_child(1).add_child(2).add_child(1)

    assert node.children == [1, 2, 1]
    assert node.has_children()
    assert node.is_child(2)
    assert not node.is_child(5)
    assert node.remove_child(1).children == [2]
    assert node.replace_child(1, 7).children == [7, 2, 7]


def test_child_edits_are_noops_when_absent() -> None:
    node = TaskNode().add_child(1)

    assert node.remove_child(9) is node
    assert node.replace_child(9, 3) is node


def test_str_without_due() -> None:
    assert str(TaskNode(name="Buy milk")) == "Buy milk"


def test_str_with_due() -> None:
    node = TaskNode(name="Buy milk", due=datetime(2024, 5, 1, 14, 5))
    assert str(node) == "Buy milk | 02:05 PM 2024-05-01"


def test_status_serializes_as_lowercase_word() -> None:
    data = TaskNode(name="A").complete().model_dump(mode="json")
    assert data["status"] == "complete"


def test_invalid_index_message() -> None:
    assert str(InvalidIndex(3)) == "Child at index 3 does not exist"
    assert InvalidIndex(3) == InvalidIndex(3)
