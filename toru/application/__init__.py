"""Application service layer for toru.

Services:
    task_service - Pure functions combining position resolution, tree
        operations and domain events
    session - TaskSession, the single owner of the live tree that every
        front end drives

Example usage:
    >>> from toru.application import TaskSession
    >>>
    >>> session = TaskSession()
    >>> _ = session.add("Buy milk")
    >>> [entry.name for entry in session.listing().entries]
    ['Buy milk']
"""

from toru.application.session import TaskCapabilities, TaskSession
from toru.application.task_service import (
    Listing,
    ListingEntry,
    TreeStats,
    add_task,
    ascend_task,
    complete_task,
    delete_task,
    descend_task,
    get_listing,
    get_tree_stats,
)

__all__ = [
    # Task service
    "add_task",
    "ascend_task",
    "complete_task",
    "delete_task",
    "descend_task",
    "get_listing",
    "get_tree_stats",
    "Listing",
    "ListingEntry",
    "TreeStats",
    # Session
    "TaskSession",
    "TaskCapabilities",
]
