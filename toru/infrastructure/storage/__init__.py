"""Storage infrastructure for toru.

Provides the persistence layer for the task tree, using Result monads for
explicit error handling.
"""

from toru.infrastructure.storage.json_storage import JsonStorage
from toru.infrastructure.storage.repositories import TreeRepository

__all__ = [
    "JsonStorage",
    "TreeRepository",
]
