"""Infrastructure layer for toru.

Wraps I/O behind Result-returning interfaces.

Exports:
    Storage:
        - JsonStorage: Low-level JSON file I/O
        - TreeRepository: Task tree persistence
"""

from toru.infrastructure.storage import (
    JsonStorage,
    TreeRepository,
)

__all__ = [
    "JsonStorage",
    "TreeRepository",
]
