"""Repository for the persisted task tree.

The document on disk has two top-level fields, ``cursor`` and ``tasks``,
and mirrors ``Tree`` field for field. Due dates are ISO-8601 strings.
"""

from pathlib import Path

from pydantic import ValidationError

from toru.domain.shared.result import Err, Ok, Result
from toru.domain.task import Tree
from toru.infrastructure.storage.json_storage import JsonStorage


class TreeRepository:
    """Repository for task tree persistence.

    Wraps save-file operations with Result-based error handling. The file
    location is fixed at construction; see ``toru.config``.
    """

    def __init__(self, path: Path, storage: JsonStorage | None = None) -> None:
        """Initialize the repository.

        Args:
            path: Location of the save file.
            storage: JsonStorage instance to use. Creates new one if not provided.
        """
        self.path = path
        self._storage = storage or JsonStorage()

    def load(self) -> Result[Tree, str]:
        """Load the task tree.

        Returns:
            Ok(Tree) if successful. Returns a fresh tree if the file doesn't
            exist yet. Err(str) if the file exists but is unreadable or does
            not describe a consistent tree.
        """
        if not self.exists():
            # First run: nothing saved yet, not an error
            return Ok(Tree.new())

        result = self._storage.load_json(self.path)
        if isinstance(result, Err):
            return result

        try:
            return Ok(Tree.model_validate(result.value))
        except ValidationError as e:
            return Err(f"Invalid task data in {self.path}: {e}")

    def save(self, tree: Tree) -> Result[None, str]:
        """Save the task tree.

        Returns:
            Ok(None) if successful, Err(str) with error message if failed.
        """
        return self._storage.save_json(self.path, tree.model_dump(mode="json"))

    def exists(self) -> bool:
        """Check if the save file exists."""
        return self.path.exists()
