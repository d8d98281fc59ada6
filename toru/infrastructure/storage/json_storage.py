"""Reading and writing the JSON save file.

No task semantics live here: the storage moves plain dictionaries between
memory and disk and reports every I/O failure as an ``Err`` message that
can be shown to the user as is.
"""

import json
from pathlib import Path
from typing import Any

from toru.domain.shared.result import Err, Ok, Result

TMP_SUFFIX = ".tmp"


class JsonStorage:
    """JSON object files with Result-returning load and save.

    Example:
        storage = JsonStorage()
        loaded = storage.load_json(Path("~/.toru.json").expanduser())
        document = loaded.value if isinstance(loaded, Ok) else {}
    """

    def load_json(self, path: Path) -> Result[dict[str, Any], str]:
        """Read ``path`` and decode it as a JSON object.

        Returns:
            Ok(dict), or Err(str) if the file is missing, unreadable, not
            JSON, or holds something other than an object.
        """
        if not path.exists():
            return Err(f"File not found: {path}")

        try:
            text = path.read_text(encoding="utf-8")
        except PermissionError:
            return Err(f"Permission denied reading {path}")
        except OSError as e:
            return Err(f"Error reading {path}: {e}")

        try:
            document = json.loads(text)
        except json.JSONDecodeError as e:
            return Err(f"Invalid JSON in {path}: {e}")

        if not isinstance(document, dict):
            return Err(f"Expected a JSON object in {path}, got {type(document).__name__}")
        return Ok(document)

    def save_json(self, path: Path, document: dict[str, Any], indent: int = 2) -> Result[None, str]:
        """Write ``document`` to ``path``, creating parent directories.

        The text goes to ``<name>.tmp`` beside the target and is then
        renamed over it, so a crash mid-write never truncates the old file.
        """
        try:
            text = json.dumps(document, indent=indent) + "\n"
        except TypeError as e:
            return Err(f"Data not JSON serializable: {e}")

        tmp_path = path.with_name(path.name + TMP_SUFFIX)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(text, encoding="utf-8")
            tmp_path.replace(path)
        except PermissionError:
            self._discard(tmp_path)
            return Err(f"Permission denied writing {path}")
        except OSError as e:
            self._discard(tmp_path)
            return Err(f"Error writing {path}: {e}")
        return Ok(None)

    @staticmethod
    def _discard(tmp_path: Path) -> None:
        try:
            tmp_path.unlink(missing_ok=True)
        except OSError:
            # The write error is the one reported
            pass
