"""Runtime configuration for toru.

The save-file location is resolved once at startup and handed to the
storage layer explicitly; nothing below the interfaces reads the
environment.

Resolution order for each path: explicit argument, environment variable
(``TORU_FILE`` / ``TORU_LOG``), then a dotfile in the home directory.
"""

import os
from datetime import datetime
from pathlib import Path

from pydantic import BaseModel

ENV_PREFIX = "TORU"
SAVE_FILE_NAME = ".toru.json"
LOG_FILE_NAME = ".toru.log"
DUE_INPUT_FORMAT = "%Y-%m-%d %I:%M %p"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


class ToruConfig(BaseModel):
    """Settings passed from the entry point to storage and front ends."""

    save_path: Path
    log_path: Path
    date_format: str = DUE_INPUT_FORMAT


def load_config(
    save_path: Path | str | None = None,
    log_path: Path | str | None = None,
) -> ToruConfig:
    """Resolve the configuration for this process.

    Args:
        save_path: Explicit save file, overriding the environment.
        log_path: Explicit log file, overriding the environment.

    Returns:
        The resolved ToruConfig.
    """
    home = Path.home()
    resolved_save = (
        Path(save_path).expanduser()
        if save_path
        else _env_path(_k("FILE"), home / SAVE_FILE_NAME)
    )
    resolved_log = (
        Path(log_path).expanduser()
        if log_path
        else _env_path(_k("LOG"), home / LOG_FILE_NAME)
    )
    return ToruConfig(save_path=resolved_save, log_path=resolved_log)


def parse_due(raw: str, date_format: str = DUE_INPUT_FORMAT) -> datetime | None:
    """Parse a due date typed by the user.

    Args:
        raw: User input. Blank means no due date.
        date_format: ``strptime`` format to parse with.

    Returns:
        The parsed timestamp, or None for blank input.

    Raises:
        ValueError: If the input doesn't match the format.
    """
    raw = raw.strip()
    if not raw:
        return None
    return datetime.strptime(raw, date_format)


def parse_name(raw: str) -> str:
    """Strip a task name typed by the user.

    Raises:
        ValueError: If nothing but whitespace was typed.
    """
    name = raw.strip()
    if not name:
        raise ValueError("A task needs a name")
    return name
