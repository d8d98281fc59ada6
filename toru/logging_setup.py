"""Logging configuration for toru.

Full-screen mode owns the terminal, so the complete log goes to a file and
only warnings from toru itself reach stderr (or info with ``--verbose``).
"""

import logging
import sys
from pathlib import Path


class _ToruOnlyFilter(logging.Filter):
    """Let toru's own records through; third-party ones only at ERROR."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == "toru" or record.name.startswith("toru."):
            return True
        return record.levelno >= logging.ERROR


def setup_logging(
    log_path: Path | None = None,
    *,
    verbose: bool = False,
    console: bool = True,
) -> None:
    """Configure the root logger.

    Call this once, before the first log call.

    Args:
        log_path: File receiving every record at DEBUG. Skipped when None.
        verbose: Show INFO on stderr instead of only WARNING and above.
        console: Attach the stderr handler at all. The TUI turns it off.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if console:
        ch = logging.StreamHandler(sys.stderr)
        ch.setLevel(logging.INFO if verbose else logging.WARNING)
        ch.setFormatter(fmt)
        ch.addFilter(_ToruOnlyFilter())
        root.addHandler(ch)

    if log_path is not None:
        try:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            fh = logging.FileHandler(str(log_path), encoding="utf-8")
        except OSError as e:
            logging.getLogger(__name__).warning(f"Cannot write log file {log_path}: {e}")
        else:
            fh.setLevel(logging.DEBUG)
            fh.setFormatter(fmt)
            root.addHandler(fh)

    logging.captureWarnings(True)
