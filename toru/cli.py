"""toru CLI.

Re-exports the Typer application from toru.interfaces.cli so the console
script can point at ``toru.cli:main``.
"""

from toru.interfaces.cli import app
from toru.interfaces.cli.main import main

__all__ = ["app", "main"]

if __name__ == "__main__":
    main()
