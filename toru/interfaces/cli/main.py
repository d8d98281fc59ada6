"""Entry point for the toru CLI.

Usage:
    python -m toru.interfaces.cli.main

Or via installed entry point:
    toru <command>
"""

from toru.interfaces.cli import app


def main() -> None:
    """Run the toru CLI application."""
    app()


if __name__ == "__main__":
    main()
