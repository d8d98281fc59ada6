"""User-facing front ends: the Typer CLI and its interactive shell."""
