"""Full-screen terminal interface for toru, built on Textual."""

from toru.tui.app import ToruApp

__all__ = ["ToruApp"]
