"""toru - personal hierarchical task manager.

Tasks form a tree held in a flat arena and addressed by index. A cursor
marks the task being viewed; the shell, one-shot commands and full-screen
interface all move it and edit the tasks below it.
"""

__version__ = "0.1.0"
