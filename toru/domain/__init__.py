"""Domain layer for toru: the task tree and its shared building blocks."""
