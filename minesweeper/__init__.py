"""A pygame Minesweeper game with a name prompt, timer, pause and debug view."""

__version__ = "0.1.0"