"""Maze Walker: a keyboard-driven text maze."""

__version__ = "1.0.0"
