"""
Host wiring for Maze Walker.

A host turns key presses into state transitions and hands every render to a
display sink. The maze is passed in explicitly; hosts keep no global state.
"""

import logging
from typing import Protocol, TextIO

from maze_walker.core import MazeState, PlayerState

logger = logging.getLogger(__name__)


class Display(Protocol):
    """Anything that can show a rendered maze."""

    def display(self, text: str) -> None:
        ...


class StreamDisplay:
    """Write each frame to a text stream, followed by a blank line."""

    def __init__(self, stream: TextIO):
        self.stream = stream

    def display(self, text: str) -> None:
        self.stream.write(text + "\n\n")
        self.stream.flush()


class BufferDisplay:
    """Keep every frame in memory."""

    def __init__(self):
        self.frames: list[str] = []

    def display(self, text: str) -> None:
        self.frames.append(text)

    @property
    def last(self) -> str | None:
        return self.frames[-1] if self.frames else None


class MazeHost:
    """
    Drive one maze from key events.

    Example:
        host = MazeHost(maze, StreamDisplay(sys.stdout))
        host.start()
        host.on_key("ArrowDown")
    """

    def __init__(self, maze: MazeState, display: Display):
        self.maze = maze
        self.sink = display

    def start(self) -> None:
        """Show the initial maze."""
        self.sink.display(self.maze.render())

    def on_key(self, key: str) -> PlayerState:
        """Handle a key, then redraw."""
        before = self.maze.player
        player = self.maze.press(key)

        if player is not before:
            logger.debug(
                f"Key {key!r}: position {player.position}, facing {player.facing.name}"
            )

        self.sink.display(self.maze.render())
        return player
