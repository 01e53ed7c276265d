"""
Maze Walker Engine

Core movement logic:
- Start search along the top row
- One-cell steps in the facing direction
- Turn clockwise instead of moving when blocked
- Arrow key bindings (other keys do nothing)
- Text rendering of the grid with the player on it

The transition functions are pure: they take a PlayerState and return a new
one. MazeState holds the current state for a host.
"""

import logging
import unicodedata
from dataclasses import dataclass, fields
from enum import IntEnum
from typing import Optional

from .grid import Cell, Grid, MazeError

logger = logging.getLogger(__name__)


class NoStartFound(MazeError):
    """Exception raised when the top row has no passage to start from."""

    pass


class Facing(IntEnum):
    """Facing directions in clockwise order."""
    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    @property
    def delta(self) -> tuple[int, int]:
        """Get (dx, dy) for this direction."""
        deltas = {
            Facing.UP: (0, -1),
            Facing.RIGHT: (1, 0),
            Facing.DOWN: (0, 1),
            Facing.LEFT: (-1, 0),
        }
        return deltas[self]

    def turned(self) -> "Facing":
        """Return the next facing clockwise."""
        return Facing((self + 1) % 4)


@dataclass(frozen=True)
class Position:
    """2D position in the maze."""
    x: int
    y: int

    def move(self, facing: Facing) -> "Position":
        """Return new position after moving in direction."""
        dx, dy = facing.delta
        return Position(self.x + dx, self.y + dy)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True)
class PlayerState:
    """Player token state. A position of None means not yet started."""
    position: Optional[Position] = None
    facing: Facing = Facing.UP

    @property
    def started(self) -> bool:
        return self.position is not None


def check_glyph(glyph: str) -> str:
    """
    Check that a glyph fills exactly one character cell.

    A plain space is allowed; control characters, other whitespace,
    combining marks and double-width characters are not.

    Raises:
        ValueError: If the glyph would change the shape of a render.
    """
    if (
        not isinstance(glyph, str)
        or len(glyph) != 1
        or not (glyph == " " or (glyph.isprintable() and not glyph.isspace()))
        or unicodedata.combining(glyph)
        or unicodedata.east_asian_width(glyph) in ("W", "F")
    ):
        raise ValueError(f"Glyph must be a single character one cell wide, got {glyph!r}")
    return glyph


@dataclass(frozen=True)
class Glyphs:
    """Characters used by `render`, one cell wide each."""
    player: str = "X"
    wall: str = "▒"
    passage: str = " "

    def __post_init__(self):
        for field in fields(self):
            check_glyph(getattr(self, field.name))


KEY_BINDINGS = {
    "ArrowUp": Facing.UP,
    "ArrowRight": Facing.RIGHT,
    "ArrowDown": Facing.DOWN,
    "ArrowLeft": Facing.LEFT,
}


def facing_for_key(key: str) -> Optional[Facing]:
    """Get the facing bound to a key, or None for unbound keys."""
    return KEY_BINDINGS.get(key)


def find_start(grid: Grid) -> Position:
    """
    Find the starting position in the top row.

    Args:
        grid: Validated maze grid.

    Returns:
        Position of the leftmost passage in row 0.

    Raises:
        NoStartFound: If row 0 is all wall.
    """
    for x, cell in enumerate(grid.cells[0]):
        if cell == Cell.PASSAGE:
            return Position(x, 0)
    raise NoStartFound("Maze has no passage in the top row to start from")


def attempt_step(grid: Grid, player: PlayerState, facing: Facing) -> PlayerState:
    """
    Try to move one cell in `facing`.

    The player always takes on the requested facing. If the target cell is a
    wall or off the grid, the player stays put and turns clockwise instead.

    Returns:
        New PlayerState. The input state is left untouched.
    """
    if player.position is None:
        logger.debug("Ignoring step before the player has a start position")
        return player

    target = player.position.move(facing)
    if grid.is_blocked(target.x, target.y):
        turned = facing.turned()
        logger.debug(
            f"Blocked at ({target.x}, {target.y}) facing {facing.name}, "
            f"turning {turned.name}"
        )
        return PlayerState(position=player.position, facing=turned)

    return PlayerState(position=target, facing=facing)


def handle_key(grid: Grid, player: PlayerState, key: str) -> PlayerState:
    """
    Apply one key press.

    Unbound keys return `player` itself: no turn, no move.
    """
    facing = facing_for_key(key)
    if facing is None:
        logger.debug(f"Ignoring unbound key {key!r}")
        return player
    return attempt_step(grid, player, facing)


def render(grid: Grid, player: PlayerState, glyphs: Glyphs = Glyphs()) -> str:
    """
    Generate a text view of the maze.

    Args:
        grid: Maze grid.
        player: Player state; an unstarted player is not drawn.
        glyphs: Characters for player, walls and passages.

    Returns:
        `grid.height` lines of `grid.width` characters joined by newlines.
    """
    lines = []
    for y, row in enumerate(grid.cells):
        line = ""
        for x, cell in enumerate(row):
            if player.position == Position(x, y):
                line += glyphs.player
            elif cell == Cell.WALL:
                line += glyphs.wall
            else:
                line += glyphs.passage
        lines.append(line)

    return "\n".join(lines)


class MazeState:
    """
    Holds one maze grid and the current player state.

    Example usage:
        maze = MazeState(Grid.from_rows(DEFAULT_MAZE))
        maze.press("ArrowDown")
        print(maze.render())
    """

    def __init__(self, grid: Grid, glyphs: Optional[Glyphs] = None):
        """
        Initialize with a validated grid and place the player at the start.

        If the top row has no passage the player stays unstarted and every
        key is ignored.
        """
        self.grid = grid
        self.glyphs = glyphs or Glyphs()
        self.start: Optional[Position] = None

        try:
            self.start = find_start(grid)
        except NoStartFound as e:
            logger.warning(f"{e}; player left unstarted")

        self.player = PlayerState(position=self.start)

    def step(self, facing: Facing) -> PlayerState:
        """Attempt a step and keep the resulting state."""
        self.player = attempt_step(self.grid, self.player, facing)
        return self.player

    def press(self, key: str) -> PlayerState:
        """Handle a key name and keep the resulting state."""
        self.player = handle_key(self.grid, self.player, key)
        return self.player

    def reset(self) -> PlayerState:
        """Return the player to the start position facing up."""
        self.player = PlayerState(position=self.start)
        return self.player

    def render(self) -> str:
        return render(self.grid, self.player, self.glyphs)

    def get_maze_info(self) -> dict:
        """Get maze metadata."""
        return {
            "width": self.grid.width,
            "height": self.grid.height,
            "start_position": self.start.to_dict() if self.start else None,
        }
