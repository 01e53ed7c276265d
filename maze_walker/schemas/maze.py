"""Maze schemas for request/response validation."""

from typing import Optional

from pydantic import BaseModel, Field

from maze_walker.core import MazeState


class MazePosition(BaseModel):
    """Schema for a position in the maze."""

    x: int
    y: int


class KeyPressRequest(BaseModel):
    """Schema for a key press. Unbound keys are accepted and ignored."""

    key: str = Field(..., min_length=1, max_length=32)


class MazeView(BaseModel):
    """Schema for the rendered maze and player state."""

    text: str
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)
    position: Optional[MazePosition] = None
    facing: str = Field(..., pattern="^(up|right|down|left)$")
    started: bool

    @classmethod
    def from_maze(cls, maze: MazeState) -> "MazeView":
        """Build a view of the current maze state."""
        player = maze.player
        return cls(
            text=maze.render(),
            width=maze.grid.width,
            height=maze.grid.height,
            position=(
                MazePosition(x=player.position.x, y=player.position.y)
                if player.position
                else None
            ),
            facing=player.facing.name.lower(),
            started=player.started,
        )
