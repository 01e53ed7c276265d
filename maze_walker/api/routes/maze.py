"""Maze routes for viewing and steering the player."""

import logging

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from maze_walker.api.deps import CurrentMaze
from maze_walker.schemas.maze import KeyPressRequest, MazeView

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/maze", tags=["Maze"])


@router.get(
    "",
    response_model=MazeView,
)
async def get_maze(maze: CurrentMaze) -> MazeView:
    """Get the rendered maze and the player's position and facing."""
    return MazeView.from_maze(maze)


@router.get(
    "/text",
    response_class=PlainTextResponse,
)
async def get_maze_text(maze: CurrentMaze) -> str:
    """Get the rendered maze as plain text, one line per row."""
    return maze.render()


@router.post(
    "/keys",
    response_model=MazeView,
)
async def press_key(request: KeyPressRequest, maze: CurrentMaze) -> MazeView:
    """Press a key.

    ArrowUp, ArrowRight, ArrowDown and ArrowLeft face that way and try to
    step; a blocked step turns the player clockwise instead. Any other key
    leaves the maze unchanged.
    """
    player = maze.press(request.key)
    logger.info(
        f"Key {request.key}: position "
        f"{player.position.to_dict() if player.position else None}, "
        f"facing {player.facing.name.lower()}"
    )
    return MazeView.from_maze(maze)


@router.post(
    "/reset",
    response_model=MazeView,
)
async def reset_maze(maze: CurrentMaze) -> MazeView:
    """Put the player back at the start, facing up."""
    maze.reset()
    logger.info("Maze reset")
    return MazeView.from_maze(maze)
