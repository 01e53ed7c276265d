"""API dependencies for dependency injection."""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from maze_walker.core import MazeState


async def get_maze_state(request: Request) -> MazeState:
    """Get the maze built at startup."""
    maze = getattr(request.app.state, "maze", None)
    if maze is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Maze not loaded",
        )
    return maze


# Type alias for cleaner route signatures
CurrentMaze = Annotated[MazeState, Depends(get_maze_state)]
