"""Pytest configuration and fixtures."""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from maze_walker.main import app
from maze_walker.api.deps import get_maze_state
from maze_walker.core import DEFAULT_MAZE, Grid, MazeState

# Start at (1, 0); every neighbour is wall or off the grid
ENCLOSED_MAZE = [
    [1, 0, 1],
    [1, 1, 1],
]


@pytest.fixture
def default_grid() -> Grid:
    """The built-in 7x7 maze."""
    return Grid.from_rows(DEFAULT_MAZE)


@pytest.fixture
def enclosed_grid() -> Grid:
    return Grid.from_rows(ENCLOSED_MAZE)


@pytest.fixture
def maze(default_grid) -> MazeState:
    """Fresh maze state on the built-in maze."""
    return MazeState(default_grid)


@pytest_asyncio.fixture(scope="function")
async def client(maze) -> AsyncGenerator[AsyncClient, None]:
    """Create a test HTTP client serving `maze`."""

    async def override_get_maze_state():
        return maze

    app.dependency_overrides[get_maze_state] = override_get_maze_state

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac

    app.dependency_overrides.clear()
