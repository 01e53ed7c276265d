"""
Maze Parser for Maze Walker.

Loads and validates maze grids from text, JSON and the filesystem.

Text Format (one row per line):
    1 = Wall
    0 = Passage
    Spaces between digits are ignored, blank lines are skipped.

JSON Format:
    An array of arrays of integers, e.g. [[1, 0, 1], [1, 0, 1]]
"""

import json
import logging
from pathlib import Path
from typing import Optional

from .grid import Grid, InvalidGrid

logger = logging.getLogger(__name__)


class MazeParseError(InvalidGrid):
    """Exception raised when maze input cannot be read or decoded."""

    pass


VALID_CHARS = {"0", "1"}


def parse_maze_text(maze_text: str) -> Grid:
    """
    Parse maze text into a grid.

    Args:
        maze_text: Multi-line string of 0/1 digits.

    Returns:
        Validated Grid.

    Raises:
        MazeParseError: If the text is empty.
        InvalidGrid: If a character is not 0/1 or the rows are ragged.
    """
    if not maze_text or not maze_text.strip():
        raise MazeParseError("Maze text is empty")

    rows = []
    # y is the raw line index, blank lines included
    for y, line in enumerate(maze_text.splitlines()):
        if not line.strip():
            continue
        row = []
        for char in line:
            if char.isspace():
                continue
            if char not in VALID_CHARS:
                raise InvalidGrid(
                    f"Invalid character '{char}' in row {y}. "
                    f"Valid characters: {', '.join(sorted(VALID_CHARS))}"
                )
            row.append(int(char))
        rows.append(row)

    return Grid.from_rows(rows)


def parse_maze_json(maze_json: str) -> Grid:
    """
    Parse a JSON array of arrays into a grid.

    Raises:
        MazeParseError: If the text is not JSON or not a list of lists.
        InvalidGrid: If the layout itself is invalid.
    """
    try:
        data = json.loads(maze_json)
    except json.JSONDecodeError as e:
        raise MazeParseError(f"Maze JSON is malformed: {e}") from e

    if not isinstance(data, list) or not all(isinstance(row, list) for row in data):
        raise MazeParseError("Maze JSON must be an array of arrays")

    return Grid.from_rows(data)


def load_maze_file(file_path: Path | str) -> Grid:
    """
    Load and parse a maze file from the filesystem.

    Files ending in `.json` are read as JSON, anything else as text.

    Args:
        file_path: Path to the maze file.

    Returns:
        Validated Grid.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        MazeParseError: If the file cannot be read or parsed.
        InvalidGrid: If the maze is invalid.
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"Maze file not found: {file_path}")

    if not file_path.is_file():
        raise MazeParseError(f"Path is not a file: {file_path}")

    try:
        content = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise MazeParseError(f"Failed to read maze file: {e}") from e

    if file_path.suffix.lower() == ".json":
        grid = parse_maze_json(content)
    else:
        grid = parse_maze_text(content)

    logger.info(f"Loaded {grid.width}x{grid.height} maze from {file_path}")
    return grid


def validate_maze_text(maze_text: str) -> tuple[bool, Optional[str]]:
    """
    Validate maze text without raising exceptions.

    Args:
        maze_text: Multi-line string representing the maze grid.

    Returns:
        Tuple of (is_valid, error_message).
        error_message is None if valid.
    """
    try:
        parse_maze_text(maze_text)
        return True, None
    except InvalidGrid as e:
        return False, str(e)
