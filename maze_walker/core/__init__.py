# Core module
from .grid import DEFAULT_MAZE, Cell, Grid, InvalidGrid, MazeError
from .maze_engine import (
    KEY_BINDINGS,
    Facing,
    Glyphs,
    MazeState,
    NoStartFound,
    PlayerState,
    Position,
    attempt_step,
    check_glyph,
    facing_for_key,
    find_start,
    handle_key,
    render,
)
from .maze_parser import (
    MazeParseError,
    load_maze_file,
    parse_maze_json,
    parse_maze_text,
    validate_maze_text,
)

__all__ = [
    "DEFAULT_MAZE",
    "Cell",
    "Grid",
    "InvalidGrid",
    "MazeError",
    "KEY_BINDINGS",
    "Facing",
    "Glyphs",
    "MazeState",
    "NoStartFound",
    "PlayerState",
    "Position",
    "attempt_step",
    "check_glyph",
    "facing_for_key",
    "find_start",
    "handle_key",
    "render",
    "MazeParseError",
    "load_maze_file",
    "parse_maze_json",
    "parse_maze_text",
    "validate_maze_text",
]
