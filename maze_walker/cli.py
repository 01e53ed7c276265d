#!/usr/bin/env python3
"""
Maze Walker terminal host.

Usage:
    maze-walker show [--maze FILE]
    maze-walker play [--maze FILE]       # one key name per line on stdin
    maze-walker serve [--host HOST] [--port PORT]

Keys are ArrowUp, ArrowRight, ArrowDown and ArrowLeft. Any other line is
ignored; `quit` or end of input stops the session.
"""

import argparse
import logging
import sys
from typing import Optional, TextIO

from maze_walker.config import Settings, get_settings
from maze_walker.core import InvalidGrid, MazeState
from maze_walker.host import MazeHost, StreamDisplay

logger = logging.getLogger(__name__)

QUIT_COMMANDS = {"quit", "exit"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="maze-walker", description="Walk a text maze")
    subparsers = parser.add_subparsers(dest="command", required=True)

    show = subparsers.add_parser("show", help="Print the maze once")
    show.add_argument("--maze", help="Maze file (.txt of 0/1 rows or .json)")

    play = subparsers.add_parser("play", help="Read key names from stdin")
    play.add_argument("--maze", help="Maze file (.txt of 0/1 rows or .json)")

    serve = subparsers.add_parser("serve", help="Run the web API")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)

    return parser


def load_maze(settings: Settings, maze_file: Optional[str]) -> MazeState:
    """Build the maze, letting --maze override the configured file."""
    if maze_file is not None:
        settings = settings.model_copy(update={"maze_file": maze_file})
    return settings.build_maze()


def play(maze: MazeState, keys: TextIO, out: TextIO) -> int:
    """Run the key loop until `quit` or end of input. Returns key count."""
    host = MazeHost(maze, StreamDisplay(out))
    host.start()

    count = 0
    for line in keys:
        key = line.strip()
        if not key:
            continue
        if key.lower() in QUIT_COMMANDS:
            break
        host.on_key(key)
        count += 1

    logger.info(f"Session ended after {count} keys")
    return count


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    settings = get_settings()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )

    if args.command == "serve":
        import uvicorn

        uvicorn.run("maze_walker.main:app", host=args.host, port=args.port)
        return 0

    try:
        maze = load_maze(settings, args.maze)
    except (InvalidGrid, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.command == "show":
        print(maze.render())
        return 0

    play(maze, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
