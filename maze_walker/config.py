"""Application configuration using Pydantic settings."""

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from maze_walker.core import (
    DEFAULT_MAZE,
    Glyphs,
    Grid,
    MazeState,
    check_glyph,
    load_maze_file,
)

# Project root directory
BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=os.path.join(BASE_DIR, ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Maze Walker"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Maze layout; the built-in 7x7 maze when unset
    maze_file: Optional[Path] = None

    # Render glyphs
    player_glyph: str = "X"
    wall_glyph: str = "▒"
    passage_glyph: str = " "

    # CORS - comma-separated list of allowed origins
    cors_origins: str = "http://localhost:3000,http://localhost:8080,http://127.0.0.1:5500"

    @field_validator("player_glyph", "wall_glyph", "passage_glyph")
    @classmethod
    def validate_glyph(cls, v: str) -> str:
        """Each glyph must fill exactly one character cell."""
        return check_glyph(v)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and check the log level name."""
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def glyphs(self) -> Glyphs:
        """Get render glyphs."""
        return Glyphs(
            player=self.player_glyph,
            wall=self.wall_glyph,
            passage=self.passage_glyph,
        )

    @property
    def cors_origins_list(self) -> list[str]:
        """Get CORS origins as a list."""
        if self.debug:
            return ["*"]
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    def load_grid(self) -> Grid:
        """Load the configured maze, or the built-in one."""
        if self.maze_file is None:
            return Grid.from_rows(DEFAULT_MAZE)
        return load_maze_file(self.maze_file)

    def build_maze(self) -> MazeState:
        """Build a maze state from the configured layout and glyphs."""
        return MazeState(self.load_grid(), glyphs=self.glyphs)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
