"""Tests for the display sinks, the key loop and the terminal host."""

import io

import pytest
from pydantic import ValidationError

from maze_walker import cli
from maze_walker.config import Settings
from maze_walker.core import Facing, Glyphs, InvalidGrid, MazeState, Position
from maze_walker.host import BufferDisplay, MazeHost, StreamDisplay


class TestMazeHost:
    """Tests for key -> step -> render -> display."""

    def test_start_displays_initial_maze(self, maze):
        display = BufferDisplay()
        MazeHost(maze, display).start()

        assert display.frames == [maze.render()]

    def test_on_key_displays_each_frame(self, maze):
        display = BufferDisplay()
        host = MazeHost(maze, display)

        player = host.on_key("ArrowDown")

        assert player.position == Position(5, 1)
        assert player.facing == Facing.DOWN
        assert display.last == maze.render()
        assert display.last.split("\n")[1] == "▒ ▒  X▒"

    def test_unbound_key_still_redraws(self, maze):
        """Test every event is followed by a render, even a no-op."""
        display = BufferDisplay()
        host = MazeHost(maze, display)
        before = maze.player

        assert host.on_key("Tab") is before
        assert len(display.frames) == 1

    def test_buffer_display_empty(self):
        assert BufferDisplay().last is None

    def test_stream_display(self):
        stream = io.StringIO()
        StreamDisplay(stream).display("ab\ncd")

        assert stream.getvalue() == "ab\ncd\n\n"


class TestSettings:
    """Tests for configuration."""

    def test_defaults_build_default_maze(self):
        settings = Settings(_env_file=None)
        maze = settings.build_maze()

        assert settings.glyphs == Glyphs()
        assert maze.get_maze_info()["start_position"] == {"x": 5, "y": 0}

    def test_maze_file_setting(self, tmp_path):
        maze_file = tmp_path / "tiny.txt"
        maze_file.write_text("10\n00\n", encoding="utf-8")

        maze = Settings(_env_file=None, maze_file=maze_file).build_maze()

        assert maze.player.position == Position(1, 0)

    def test_glyph_settings(self):
        settings = Settings(_env_file=None, player_glyph="@", wall_glyph="#", passage_glyph=".")
        assert settings.build_maze().render().split("\n")[0] == "#####@#"

    @pytest.mark.parametrize("glyph", ["", "##", "\n", "\t"])
    def test_glyph_must_be_single_character(self, glyph):
        with pytest.raises(ValidationError, match="single character"):
            Settings(_env_file=None, wall_glyph=glyph)

    def test_newline_passage_glyph_rejected(self):
        """Test a newline passage glyph cannot add lines to the render."""
        with pytest.raises(ValidationError, match="one cell wide"):
            Settings(_env_file=None, passage_glyph="\n")

    def test_space_passage_glyph_allowed(self):
        maze = Settings(_env_file=None, passage_glyph=" ").build_maze()
        assert len(maze.render().split("\n")) == 7

    def test_log_level_normalized(self):
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"

        with pytest.raises(ValidationError, match="Unknown log level"):
            Settings(_env_file=None, log_level="loud")

    def test_cors_origins_list(self):
        settings = Settings(_env_file=None, cors_origins="http://a, http://b,")
        assert settings.cors_origins_list == ["http://a", "http://b"]

        assert Settings(_env_file=None, debug=True).cors_origins_list == ["*"]

    def test_bad_maze_file_raises(self, tmp_path):
        maze_file = tmp_path / "bad.txt"
        maze_file.write_text("12\n00\n", encoding="utf-8")

        with pytest.raises(InvalidGrid):
            Settings(_env_file=None, maze_file=maze_file).build_maze()


class TestCli:
    """Tests for the terminal host."""

    def test_play_loop(self, maze):
        keys = io.StringIO("ArrowDown\n\nArrowDown\nNope\nquit\nArrowDown\n")
        out = io.StringIO()

        count = cli.play(maze, keys, out)

        assert count == 3
        assert maze.player.position == Position(5, 2)
        # initial frame plus one per key
        assert out.getvalue().count("X") == 4

    def test_play_until_end_of_input(self, maze):
        assert cli.play(maze, io.StringIO("ArrowUp\nArrowUp"), io.StringIO()) == 2
        assert maze.player.facing == Facing.RIGHT

    def test_show(self, capsys):
        assert cli.main(["show"]) == 0

        out = capsys.readouterr().out
        assert out.split("\n")[0] == "▒▒▒▒▒X▒"

    def test_show_maze_file(self, tmp_path, capsys):
        maze_file = tmp_path / "corridor.json"
        maze_file.write_text("[[1, 0, 1], [1, 0, 1]]", encoding="utf-8")

        assert cli.main(["show", "--maze", str(maze_file)]) == 0
        assert capsys.readouterr().out == "▒X▒\n▒ ▒\n"

    def test_play_from_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("ArrowDown\n"))

        assert cli.main(["play"]) == 0

        frames = capsys.readouterr().out.strip("\n").split("\n\n")
        assert len(frames) == 2
        assert frames[1].split("\n")[1] == "▒ ▒  X▒"

    def test_missing_maze_file(self, tmp_path, capsys):
        assert cli.main(["show", "--maze", str(tmp_path / "missing.txt")]) == 1
        assert "Maze file not found" in capsys.readouterr().err

    def test_invalid_maze_file(self, tmp_path, capsys):
        maze_file = tmp_path / "bad.txt"
        maze_file.write_text("101\n10\n", encoding="utf-8")

        assert cli.main(["play", "--maze", str(maze_file)]) == 1
        assert "not rectangular" in capsys.readouterr().err

    def test_command_required(self):
        with pytest.raises(SystemExit):
            cli.main([])
