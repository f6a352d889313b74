"""Tests for the CLI frontend."""

import argparse
from io import StringIO
from unittest.mock import patch

import pytest
from lifegrid.frontends.cli import (
    config_from_args,
    create_parser,
    main,
    print_results,
    validate_args,
)


BLINKER = "00000\n00000\n01110\n00000\n00000\n"


@pytest.fixture
def board_file(tmp_path):
    path = tmp_path / "blinker.txt"
    path.write_text(BLINKER)
    return path


class TestArgumentParsing:
    """Test command-line argument parsing."""

    def test_defaults(self):
        """Test parser creation and default values."""
        parser = create_parser()
        assert isinstance(parser, argparse.ArgumentParser)

        args = parser.parse_args(["board.txt"])
        assert args.board == "board.txt"
        assert args.pixel_width == 1
        assert args.delay == 100.0
        assert args.debug is False
        assert args.no_clear is False
        assert args.max_generations is None
        assert args.verbose is False

    def test_board_is_required(self):
        parser = create_parser()
        with patch("sys.stderr", new_callable=StringIO):
            with pytest.raises(SystemExit):
                parser.parse_args([])

    def test_long_args(self):
        parser = create_parser()
        args = parser.parse_args(
            ["b.txt", "--pixel-width", "3", "--delay", "250", "--debug", "--no-clear", "--max-generations", "7"]
        )
        assert args.pixel_width == 3
        assert args.delay == 250.0
        assert args.debug is True
        assert args.no_clear is True
        assert args.max_generations == 7

    def test_short_args(self):
        parser = create_parser()
        args = parser.parse_args(["b.txt", "-w", "2", "-d", "5", "-m", "10", "-v"])
        assert args.pixel_width == 2
        assert args.delay == 5.0
        assert args.max_generations == 10
        assert args.verbose is True

    def test_config_from_args(self):
        args = create_parser().parse_args(["b.txt", "-w", "2", "-d", "250", "--debug", "--no-clear"])
        config = config_from_args(args)
        assert config.pixel_width == 2
        assert config.tick_delay == 0.25
        assert config.debug_overlay is True
        assert config.clear_screen is False


class TestValidation:
    """Test argument validation."""

    def test_valid(self):
        args = create_parser().parse_args(["b.txt"])
        assert validate_args(args) is True

    @patch("sys.stdout", new_callable=StringIO)
    def test_invalid(self, mock_stdout):
        args = create_parser().parse_args(["b.txt", "-w", "0", "-d", "-1", "-m", "0"])
        assert validate_args(args) is False

        output = mock_stdout.getvalue()
        assert "Error: Invalid arguments:" in output
        assert "Pixel width must be at least 1" in output
        assert "Tick delay must be non-negative" in output
        assert "Max generations must be positive" in output


class TestMain:
    """Test the main entry point."""

    @patch("sys.stdout", new_callable=StringIO)
    def test_runs_capped_simulation(self, mock_stdout, board_file):
        exit_code = main([str(board_file), "-m", "2", "-d", "0"])

        assert exit_code == 0
        output = mock_stdout.getvalue()
        # One frame per generation advanced, each preceded by a terminal reset
        assert output.count("\x1bc") == 2
        assert "⬛" in output

    @patch("sys.stdout", new_callable=StringIO)
    def test_debug_mode(self, mock_stdout, board_file):
        assert main([str(board_file), "-m", "1", "-d", "0", "--debug", "--no-clear"]) == 0

        output = mock_stdout.getvalue()
        assert "\x1bc" not in output
        assert "  ┌─┬─┬─┬─┬─┬" in output
        assert "01│1│2│3│2│1│" in output

    @patch("sys.stdout", new_callable=StringIO)
    def test_missing_board(self, mock_stdout, tmp_path):
        exit_code = main([str(tmp_path / "nope.txt")])

        assert exit_code == 1
        assert "Error: Couldn't open" in mock_stdout.getvalue()

    @patch("sys.stdout", new_callable=StringIO)
    def test_malformed_board(self, mock_stdout, tmp_path):
        path = tmp_path / "bad.txt"
        path.write_text("010\n0a0\n")

        assert main([str(path)]) == 1
        assert "invalid character 'a'" in mock_stdout.getvalue()

    @patch("sys.stdout", new_callable=StringIO)
    def test_invalid_args(self, mock_stdout, board_file):
        assert main([str(board_file), "--pixel-width", "0"]) == 1
        assert "Error: Invalid arguments:" in mock_stdout.getvalue()

    @patch("sys.stdout", new_callable=StringIO)
    def test_keyboard_interrupt(self, mock_stdout, board_file):
        with patch("lifegrid.frontends.cli.GameOfLife.run", side_effect=KeyboardInterrupt):
            exit_code = main([str(board_file)])

        assert exit_code == 0
        assert "Simulation interrupted by user" in mock_stdout.getvalue()

    @patch("logging.basicConfig")
    @patch("sys.stdout", new_callable=StringIO)
    def test_verbose(self, mock_stdout, mock_basic_config, board_file):
        assert main([str(board_file), "-m", "3", "-d", "0", "-v"]) == 0

        mock_basic_config.assert_called_once()
        output = mock_stdout.getvalue()
        assert "Loaded 5x5 board" in output
        assert "(3 alive)" in output
        assert "Ran 3 generations on a 5x5 grid" in output
        assert "Final population: 3" in output


class TestPrintResults:
    """Test result formatting."""

    @patch("sys.stdout", new_callable=StringIO)
    def test_print_results(self, mock_stdout):
        stats = {"generation": 12, "population": 6, "grid_size": (4, 5), "population_density": 0.3}
        print_results(12, stats, 1.5)

        output = mock_stdout.getvalue()
        assert "Ran 12 generations on a 4x5 grid" in output
        assert "Final generation: 12" in output
        assert "Final population: 6 (30.0%)" in output
        assert "Duration: 1.50s" in output
