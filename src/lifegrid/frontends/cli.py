"""Command-line interface for running a board in the terminal."""

import argparse
import logging
import sys
import time
from typing import List, Optional

from ..core.config import DisplayConfig
from ..core.errors import LoadError
from ..core.game import GameOfLife
from ..core.loader import load
from .terminal import TerminalRenderer


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="lifegrid-cli",
        description="Animate Conway's Game of Life on a wraparound grid in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Board files contain one row per line, '0' for a dead cell and '1' for a live one.

Examples:
  # Animate a board until interrupted with Ctrl-C
  lifegrid-cli boards/glider.txt

  # Double-width cells, 50ms between generations
  lifegrid-cli boards/glider.txt --pixel-width 2 --delay 50

  # Show indices and neighbor counts, stop after 20 generations
  lifegrid-cli boards/blinker.txt --debug --max-generations 20
        """,
    )

    parser.add_argument("board", type=str, help="Path to the board file")

    # Display configuration
    parser.add_argument(
        "-w",
        "--pixel-width",
        type=int,
        default=1,
        help="Number of glyphs drawn per cell (default: 1)",
    )

    parser.add_argument(
        "-d",
        "--delay",
        type=float,
        default=100.0,
        help="Delay between generations in milliseconds (default: 100)",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Show row/column indices and live-neighbor counts",
    )

    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Do not clear the terminal before each frame",
    )

    # Simulation configuration
    parser.add_argument(
        "-m",
        "--max-generations",
        type=int,
        default=None,
        help="Stop after this many generations (default: run until interrupted)",
    )

    # Output configuration
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print progress information and final statistics",
    )

    return parser


def config_from_args(args: argparse.Namespace) -> DisplayConfig:
    """Build a display configuration from parsed arguments."""
    return DisplayConfig(
        pixel_width=args.pixel_width,
        tick_delay=args.delay / 1000.0,
        debug_overlay=args.debug,
        clear_screen=not args.no_clear,
    )


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = config_from_args(args).validate()

    if args.max_generations is not None and args.max_generations <= 0:
        errors.append("Max generations must be positive")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def print_results(generations: int, stats: dict, duration: float) -> None:
    """Print a summary of a finished run.

    Args:
        generations: Generations advanced during the run
        stats: Statistics from ``GameOfLife.get_statistics()``
        duration: Wall-clock duration of the run in seconds
    """
    rows, cols = stats["grid_size"]
    print(f"Ran {generations} generations on a {rows}x{cols} grid")
    print(f"Final generation: {stats['generation']}")
    print(f"Final population: {stats['population']} ({stats['population_density']:.1%})")
    print(f"Duration: {duration:.2f}s")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    if not validate_args(args):
        return 1

    try:
        grid = load(args.board)
    except LoadError as e:
        print(f"Error: {e}")
        return 1

    config = config_from_args(args)
    renderer = TerminalRenderer(config)
    game = GameOfLife(grid, config=config, render=renderer)

    if args.verbose:
        print(f"Loaded {grid.rows}x{grid.cols} board from {args.board} ({grid.population} alive)")

    start_time = time.time()
    try:
        game.run(max_generations=args.max_generations)
    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")

    if args.verbose:
        print_results(game.generation, game.get_statistics(), time.time() - start_time)

    return 0


if __name__ == "__main__":
    sys.exit(main())
