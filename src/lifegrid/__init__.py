"""Conway's Game of Life on a wraparound grid, animated in the terminal."""

__version__ = "0.1.0"

from .core.errors import InvalidDimensions, LifeGridError, LoadError, OutOfBounds, RaggedInput
from .core.grid import Cell, Grid, next_state
from .core.game import GameOfLife
from .core.config import DisplayConfig
from .core.loader import dumps, load, loads, save

__all__ = [
    "Cell",
    "Grid",
    "next_state",
    "GameOfLife",
    "DisplayConfig",
    "load",
    "loads",
    "dumps",
    "save",
    "LifeGridError",
    "InvalidDimensions",
    "RaggedInput",
    "OutOfBounds",
    "LoadError",
]
