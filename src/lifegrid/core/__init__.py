"""Grid engine, board format and simulation driver."""

from .errors import InvalidDimensions, LifeGridError, LoadError, OutOfBounds, RaggedInput
from .grid import Cell, Grid, next_state
from .game import GameOfLife
from .config import DisplayConfig

__all__ = [
    "Cell",
    "Grid",
    "next_state",
    "GameOfLife",
    "DisplayConfig",
    "LifeGridError",
    "InvalidDimensions",
    "RaggedInput",
    "OutOfBounds",
    "LoadError",
]
