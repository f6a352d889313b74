"""Toroidal grid engine for Conway's Game of Life."""

from enum import Enum
import operator
from typing import Iterable, Iterator, List, Tuple
import numpy as np
import torch
import torch.nn.functional as F

from .errors import InvalidDimensions, OutOfBounds, RaggedInput


NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
)


class Cell(Enum):
    """State of a single cell."""

    DEAD = "dead"
    ALIVE = "alive"

    def __bool__(self) -> bool:
        return self is Cell.ALIVE

    @classmethod
    def from_bool(cls, alive) -> "Cell":
        """Map any truthy value to ALIVE and anything else to DEAD."""
        return cls.ALIVE if alive else cls.DEAD


def next_state(cell: Cell, alive_neighbors: int) -> Cell:
    """Apply the B3/S23 rule to one cell.

    Args:
        cell: Current state of the cell
        alive_neighbors: Number of alive cells among its 8 neighbors

    Returns:
        State of the cell in the next generation
    """
    if cell is Cell.ALIVE:
        return Cell.ALIVE if alive_neighbors in (2, 3) else Cell.DEAD
    return Cell.ALIVE if alive_neighbors == 3 else Cell.DEAD


class Grid:
    """A fixed-size rows x cols grid whose opposite edges touch.

    Cell states live in a numpy array. A second array of the same shape
    serves as the scratch buffer for ``advance()``: the next generation is
    written there in full and the two arrays are then swapped, so neighbor
    counts are always taken from the previous generation.
    """

    def __init__(self, rows: int, cols: int) -> None:
        """Create a grid with every cell dead.

        Args:
            rows: Number of rows (at least 1)
            cols: Number of columns (at least 1)

        Raises:
            InvalidDimensions: If either dimension is less than 1
        """
        if rows < 1 or cols < 1:
            raise InvalidDimensions(rows, cols)

        self._rows = rows
        self._cols = cols
        self._generation = 0
        self._cells = np.zeros((rows, cols), dtype=np.int8)
        self._scratch = np.zeros((rows, cols), dtype=np.int8)

        self._torch_input = torch.zeros(1, 1, rows, cols, dtype=torch.float32)
        self._torch_kernel = (
            torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)
        )

    @classmethod
    def new(cls, rows: int, cols: int) -> "Grid":
        """Create an all-dead grid (alias of the constructor)."""
        return cls(rows, cols)

    @classmethod
    def from_rows(cls, cell_rows: Iterable[Iterable]) -> "Grid":
        """Build a grid from explicit row data.

        Args:
            cell_rows: Rows of truthy (alive) / falsy (dead) values; ``Cell``
                members work too

        Returns:
            New grid at generation 0

        Raises:
            RaggedInput: If the rows differ in length
            InvalidDimensions: If there are no rows or the rows are empty
        """
        data: List[List[bool]] = [[bool(value) for value in row] for row in cell_rows]
        rows = len(data)
        cols = len(data[0]) if data else 0

        for index, row in enumerate(data):
            if len(row) != cols:
                raise RaggedInput(index, cols, len(row))

        grid = cls(rows, cols)
        grid._cells[:] = np.array(data, dtype=np.int8)
        return grid

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> Tuple[int, int]:
        """Grid dimensions as (rows, cols)."""
        return (self._rows, self._cols)

    @property
    def generation(self) -> int:
        """Number of times ``advance()`` has been called."""
        return self._generation

    @property
    def population(self) -> int:
        """Number of alive cells."""
        return int(np.count_nonzero(self._cells))

    def _check_bounds(self, row: int, col: int) -> Tuple[int, int]:
        row, col = operator.index(row), operator.index(col)
        if not (0 <= row < self._rows and 0 <= col < self._cols):
            raise OutOfBounds(row, col, self.shape)
        return row, col

    def state_at(self, row: int, col: int) -> Cell:
        """Get the state of a cell.

        Raises:
            OutOfBounds: If the coordinates are outside the grid
            TypeError: If a coordinate is not an integer
        """
        row, col = self._check_bounds(row, col)
        return Cell.from_bool(self._cells[row, col])

    def count_alive_neighbors(self, row: int, col: int) -> int:
        """Count alive cells among the 8 wrapped neighbors of a cell.

        On a grid with a single row or column the same physical cell is
        reached through several offsets and is counted each time.

        Returns:
            Number of living neighbors (0-8)

        Raises:
            OutOfBounds: If the coordinates are outside the grid
            TypeError: If a coordinate is not an integer
        """
        row, col = self._check_bounds(row, col)
        return self._count_neighbors(self._cells, row, col)

    def _count_neighbors(self, cells: np.ndarray, row: int, col: int) -> int:
        rows, cols = self._rows, self._cols
        count = 0
        for dr, dc in NEIGHBOR_OFFSETS:
            count += cells[(row + dr + rows) % rows, (col + dc + cols) % cols]
        return int(count)

    def neighbor_counts(self) -> np.ndarray:
        """Count neighbors for all cells with a circular-padded convolution.

        Returns:
            (rows, cols) integer array of neighbor counts
        """
        self._torch_input[0, 0] = torch.from_numpy(self._cells.astype(np.float32))
        padded = F.pad(self._torch_input, (1, 1, 1, 1), mode="circular")
        neighbors = F.conv2d(padded, self._torch_kernel)
        return neighbors[0, 0].numpy().astype(np.int8)

    def iterate_cells(self) -> Iterator[Tuple[Tuple[int, int], Cell]]:
        """Yield ``((row, col), cell)`` for every cell in row-major order."""
        for row in range(self._rows):
            for col in range(self._cols):
                yield (row, col), Cell.from_bool(self._cells[row, col])

    def advance(self) -> None:
        """Replace the grid with its next generation."""
        current = self._cells
        scratch = self._scratch

        for row in range(self._rows):
            for col in range(self._cols):
                cell = Cell.from_bool(current[row, col])
                alive = next_state(cell, self._count_neighbors(current, row, col))
                scratch[row, col] = 1 if alive else 0

        self._cells, self._scratch = scratch, current
        self._generation += 1

    def to_rows(self) -> List[List[bool]]:
        """Convert the current generation to nested lists of booleans."""
        return [[bool(value) for value in row] for row in self._cells.tolist()]

    def copy(self) -> "Grid":
        """Return a new grid with the same cells and generation counter."""
        clone = Grid(self._rows, self._cols)
        clone._cells[:] = self._cells
        clone._generation = self._generation
        return clone

    def __eq__(self, other: object) -> bool:
        """Grids are equal when they have the same shape and cell states."""
        if not isinstance(other, Grid):
            return False
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)

    def __repr__(self) -> str:
        return f"Grid(rows={self._rows}, cols={self._cols}, generation={self._generation})"

    def __str__(self) -> str:
        """String representation showing living cells as '*' and dead as '.'."""
        return "\n".join("".join("*" if value else "." for value in row) for row in self._cells)
