"""Exceptions raised by the grid engine and the board loader."""


class LifeGridError(Exception):
    """Base class for all lifegrid errors."""


class InvalidDimensions(LifeGridError, ValueError):
    """Grid constructed with zero (or negative) rows or columns."""

    def __init__(self, rows: int, cols: int) -> None:
        self.rows = rows
        self.cols = cols
        super().__init__(f"Grid dimensions must be positive, got {rows}x{cols}")


class RaggedInput(LifeGridError, ValueError):
    """Row data whose rows are not all the same length."""

    def __init__(self, row: int, expected: int, actual: int) -> None:
        self.row = row
        self.expected = expected
        self.actual = actual
        super().__init__(f"Row {row} has {actual} cells, expected {expected}")


class OutOfBounds(LifeGridError, IndexError):
    """Cell coordinates outside the grid."""

    def __init__(self, row: int, col: int, shape) -> None:
        self.row = row
        self.col = col
        super().__init__(f"Coordinates ({row}, {col}) out of bounds for {shape[0]}x{shape[1]} grid")


class LoadError(LifeGridError, ValueError):
    """A board description could not be turned into a grid."""
