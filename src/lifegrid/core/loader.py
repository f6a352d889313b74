"""Reading and writing boards in the plain-text 0/1 format.

Each line of a board file is one grid row and each character one cell:
``0`` for dead, ``1`` for alive. All lines must have the same length.
"""

import logging
from pathlib import Path
from typing import List, Union

from .errors import LoadError
from .grid import Grid

logger = logging.getLogger(__name__)

DEAD_CHAR = "0"
ALIVE_CHAR = "1"


def loads(text: str, source: str = "<string>") -> Grid:
    """Parse a board description.

    Trailing blank lines are ignored; any other blank line counts as a row of
    the wrong length.

    Args:
        text: Board text
        source: Name used in error messages

    Returns:
        New grid at generation 0

    Raises:
        LoadError: If the text is empty, contains a character other than
            ``0``/``1``, or has lines of different lengths
    """
    # only \n and \r\n end a line
    lines = [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]
    while lines and not lines[-1]:
        lines.pop()

    if not lines:
        raise LoadError(f"{source}: board is empty")

    cols = len(lines[0])
    cell_rows: List[List[bool]] = []
    for line_no, line in enumerate(lines, start=1):
        if len(line) != cols:
            raise LoadError(f"{source}: line {line_no} has {len(line)} cells, expected {cols}")

        row = []
        for col_no, char in enumerate(line, start=1):
            if char == ALIVE_CHAR:
                row.append(True)
            elif char == DEAD_CHAR:
                row.append(False)
            else:
                raise LoadError(f"{source}: invalid character {char!r} at line {line_no}, column {col_no}")
        cell_rows.append(row)

    return Grid.from_rows(cell_rows)


def load(path: Union[str, Path]) -> Grid:
    """Load a board file.

    Args:
        path: Path to a 0/1 board file

    Returns:
        New grid at generation 0

    Raises:
        LoadError: If the file cannot be read or is not a valid board
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise LoadError(f"Couldn't open {path}: {e}") from e

    grid = loads(text, source=str(path))
    logger.info("Loaded board %s with dimensions %dx%d", path, grid.rows, grid.cols)
    return grid


def dumps(grid: Grid) -> str:
    """Serialize a grid's current generation to the 0/1 format."""
    lines = ["".join(ALIVE_CHAR if alive else DEAD_CHAR for alive in row) for row in grid.to_rows()]
    return "\n".join(lines) + "\n"


def save(grid: Grid, path: Union[str, Path]) -> Path:
    """Write a grid to a board file, creating parent directories.

    Returns:
        The path written to
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dumps(grid), encoding="utf-8")
    logger.debug("Saved %dx%d board to %s", grid.rows, grid.cols, path)
    return path
