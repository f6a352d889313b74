"""Terminal rendering of grids."""

import sys
from typing import Optional, TextIO

from ..core.config import DisplayConfig
from ..core.grid import Grid

RESET_TERMINAL = "\x1bc"
GREEN_BACKGROUND = "\x1b[42m"
RESET_STYLE = "\x1b[0m"


class TerminalRenderer:
    """Writes frames of a grid to a text stream.

    In the default mode every cell is drawn as its glyph repeated
    ``pixel_width`` times. The debug mode draws row and column indices, a
    box-drawing frame and each cell's live-neighbor count, with alive cells
    highlighted.
    """

    def __init__(self, config: Optional[DisplayConfig] = None, stream: Optional[TextIO] = None) -> None:
        self.config = config or DisplayConfig()
        self.stream = stream if stream is not None else sys.stdout

    def format_grid(self, grid: Grid) -> str:
        """Format one frame without any terminal control sequences."""
        if self.config.debug_overlay:
            return self._format_debug(grid)
        return self._format_release(grid)

    def _format_release(self, grid: Grid) -> str:
        alive = self.config.alive_glyph * self.config.pixel_width
        dead = self.config.dead_glyph * self.config.pixel_width
        return "\n".join("".join(alive if value else dead for value in row) for row in grid.to_rows())

    def _format_debug(self, grid: Grid) -> str:
        counts = grid.neighbor_counts()
        lines = [
            "   " + "".join(f"{col % 10} " for col in range(grid.cols)),
            "  ┌" + "─┬" * grid.cols,
        ]

        for row, values in enumerate(grid.to_rows()):
            parts = [f"{row:02}│"]
            for col, alive in enumerate(values):
                count = int(counts[row, col])
                if alive:
                    parts.append(f"{GREEN_BACKGROUND}{count}{RESET_STYLE} ")
                else:
                    parts.append(f"{count}│")
            lines.append("".join(parts))

        return "\n".join(lines)

    def render(self, grid: Grid) -> None:
        """Clear the terminal (if configured) and draw the grid."""
        prefix = RESET_TERMINAL if self.config.clear_screen else ""
        self.stream.write(prefix + self.format_grid(grid) + "\n")
        self.stream.flush()

    __call__ = render
