"""Simulation driver: render, advance, sleep."""

import logging
import time
from typing import Callable, Dict, Optional

from .config import DisplayConfig
from .grid import Grid

logger = logging.getLogger(__name__)


class GameOfLife:
    """Drives a grid through successive generations.

    Each iteration of ``run()`` renders the current generation, advances the
    grid once and then sleeps for the configured tick delay.
    """

    def __init__(
        self,
        grid: Grid,
        config: Optional[DisplayConfig] = None,
        render: Optional[Callable[[Grid], None]] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """Initialize the driver.

        Args:
            grid: The grid to simulate
            config: Display configuration (only ``tick_delay`` is used here)
            render: Called with the grid before every advance
            sleep: Function used to wait between generations
        """
        self.grid = grid
        self.config = config or DisplayConfig()
        self.render = render
        self._sleep = sleep
        self._stop_requested = False

    @property
    def generation(self) -> int:
        """Current generation number."""
        return self.grid.generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self.grid.population

    @property
    def stop_requested(self) -> bool:
        return self._stop_requested

    def step(self) -> None:
        """Advance the simulation by one generation."""
        self.grid.advance()

    def stop(self) -> None:
        """Ask ``run()`` to return before its next iteration."""
        self._stop_requested = True

    def run(self, max_generations: Optional[int] = None) -> int:
        """Run the render/advance/sleep loop.

        Args:
            max_generations: Stop after this many advances (None runs until
                ``stop()`` is called or the process is interrupted)

        Returns:
            Number of generations advanced by this call
        """
        self._stop_requested = False
        advanced = 0

        logger.debug("Starting run at generation %d (cap: %s)", self.generation, max_generations)

        while not self._stop_requested:
            if max_generations is not None and advanced >= max_generations:
                break

            if self.render is not None:
                self.render(self.grid)

            # render may have asked us to stop
            if self._stop_requested:
                break

            self.step()
            advanced += 1
            self._sleep(self.config.tick_delay)

        logger.debug("Run finished at generation %d after %d advances", self.generation, advanced)
        return advanced

    def get_statistics(self) -> Dict:
        """Get a summary of the current simulation state."""
        return {
            "generation": self.generation,
            "population": self.population,
            "grid_size": self.grid.shape,
            "population_density": self.population / (self.grid.rows * self.grid.cols),
        }
