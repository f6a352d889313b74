"""Display and pacing configuration."""

from dataclasses import dataclass
from typing import List


@dataclass
class DisplayConfig:
    """Configuration for rendering and pacing a simulation."""
    pixel_width: int = 1
    tick_delay: float = 0.1  # seconds between generations
    debug_overlay: bool = False
    alive_glyph: str = "⬛"
    dead_glyph: str = "⬜"
    clear_screen: bool = True

    def validate(self) -> List[str]:
        """Return a list of problems with this configuration (empty if valid)."""
        errors = []

        if self.pixel_width < 1:
            errors.append("Pixel width must be at least 1")

        if self.tick_delay < 0:
            errors.append("Tick delay must be non-negative")

        if not self.alive_glyph or not self.dead_glyph:
            errors.append("Cell glyphs must not be empty")

        return errors
