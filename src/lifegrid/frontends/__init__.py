"""Frontend interfaces for lifegrid."""

from .terminal import TerminalRenderer
from .cli import main

__all__ = ["TerminalRenderer", "main"]
