"""
Viewport
=========
Fits the field to the terminal and restarts the game when it changes.
"""

import logging
from typing import Optional, Tuple

from .config import CELL_WIDTH, CELL_HEIGHT, FIELD_OFFSET
from .game import GameState

logger = logging.getLogger(__name__)


def grid_size(width: int, height: int) -> Tuple[int, int]:
    """Number of field columns and rows that fit in a terminal."""
    num_x = width // CELL_WIDTH
    num_y = (height - FIELD_OFFSET) // CELL_HEIGHT
    return num_x, num_y


class Viewport:
    """Tracks the terminal size and reinitializes the game on change."""

    def __init__(self, game: GameState):
        self.game = game
        self.size: Optional[Tuple[int, int]] = None

    def refresh(self, width: int, height: int) -> bool:
        """
        Apply a terminal size. Returns True if the game was reset.

        Sizes too small for a single cell are ignored.
        """
        if self.size == (width, height):
            return False

        num_x, num_y = grid_size(width, height)
        if num_x < 1 or num_y < 1:
            logger.warning(f"Ignoring terminal size {width}x{height}: no room for the field")
            return False

        logger.info(f"Terminal resized to {width}x{height}, field {num_x}x{num_y}")
        self.size = (width, height)
        self.game.resize(num_x, num_y)
        self.game.start_new_game()
        return True
