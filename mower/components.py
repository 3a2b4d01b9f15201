"""
Component Definitions
======================
Plain data shared between the game state, input and rendering.
"""

from dataclasses import dataclass
from typing import Tuple
from enum import Enum


class Cell(Enum):
    """State of a single field tile."""
    EMPTY = 'empty'
    GRASS = 'grass'


class Direction(Enum):
    """Directional input. Value is the (dx, dy) step."""
    LEFT = (-1, 0)
    UP = (0, -1)
    RIGHT = (1, 0)
    DOWN = (0, 1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


# Order in which pending directions are applied each frame
MOVE_ORDER = (Direction.DOWN, Direction.UP, Direction.LEFT, Direction.RIGHT)


@dataclass
class Position:
    """Integer cell coordinates on the field."""
    x: int = 0
    y: int = 0

    def copy(self) -> 'Position':
        return Position(self.x, self.y)


@dataclass(frozen=True)
class Snapshot:
    """
    Read-only view of the game state for the renderer.

    The grid is a tuple of columns, indexed [x][y].
    """
    running: bool
    player_won: bool
    num_x: int
    num_y: int
    total_cells: int
    mowed_count: int
    player_pos: Position
    enemy_pos: Position
    grid: Tuple[Tuple[Cell, ...], ...]

    def cell_at(self, x: int, y: int) -> Cell:
        return self.grid[x][y]

    @property
    def percent_mowed(self) -> int:
        """Whole percentage of the field mowed (floored)."""
        if self.total_cells <= 0:
            return 0
        return (self.mowed_count * 100) // self.total_cells
