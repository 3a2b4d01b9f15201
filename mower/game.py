"""
Game State
===========
The field, the player and the fox, advanced once per frame.
"""

import logging
from typing import List, Optional, Set

from .components import Cell, Direction, Position, Snapshot, MOVE_ORDER
from .config import ENEMY_MOVE_DELAY

logger = logging.getLogger(__name__)


def count_mowed(grid: List[List[Cell]]) -> int:
    """Count every EMPTY cell in the grid."""
    return sum(1 for column in grid for cell in column if cell is Cell.EMPTY)


def _step_toward(source: int, target: int) -> int:
    if target < source:
        return -1
    if target > source:
        return 1
    return 0


class GameState:
    """
    Central game state container.

    The only mutators are start_new_game, resize, key_down, key_up and
    advance. Everything else reads through snapshot().
    """

    def __init__(self, num_x: int = 1, num_y: int = 1,
                 enemy_move_delay: float = ENEMY_MOVE_DELAY):
        self.enemy_move_delay = enemy_move_delay

        self.running = True
        self.player_won = False

        self.num_x = 0
        self.num_y = 0
        self.total_cells = 0
        self.mowed_count = 0

        self.player_pos = Position(0, 0)
        self.enemy_pos = Position(0, 0)
        self.last_enemy_move: Optional[float] = None  # None = never moved
        self.pending_keys: Set[Direction] = set()
        self.grid: List[List[Cell]] = []

        self.resize(num_x, num_y)
        self.start_new_game()

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def resize(self, num_x: int, num_y: int):
        """Set the field dimensions. Must be followed by start_new_game()."""
        self.num_x = num_x
        self.num_y = num_y
        self.total_cells = num_x * num_y

    def start_new_game(self):
        """Replace the field with fresh grass and reset both positions."""
        logger.info(f"Creating a new board ({self.num_x}, {self.num_y})")
        self.grid = [
            [Cell.GRASS for _ in range(self.num_y)]
            for _ in range(self.num_x)
        ]
        self.player_pos = Position(0, 0)
        self.enemy_pos = Position(self.num_x - 1, self.num_y - 1)
        self.mowed_count = 0
        self.running = True
        self.player_won = False

    # -------------------------------------------------------------------------
    # Input
    # -------------------------------------------------------------------------

    def key_down(self, direction: Direction):
        self.pending_keys.add(direction)

    def key_up(self, direction: Direction):
        self.pending_keys.discard(direction)

    # -------------------------------------------------------------------------
    # Per-frame update
    # -------------------------------------------------------------------------

    def advance(self, now: float):
        """
        Advance the game by one frame.

        `now` is the current wall-clock time in seconds; frames have no
        fixed interval so the enemy cadence is measured against it.
        """
        if not self.running:
            return

        previous = self.player_pos.copy()
        self._apply_pending_moves()

        # Mow the cell left behind and the cell underfoot
        if self.player_pos != previous:
            self.grid[previous.x][previous.y] = Cell.EMPTY
        self.grid[self.player_pos.x][self.player_pos.y] = Cell.EMPTY

        self.mowed_count = count_mowed(self.grid)
        player_done = self.mowed_count == self.total_cells

        if self.last_enemy_move is None or now - self.last_enemy_move > self.enemy_move_delay:
            self._move_enemy()
            self.last_enemy_move = now

        caught = self.player_pos == self.enemy_pos
        if caught or player_done:
            self.player_won = player_done
            self.running = False
            logger.info(
                f"Game over: {'won' if player_done else 'caught'} "
                f"with {self.mowed_count}/{self.total_cells} mowed"
            )

    def _apply_pending_moves(self):
        """Apply each pending direction once, wrapping at the field edges."""
        pos = self.player_pos
        for direction in MOVE_ORDER:
            if direction in self.pending_keys:
                pos.x = (pos.x + direction.dx) % self.num_x
                pos.y = (pos.y + direction.dy) % self.num_y
                self.pending_keys.discard(direction)

    def _move_enemy(self):
        """Step one cell toward the player along the axis with the larger gap."""
        player, enemy = self.player_pos, self.enemy_pos
        x_diff = abs(player.x - enemy.x)
        y_diff = abs(player.y - enemy.y)
        if x_diff > y_diff:
            enemy.x += _step_toward(enemy.x, player.x)
        else:
            enemy.y += _step_toward(enemy.y, player.y)
        logger.debug(f"Enemy at ({enemy.x}, {enemy.y})")

    # -------------------------------------------------------------------------
    # Read access
    # -------------------------------------------------------------------------

    def snapshot(self) -> Snapshot:
        """Immutable copy of everything the renderer needs."""
        return Snapshot(
            running=self.running,
            player_won=self.player_won,
            num_x=self.num_x,
            num_y=self.num_y,
            total_cells=self.total_cells,
            mowed_count=self.mowed_count,
            player_pos=self.player_pos.copy(),
            enemy_pos=self.enemy_pos.copy(),
            grid=tuple(tuple(column) for column in self.grid),
        )
