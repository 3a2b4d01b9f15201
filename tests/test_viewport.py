from mower.components import Cell, Position
from mower.config import CELL_WIDTH, FIELD_OFFSET
from mower.game import GameState
from mower.viewport import Viewport, grid_size


def test_grid_size():
    assert grid_size(80, 24) == (80 // CELL_WIDTH, 24 - FIELD_OFFSET)
    assert grid_size(81, 24) == (80 // CELL_WIDTH, 24 - FIELD_OFFSET)


def test_refresh_resets_game():
    game = GameState(3, 3)
    viewport = Viewport(game)
    assert viewport.refresh(20, 8)

    num_x, num_y = grid_size(20, 8)
    assert (game.num_x, game.num_y) == (num_x, num_y)
    assert game.total_cells == num_x * num_y
    assert game.enemy_pos == Position(num_x - 1, num_y - 1)
    assert game.running


def test_same_size_is_a_no_op():
    game = GameState(3, 3)
    viewport = Viewport(game)
    viewport.refresh(20, 8)
    game.advance(0.0)
    assert not viewport.refresh(20, 8)
    assert game.grid[0][0] is Cell.EMPTY


def test_new_size_starts_new_game():
    game = GameState(3, 3)
    viewport = Viewport(game)
    viewport.refresh(20, 8)
    game.advance(0.0)
    assert viewport.refresh(30, 10)
    assert game.mowed_count == 0
    assert game.grid[0][0] is Cell.GRASS


def test_degenerate_size_ignored():
    game = GameState(3, 3)
    viewport = Viewport(game)
    assert not viewport.refresh(1, 24)
    assert not viewport.refresh(80, FIELD_OFFSET)
    assert (game.num_x, game.num_y) == (3, 3)
    assert viewport.size is None
