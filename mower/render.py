"""
Screen Rendering
=================
Paints a game snapshot: header, field and game-over overlay.
"""

from .components import Cell, Snapshot
from .config import (
    CELL_WIDTH, CELL_HEIGHT, FIELD_OFFSET, TITLE,
    FOX_GLYPH, GRASS_GLYPH, PLAYER_GLYPH,
)
from .engine import GameRenderer, GRASS_GREEN, GRAY_MED, NEON_RED, NEON_YELLOW, WHITE


def cell_glyph(snapshot: Snapshot, x: int, y: int) -> str:
    """Glyph for a field cell; the fox is drawn over the player."""
    if snapshot.enemy_pos.x == x and snapshot.enemy_pos.y == y:
        return FOX_GLYPH
    if snapshot.player_pos.x == x and snapshot.player_pos.y == y:
        return PLAYER_GLYPH
    if snapshot.cell_at(x, y) is Cell.GRASS:
        return GRASS_GLYPH
    return ''


def render_header(renderer: GameRenderer, snapshot: Snapshot):
    """Title, progress and the divider above the field."""
    renderer.draw_hline(FIELD_OFFSET - 1, WHITE)
    renderer.put_centered(0, TITLE, WHITE)
    renderer.put_shadow_string(1, 0, f'{snapshot.percent_mowed}%', GRASS_GREEN)


def render_field(renderer: GameRenderer, snapshot: Snapshot):
    for x in range(snapshot.num_x):
        for y in range(snapshot.num_y):
            glyph = cell_glyph(snapshot, x, y)
            if glyph:
                renderer.put_glyph(x * CELL_WIDTH, y * CELL_HEIGHT + FIELD_OFFSET,
                                   glyph, CELL_WIDTH)


def render_game_over(renderer: GameRenderer, snapshot: Snapshot):
    """Result banner centered over the field."""
    message = 'You Won!' if snapshot.player_won else 'You Lose!'
    color = NEON_YELLOW if snapshot.player_won else NEON_RED
    total = (f'Total: {snapshot.percent_mowed}% '
             f'({snapshot.mowed_count}/{snapshot.total_cells})')

    mid_y = renderer.height // 2
    # Blank band so text never lands on half of a wide glyph
    for y in range(mid_y - 3, mid_y + 4):
        renderer.put_string(0, y, ' ' * renderer.width)
    renderer.put_centered(mid_y - 2, message, color)
    renderer.put_centered(mid_y, total, WHITE)
    renderer.put_centered(mid_y + 2, '[ R - RESTART ]    [ Q - QUIT ]', GRAY_MED, shadow=False)


def render_frame(renderer: GameRenderer, snapshot: Snapshot) -> str:
    """Draw a whole frame and return the terminal output for it."""
    renderer.begin_frame()
    render_header(renderer, snapshot)
    render_field(renderer, snapshot)
    if not snapshot.running:
        render_game_over(renderer, snapshot)
    return renderer.end_frame()
