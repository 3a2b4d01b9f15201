import pytest
from blessed.keyboard import Keystroke

from mower.game import GameState


class FakeTerminal:
    """Just enough of blessed.Terminal for rendering and input without a tty."""

    home = '<home>'
    clear = '<clear>'
    normal = '<normal>'

    def __init__(self, width=20, height=8):
        self.width = width
        self.height = height
        self.keys = []

    def move_xy(self, x, y):
        return f'<{x},{y}>'

    def color(self, code):
        return ''

    def on_color(self, code):
        return ''

    def inkey(self, timeout=None):
        if self.keys:
            return self.keys.pop(0)
        return Keystroke('')


def arrow(name):
    """Keystroke as blessed reports an arrow key."""
    codes = {'KEY_LEFT': 260, 'KEY_RIGHT': 261, 'KEY_UP': 259, 'KEY_DOWN': 258}
    return Keystroke('\x1b[', code=codes[name], name=name)


@pytest.fixture
def game():
    """5x5 game with the enemy's clock primed so it won't step on the next frame."""
    g = GameState(5, 5)
    g.last_enemy_move = 100.0
    return g


@pytest.fixture
def term():
    return FakeTerminal()
