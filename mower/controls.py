"""
Controls
=========
Turns blessed keystrokes into game input.
"""

from typing import Dict, Optional

from .components import Direction
from .config import KEY_HOLD_FRAMES
from .game import GameState


KEY_NAME_DIRECTIONS = {
    'KEY_LEFT': Direction.LEFT,
    'KEY_UP': Direction.UP,
    'KEY_RIGHT': Direction.RIGHT,
    'KEY_DOWN': Direction.DOWN,
}

KEY_CHAR_DIRECTIONS = {
    'a': Direction.LEFT,
    'w': Direction.UP,
    'd': Direction.RIGHT,
    's': Direction.DOWN,
}


def key_direction(key) -> Optional[Direction]:
    """Direction for a keystroke, or None if it is not a movement key."""
    if key.is_sequence:
        return KEY_NAME_DIRECTIONS.get(key.name)
    return KEY_CHAR_DIRECTIONS.get(key.lower())


class InputHandler:
    """
    Feeds key presses into the game and releases them again.

    Terminals don't report key-up events, so each press starts a frame
    timer; when it runs out the key is released. A press the game has
    already consumed is not repeated until the terminal sends another one.
    """

    def __init__(self, game: GameState, hold_duration: int = KEY_HOLD_FRAMES):
        self.game = game
        self.hold_duration = hold_duration
        self.keys_held: Dict[Direction, int] = {}  # direction -> frames remaining

        # Actions triggered this frame (consumed on read)
        self._quit_triggered = False
        self._restart_triggered = False

    def process_key(self, key) -> None:
        """Process a single key press from blessed's inkey()."""
        if key is None or not key:
            return

        direction = key_direction(key)
        if direction is not None:
            self.keys_held[direction] = self.hold_duration
            self.game.key_down(direction)
            return

        key_str = key.lower() if not key.is_sequence else ''
        if key_str == 'q' or key.name == 'KEY_ESCAPE':
            self._quit_triggered = True
        elif key_str == 'r':
            self._restart_triggered = True

    def update(self) -> None:
        """Update key hold timers (call once per frame)."""
        expired = []
        for direction, frames in self.keys_held.items():
            self.keys_held[direction] = frames - 1
            if self.keys_held[direction] <= 0:
                expired.append(direction)
        for direction in expired:
            del self.keys_held[direction]
            self.game.key_up(direction)

    def consume_quit(self) -> bool:
        """Check and consume quit trigger."""
        triggered = self._quit_triggered
        self._quit_triggered = False
        return triggered

    def consume_restart(self) -> bool:
        """Check and consume restart trigger."""
        triggered = self._restart_triggered
        self._restart_triggered = False
        return triggered
