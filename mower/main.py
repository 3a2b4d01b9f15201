#!/usr/bin/env python3
"""
MOWER - Terminal Lawn Arcade
=============================
Mow every tile of grass before the fox catches you.

Controls:
    ARROWS/WASD - Move one tile per press (the field wraps at the edges)
    R           - Restart after game over
    Q/ESC       - Quit
"""

import sys
import time
import logging
from typing import Callable, Optional

try:
    from blessed import Terminal
except ImportError:
    print("ERROR: 'blessed' library required. Install with: pip install blessed")
    sys.exit(1)

from .config import FRAME_TIME, DROP_SHADOW_OFFSET, LOG_FILE, LOG_LEVEL
from .controls import InputHandler
from .engine import GameRenderer
from .game import GameState
from .render import render_frame
from .viewport import Viewport, grid_size

logger = logging.getLogger(__name__)


# =============================================================================
# FRAME SCHEDULING
# =============================================================================

class FrameLoop:
    """
    Calls `on_frame(now)` at a steady rate until stopped.

    Frames keep being scheduled whatever the game state; whether a frame
    does any work is up to the callback. `now` is read from the clock
    every frame because frame intervals are not guaranteed.
    """

    def __init__(self, on_frame: Callable[[float], None],
                 frame_time: float = FRAME_TIME,
                 clock: Callable[[], float] = time.perf_counter,
                 sleep: Callable[[float], None] = time.sleep):
        self.on_frame = on_frame
        self.frame_time = frame_time
        self.clock = clock
        self.sleep = sleep
        self.active = False

    def stop(self):
        self.active = False

    def run(self, should_continue: Callable[[], bool] = lambda: True):
        self.active = True
        while self.active and should_continue():
            now = self.clock()
            self.on_frame(now)

            # Sleep for remaining frame time
            elapsed = self.clock() - now
            sleep_time = self.frame_time - elapsed
            if sleep_time > 0.001:
                self.sleep(sleep_time * 0.9)


# =============================================================================
# APPLICATION
# =============================================================================

class MowerApp:
    """Wires the terminal, input, viewport and renderer around one game."""

    def __init__(self, term: Terminal, out: Optional[Callable[[str], None]] = None):
        self.term = term
        self.out = out or (lambda text: print(text, end='', flush=True))
        self.running = True

        self.game = GameState()
        self.renderer = GameRenderer(term, shadow_offset=DROP_SHADOW_OFFSET)
        self.input_handler = InputHandler(self.game)
        self.viewport = Viewport(self.game)

    def handle_input(self):
        """Drain the terminal input buffer."""
        key = self.term.inkey(timeout=0)
        while key:
            self.input_handler.process_key(key)
            key = self.term.inkey(timeout=0)

        if self.input_handler.consume_quit():
            self.running = False
        if self.input_handler.consume_restart() and not self.game.running:
            logger.info("Restarting")
            self.game.start_new_game()

    def check_viewport(self):
        """Re-fit the field if the terminal changed size."""
        width, height = self.term.width, self.term.height
        if self.viewport.refresh(width, height):
            self.renderer.resize(width, height)
            self.out(self.term.home + self.term.clear)

    def frame(self, now: float):
        """One scheduled frame: update and draw only while the game runs."""
        self.handle_input()
        self.check_viewport()

        if self.game.running:
            self.game.advance(now)
            self.out(render_frame(self.renderer, self.game.snapshot()))

        self.input_handler.update()


# =============================================================================
# MAIN LOOP
# =============================================================================

def setup_logging():
    """Log to MOWER_LOG_FILE if set; the terminal itself is the game screen."""
    if LOG_FILE:
        logging.basicConfig(
            filename=LOG_FILE,
            level=getattr(logging, LOG_LEVEL, logging.INFO),
            format='%(asctime)s %(name)s %(levelname)s %(message)s',
        )
    else:
        logging.getLogger('mower').addHandler(logging.NullHandler())


def main():
    """Entry point. Sets up terminal and runs the frame loop."""
    setup_logging()
    term = Terminal()

    num_x, num_y = grid_size(term.width, term.height)
    if num_x < 1 or num_y < 1:
        print(f'Terminal too small: {term.width}x{term.height}')
        sys.exit(1)

    with term.fullscreen(), term.cbreak(), term.hidden_cursor():
        app = MowerApp(term)
        loop = FrameLoop(app.frame)
        loop.run(lambda: app.running)

        # Restore terminal
        print(term.normal, end='', flush=True)


if __name__ == '__main__':
    main()
