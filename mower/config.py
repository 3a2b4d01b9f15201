"""
Game Configuration
===================
Tuning constants and environment-driven settings.
"""

import os


# =============================================================================
# TIMING
# =============================================================================

TARGET_FPS = 60
FRAME_TIME = 1.0 / TARGET_FPS
ENEMY_MOVE_DELAY = 0.5  # seconds between enemy steps

# Terminals have no key-up event; a press counts as held for this many frames
KEY_HOLD_FRAMES = 8


# =============================================================================
# LAYOUT
# =============================================================================

CELL_WIDTH = 2  # emoji glyphs are two columns wide
CELL_HEIGHT = 1
FIELD_OFFSET = 2  # rows above the field (title + divider)
DROP_SHADOW_OFFSET = 1


# =============================================================================
# GLYPHS
# =============================================================================

FOX_GLYPH = '\U0001F98A'     # fox
GRASS_GLYPH = '\U0001F33F'   # herb
PLAYER_GLYPH = '\U0001F600'  # grinning face

TITLE = 'Mower'


# =============================================================================
# LOGGING
# =============================================================================

# Logging to the terminal would corrupt the fullscreen display, so it is
# only enabled when a file is given.
LOG_FILE = os.environ.get('MOWER_LOG_FILE', '')
LOG_LEVEL = os.environ.get('MOWER_LOG_LEVEL', 'INFO').upper()
