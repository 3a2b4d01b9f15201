"""
Rendering Engine
=================
Double-buffered terminal renderer with wide-glyph support.
"""

from dataclasses import dataclass, field
from typing import List

try:
    from blessed import Terminal
except ImportError:
    raise ImportError("'blessed' library required. Install with: pip install blessed")


# ANSI 256 color constants
GRASS_GREEN = 34
NEON_YELLOW = 226
NEON_RED = 196

GRAY_MED = 245
GRAY_DARK = 238

WHITE = 255

# Marks the right half of a double-width glyph
CONTINUATION = ''


@dataclass
class ScreenCell:
    """A single cell in the render buffer."""
    char: str = ' '
    fg_color: int = 7
    bg_color: int = -1  # -1 = transparent/default

    def matches(self, other: 'ScreenCell') -> bool:
        """Check if two cells are visually identical."""
        return (
            self.char == other.char and
            self.fg_color == other.fg_color and
            self.bg_color == other.bg_color
        )

    def reset(self):
        """Reset to empty state."""
        self.char = ' '
        self.fg_color = 7
        self.bg_color = -1


class DoubleBuffer:
    """
    Double-buffered terminal renderer.

    Writes to a back buffer, then swaps to front buffer,
    only updating cells that changed. No screen clears needed.
    """

    def __init__(self, term: Terminal, width: int, height: int):
        self.term = term
        self.width = width
        self.height = height
        self.front: List[List[ScreenCell]] = []
        self.back: List[List[ScreenCell]] = []
        self._init_buffers()
        self._normal = term.normal  # Cache reset sequence

    def _init_buffers(self):
        """Initialize both buffers with empty cells."""
        self.front = [
            [ScreenCell() for _ in range(self.width)]
            for _ in range(self.height)
        ]
        self.back = [
            [ScreenCell() for _ in range(self.width)]
            for _ in range(self.height)
        ]

    def resize(self, width: int, height: int):
        """Handle terminal resize."""
        self.width = width
        self.height = height
        self._init_buffers()

    def clear_back(self):
        """Clear the back buffer by resetting cells in-place."""
        for row in self.back:
            for cell in row:
                cell.reset()

    def put(self, x: int, y: int, char: str, fg_color: int = 7, bg_color: int = -1):
        """Put a character in the back buffer at exact position."""
        if 0 <= x < self.width and 0 <= y < self.height:
            cell = self.back[y][x]
            cell.char = char
            cell.fg_color = fg_color
            cell.bg_color = bg_color

    def put_string(self, x: int, y: int, text: str, fg_color: int = 7, bg_color: int = -1):
        """Put a string in the back buffer."""
        for i, char in enumerate(text):
            self.put(x + i, y, char, fg_color, bg_color)

    def put_wide(self, x: int, y: int, glyph: str, span: int = 2, fg_color: int = 7):
        """Put a glyph that occupies `span` columns. Dropped if it would be clipped."""
        if x < 0 or x + span > self.width:
            return
        self.put(x, y, glyph, fg_color)
        for i in range(1, span):
            self.put(x + i, y, CONTINUATION, fg_color)

    def present(self) -> str:
        """
        Swap buffers and generate output for changed cells only.

        Continuation cells are never written; the terminal fills them
        when the glyph to their left is drawn.
        """
        output_parts = []
        normal = self._normal
        for y in range(self.height):
            for x in range(self.width):
                back_cell = self.back[y][x]
                front_cell = self.front[y][x]

                if back_cell.matches(front_cell) or back_cell.char == CONTINUATION:
                    continue

                # Position cursor
                output_parts.append(self.term.move_xy(x, y))
                # Reset colors to prevent bleed
                output_parts.append(normal)
                # Apply colors
                if back_cell.bg_color >= 0:
                    output_parts.append(self.term.on_color(back_cell.bg_color))
                output_parts.append(self.term.color(back_cell.fg_color))
                output_parts.append(back_cell.char)

        # Swap: back becomes the new front, old front becomes next back
        self.front, self.back = self.back, self.front

        return ''.join(output_parts)


@dataclass
class GameRenderer:
    """
    High-level renderer: frame bracketing plus text helpers.

    Positions passed in are terminal columns/rows.
    """
    term: Terminal
    shadow_offset: int = 1
    buffer: DoubleBuffer = field(init=False)

    def __post_init__(self):
        self.buffer = DoubleBuffer(self.term, self.term.width, self.term.height)

    @property
    def width(self) -> int:
        return self.buffer.width

    @property
    def height(self) -> int:
        return self.buffer.height

    def begin_frame(self):
        """Begin rendering a new frame."""
        self.buffer.clear_back()

    def end_frame(self) -> str:
        """Finalize frame and return the output for changed cells."""
        return self.buffer.present()

    def resize(self, width: int, height: int):
        """Handle terminal resize. The caller must clear the screen."""
        self.buffer.resize(width, height)

    def put_string(self, x: int, y: int, text: str, fg_color: int = WHITE):
        self.buffer.put_string(x, y, text, fg_color)

    def put_glyph(self, x: int, y: int, glyph: str, span: int = 2):
        self.buffer.put_wide(x, y, glyph, span)

    def put_shadow_string(self, x: int, y: int, text: str,
                          fg_color: int = WHITE, shadow_color: int = GRAY_DARK):
        """Draw text over a dark copy offset down and to the right."""
        offset = self.shadow_offset
        self.buffer.put_string(x + offset, y + offset, text, shadow_color)
        self.buffer.put_string(x, y, text, fg_color)

    def put_centered(self, y: int, text: str, fg_color: int = WHITE,
                     shadow: bool = True):
        """Draw text horizontally centered on row y."""
        x = max(0, self.width // 2 - len(text) // 2)
        if shadow:
            self.put_shadow_string(x, y, text, fg_color)
        else:
            self.put_string(x, y, text, fg_color)

    def draw_hline(self, y: int, color: int = WHITE, char: str = '─'):
        """Draw a full-width horizontal line."""
        self.buffer.put_string(0, y, char * self.width, color)
