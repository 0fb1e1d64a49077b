#
# PROJECT: sphere-cli-raycaster
# MODULE: sphere_cli_raycaster/display.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import curses

from .color import BACKGROUND, MONO_GLYPHS
from .errors import TerminalSizeError
from .picture import Picture

# Lines/columns taken by the window box around the picture
BORDER = 2


def check_size(stdscr, height: int, width: int):
    """Raise TerminalSizeError unless the terminal has at least height x width cells."""
    lines, cols = stdscr.getmaxyx()
    if cols < width or lines < height:
        raise TerminalSizeError((height, width), (lines, cols))


def picture_size(height: int, width: int):
    """Picture dimensions that fit inside a bordered window of height x width."""
    return height - BORDER, width - BORDER


def cell_char(color: int, use_glyphs: bool) -> str:
    """Character drawn for a sphere cell: a blank on a colored pair, or a glyph."""
    if not use_glyphs:
        return ' '
    return MONO_GLYPHS[(color - 1) % len(MONO_GLYPHS)]


def draw_picture(window, picture: Picture, attrs, use_glyphs: bool = False):
    """
    Blit a picture into a curses window.

    Background cells are skipped.  Picture row 0 is the bottom line of the
    window.  Colors without a registered attribute fall back to a glyph on
    the default attribute.
    """
    height = picture.height
    for i, row in enumerate(picture.rows()):
        y = height - 1 - i
        for x, color in enumerate(row):
            if color == BACKGROUND:
                continue
            attr = attrs.get(color)
            char = cell_char(color, use_glyphs or attr is None)
            try:
                window.addstr(y, x, char, attr or 0)
            except curses.error:
                # Writing the bottom-right cell moves the cursor off-window
                pass
