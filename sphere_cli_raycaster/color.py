#
# PROJECT: sphere-cli-raycaster
# MODULE: sphere_cli_raycaster/color.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import curses
import logging

from .errors import NoColorSupportError

logger = logging.getLogger(__name__)

# Color index 0 is reserved: "no sphere here".  Spheres use 1..N and the
# display never draws a background cell.
BACKGROUND = 0

# Default sphere colors for index 1..7
DEFAULT_COLORS = [
    curses.COLOR_RED,
    curses.COLOR_BLUE,
    curses.COLOR_GREEN,
    curses.COLOR_YELLOW,
    curses.COLOR_MAGENTA,
    curses.COLOR_CYAN,
    curses.COLOR_WHITE,
]

# Glyphs used per color index when drawing without color
MONO_GLYPHS = "@#%*+=o"

def parse_hex_color(hex_str):
    """
    Parse a hex color string to an (r, g, b) tuple.
    Accepts: '#RRGGBB' or 'RRGGBB' (case-insensitive).
    Returns: (r, g, b) tuple with values 0-255, or None on failure.
    """
    if hex_str is None:
        return None
    val = str(hex_str).strip().lstrip('#')
    if len(val) != 6:
        return None
    try:
        r = int(val[0:2], 16)
        g = int(val[2:4], 16)
        b = int(val[4:6], 16)
        return (r, g, b)
    except ValueError:
        return None

def parse_palette(text):
    """
    Parse a comma separated list of hex colors ('#FF0000,#0000FF').
    Raises ValueError naming the first entry that is not a color.
    """
    palette = []
    for item in str(text).split(','):
        item = item.strip()
        if not item:
            continue
        rgb = parse_hex_color(item)
        if rgb is None:
            raise ValueError(f"not a #RRGGBB color: {item!r}")
        palette.append(rgb)
    if not palette:
        raise ValueError("palette is empty")
    return palette

# --- xterm-256 lookup ---

# The 6x6x6 color cube occupies indices 16-231.
# Each axis has values: 0, 95, 135, 175, 215, 255
_CUBE_VALUES = [0, 95, 135, 175, 215, 255]

# ANSI 0-7 approximate RGB values
_ANSI8 = [
    (0, 0, 0),       # 0  black
    (128, 0, 0),     # 1  red
    (0, 128, 0),     # 2  green
    (128, 128, 0),   # 3  yellow
    (0, 0, 128),     # 4  blue
    (128, 0, 128),   # 5  magenta
    (0, 128, 128),   # 6  cyan
    (192, 192, 192), # 7  white
]

def _rgb_to_nearest_xterm(r, g, b):
    """Find the nearest xterm-256 index for an (r, g, b) color.
    Searches the 6x6x6 cube and the grayscale ramp for best match."""

    def _nearest_cube_val(v):
        best_i = 0
        best_d = abs(v - _CUBE_VALUES[0])
        for i in range(1, 6):
            d = abs(v - _CUBE_VALUES[i])
            if d < best_d:
                best_d = d
                best_i = i
        return best_i

    ri = _nearest_cube_val(r)
    gi = _nearest_cube_val(g)
    bi = _nearest_cube_val(b)
    cube_idx = 16 + ri * 36 + gi * 6 + bi
    cr, cg, cb = _CUBE_VALUES[ri], _CUBE_VALUES[gi], _CUBE_VALUES[bi]
    cube_dist = (r - cr) ** 2 + (g - cg) ** 2 + (b - cb) ** 2

    # Grayscale ramp 232-255: 8, 18, ..., 238
    gray_avg = (r + g + b) // 3
    gray_step = max(0, min(23, (gray_avg - 8 + 5) // 10))
    gray_idx = 232 + gray_step
    gv = 8 + gray_step * 10
    gray_dist = (r - gv) ** 2 + (g - gv) ** 2 + (b - gv) ** 2

    return gray_idx if gray_dist < cube_dist else cube_idx

def _rgb_to_nearest_ansi8(r, g, b):
    """Find the nearest basic ANSI color index (0-7) for an (r, g, b) color."""
    best_idx = 0
    best_dist = (r - _ANSI8[0][0]) ** 2 + (g - _ANSI8[0][1]) ** 2 + (b - _ANSI8[0][2]) ** 2
    for i in range(1, 8):
        ar, ag, ab = _ANSI8[i]
        d = (r - ar) ** 2 + (g - ag) ** 2 + (b - ab) ** 2
        if d < best_dist:
            best_dist = d
            best_idx = i
    return best_idx

def resolve_palette(palette, num_colors):
    """
    Turn an optional list of (r, g, b) tuples into curses color numbers,
    one per sphere color index starting at 1.

    Without a palette the DEFAULT_COLORS are used.  With 256+ colors each
    entry maps to the nearest xterm-256 index, otherwise to ANSI 0-7.
    """
    if not palette:
        return list(DEFAULT_COLORS)
    if num_colors >= 256:
        return [_rgb_to_nearest_xterm(r, g, b) for r, g, b in palette]
    return [_rgb_to_nearest_ansi8(r, g, b) for r, g, b in palette]

def init_colors(palette=None, use_color=True):
    """
    Register one curses color pair per sphere color index.

    Each pair uses the same color for foreground and background so a blank
    cell prints as a solid block.  Call once after curses.wrapper init.
    Returns {color_index: curses attribute}; empty in monochrome mode.
    Raises NoColorSupportError when color is requested but unavailable.
    """
    if not use_color:
        return {}

    if not curses.has_colors():
        raise NoColorSupportError("No color support for this terminal.")

    curses.start_color()

    num_colors = getattr(curses, 'COLORS', 8)
    max_pairs = getattr(curses, 'COLOR_PAIRS', 64)
    slots = resolve_palette(palette, num_colors)

    attrs = {}
    for color_idx, slot in enumerate(slots, start=1):
        if color_idx >= max_pairs:
            logger.warning("terminal has %d color pairs, dropping color %d and up",
                           max_pairs, color_idx)
            break
        try:
            curses.init_pair(color_idx, slot, slot)
        except curses.error:
            logger.warning("could not register color pair %d (color %d)", color_idx, slot)
            continue
        attrs[color_idx] = curses.color_pair(color_idx)

    logger.debug("registered %d color pairs (%d terminal colors)", len(attrs), num_colors)
    return attrs
