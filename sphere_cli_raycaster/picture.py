#
# PROJECT: sphere-cli-raycaster
# MODULE: sphere_cli_raycaster/picture.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

from .color import BACKGROUND


class Picture:
    """
    Rectangular grid of color indices produced by one render pass.

    Pixels are stored row-major in a flat list of height * width ints;
    BACKGROUND (0) marks a cell no sphere covers.  The buffer is allocated
    once and overwritten every frame, never resized.
    """
    __slots__ = ['height', 'width', 'pixels']

    def __init__(self, height: int, width: int):
        if height <= 0 or width <= 0:
            raise ValueError(f"picture size must be positive, got {height}x{width}")
        self.height, self.width = height, width
        self.pixels = [BACKGROUND] * (height * width)

    def __repr__(self):
        return f"Picture({self.height}x{self.width})"

    def get(self, i: int, j: int) -> int:
        return self.pixels[i * self.width + j]

    def set(self, i: int, j: int, color: int):
        self.pixels[i * self.width + j] = color

    def clear(self):
        self.pixels[:] = [BACKGROUND] * (self.height * self.width)

    def rows(self):
        """Yield each row as a list, row 0 first."""
        w = self.width
        for i in range(self.height):
            yield self.pixels[i * w:(i + 1) * w]
