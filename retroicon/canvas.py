"""
RGBA pixel canvas with a few drawing primitives. Coordinates passed to the
drawing methods live in a fixed 512x512 logical space and are scaled down
(with floor) to the canvas size.
"""
import math

from .png import encode_png

LOGICAL_SIZE = 512

# Win95 color palette
COLORS = {
    'teal': (0, 128, 128),         # Desktop background
    'navy': (0, 0, 128),           # Title bar
    'white': (255, 255, 255),      # Highlights
    'gray': (192, 192, 192),       # Window background
    'dark_gray': (128, 128, 128),  # Shadows
    'black': (0, 0, 0),            # Text/borders
    'yellow': (255, 255, 0),
    'red': (255, 0, 0),
    'green': (0, 255, 0),
    'blue': (0, 0, 255),
}


class Canvas:
    """A square, initially transparent RGBA bitmap."""

    def __init__(self, size):
        if not isinstance(size, int) or isinstance(size, bool) or size <= 0:
            raise ValueError(f"Canvas size must be a positive integer, got {size!r}")
        self.size = size
        self.scale = size / LOGICAL_SIZE
        self.pixels = bytearray(size * size * 4)

    def __repr__(self):
        return f"Canvas(size={self.size})"

    def scaled(self, v):
        """Map a logical coordinate to a pixel coordinate."""
        return math.floor(v * self.scale)

    def set_pixel(self, x, y, color, alpha=255):
        x = math.floor(x)
        y = math.floor(y)
        if x < 0 or x >= self.size or y < 0 or y >= self.size:
            return
        idx = (y * self.size + x) * 4
        self.pixels[idx:idx + 4] = bytes((color[0], color[1], color[2], alpha))

    def get_pixel(self, x, y):
        if x < 0 or x >= self.size or y < 0 or y >= self.size:
            raise IndexError(f"Pixel ({x}, {y}) outside {self.size}x{self.size} canvas")
        idx = (y * self.size + x) * 4
        return tuple(self.pixels[idx:idx + 4])

    def fill_rect(self, x1, y1, x2, y2, color):
        """Fill the half-open logical rectangle [x1, x2) x [y1, y2)."""
        px1 = max(0, self.scaled(x1))
        py1 = max(0, self.scaled(y1))
        px2 = min(self.size, self.scaled(x2))
        py2 = min(self.size, self.scaled(y2))
        if px1 >= px2 or py1 >= py2:
            return
        row = bytes((color[0], color[1], color[2], 255)) * (px2 - px1)
        for y in range(py1, py2):
            start = (y * self.size + px1) * 4
            self.pixels[start:start + len(row)] = row

    def draw_beveled_rect(self, x1, y1, x2, y2, thickness,
                          light=COLORS['white'], dark=COLORS['dark_gray']):
        """Draw a raised border: light top/left rings, dark bottom/right rings."""
        t = max(1, self.scaled(thickness))
        left, top = self.scaled(x1), self.scaled(y1)
        right, bottom = self.scaled(x2), self.scaled(y2)

        for i in range(t):
            for x in range(left + i, right - i):
                self.set_pixel(x, top + i, light)
            for y in range(top + i, bottom - i):
                self.set_pixel(left + i, y, light)

        for i in range(t):
            for x in range(left + i, right - i):
                self.set_pixel(x, bottom - 1 - i, dark)
            for y in range(top + i, bottom - i):
                self.set_pixel(right - 1 - i, y, dark)

    def to_png(self, level=-1):
        return encode_png(self.size, self.size, self.pixels, level)
