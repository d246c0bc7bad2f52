"""
The monitor icon, expressed as an ordered list of drawing commands in the
512x512 logical space.
"""
from collections import namedtuple

from .canvas import COLORS, Canvas


class Rect(namedtuple('Rect', 'x1 y1 x2 y2 color')):
    __slots__ = ()

    def apply(self, canvas):
        canvas.fill_rect(self.x1, self.y1, self.x2, self.y2, self.color)


class Bevel(namedtuple('Bevel', 'x1 y1 x2 y2 thickness')):
    __slots__ = ()

    def apply(self, canvas):
        canvas.draw_beveled_rect(self.x1, self.y1, self.x2, self.y2, self.thickness)


MONITOR_ICON = (
    # Monitor body
    Rect(56, 40, 456, 360, COLORS['gray']),
    Bevel(56, 40, 456, 360, 8),

    # Screen bezel
    Rect(80, 64, 432, 320, COLORS['dark_gray']),

    # Screen (teal desktop)
    Rect(96, 80, 416, 304, COLORS['teal']),

    # Mini window: frame, title bar, title text, close box, client area
    Rect(120, 100, 320, 240, COLORS['gray']),
    Rect(120, 100, 320, 130, COLORS['navy']),
    Rect(130, 108, 200, 122, COLORS['white']),
    Rect(296, 104, 314, 126, COLORS['gray']),
    Rect(124, 134, 316, 236, COLORS['white']),

    # Text lines in window
    Rect(132, 145, 280, 155, COLORS['black']),
    Rect(132, 165, 260, 175, COLORS['black']),
    Rect(132, 185, 290, 195, COLORS['black']),
    Rect(132, 205, 240, 215, COLORS['black']),

    # Taskbar and start button
    Rect(96, 280, 416, 304, COLORS['gray']),
    Rect(100, 284, 160, 300, COLORS['gray']),

    # Logo quadrants
    Rect(104, 288, 112, 294, COLORS['red']),
    Rect(114, 288, 122, 294, COLORS['green']),
    Rect(104, 294, 112, 300, COLORS['blue']),
    Rect(114, 294, 122, 300, COLORS['yellow']),

    # Stand
    Rect(180, 360, 332, 400, COLORS['gray']),
    Bevel(180, 360, 332, 400, 4),

    # Base
    Rect(120, 400, 392, 440, COLORS['gray']),
    Bevel(120, 400, 392, 440, 6),

    # Power LED
    Rect(400, 330, 420, 345, COLORS['green']),
)


def paint(canvas, script=MONITOR_ICON):
    """Apply each drawing command of script to canvas, in order."""
    for command in script:
        command.apply(canvas)
    return canvas


def render_icon(size, script=MONITOR_ICON):
    """Draw script on a fresh size x size canvas."""
    return paint(Canvas(size), script)
