"""
Render the retro monitor application icon and encode it as PNG, ICO and ICNS
files using only a built-in PNG writer.
"""

from .artwork import MONITOR_ICON, paint, render_icon
from .canvas import COLORS, LOGICAL_SIZE, Canvas
from .containers import make_icns, make_ico
from .crc import crc32
from .generate import DEFAULT_SIZES, FileSink, generate
from .png import PNG_SIGNATURE, encode_png, make_chunk, read_chunks

__version__ = "0.1.0"

__all__ = [
    "COLORS",
    "DEFAULT_SIZES",
    "LOGICAL_SIZE",
    "MONITOR_ICON",
    "PNG_SIGNATURE",
    "Canvas",
    "FileSink",
    "crc32",
    "encode_png",
    "generate",
    "make_chunk",
    "make_icns",
    "make_ico",
    "paint",
    "read_chunks",
    "render_icon",
]
