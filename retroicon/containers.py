"""
Icon bundle formats that embed the PNG images directly: Windows ICO and
Apple ICNS.
"""
import logging
import struct

log = logging.getLogger(__name__)

ICO_HEADER_SIZE = 6
ICO_ENTRY_SIZE = 16

# ICNS types that hold PNG data, keyed by pixel size
ICNS_TYPES = {
    16: b'icp4',
    32: b'icp5',
    64: b'icp6',
    128: b'ic07',
    256: b'ic08',
    512: b'ic09',
}


def make_ico(images):
    """Create an ICO file from (size, png_bytes) pairs."""
    images = list(images)
    if not images:
        raise ValueError("ICO needs at least one image")

    # Reserved, Type (1=icon), Count
    ico_data = struct.pack('<HHH', 0, 1, len(images))

    offset = ICO_HEADER_SIZE + ICO_ENTRY_SIZE * len(images)
    for size, png_data in images:
        if not 0 < size <= 256:
            raise ValueError(f"ICO images must be 1..256 pixels, got {size}")
        # Width, Height, ColorCount, Reserved, Planes, BitCount, Size, Offset
        w = size if size < 256 else 0
        ico_data += struct.pack('<BBBBHHII', w, w, 0, 0, 1, 32, len(png_data), offset)
        offset += len(png_data)

    for _, png_data in images:
        ico_data += png_data

    return ico_data


def make_icns(images):
    """Create an ICNS file from (size, png_bytes) pairs."""
    body = b''
    count = 0
    for size, png_data in sorted(images, key=lambda item: item[0]):
        icns_type = ICNS_TYPES.get(size)
        if icns_type is None:
            log.debug("No ICNS type for %dx%d, skipping", size, size)
            continue
        body += icns_type + struct.pack('>I', 8 + len(png_data)) + png_data
        count += 1

    if not count:
        raise ValueError("None of the image sizes can be stored in ICNS")

    return b'icns' + struct.pack('>I', 8 + len(body)) + body
