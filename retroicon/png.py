"""
Minimal PNG writer: 8-bit RGBA, no interlacing, one IDAT chunk,
filter type 0 on every scanline.
"""
import struct
import zlib

from .crc import crc32

PNG_SIGNATURE = b'\x89PNG\r\n\x1a\n'

COLOR_TYPE_RGBA = 6
BIT_DEPTH = 8


def _chunk_type(chunk_type):
    if isinstance(chunk_type, str):
        try:
            chunk_type = chunk_type.encode('ascii')
        except UnicodeEncodeError:
            raise ValueError(f"Chunk type must be ASCII: {chunk_type!r}") from None
    if len(chunk_type) != 4 or any(b > 0x7F for b in chunk_type):
        raise ValueError(f"Chunk type must be 4 ASCII characters: {chunk_type!r}")
    return bytes(chunk_type)


def make_chunk(chunk_type, data):
    """Frame data as a PNG chunk: length, type, data, CRC of type + data."""
    ct = _chunk_type(chunk_type)
    data = bytes(data)
    return (
        struct.pack('>I', len(data))
        + ct
        + data
        + struct.pack('>I', crc32(data, crc32(ct)))
    )


def ihdr_make(width, height):
    """Build the 13-byte IHDR payload for an 8-bit RGBA image."""
    if width <= 0 or height <= 0:
        raise ValueError(f"Image dimensions must be positive: {width}x{height}")
    # width, height, bit depth, color type, compression, filter, interlace
    return struct.pack('>IIBBBBB', width, height, BIT_DEPTH, COLOR_TYPE_RGBA, 0, 0, 0)


def data_filter(pixels, width, height):
    """Prefix every scanline with filter byte 0 (no filter)."""
    stride = width * 4
    return b''.join(
        b'\x00' + bytes(pixels[stride * y:stride * (y + 1)])
        for y in range(height)
    )


def encode_png(width, height, pixels, level=-1):
    """Encode a width x height RGBA buffer into a complete PNG file."""
    ihdr = ihdr_make(width, height)
    if len(pixels) != width * height * 4:
        raise ValueError(
            f"Pixel buffer has {len(pixels)} bytes, "
            f"expected {width * height * 4} for {width}x{height} RGBA"
        )

    compressed = zlib.compress(data_filter(pixels, width, height), level)

    return b''.join([
        PNG_SIGNATURE,
        make_chunk(b'IHDR', ihdr),
        make_chunk(b'IDAT', compressed),
        make_chunk(b'IEND', b''),
    ])


def read_chunks(data):
    """Split a PNG file into (type, payload) pairs, checking every CRC."""
    data = bytes(data)
    if not data.startswith(PNG_SIGNATURE):
        raise ValueError("Not a PNG file: bad signature")

    chunks = []
    pos = len(PNG_SIGNATURE)
    while pos < len(data):
        if pos + 8 > len(data):
            raise ValueError(f"Truncated chunk header at offset {pos}")
        length, ct = struct.unpack('>I4s', data[pos:pos + 8])
        end = pos + 8 + length
        if end + 4 > len(data):
            raise ValueError(f"Truncated {ct!r} chunk at offset {pos}")
        payload = data[pos + 8:end]
        (crc,) = struct.unpack('>I', data[end:end + 4])
        if crc != crc32(payload, crc32(ct)):
            raise ValueError(f"CRC mismatch in {ct!r} chunk at offset {pos}")
        chunks.append((ct.decode('ascii'), payload))
        pos = end + 4
    return chunks
