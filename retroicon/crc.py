"""CRC-32 as used by PNG chunks (ISO-3309 / ITU-T V.42)."""

_POLY = 0xEDB88320
_table = None


def crc_table():
    """Return the 256-entry lookup table, building it on first use."""
    global _table
    if _table is None:
        table = []
        for n in range(256):
            c = n
            for _ in range(8):
                c = (_POLY ^ (c >> 1)) if c & 1 else (c >> 1)
            table.append(c)
        _table = tuple(table)
    return _table


def crc32(data, crc=0):
    """Compute the CRC-32 of data, continuing from a previous crc value."""
    table = crc_table()
    c = crc ^ 0xFFFFFFFF
    for byte in data:
        c = table[(c ^ byte) & 0xFF] ^ (c >> 8)
    return c ^ 0xFFFFFFFF
