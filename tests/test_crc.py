import zlib

import pytest

from retroicon.crc import crc32, crc_table


def test_empty():
    assert crc32(b'') == 0


def test_abc_reference_value():
    assert crc32(b'abc') == 0x352441C2


def test_table():
    table = crc_table()
    assert len(table) == 256
    assert table[0] == 0
    assert table[1] == 0x77073096
    assert table[255] == 0x2D02EF8D
    assert crc_table() is table


@pytest.mark.parametrize('data', [
    b'\x00',
    b'IEND',
    b'123456789',
    bytes(range(256)) * 3,
    b'The quick brown fox jumps over the lazy dog',
])
def test_matches_zlib(data):
    assert crc32(data) == zlib.crc32(data)


def test_running_crc():
    assert crc32(b'world', crc32(b'hello ')) == crc32(b'hello world')
