import io
import logging

import pytest
from PIL import Image

from retroicon.generate import (DEFAULT_SIZES, FileSink, build_bundles, generate,
                                verify_png)
from retroicon.png import read_chunks


class MemorySink(dict):
    def __call__(self, size, data):
        self[size] = data


def test_two_sizes_are_independent():
    sink = MemorySink()
    result = generate([16, 512], sink)

    assert result.ok
    assert sorted(sink) == [16, 512]
    assert result.written == sink

    bboxes = {}
    for size, data in sink.items():
        ihdr = read_chunks(data)[0][1]
        assert int.from_bytes(ihdr[:4], 'big') == size
        assert int.from_bytes(ihdr[4:8], 'big') == size
        with Image.open(io.BytesIO(data)) as img:
            img.load()
            assert img.size == (size, size)
            bboxes[size] = img.getchannel('A').getbbox()

    assert bboxes == {16: (1, 1, 14, 13), 512: (56, 40, 456, 440)}


def test_output_matches_single_size_run():
    together = MemorySink()
    generate([512, 16], together)
    alone = MemorySink()
    generate([16], alone)
    assert together[16] == alone[16]


def test_failure_is_isolated(caplog):
    written = MemorySink()

    def sink(size, data):
        if size == 32:
            raise OSError("disk full")
        written(size, data)

    with caplog.at_level(logging.ERROR, logger='retroicon.generate'):
        result = generate([16, 32, 48], sink)

    assert not result.ok
    assert sorted(result.written) == [16, 48]
    assert sorted(written) == [16, 48]
    assert isinstance(result.failed[32], OSError)
    assert "Failed to generate 32x32 icon" in caplog.text


def test_invalid_size_is_isolated():
    result = generate([0, 16], MemorySink())
    assert sorted(result.written) == [16]
    assert isinstance(result.failed[0], ValueError)


def test_check_decodes_with_pillow():
    result = generate([16, 64], MemorySink(), check=True)
    assert result.ok


def test_verify_png_rejects_wrong_size():
    data = generate([16], MemorySink()).written[16]
    with pytest.raises(ValueError, match='Expected 32x32'):
        verify_png(data, 32)


def test_verify_png_rejects_garbage():
    with pytest.raises(ValueError):
        verify_png(b'not a png', 16)


def test_file_sink(tmp_path):
    sink = FileSink(tmp_path / 'assets', main_size=32)
    result = generate([16, 32], sink)

    out = tmp_path / 'assets'
    assert result.ok
    assert sorted(p.name for p in out.iterdir()) == ['icon-16.png', 'icon-32.png', 'icon.png']
    assert (out / 'icon.png').read_bytes() == (out / 'icon-32.png').read_bytes()
    assert len(sink.paths) == 3


def test_build_bundles(tmp_path):
    written = generate(DEFAULT_SIZES, MemorySink()).written
    paths = build_bundles(tmp_path, written)

    assert [p.name for p in paths] == ['icon.ico', 'icon.icns']
    with Image.open(tmp_path / 'icon.ico') as img:
        assert set(img.ico.sizes()) == {(s, s) for s in DEFAULT_SIZES if s <= 256}
    assert (tmp_path / 'icon.icns').read_bytes()[:4] == b'icns'


def test_build_bundles_skips_unusable_sizes(tmp_path, caplog):
    written = generate([48], MemorySink()).written
    with caplog.at_level(logging.WARNING, logger='retroicon.generate'):
        paths = build_bundles(tmp_path, written)

    assert [p.name for p in paths] == ['icon.ico']
    assert "skipping icon.icns" in caplog.text


def test_file_sink_records_nothing_when_a_write_fails(tmp_path):
    # a directory in the way makes the second file for size 32 unwritable
    (tmp_path / 'icon.png').mkdir()
    sink = FileSink(tmp_path, main_size=32)
    result = generate([16, 32], sink)

    assert sorted(result.written) == [16]
    assert isinstance(result.failed[32], OSError)
    assert [p.name for p in sink.paths] == ['icon-16.png']
