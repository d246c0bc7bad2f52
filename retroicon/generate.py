"""
Render the icon at several sizes and hand each encoded PNG to a sink.
"""
import io
import logging
from pathlib import Path

from PIL import Image

from .artwork import MONITOR_ICON, render_icon
from .containers import ICNS_TYPES, make_icns, make_ico

log = logging.getLogger(__name__)

DEFAULT_SIZES = (16, 32, 48, 64, 128, 256, 512)


class GenerateResult:
    def __init__(self):
        self.written = {}
        self.failed = {}

    @property
    def ok(self):
        return not self.failed

    def __repr__(self):
        return f"GenerateResult(written={sorted(self.written)}, failed={sorted(self.failed)})"


def verify_png(data, size):
    """Decode data with Pillow and check it is a size x size RGBA image."""
    try:
        with Image.open(io.BytesIO(data)) as img:
            img.verify()
        # verify() leaves the image unusable, so open it again to decode pixels
        with Image.open(io.BytesIO(data)) as img:
            img.load()
            mode, dims = img.mode, img.size
    except (OSError, SyntaxError) as e:
        raise ValueError(f"{size}x{size} PNG failed to decode: {e}") from e

    if mode != 'RGBA' or dims != (size, size):
        raise ValueError(
            f"Expected {size}x{size} RGBA, decoded {dims[0]}x{dims[1]} {mode}"
        )


class FileSink:
    """Write each PNG as output_dir/icon-<size>.png.

    The main_size image is also written as icon.png.
    """

    def __init__(self, output_dir, name_format='icon-{size}.png', main_size=512):
        self.output_dir = Path(output_dir)
        self.name_format = name_format
        self.main_size = main_size
        self.paths = []

    def __call__(self, size, data):
        self.output_dir.mkdir(parents=True, exist_ok=True)
        names = [self.name_format.format(size=size)]
        if size == self.main_size:
            names.append('icon.png')

        # paths are only recorded once every file for this size is written
        written = []
        for name in names:
            path = self.output_dir / name
            path.write_bytes(data)
            written.append(path)
        for path in written:
            log.info("Created %s", path)
        self.paths.extend(written)


def generate(sizes, sink, level=-1, check=False, script=MONITOR_ICON):
    """Render, encode and deliver one PNG per size.

    A failure for one size is logged and recorded in the result; the
    remaining sizes are still generated.
    """
    result = GenerateResult()
    for size in sizes:
        try:
            log.debug("Rendering %dx%d", size, size)
            data = render_icon(size, script).to_png(level)
            if check:
                verify_png(data, size)
            sink(size, data)
        except Exception as e:
            log.exception("Failed to generate %dx%d icon", size, size)
            result.failed[size] = e
        else:
            result.written[size] = data
    return result


def build_bundles(output_dir, written, ico=True, icns=True):
    """Write icon.ico and icon.icns from the generated PNGs."""
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    images = sorted(written.items())
    paths = []

    if ico:
        ico_images = [(size, data) for size, data in images if size <= 256]
        if ico_images:
            path = output_dir / 'icon.ico'
            path.write_bytes(make_ico(ico_images))
            log.info("Created %s with sizes %s", path, [s for s, _ in ico_images])
            paths.append(path)
        else:
            log.warning("No sizes <= 256 available, skipping icon.ico")

    if icns:
        if any(size in ICNS_TYPES for size, _ in images):
            path = output_dir / 'icon.icns'
            path.write_bytes(make_icns(images))
            log.info("Created %s", path)
            paths.append(path)
        else:
            log.warning("No ICNS-compatible sizes available, skipping icon.icns")

    return paths
