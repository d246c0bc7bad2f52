"""
Generate the application icons: PNGs at several sizes plus icon.ico and
icon.icns built from them.
"""
import argparse
import logging
import sys

from .generate import DEFAULT_SIZES, FileSink, build_bundles, generate


def parse_sizes(value):
    try:
        sizes = [int(s) for s in value.split(',') if s.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid size list: {value!r}") from None
    if not sizes or any(s <= 0 for s in sizes):
        raise argparse.ArgumentTypeError(f"sizes must be positive integers: {value!r}")
    return list(dict.fromkeys(sizes))


def parse_level(value):
    level = int(value)
    if not -1 <= level <= 9:
        raise argparse.ArgumentTypeError(f"compression level must be -1..9, got {level}")
    return level


def build_parser():
    parser = argparse.ArgumentParser(
        prog='retroicon',
        description="Generate the retro monitor application icon")
    parser.add_argument('-o', '--output-dir', default='assets',
                        help="directory for the generated files (default: %(default)s)")
    parser.add_argument('-s', '--sizes', type=parse_sizes, default=list(DEFAULT_SIZES),
                        help="comma separated icon sizes (default: %s)"
                        % ','.join(str(s) for s in DEFAULT_SIZES))
    parser.add_argument('--level', type=parse_level, default=-1,
                        help="zlib compression level, -1 to 9 (default: %(default)s)")
    parser.add_argument('--no-ico', action='store_true', help="do not write icon.ico")
    parser.add_argument('--no-icns', action='store_true', help="do not write icon.icns")
    parser.add_argument('--check', action='store_true',
                        help="decode every PNG with Pillow before writing it")
    parser.add_argument('-v', '--verbose', action='store_true', help="debug output")
    parser.add_argument('-q', '--quiet', action='store_true', help="only report errors")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.ERROR if args.quiet else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    sink = FileSink(args.output_dir, main_size=max(args.sizes))
    result = generate(args.sizes, sink, level=args.level, check=args.check)

    paths = list(sink.paths)
    if result.written:
        paths += build_bundles(args.output_dir, result.written,
                               ico=not args.no_ico, icns=not args.no_icns)

    if not args.quiet:
        for path in paths:
            print(f"✓ Created {path}")

    if not result.ok:
        print(f"✗ Failed sizes: {', '.join(str(s) for s in sorted(result.failed))}",
              file=sys.stderr)
        return 1
    return 0
