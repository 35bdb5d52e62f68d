# src/hexcolor_namer/cli.py
import argparse
import json
import logging
import sys

from hexcolor_namer.naming import (
    PALETTE_CHOICES,
    PaletteError,
    build_packets,
    get_palette,
    load_palette,
    resolve_name,
)
from hexcolor_namer.utils.load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    DataDirNotFound,
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hexcolor-namer",
        description="Name hex color codes after the closest reference color.",
    )
    parser.add_argument(
        "codes",
        nargs="+",
        help="Hex color codes (e.g. '#1E90FF' F00 000f)",
    )
    parser.add_argument(
        "--name-only",
        action="store_true",
        dest="name_only",
        help="Print one color name per line instead of JSON packets",
    )
    parser.add_argument(
        "--palette",
        choices=PALETTE_CHOICES,
        default="ntc",
        help="Reference palette (default: ntc)",
    )
    parser.add_argument(
        "--palette-file",
        dest="palette_file",
        metavar="NAME",
        help="Load <data>/<NAME>.json ({hex: name}) instead of --palette",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")
    return parser


def main(argv=None):
    """CLI: resolve hex codes to names and print packets (JSON) or names."""
    args = build_parser().parse_args(argv)
    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.palette_file:
            palette = load_palette(args.palette_file)
        else:
            palette = get_palette(args.palette)
    except (
        DataDirNotFound,
        ConfigFileNotFound,
        ConfigParseError,
        ConfigTypeError,
        PaletteError,
    ) as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1

    logger.debug("Using %r for %d code(s)", palette, len(args.codes))
    if args.name_only:
        for code in args.codes:
            print(resolve_name(code, palette))
    else:
        packets = [p.to_dict() for p in build_packets(args.codes, palette)]
        print(json.dumps(packets[0] if len(packets) == 1 else packets, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
