import argparse
import logging
import sys

from asciisheet.batch import convert_folder
from asciisheet.config import (
    DEFAULT_CELL_HEIGHT,
    DEFAULT_CELL_WIDTH,
    DEFAULT_SCALE,
    DEFAULT_SHEET_NAME,
    RenderConfig,
)
from asciisheet.glyphs import DEFAULT_GLYPHS, DEFAULT_WEIGHTS


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render a folder of images as ASCII art Excel sheets")
    parser.add_argument("-i", "--input", default="image", help="Folder of input images (default: image)")
    parser.add_argument(
        "-o", "--output", default="ascii_excel", help="Folder for the .xlsx files, created if missing (default: ascii_excel)"
    )
    parser.add_argument(
        "--chars", default=DEFAULT_GLYPHS, help=f"Glyphs ordered dark to light (default: {DEFAULT_GLYPHS})"
    )
    parser.add_argument(
        "--weights",
        default=",".join(f"{w:g}" for w in DEFAULT_WEIGHTS),
        help="Comma-separated repeat weight per glyph (default: 13,8,5,3,2,1,0.5,0.2,0.1)",
    )
    parser.add_argument("--sheet", default=DEFAULT_SHEET_NAME, help=f"Sheet name (default: {DEFAULT_SHEET_NAME})")
    parser.add_argument(
        "-s",
        "--scale",
        type=float,
        default=DEFAULT_SCALE,
        help="Resize factor applied before conversion (default: 1/3). Keep resized widths within 702 columns.",
    )
    parser.add_argument(
        "--width", type=float, default=DEFAULT_CELL_WIDTH, help="Cell width in pixels (default: 36)"
    )
    parser.add_argument(
        "--height", type=float, default=DEFAULT_CELL_HEIGHT, help="Cell height in pixels (default: 15)"
    )
    parser.add_argument("-w", "--workers", type=int, default=None, help="Row worker threads (default: automatic)")
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Enable debug logging")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(levelname)s: %(message)s")

    try:
        config = RenderConfig.from_strings(
            args.chars,
            args.weights,
            sheet_name=args.sheet,
            scale=args.scale,
            cell_width=args.width,
            cell_height=args.height,
            workers=args.workers,
        )
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        convert_folder(args.input, args.output, config)
    except FileNotFoundError as e:
        print(e, file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
