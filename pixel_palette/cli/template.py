import argparse
import sys
from typing import List, Optional

from .common import configure_logging
from ..exceptions import PixelPaletteError
from ..pipeline.template_builder import TEMPLATE_OUTPUT_PATH, build_template


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="pixel-template",
        description="Create a blank sprite template of alternating green/red tiles.",
    )
    ap.add_argument("file_width", type=int)
    ap.add_argument("file_height", type=int)
    ap.add_argument("tile_width", type=int)
    ap.add_argument("tile_height", type=int)
    ap.add_argument("--output", default=TEMPLATE_OUTPUT_PATH,
                    help=f"destination path (default: {TEMPLATE_OUTPUT_PATH})")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        build_template(args.file_width, args.file_height, args.tile_width, args.tile_height,
                       output_path=args.output)
    except PixelPaletteError as err:
        print(f"Error: {err}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
