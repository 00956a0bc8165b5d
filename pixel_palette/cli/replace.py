import argparse
import logging
import sys
from typing import List, Optional

from .common import configure_logging, require_file
from ..exceptions import PixelPaletteError
from ..pipeline.color_replacer import preview_replacement, replace_colors

logger = logging.getLogger(__name__)

EPILOG = """\
Color formats supported:
  #RRGGBB (e.g., #ff0000 for red)
  #RGB (e.g., #f00 for red)
  RRGGBB (without # prefix)
  RGB (without # prefix)

Examples:
  pixel-replace image.png '#ff0000' '#0000ff'
  pixel-replace image.png 'ff0000,00ff00' '0000ff,ffff00'
  pixel-replace image.png '#f00,#0f0,#00f' '#000,#fff,#888' --preview
"""


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="pixel-replace",
        description="Replace exact colors in an image and save a modified copy.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    ap.add_argument("file", help="path to the image file")
    ap.add_argument("old_colors", help="comma-separated hex colors to replace")
    ap.add_argument("new_colors", help="comma-separated hex colors to replace with")
    ap.add_argument("--preview", action="store_true",
                    help="show preview of changes without saving")
    ap.add_argument("--output", default=None,
                    help="destination path (default: <name>_color_change<ext>)")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    if not require_file(args.file):
        return 1

    try:
        if args.preview:
            preview_replacement(args.file, args.old_colors, args.new_colors)
            print("Preview mode - no changes saved.")
        else:
            replace_colors(args.file, args.old_colors, args.new_colors,
                           output_path=args.output)
    except PixelPaletteError as err:
        logger.debug("Replacement failed", exc_info=True)
        print(f"Error: {err}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
