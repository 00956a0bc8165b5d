import argparse
import logging
import sys
from typing import List, Optional

from .common import configure_logging, require_file
from ..exceptions import PixelPaletteError
from ..pipeline.color_analyzer import TOP_COLORS_LIMIT, analyze_image

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="pixel-analyze",
        description="Count the colors of an image and report the most common ones.",
    )
    ap.add_argument("file", help="path to the image file")
    ap.add_argument("--all", action="store_true", dest="show_all",
                    help="show all colors (default: top N)")
    ap.add_argument("--csv", nargs="?", const="", default=None, metavar="PATH",
                    help="export colors to CSV (default path: COLORS_CSV_PATH or colors.csv)")
    ap.add_argument("--limit", type=int, default=TOP_COLORS_LIMIT,
                    help=f"show top N colors (default: {TOP_COLORS_LIMIT})")
    ap.add_argument("--stats", action="store_true", help="show detailed statistics")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    if not require_file(args.file):
        return 1

    try:
        analyze_image(
            args.file,
            limit=args.limit,
            show_all=args.show_all,
            show_stats=args.stats,
            export_csv=args.csv is not None,
            csv_path=args.csv or None,
        )
    except (PixelPaletteError, OSError) as err:  # OSError: CSV destination
        logger.debug("Analysis failed", exc_info=True)
        print(f"Error: {err}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
