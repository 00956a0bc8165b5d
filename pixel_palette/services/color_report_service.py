import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Union

import pandas as pd
from dotenv import load_dotenv

from ..models.color_count import ColorCount
from ..models.color_histogram import ColorHistogram
from ..models.replacement import ReplacementPreview, ReplacementSpec
from .color_codec_service import ColorCodecService

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

CSV_COLUMNS = ["Rank", "Hex", "Red", "Green", "Blue", "Alpha", "PixelCount", "Percentage"]
RULE = "-" * 50


class ColorReportService:
    """
    Presentation of analysis / replacement results: console text and CSV.
    Builds strings and files only, never touches pixels.
    """

    def __init__(self):
        self.csv_path = Path(os.getenv("COLORS_CSV_PATH", "colors.csv"))

    # ── Console text ────────────────────────────────────────────────
    @staticmethod
    def format_color_line(rank: int, entry: ColorCount) -> str:
        r, g, b, a = entry.color.rgba
        return (f"{rank}. {entry.hex} (RGBA: {r},{g},{b},{a}) - "
                f"{entry.count} pixels ({entry.percentage}%)")

    def format_header(self, path: Union[str, Path], histogram: ColorHistogram, width: int, height: int) -> List[str]:
        return [
            f"Analyzing PNG: {path}",
            f"Dimensions: {width}x{height}",
            f"Total pixels: {histogram.total_pixels}",
            RULE,
            f"Found {histogram.distinct_color_count()} unique colors",
            "",
        ]

    def format_summary(self, histogram: ColorHistogram, limit: int) -> List[str]:
        lines = [f"Top {limit} most common colors:", RULE]
        lines += [
            self.format_color_line(rank, entry)
            for rank, entry in enumerate(histogram.top_colors(limit), 1)
        ]
        return lines

    def format_all(self, histogram: ColorHistogram) -> List[str]:
        lines = ["All colors found:", RULE]
        lines += [
            self.format_color_line(rank, entry)
            for rank, entry in enumerate(histogram.top_colors(), 1)
        ]
        return lines

    @staticmethod
    def format_stats(stats: Dict[str, Any]) -> List[str]:
        lines = [
            "",
            "Detailed Statistics:",
            RULE,
            f"Total unique colors: {stats['total_colors']}",
            f"Total pixels: {stats['total_pixels']}",
            f"Has transparency: {str(stats['has_transparency']).lower()}",
        ]
        most_common = stats["most_common_color"]
        if most_common:
            lines.append(
                f"Most common color: {most_common['hex']} "
                f"({most_common['count']} pixels, {most_common['percentage']}%)"
            )
        return lines

    @staticmethod
    def format_spec(spec: ReplacementSpec) -> List[str]:
        lines = ["Color replacements to be made:"]
        for old, new in spec.lookup().items():
            lines.append(f"  {ColorCodecService.to_hex(old)} → {ColorCodecService.to_hex(new)}")
        lines.append("")
        return lines

    @staticmethod
    def format_preview(previews: List[ReplacementPreview]) -> List[str]:
        lines = ["Preview of changes:", RULE]
        for item in previews:
            lines.append(
                f"{ColorCodecService.to_hex(item.old_color)} → "
                f"{ColorCodecService.to_hex(item.new_color)}: "
                f"{item.match_count} pixels ({item.percentage}%)"
            )
        lines.append("")
        return lines

    # ── CSV ─────────────────────────────────────────────────────────
    @staticmethod
    def to_dataframe(histogram: ColorHistogram) -> pd.DataFrame:
        rows = [
            [rank, entry.hex, *entry.color.rgba, entry.count, entry.percentage]
            for rank, entry in enumerate(histogram.top_colors(), 1)
        ]
        return pd.DataFrame(rows, columns=CSV_COLUMNS)

    def export_csv(self, histogram: ColorHistogram, path: Union[str, Path, None] = None) -> Path:
        """
        Write one row per color, most common first, and return the path used.
        """
        path = Path(path) if path is not None else self.csv_path
        self.to_dataframe(histogram).to_csv(path, index=False)
        logger.info(f"Exported {histogram.distinct_color_count()} colors to {path}")
        return path
