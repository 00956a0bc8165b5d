# pipeline/color_analyzer.py
from pathlib import Path
import os
from typing import Optional

from dotenv import load_dotenv

from ..models.color_histogram import ColorHistogram
from ..services.color_analysis_service import ColorAnalysisService
from ..services.color_report_service import ColorReportService
from ..services.image_service import ImageService

# env‑vars
load_dotenv()
TOP_COLORS_LIMIT = int(os.getenv("TOP_COLORS_LIMIT", "10"))


def analyze_image(
    path: str | Path,
    *,
    limit: int = TOP_COLORS_LIMIT,
    show_all: bool = False,
    show_stats: bool = False,
    csv_path: Optional[str | Path] = None,
    export_csv: bool = False,
    image_service: Optional[ImageService] = None,
    analysis_service: Optional[ColorAnalysisService] = None,
    report_service: Optional[ColorReportService] = None,
) -> ColorHistogram:
    """
    Load the image at *path* and print its color breakdown:
        • header with dimensions and unique color count
        • top *limit* colors, or every color with *show_all*
        • detailed statistics with *show_stats*
        • CSV export with *export_csv* (to *csv_path* or COLORS_CSV_PATH)
    Returns the histogram so callers can keep querying it.
    """
    image_service = image_service or ImageService()
    analysis_service = analysis_service or ColorAnalysisService()
    report_service = report_service or ColorReportService()

    image = image_service.load(path)
    histogram = analysis_service.build_histogram(image)

    width, height = image_service.get_image_dimensions(image)
    lines = report_service.format_header(path, histogram, width, height)
    if show_all:
        lines += report_service.format_all(histogram)
    else:
        lines += report_service.format_summary(histogram, limit)

    if show_stats:
        lines += report_service.format_stats(analysis_service.color_stats(histogram))

    print("\n".join(lines))

    if export_csv:
        written = report_service.export_csv(histogram, csv_path)
        print(f"Colors exported to {written}")

    return histogram
