import logging
import os
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

from ..models.color_count import ColorCount
from ..models.color_histogram import ColorHistogram
from ..models.image import Image
from ..models.pixel_color import PixelColor
from ..repositories.pixel_repository import PixelRepository

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


class ColorAnalysisService:
    """
    Builds color histograms and derives the summary statistics reported
    by the analyzer (palette, most/least common colors, transparency).
    """

    def __init__(self):
        self.repository = PixelRepository()
        self.least_common_limit = int(os.getenv("LEAST_COMMON_LIMIT", "5"))

    def build_histogram(self, image: Image) -> ColorHistogram:
        """
        Count every pixel of *image* exactly once, keyed by its full RGBA value.

        Args:
            image: Image with (H, W, 4) uint8 RGBA pixels. 0x0 is allowed.

        Returns:
            ColorHistogram whose counts sum to width × height.
        """
        colors, counts = self.repository.count_colors(image.pixels)
        histogram = ColorHistogram(
            counts={
                PixelColor.from_packed(int(packed)): int(count)
                for packed, count in zip(colors, counts)
            },
            total_pixels=image.total_pixels,
        )
        logger.info(
            f"Scanned {image.width}x{image.height} image: "
            f"{histogram.distinct_color_count()} unique colors"
        )
        return histogram

    @staticmethod
    def _as_dict(entry: ColorCount) -> Dict[str, Any]:
        r, g, b, a = entry.color.rgba
        return {
            "hex": entry.hex,
            "rgba": {"r": r, "g": g, "b": b, "a": a},
            "count": entry.count,
            "percentage": entry.percentage,
        }

    def get_color_palette(
        self, histogram: ColorHistogram, max_colors: Optional[int] = None
    ) -> List[Dict[str, Any]]:
        """
        Plain-dict view of the histogram in descending count order,
        suitable for JSON or templating.
        """
        return [self._as_dict(entry) for entry in histogram.top_colors(max_colors)]

    def color_stats(self, histogram: ColorHistogram) -> Dict[str, Any]:
        most_common = histogram.most_common()
        return {
            "total_colors": histogram.distinct_color_count(),
            "total_pixels": histogram.total_pixels,
            "has_transparency": histogram.has_transparency(),
            "most_common_color": self._as_dict(most_common) if most_common else None,
            "least_common_colors": [
                self._as_dict(entry)
                for entry in histogram.least_common(self.least_common_limit)
            ],
        }
