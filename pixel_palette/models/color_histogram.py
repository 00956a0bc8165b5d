from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .color_count import ColorCount, percentage_of
from .pixel_color import PixelColor


@dataclass
class ColorHistogram:
    """
    Data object: occurrence count of every distinct RGBA color of one image.

    `counts` keeps insertion order == first-seen order of a row-major scan,
    which is what breaks ties between equally frequent colors. Built once by
    ColorAnalysisService, read-only afterwards.
    """
    counts: Dict[PixelColor, int] = field(default_factory=dict)
    total_pixels: int = 0

    # ── Direct accessors ─────────────────────────────────────────────
    def distinct_color_count(self) -> int:
        return len(self.counts)

    def count_of(self, color: PixelColor) -> int:
        return self.counts.get(color, 0)

    def has_transparency(self) -> bool:
        return any(color.is_transparent for color in self.counts)

    def entry(self, color: PixelColor) -> ColorCount:
        count = self.count_of(color)
        return ColorCount(color, count, percentage_of(count, self.total_pixels))

    # ── Ranked queries ───────────────────────────────────────────────
    def _ranked(self, descending: bool) -> List[ColorCount]:
        # sorted() is stable, so equal counts keep first-seen order
        sign = -1 if descending else 1
        ranked = sorted(self.counts.items(), key=lambda item: sign * item[1])
        return [
            ColorCount(color, count, percentage_of(count, self.total_pixels))
            for color, count in ranked
        ]

    def top_colors(self, n: Optional[int] = None) -> List[ColorCount]:
        """
        Colors by descending count. `n=None` (or any n above the distinct
        color count) returns every color.
        """
        ranked = self._ranked(descending=True)
        return ranked if n is None else ranked[:max(n, 0)]

    def least_common(self, n: int = 5) -> List[ColorCount]:
        return self._ranked(descending=False)[:max(n, 0)]

    def most_common(self) -> ColorCount | None:
        if not self.counts:
            return None
        # max() returns the first maximal item, i.e. the earliest seen one
        color, count = max(self.counts.items(), key=lambda item: item[1])
        return ColorCount(color, count, percentage_of(count, self.total_pixels))

    # ── Reduction ────────────────────────────────────────────────────
    def merge(self, other: "ColorHistogram") -> "ColorHistogram":
        """
        Combine two partial histograms (e.g. of disjoint row ranges, `self`
        covering the earlier rows). Counts are summed per color; colors only
        present in `other` are appended after those of `self`.
        """
        merged = dict(self.counts)
        for color, count in other.counts.items():
            merged[color] = merged.get(color, 0) + count
        return ColorHistogram(counts=merged, total_pixels=self.total_pixels + other.total_pixels)
