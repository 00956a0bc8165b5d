import logging
import os
from pathlib import Path
from typing import List, Sequence, Union

from dotenv import load_dotenv

from ..models.color_count import percentage_of
from ..models.image import Image
from ..models.pixel_color import PixelColor
from ..models.replacement import ReplacementPreview, ReplacementResult, ReplacementSpec
from ..repositories.pixel_repository import PixelRepository

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


class ColorReplacementService:
    """
    Exact-match color find & replace over RGBA images.

    The service holds no per-run state: every call gets its own counters,
    and source images are never modified.
    """

    def __init__(self):
        self.repository = PixelRepository()
        self.output_suffix = os.getenv("COLOR_CHANGE_SUFFIX", "_color_change")

    @staticmethod
    def build_spec(
        old_colors: Sequence[PixelColor], new_colors: Sequence[PixelColor]
    ) -> ReplacementSpec:
        """Raises ReplacementSpecMismatch when the lists differ in length."""
        return ReplacementSpec.from_colors(old_colors, new_colors)

    def preview(self, image: Image, spec: ReplacementSpec) -> List[ReplacementPreview]:
        """
        Count, for every rule in order, the pixels it would match.
        Each rule is counted on its own, so a repeated old color reports
        the same count twice. Nothing is written.
        """
        counts = self.repository.count_matches(
            image.pixels, [old.packed for old, _ in spec.pairs]
        )
        return [
            ReplacementPreview(
                old_color=old,
                new_color=new,
                match_count=count,
                percentage=percentage_of(count, image.total_pixels),
            )
            for (old, new), count in zip(spec.pairs, counts)
        ]

    def apply(self, image: Image, spec: ReplacementSpec) -> ReplacementResult:
        """
        Produce a new Image where every pixel matching an old color carries
        its paired new color.

        Args:
            image: source Image, left untouched.
            spec: ordered rules; for a repeated old color the first rule wins.

        Returns:
            ReplacementResult with the new Image (same path as the source,
            callers pick the destination) and the number of rewritten pixels.
        """
        table = [(old.packed, new.packed) for old, new in spec.lookup().items()]
        new_pixels, replaced = self.repository.replace(image.pixels, table)

        logger.info(f"Replaced {replaced} of {image.total_pixels} pixels using {len(table)} rule(s)")
        return ReplacementResult(
            image=Image(pixels=new_pixels, path=image.path),
            replacement_count=replaced,
        )

    def output_path_for(self, path: Union[str, Path]) -> Path:
        """'dir/name.png' → 'dir/name_color_change.png'"""
        path = Path(path)
        return path.with_name(f"{path.stem}{self.output_suffix}{path.suffix}")
