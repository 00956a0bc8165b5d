from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Sequence, Tuple

from ..exceptions import ReplacementSpecMismatch
from .image import Image
from .pixel_color import PixelColor


@dataclass(frozen=True)
class ReplacementSpec:
    """
    Ordered (old color → new color) substitution rules.
    Duplicate old colors are tolerated; the first rule for a color wins.
    """
    pairs: Tuple[Tuple[PixelColor, PixelColor], ...]

    @classmethod
    def from_colors(
        cls,
        old_colors: Sequence[PixelColor],
        new_colors: Sequence[PixelColor],
    ) -> "ReplacementSpec":
        if len(old_colors) != len(new_colors):
            raise ReplacementSpecMismatch(len(old_colors), len(new_colors))
        return cls(pairs=tuple(zip(old_colors, new_colors)))

    def lookup(self) -> Dict[PixelColor, PixelColor]:
        """old → new mapping, keeping the first rule for a repeated old color."""
        table: Dict[PixelColor, PixelColor] = {}
        for old, new in self.pairs:
            table.setdefault(old, new)
        return table

    def __len__(self) -> int:
        return len(self.pairs)


@dataclass(frozen=True)
class ReplacementPreview:
    """How many pixels one rule would rewrite, without rewriting them."""
    old_color: PixelColor
    new_color: PixelColor
    match_count: int
    percentage: float


@dataclass
class ReplacementResult:
    """
    Data object returned by an apply run: the *new* image and the number of
    pixels that were rewritten in it.
    """
    image: Image
    replacement_count: int
