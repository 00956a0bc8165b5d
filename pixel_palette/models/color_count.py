from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from .pixel_color import PixelColor


@dataclass(frozen=True)
class ColorCount:
    """
    Data object for one histogram entry: a color, how many pixels carry it,
    and its share of the image (0-100, two decimals).
    """
    color: PixelColor
    count: int
    percentage: float

    @property
    def hex(self) -> str:
        return "#%02x%02x%02x" % (self.color.red, self.color.green, self.color.blue)


def percentage_of(count: int, total_pixels: int) -> float:
    if total_pixels == 0:
        return 0.0
    # exact ratio, .5 rounds away from zero: 1 of 32 pixels is 3.13
    share = Decimal(count * 100) / Decimal(total_pixels)
    return float(share.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))
