# services/color_codec_service.py
import re
from typing import List

from ..exceptions import InvalidColorFormat
from ..models.pixel_color import PixelColor

_HEX_RE = re.compile(r"^(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


class ColorCodecService:
    """
    Conversions between hex strings and PixelColor.
    Hex strings never carry alpha: parsed colors are opaque and alpha is
    dropped when rendering.
    """

    @staticmethod
    def _strip(text: str) -> str:
        text = text.strip()
        return text[1:] if text.startswith("#") else text

    @staticmethod
    def is_valid_hex(text: str) -> bool:
        return bool(_HEX_RE.match(ColorCodecService._strip(text)))

    @staticmethod
    def parse_hex(text: str) -> PixelColor:
        """
        Accepts 'RGB', 'RRGGBB', '#RGB' or '#RRGGBB' (any case).
        Shorthand digits are doubled: 'f00' → 'ff0000'.
        """
        digits = ColorCodecService._strip(text)
        if not _HEX_RE.match(digits):
            raise InvalidColorFormat(text)

        if len(digits) == 3:
            digits = "".join(c * 2 for c in digits)

        return PixelColor(
            red=int(digits[0:2], 16),
            green=int(digits[2:4], 16),
            blue=int(digits[4:6], 16),
            alpha=255,
        )

    @staticmethod
    def to_hex(color: PixelColor) -> str:
        return "#%02x%02x%02x" % (color.red, color.green, color.blue)

    @staticmethod
    def normalize_hex(text: str) -> str:
        return ColorCodecService.to_hex(ColorCodecService.parse_hex(text))

    @staticmethod
    def parse_color_list(text: str) -> List[PixelColor]:
        """
        Parse a comma-separated list such as '#ff0000, 0f0'.

        Every token is validated before any is converted; the first bad
        token is reported and nothing is returned.
        """
        tokens = [token.strip() for token in text.split(",")]
        for token in tokens:
            if not ColorCodecService.is_valid_hex(token):
                raise InvalidColorFormat(token)
        return [ColorCodecService.parse_hex(token) for token in tokens]
