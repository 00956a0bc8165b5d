"""Named colors and builders for small in-memory test images."""

from __future__ import annotations

from typing import Sequence

import numpy as np
from hypothesis import strategies as st
from PIL import Image as PILImage

from pixel_palette.models.image import Image
from pixel_palette.models.pixel_color import PixelColor

RED = PixelColor(255, 0, 0)
GREEN = PixelColor(0, 255, 0)
BLUE = PixelColor(0, 0, 255)
CLEAR = PixelColor(0, 0, 0, 0)


def make_image(rows: Sequence[Sequence[PixelColor]], path=None) -> Image:
    """Build an RGBA Image from rows of PixelColor (row-major, top row first)."""
    if not rows or not rows[0]:
        return Image(pixels=np.zeros((len(rows), 0, 4), dtype=np.uint8), path=path)
    pixels = np.array([[color.rgba for color in row] for row in rows], dtype=np.uint8)
    return Image(pixels=pixels, path=path)


def pixel_rows(image: Image):
    """Image back to rows of PixelColor."""
    return [[PixelColor(*map(int, px)) for px in row] for row in image.pixels]


def write_png(path, rows: Sequence[Sequence[PixelColor]]):
    """Write rows of PixelColor to *path* as an RGBA PNG and return the path."""
    PILImage.fromarray(make_image(rows).pixels).save(path)
    return path


channel = st.integers(0, 255)


@st.composite
def rgba_images(draw, max_side=6):
    """Small images drawn from a small palette so colors repeat."""
    height = draw(st.integers(0, max_side))
    width = draw(st.integers(0, max_side))
    palette = draw(st.lists(st.tuples(channel, channel, channel, channel), min_size=1, max_size=4))
    picks = draw(st.lists(st.integers(0, len(palette) - 1),
                          min_size=height * width, max_size=height * width))
    pixels = np.array([palette[i] for i in picks], dtype=np.uint8).reshape(height, width, 4)
    return Image(pixels=pixels)
