"""Shared fixtures: small in-memory images and PNG files."""

from __future__ import annotations

import numpy as np
import pytest
from hypothesis import settings

from pixel_palette.models.image import Image

from .helpers import BLUE, GREEN, RED, make_image, write_png

# numpy warm-up makes the first examples slow
settings.register_profile("pixel_palette", deadline=None)
settings.load_profile("pixel_palette")


@pytest.fixture
def rrbg_image() -> Image:
    """2x2 image: red, red on top, blue, green below."""
    return make_image([[RED, RED], [BLUE, GREEN]])


@pytest.fixture
def empty_image() -> Image:
    return Image(pixels=np.zeros((0, 0, 4), dtype=np.uint8))


@pytest.fixture
def rrbg_png(tmp_path):
    return write_png(tmp_path / "sprite.png", [[RED, RED], [BLUE, GREEN]])
