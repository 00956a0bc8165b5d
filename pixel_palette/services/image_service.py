from pathlib import Path
from typing import Union

import numpy as np

from ..models.image import Image
from ..repositories.image_repository import ImageRepository


class ImageService:
    """I/O helpers.  No color accounting here."""
    def __init__(self):
        self.image_repository = ImageRepository()

    def create_image(self, pixels: np.ndarray, path: Union[str, Path] = None) -> Image:
        return self.image_repository.create_image(pixels, path)

    def load(self, path: Union[str, Path]) -> Image:
        """Load a single image from disk into an RGBA Image object."""
        return self.image_repository.load(path)

    def save(self, image: Image) -> None:
        """
        Business-level method to save the image to its own path.
        """
        self.image_repository.save(image)

    def save_as(self, image: Image, path: Union[str, Path]) -> Image:
        """
        Save the pixels of *image* under a new path and return the new Image.
        The given Image keeps its path.
        """
        target = self.create_image(image.pixels, path)
        self.save(target)
        return target

    def get_image_dimensions(self, img: Image):
        """(width, height) of an image."""
        return img.width, img.height
