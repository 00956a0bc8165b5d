from pathlib import Path
from typing import Union
import logging
import os
import signal

import cv2
import numpy as np
from PIL import Image as PILImage
from dotenv import load_dotenv

from ..exceptions import ImageLoadFailed, ImageSaveFailed
from ..models.image import Image

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

# cv2 channel layout → conversion to RGBA
_TO_RGBA = {
    1: cv2.COLOR_GRAY2RGBA,
    3: cv2.COLOR_BGR2RGBA,
    4: cv2.COLOR_BGRA2RGBA,
}
# Formats Pillow cannot write with an alpha channel
_OPAQUE_ONLY = {".jpg", ".jpeg"}


class ImageRepository:
    """
    Handles file I/O for Image entities.
    Decoding goes through OpenCV, encoding through Pillow.
    """
    def __init__(self):
        exts = os.getenv("VALID_IMAGE_EXTENSIONS", ".png,.jpg,.jpeg,.bmp,.tif,.tiff,.webp")
        self.VALID_EXTS = {ext.strip().lower() for ext in exts.split(",") if ext.strip()}
        self.LOAD_TIMEOUT = int(os.getenv("IMAGE_LOAD_TIMEOUT", "5"))

    @staticmethod
    def create_image(pixels: np.ndarray, path: Union[str, Path] = None) -> Image:
        if path is None:
            return Image(pixels)
        return Image(pixels=pixels, path=Path(path))

    @staticmethod
    def to_rgba(arr: np.ndarray) -> np.ndarray:
        """
        Any 8-bit array as returned by cv2.imread(..., IMREAD_UNCHANGED)
        → (H, W, 4) uint8 RGBA.
        """
        if arr.dtype != np.uint8:
            raise ImageLoadFailed(f"Only 8-bit images are supported, got {arr.dtype}")

        channels = 1 if arr.ndim == 2 else arr.shape[2]
        if channels == 2:  # gray + alpha, no cv2 conversion code for it
            gray, alpha = arr[..., 0], arr[..., 1]
            return np.dstack([gray, gray, gray, alpha])
        if channels not in _TO_RGBA:
            raise ImageLoadFailed(f"Unsupported channel count: {channels}")
        return cv2.cvtColor(arr, _TO_RGBA[channels])

    def load(self, path: Union[str, Path], timeout: int | None = None) -> Image:
        path = Path(path)
        timeout = self.LOAD_TIMEOUT if timeout is None else timeout

        # ─── timeout wrapper ──────────────────────────────────────────────
        def _handler(signum, frame):
            raise TimeoutError(f"cv2.imread timed-out after {timeout}s: {path}")

        previous = signal.signal(signal.SIGALRM, _handler)
        signal.alarm(timeout)
        try:
            arr = cv2.imread(str(path), cv2.IMREAD_UNCHANGED)
        except TimeoutError as err:
            raise ImageLoadFailed(str(err)) from err
        finally:
            signal.alarm(0)  # always disarm
            signal.signal(signal.SIGALRM, previous)
        # ──────────────────────────────────────────────────────────────────

        if arr is None:
            raise ImageLoadFailed(f"Image not found or unreadable: {path}")

        pixels = self.to_rgba(arr)
        logger.debug(f"Loaded {path}: {pixels.shape[1]}x{pixels.shape[0]}")
        return Image(pixels=pixels, path=path)

    def save(self, image: Image) -> None:
        if image.path is None:
            raise ImageSaveFailed("Image has no destination path")
        if image.path.suffix.lower() not in self.VALID_EXTS:
            raise ImageSaveFailed(f"Unsupported output extension: {image.path.suffix or image.path.name}")
        try:
            pil_obj = PILImage.fromarray(np.ascontiguousarray(image.pixels))
            if image.path.suffix.lower() in _OPAQUE_ONLY:
                pil_obj = pil_obj.convert("RGB")
            pil_obj.save(image.path)
        except (OSError, ValueError, KeyError) as err:
            # Pillow raises KeyError / ValueError for unknown extensions
            raise ImageSaveFailed(f"Could not save image to {image.path}: {err}") from err
        logger.debug(f"Saved {image.path}")

