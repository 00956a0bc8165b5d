import logging
from typing import Tuple

import cv2
import numpy as np

from ..exceptions import InvalidTemplateSize
from ..models.image import Image

logger = logging.getLogger(__name__)

GREEN = (0, 128, 0, 255)  # RGBA
RED = (255, 0, 0, 255)


class TemplateService:
    """
    Blank sprite-sheet templates: a canvas split into equally sized tiles
    painted in alternating green / red so tile borders are easy to see.
    """

    @staticmethod
    def _tile_counts(file_width: int, file_height: int, tile_width: int, tile_height: int) -> Tuple[int, int]:
        for name, value in (("file width", file_width), ("file height", file_height),
                            ("tile width", tile_width), ("tile height", tile_height)):
            if value <= 0:
                raise InvalidTemplateSize(f"{name} must be positive, got {value}")
        if file_width % tile_width != 0:
            raise InvalidTemplateSize(
                f"Must specify a valid tile width with File_width = {file_width}")
        if file_height % tile_height != 0:
            raise InvalidTemplateSize(
                f"Must specify a valid tile height with File_height = {file_height}")
        return file_width // tile_width, file_height // tile_height

    @staticmethod
    def tile_color(column: int, row: int, rows: int) -> Tuple[int, int, int, int]:
        """
        Colors are assigned column by column, flipping after every tile and
        once more at the end of each column. With an even row count that
        gives a checkerboard, with an odd one every column starts green.
        """
        return GREEN if (column * (rows + 1) + row) % 2 == 0 else RED

    def create_template(self, file_width: int, file_height: int, tile_width: int, tile_height: int) -> Image:
        columns, rows = self._tile_counts(file_width, file_height, tile_width, tile_height)

        canvas = np.zeros((file_height, file_width, 4), dtype=np.uint8)
        for i in range(columns):
            for j in range(rows):
                top_left = (i * tile_width, j * tile_height)
                bottom_right = ((i + 1) * tile_width - 1, (j + 1) * tile_height - 1)
                cv2.rectangle(canvas, top_left, bottom_right, self.tile_color(i, j, rows), thickness=-1)

        logger.info(f"Template {file_width}x{file_height} with {columns}x{rows} tiles")
        return Image(pixels=canvas)
