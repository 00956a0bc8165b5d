# pipeline/template_builder.py
from pathlib import Path
import os
from typing import Optional

from dotenv import load_dotenv

from ..models.image import Image
from ..services.image_service import ImageService
from ..services.template_service import TemplateService

# env‑vars
load_dotenv()
TEMPLATE_OUTPUT_PATH = os.getenv("TEMPLATE_OUTPUT_PATH", "sprite_template.png")


def build_template(
    file_width: int,
    file_height: int,
    tile_width: int,
    tile_height: int,
    *,
    output_path: str | Path = TEMPLATE_OUTPUT_PATH,
    image_service: Optional[ImageService] = None,
    template_service: Optional[TemplateService] = None,
) -> Image:
    """Create a tiled template image and save it to *output_path*."""
    image_service = image_service or ImageService()
    template_service = template_service or TemplateService()

    template = template_service.create_template(file_width, file_height, tile_width, tile_height)
    saved = image_service.save_as(template, output_path)
    print(f"Template saved as: {saved.path}")
    return saved
