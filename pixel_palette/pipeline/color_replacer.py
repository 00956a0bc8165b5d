# pipeline/color_replacer.py
from pathlib import Path
from typing import List, Optional

from ..models.replacement import ReplacementPreview, ReplacementResult
from ..services.color_codec_service import ColorCodecService
from ..services.color_replacement_service import ColorReplacementService
from ..services.color_report_service import ColorReportService
from ..services.image_service import ImageService


def preview_replacement(
    path: str | Path,
    old_colors: str,
    new_colors: str,
    *,
    image_service: Optional[ImageService] = None,
    replacement_service: Optional[ColorReplacementService] = None,
    report_service: Optional[ColorReportService] = None,
) -> List[ReplacementPreview]:
    """
    Dry run: parse both color lists, count matches per rule, print them.
    Nothing is written to disk.
    """
    image_service = image_service or ImageService()
    replacement_service = replacement_service or ColorReplacementService()
    report_service = report_service or ColorReportService()

    # 1. validate everything before touching the image
    spec = replacement_service.build_spec(
        ColorCodecService.parse_color_list(old_colors),
        ColorCodecService.parse_color_list(new_colors),
    )

    # 2. count
    image = image_service.load(path)
    print(f"Processing PNG: {path}")
    width, height = image_service.get_image_dimensions(image)
    print(f"Image dimensions: {width}x{height}")
    print()

    previews = replacement_service.preview(image, spec)
    print("\n".join(report_service.format_preview(previews)))
    return previews


def replace_colors(
    path: str | Path,
    old_colors: str,
    new_colors: str,
    *,
    output_path: Optional[str | Path] = None,
    image_service: Optional[ImageService] = None,
    replacement_service: Optional[ColorReplacementService] = None,
    report_service: Optional[ColorReportService] = None,
) -> ReplacementResult:
    """
    For the image at *path*:
        • parse and pair the old / new color lists (fails before loading)
        • print a preview of the matches
        • rewrite matching pixels into a new image
        • save it next to the source as '<name>_color_change<ext>',
          or to *output_path*
    Returns the ReplacementResult whose image carries the saved path.
    """
    image_service = image_service or ImageService()
    replacement_service = replacement_service or ColorReplacementService()
    report_service = report_service or ColorReportService()

    spec = replacement_service.build_spec(
        ColorCodecService.parse_color_list(old_colors),
        ColorCodecService.parse_color_list(new_colors),
    )

    image = image_service.load(path)
    print(f"Processing PNG: {path}")
    width, height = image_service.get_image_dimensions(image)
    print(f"Image dimensions: {width}x{height}")
    print()
    print("\n".join(report_service.format_preview(replacement_service.preview(image, spec))))

    print("Performing color replacement...")
    print("\n".join(report_service.format_spec(spec)))
    result = replacement_service.apply(image, spec)

    target = Path(output_path) if output_path else replacement_service.output_path_for(path)
    result.image = image_service.save_as(result.image, target)

    print(f"Image saved as: {target}")
    print(f"Total pixels replaced: {result.replacement_count}")
    print()
    print("✓ Color replacement completed successfully!")
    print(f"Original file: {path}")
    print(f"New file: {target}")
    return result
