class PixelPaletteError(Exception):
    """Base class for every error raised by pixel_palette."""
    pass


class InvalidColorFormat(PixelPaletteError, ValueError):
    """Raised when a hex color string is not #RGB / #RRGGBB (with or without '#')."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Invalid hex color: {token}. Use format #RRGGBB or #RGB")


class ReplacementSpecMismatch(PixelPaletteError, ValueError):
    """Raised when the old and new color lists of a replacement differ in length."""

    def __init__(self, old_count: int, new_count: int):
        self.old_count = old_count
        self.new_count = new_count
        super().__init__(
            f"Number of old colors ({old_count}) must match "
            f"number of new colors ({new_count})"
        )


class ImageLoadFailed(PixelPaletteError, OSError):
    """Raised when an image file cannot be read or decoded to 8-bit RGBA."""
    pass


class ImageSaveFailed(PixelPaletteError, OSError):
    """Raised when an image cannot be written to disk."""
    pass


class InvalidTemplateSize(PixelPaletteError, ValueError):
    """Raised when a template canvas cannot be split evenly into tiles."""
    pass
