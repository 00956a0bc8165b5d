from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class PixelColor:
    """
    Value-object for one RGBA color, 8 bits per channel.
    Equality and hashing cover all four channels, so two pixels that only
    differ in alpha are different colors.
    """
    red: int
    green: int
    blue: int
    alpha: int = 255  # fully opaque

    def __post_init__(self):
        for name in ("red", "green", "blue", "alpha"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"{name} channel out of range [0, 255]: {value}")
            # plain ints, even when built from numpy scalars
            object.__setattr__(self, name, int(value))

    # ── Packed 0xRRGGBBAA form ───────────────────────────────────────
    @classmethod
    def from_packed(cls, value: int) -> "PixelColor":
        return cls(
            red=(value >> 24) & 0xFF,
            green=(value >> 16) & 0xFF,
            blue=(value >> 8) & 0xFF,
            alpha=value & 0xFF,
        )

    @property
    def packed(self) -> int:
        return (self.red << 24) | (self.green << 16) | (self.blue << 8) | self.alpha

    @property
    def rgba(self) -> Tuple[int, int, int, int]:
        return self.red, self.green, self.blue, self.alpha

    @property
    def is_transparent(self) -> bool:
        """True for any alpha below 255, not only fully transparent pixels."""
        return self.alpha < 255
