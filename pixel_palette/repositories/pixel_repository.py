# repositories/pixel_repository.py
from typing import List, Tuple
import numpy as np


class PixelRepository:
    """
    Raw numpy scans over RGBA pixel buffers.

    • Works on (H, W, 4) uint8 arrays only, never on Image objects.
    • Colors are handled as packed 0xRRGGBBAA uint32 values here; the
      services convert them to PixelColor at the boundary.
    • Source buffers are never written to.
    """

    # ---------- private helpers ----------
    @staticmethod
    def _unpack(packed: int) -> np.ndarray:
        return np.array(
            [(packed >> 24) & 0xFF, (packed >> 16) & 0xFF, (packed >> 8) & 0xFF, packed & 0xFF],
            dtype=np.uint8,
        )

    # ---------- public API ----------
    @staticmethod
    def pack(pixels: np.ndarray) -> np.ndarray:
        """
        (H, W, 4) uint8 RGBA  →  (H, W) uint32 packed colors.
        """
        rgba = pixels.astype(np.uint32)
        return (rgba[..., 0] << 24) | (rgba[..., 1] << 16) | (rgba[..., 2] << 8) | rgba[..., 3]

    def count_colors(self, pixels: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        """
        One row-major pass over the buffer.

        Returns
        -------
        colors : np.ndarray  (K,)  uint32 packed colors, in first-seen order
        counts : np.ndarray  (K,)  int64 occurrences of each color
        """
        flat = self.pack(pixels).ravel()  # C order: y outer, x inner
        if flat.size == 0:
            return np.empty(0, dtype=np.uint32), np.empty(0, dtype=np.int64)

        colors, first_index, counts = np.unique(flat, return_index=True, return_counts=True)
        order = np.argsort(first_index, kind="stable")
        return colors[order], counts[order].astype(np.int64)

    def count_matches(self, pixels: np.ndarray, packed_colors: List[int]) -> List[int]:
        """Number of pixels exactly equal to each packed color, counted independently."""
        packed = self.pack(pixels)
        return [int(np.count_nonzero(packed == np.uint32(color))) for color in packed_colors]

    def replace(self, pixels: np.ndarray, table: List[Tuple[int, int]]) -> Tuple[np.ndarray, int]:
        """
        Rewrite every pixel whose packed color is an old color of *table*.

        The old colors are sorted once and every pixel is located among them
        with ``np.searchsorted`` in a single pass over the buffer. Matching is
        done against the source buffer only, so a pixel written with a new
        color is never matched again by a later rule. *table* must not repeat
        old colors.

        Returns the new (H, W, 4) buffer and the number of rewritten pixels.
        """
        out = pixels.copy()
        if not table:
            return out, 0

        ordered = sorted(table)
        olds = np.array([old for old, _ in ordered], dtype=np.uint32)
        news = np.stack([self._unpack(new) for _, new in ordered])

        flat = self.pack(pixels).ravel()
        idx = np.minimum(np.searchsorted(olds, flat), len(olds) - 1)
        hit = olds[idx] == flat

        out.reshape(-1, 4)[hit] = news[idx[hit]]
        return out, int(np.count_nonzero(hit))
