"""
Pixel Buffer
============
Fixed-size square grid of RGB colors owned by a Scene.

The grid is one contiguous numpy allocation of shape (size, size, 3), stored
row-major: row index is y, column index is x.
"""
from __future__ import annotations
from typing import Optional, Tuple, TYPE_CHECKING

import numpy as np

from softraster.model.vectors import Vector3, channels_to_bytes

if TYPE_CHECKING:
    import numpy.typing as npt


class PixelBuffer:
    """
    A square grid of float RGB pixels, addressed as buffer[x, y].
    """
    def __init__(self, pixels: npt.NDArray[np.float64]) -> None:
        if pixels.ndim != 3 or pixels.shape[0] != pixels.shape[1] or pixels.shape[2] != 3:
            raise ValueError(f"Expected a (size, size, 3) array, got shape {pixels.shape}.")
        self.pixels = pixels

    @classmethod
    def black(cls, size: int) -> PixelBuffer:
        """Allocate a new all-black buffer with the given side length."""
        if isinstance(size, bool) or not isinstance(size, (int, np.integer)) or size <= 0:
            raise ValueError(f"Buffer size must be a positive integer, got {size!r}.")
        return cls(np.zeros((size, size, 3), dtype=np.float64))

    @property
    def size(self) -> int:
        return self.pixels.shape[0]

    def _check_index(self, x: int, y: int) -> None:
        if not (0 <= x < self.size and 0 <= y < self.size):
            raise IndexError(f"Pixel ({x}, {y}) is outside a {self.size}x{self.size} buffer.")

    def __getitem__(self, index: Tuple[int, int]) -> Vector3:
        x, y = index
        self._check_index(x, y)
        return Vector3.from_array(self.pixels[y, x])

    def __setitem__(self, index: Tuple[int, int], color: Vector3) -> None:
        x, y = index
        self._check_index(x, y)
        self.pixels[y, x] = (color.r, color.g, color.b)

    def clamp_region(
        self, top_left: Tuple[float, float], bottom_right: Tuple[float, float]
    ) -> Optional[Tuple[int, int, int, int]]:
        """
        Intersect an inclusive rectangle with the buffer.

        Corners are floored to pixel indices. Returns (x0, x1, y0, y1) as
        inclusive indices, or None when nothing of the rectangle is inside.
        """
        last = self.size - 1
        x0 = max(0, int(np.floor(top_left[0])))
        y0 = max(0, int(np.floor(top_left[1])))
        x1 = min(last, int(np.floor(bottom_right[0])))
        y1 = min(last, int(np.floor(bottom_right[1])))
        if x0 > x1 or y0 > y1:
            return None
        return x0, x1, y0, y1

    def fill_masked(
        self,
        x0: int,
        y0: int,
        mask: npt.NDArray[np.bool_],
        color: Vector3,
    ) -> int:
        """
        Overwrite the cells selected by `mask`, whose top-left cell is (x0, y0).
        Returns the number of cells written.
        """
        rows, cols = mask.shape
        self._check_index(x0, y0)
        self._check_index(x0 + cols - 1, y0 + rows - 1)
        region = self.pixels[y0:y0 + rows, x0:x0 + cols]
        region[mask] = (color.r, color.g, color.b)
        return int(np.count_nonzero(mask))

    def to_bytes(self) -> bytes:
        """Row-major R,G,B bytes, 3 per pixel, with out-of-range channels clamped."""
        return channels_to_bytes(self.pixels).tobytes()

    def copy(self) -> PixelBuffer:
        return PixelBuffer(self.pixels.copy())
