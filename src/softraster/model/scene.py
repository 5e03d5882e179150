"""
Scene (Rasterization Engine)
============================
This module owns the pixel buffer and the triangle list, and paints one
into the other.

Why is this file needed?
------------------------
1. State Management: It holds the current buffer and triangles in one place.
   Both are replaced together on reset.
2. Rasterization: `render` scans every triangle's bounding box (clamped to
   the buffer) and paints the pixels that pass the containment test.
   Later triangles overwrite earlier ones (painter's algorithm).
3. Export: `export` flattens the buffer to RGB bytes for a presenter.

Classes:
    Scene: The main container class.
"""
from __future__ import annotations

import logging
from typing import Iterable, Optional, Tuple

import numpy as np

from softraster import config
from softraster.model.buffer import PixelBuffer
from softraster.model.generators import TriangleSource, make_triangle_source
from softraster.model.triangle import Triangle
from softraster.model.vectors import Vector3

logger = logging.getLogger(__name__)


class Scene:
    """
    A square pixel buffer plus the ordered triangles painted into it.
    """
    def __init__(
        self,
        triangles: Optional[Iterable[Triangle]] = None,
        size: int = config.BUFFER_SIZE,
        triangle_source: Optional[TriangleSource] = None,
    ) -> None:
        """
        Create a scene with a black buffer.

        Args:
            triangles: Explicit triangles in paint order. When omitted, they
                are drawn from `triangle_source`.
            size: Side length of the square buffer.
            triangle_source: Called on creation and on every reset without
                explicit triangles. Defaults to a random demo scene.
        """
        self._size = size
        self._triangle_source: TriangleSource = triangle_source or make_triangle_source()
        self._buffer: PixelBuffer = PixelBuffer.black(size)
        self._triangles: Tuple[Triangle, ...] = self._load(triangles)
        logger.info(f"Scene created: {size}x{size} buffer, {len(self._triangles)} triangles.")

    @classmethod
    def create(
        cls,
        triangles: Optional[Iterable[Triangle]] = None,
        size: int = config.BUFFER_SIZE,
        triangle_source: Optional[TriangleSource] = None,
    ) -> Scene:
        return cls(triangles=triangles, size=size, triangle_source=triangle_source)

    def _load(self, triangles: Optional[Iterable[Triangle]]) -> Tuple[Triangle, ...]:
        if triangles is None:
            triangles = self._triangle_source()
        return tuple(triangles)

    @property
    def size(self) -> int:
        return self._size

    @property
    def triangles(self) -> Tuple[Triangle, ...]:
        return self._triangles

    @property
    def buffer(self) -> PixelBuffer:
        return self._buffer

    def pixel(self, x: int, y: int) -> Vector3:
        return self._buffer[x, y]

    def reset(self, triangles: Optional[Iterable[Triangle]] = None) -> None:
        """
        Discard buffer and triangles, start over from a black buffer.
        If the triangle source fails, the scene is left untouched.
        """
        new_triangles = self._load(triangles)
        self._buffer = PixelBuffer.black(self._size)
        self._triangles = new_triangles
        logger.info(f"Scene reset: {len(self._triangles)} triangles.")

    def render(self) -> None:
        """
        Paint every triangle into the buffer, in list order.

        Pixels already painted are overwritten, not blended. Triangles
        reaching outside the buffer are clamped to it; degenerate triangles
        paint at most a line of pixels.
        """
        painted = 0
        for index, triangle in enumerate(self._triangles):
            painted += self._paint(index, triangle)
        logger.debug(f"Rendered {len(self._triangles)} triangles, {painted} pixels written.")

    def _paint(self, index: int, triangle: Triangle) -> int:
        top_left, bottom_right = triangle.bounding_box()
        logger.debug(f"Triangle {index}: bounding box {top_left} - {bottom_right}")

        region = self._buffer.clamp_region(
            (top_left.x, top_left.y), (bottom_right.x, bottom_right.y)
        )
        if region is None:
            logger.debug(f"Triangle {index}: outside the buffer, skipped.")
            return 0

        x0, x1, y0, y1 = region
        # Integer pixel coordinates of the clamped box, rows are y
        xs = np.arange(x0, x1 + 1, dtype=np.float64)
        ys = np.arange(y0, y1 + 1, dtype=np.float64)
        grid_x, grid_y = np.meshgrid(xs, ys)

        mask = triangle.contains_grid(grid_x, grid_y)
        return self._buffer.fill_masked(x0, y0, mask, triangle.color)

    def export(self) -> bytes:
        """Row-major R,G,B bytes of the current buffer, 3 * size * size long."""
        return self._buffer.to_bytes()
