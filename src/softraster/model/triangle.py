"""
Solid-colored 2D triangle with the geometric tests used by the rasterizer.
"""
from __future__ import annotations
import numbers
from typing import Any, Iterable, Tuple, Union, TYPE_CHECKING

import numpy as np

from softraster.model.vectors import Vector2, Vector3

if TYPE_CHECKING:
    import numpy.typing as npt

# Scalars or numpy arrays of pixel coordinates
Coordinate = Union[float, "npt.NDArray[np.float64]"]


class Triangle:
    """
    Three vertices in pixel space plus one fill color.

    Collinear or coincident vertices are legal; such triangles cover at most
    a line of pixels. Winding order is not normalized.

    A triangle never changes after construction: the color is copied in, and
    `color` hands out a fresh Vector3 on every read.
    """
    def __init__(self, points: Iterable[Vector2], color: Vector3) -> None:
        points = tuple(points)
        if len(points) != 3:
            raise ValueError(f"A triangle needs exactly 3 points, got {len(points)}.")
        self._points: Tuple[Vector2, Vector2, Vector2] = points
        self._rgb: Tuple[float, float, float] = (color.r, color.g, color.b)

    @property
    def points(self) -> Tuple[Vector2, Vector2, Vector2]:
        return self._points

    @property
    def color(self) -> Vector3:
        return Vector3(*self._rgb)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Triangle):
            return NotImplemented
        return self._points == other._points and self._rgb == other._rgb

    def __hash__(self) -> int:
        return hash((self._points, self._rgb))

    def __repr__(self) -> str:
        return f"Triangle(points={self._points!r}, color={self.color!r})"

    def __mul__(self, k: float) -> Triangle:
        if not isinstance(k, numbers.Real):
            return NotImplemented
        return self.scale(k)

    def scale(self, k: float) -> Triangle:
        """Scale every vertex by `k`; the color is unchanged."""
        a, b, c = self.points
        return Triangle(points=(a * k, b * k, c * k), color=self.color)

    def bounding_box(self) -> Tuple[Vector2, Vector2]:
        """
        Returns the axis-aligned bounding box as (top_left, bottom_right),
        i.e. the component-wise minimum and maximum of the vertices.
        """
        xs = [p.x for p in self.points]
        ys = [p.y for p in self.points]
        return Vector2(min(xs), min(ys)), Vector2(max(xs), max(ys))

    def edge_values(
        self, px: Coordinate, py: Coordinate
    ) -> Tuple[Coordinate, Coordinate, Coordinate]:
        """
        Signed half-plane values of (px, py) against the edges A->B, B->C and C->A.

        Each value is dot(p - start, rotate_clockwise_90(end - start)); it is
        positive right of the edge, negative left of it and zero on it.
        Accepts scalars or broadcastable numpy arrays.
        """
        a, b, c = self.points
        return (
            _edge_value(a, b, px, py),
            _edge_value(b, c, px, py),
            _edge_value(c, a, px, py),
        )

    def contains(self, point: Vector2) -> bool:
        """
        Is the point inside the triangle?

        True when all three edges put the point on the same side. A point on
        an edge agrees with either side, so boundaries are inside for both
        windings.
        """
        # Three-valued form of Vector2.is_right_of_line for each edge
        e_ab, e_bc, e_ca = self.edge_values(point.x, point.y)
        all_right = e_ab >= 0.0 and e_bc >= 0.0 and e_ca >= 0.0
        all_left = e_ab <= 0.0 and e_bc <= 0.0 and e_ca <= 0.0
        return all_right or all_left

    def contains_grid(
        self, xs: npt.NDArray[np.float64], ys: npt.NDArray[np.float64]
    ) -> npt.NDArray[np.bool_]:
        """Vectorised `contains` over arrays of x and y coordinates."""
        e_ab, e_bc, e_ca = self.edge_values(xs, ys)
        all_right = (e_ab >= 0.0) & (e_bc >= 0.0) & (e_ca >= 0.0)
        all_left = (e_ab <= 0.0) & (e_bc <= 0.0) & (e_ca <= 0.0)
        return all_right | all_left


def _edge_value(start: Vector2, end: Vector2, px: Coordinate, py: Coordinate) -> Coordinate:
    # dot((px, py) - start, (end - start) rotated clockwise)
    perp = (end - start).rotate_clockwise_90()
    return (px - start.x) * perp.x + (py - start.y) * perp.y
