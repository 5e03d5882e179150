"""
Vector Primitives
=================
Small value types used by the rasterizer.

Classes:
    Vector2: A point or direction in the image plane.
    Vector3: A 3-component vector, also used as an RGB color.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple, Union, TYPE_CHECKING
import math
import numbers

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Vector2:
    """
    A point or direction in 2D pixel space.
    Arithmetic never mutates, it always returns a new vector.
    """
    x: float
    y: float

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: Union[Vector2, float]) -> Vector2:
        # Vector * Vector is the component-wise (Hadamard) product
        if isinstance(other, Vector2):
            return Vector2(self.x * other.x, self.y * other.y)
        if isinstance(other, numbers.Real):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other: float) -> Vector2:
        if isinstance(other, numbers.Real):
            return self.scale(other)
        return NotImplemented

    def scale(self, k: float) -> Vector2:
        return Vector2(self.x * k, self.y * k)

    def dot(self, other: Vector2) -> float:
        return self.x * other.x + self.y * other.y

    def rotate_clockwise_90(self) -> Vector2:
        """Turn the vector by 90 degrees clockwise: (x, y) -> (y, -x)."""
        return Vector2(self.y, -self.x)

    @staticmethod
    def is_right_of_line(a: Vector2, b: Vector2, p: Vector2) -> bool:
        """
        Is point `p` on the right side of the directed line a -> b?
        Points exactly on the line count as right.
        """
        ap = p - a
        ab_perp = (b - a).rotate_clockwise_90()
        return ap.dot(ab_perp) >= 0.0


@dataclass
class Vector3:
    """
    A 3D vector. When used as a color, (x, y, z) are read as (r, g, b)
    and each channel should lie in [0.0, 1.0).
    """
    x: float
    y: float
    z: float

    @property
    def r(self) -> float:
        return self.x

    @r.setter
    def r(self, value: float) -> None:
        self.x = value

    @property
    def g(self) -> float:
        return self.y

    @g.setter
    def g(self, value: float) -> None:
        self.y = value

    @property
    def b(self) -> float:
        return self.z

    @b.setter
    def b(self, value: float) -> None:
        self.z = value

    def to_rgb_bytes(self) -> Tuple[int, int, int]:
        """
        Convert the color to an (R, G, B) byte triple.

        Each byte is floor(channel * 256) clamped to [0, 255], so channels at
        or above 1.0 saturate to 255 and negative channels become 0.
        """
        return (
            channel_to_byte(self.r),
            channel_to_byte(self.g),
            channel_to_byte(self.b),
        )

    @classmethod
    def from_array(cls, values: npt.ArrayLike) -> Vector3:
        x, y, z = (float(v) for v in values)
        return cls(x, y, z)


def channel_to_byte(channel: float) -> int:
    """Map a normalized color channel to a byte, clamping out-of-range input."""
    return min(255, max(0, math.floor(channel * 256.0)))


def channels_to_bytes(channels: npt.NDArray[np.float64]) -> npt.NDArray[np.uint8]:
    """Vectorised `channel_to_byte` for whole pixel arrays."""
    return np.clip(np.floor(channels * 256.0), 0, 255).astype(np.uint8)
