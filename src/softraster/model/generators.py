"""
Random demo scenes.

Triangles are sampled in the unit square (vertices and color uniform in
[0, 1) per component) and then scaled into pixel space.
"""
from __future__ import annotations
from typing import Callable, List, Optional

import numpy as np

from softraster import config
from softraster.model.triangle import Triangle
from softraster.model.vectors import Vector2, Vector3

# Anything that produces the triangles of a fresh scene
TriangleSource = Callable[[], List[Triangle]]


def random_triangle(rng: np.random.Generator) -> Triangle:
    """One triangle with vertices and color drawn uniformly from [0, 1)."""
    xy = rng.random((3, 2))
    rgb = rng.random(3)
    return Triangle(
        points=(Vector2(*xy[0]), Vector2(*xy[1]), Vector2(*xy[2])),
        color=Vector3(*rgb),
    )


def random_triangles(
    count: int = config.DEMO_TRIANGLE_COUNT,
    scale: float = config.DEMO_PROJECTION_SCALE,
    rng: Optional[np.random.Generator] = None,
    seed: Optional[int] = None,
) -> List[Triangle]:
    """
    Generate `count` random triangles projected into pixel space.

    Args:
        count: Number of triangles.
        scale: Factor applied to every vertex after sampling.
        rng: Random generator to draw from. Takes precedence over `seed`.
        seed: Seed for a new generator when `rng` is not given.
    """
    if count < 0:
        raise ValueError(f"Triangle count must not be negative, got {count}.")
    if rng is None:
        rng = np.random.default_rng(seed)
    return [random_triangle(rng) * scale for _ in range(count)]


def make_triangle_source(
    count: int = config.DEMO_TRIANGLE_COUNT,
    scale: float = config.DEMO_PROJECTION_SCALE,
    seed: Optional[int] = None,
) -> TriangleSource:
    """
    Build a triangle source for `Scene`.

    With a seed, every call replays the same scene; without one, every call
    draws a new random scene.
    """
    if seed is not None:
        return lambda: random_triangles(count=count, scale=scale, seed=seed)

    rng = np.random.default_rng()
    return lambda: random_triangles(count=count, scale=scale, rng=rng)
