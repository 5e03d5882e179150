"""
softraster: a minimal CPU triangle rasterizer.
"""
from softraster.model.vectors import Vector2, Vector3
from softraster.model.triangle import Triangle
from softraster.model.buffer import PixelBuffer
from softraster.model.scene import Scene

__all__ = ["Vector2", "Vector3", "Triangle", "PixelBuffer", "Scene"]
