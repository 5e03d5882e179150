import os
import sys
from pathlib import Path

import pytest

# Allow running the tests from a source checkout without installing
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

# Qt tests never need a real display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from softraster.model.triangle import Triangle  # noqa: E402
from softraster.model.vectors import Vector2, Vector3  # noqa: E402

RED = Vector3(1.0, 0.0, 0.0)
BLUE = Vector3(0.0, 0.0, 1.0)


def make_triangle(points, color=RED):
    return Triangle(points=tuple(Vector2(x, y) for x, y in points), color=color)


@pytest.fixture
def corner_triangle():
    """Right triangle filling the top-left half of a 4x4 buffer."""
    return make_triangle([(0.0, 0.0), (3.0, 0.0), (0.0, 3.0)])
