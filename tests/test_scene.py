import pytest

from softraster import config
from softraster.model.generators import make_triangle_source
from softraster.model.scene import Scene
from softraster.model.vectors import Vector3

from conftest import BLUE, RED, make_triangle

BLACK_PIXEL = (0, 0, 0)
RED_PIXEL = (255, 0, 0)
BLUE_PIXEL = (0, 0, 255)


def pixel_bytes(data, size, x, y):
    offset = 3 * (y * size + x)
    return tuple(data[offset:offset + 3])


def painted_pixels(scene):
    data = scene.export()
    return {
        (x, y)
        for y in range(scene.size)
        for x in range(scene.size)
        if pixel_bytes(data, scene.size, x, y) != BLACK_PIXEL
    }


def test_new_scene_is_black(corner_triangle):
    scene = Scene(triangles=[corner_triangle], size=4)
    assert scene.export() == bytes(3 * 4 * 4)
    assert scene.triangles == (corner_triangle,)


def test_render_corner_triangle(corner_triangle):
    scene = Scene(triangles=[corner_triangle], size=4)
    scene.render()
    data = scene.export()
    assert len(data) == 3 * 4 * 4
    for y in range(4):
        for x in range(4):
            expected = RED_PIXEL if x + y <= 3 else BLACK_PIXEL
            assert pixel_bytes(data, 4, x, y) == expected, (x, y)


def test_render_partially_outside_triangle():
    scene = Scene(triangles=[make_triangle([(-5.0, -5.0), (2.0, 2.0), (-5.0, 2.0)])], size=4)
    scene.render()
    assert painted_pixels(scene) == {(x, y) for y in range(3) for x in range(y + 1)}


def test_render_triangle_fully_outside():
    scene = Scene(triangles=[make_triangle([(10.0, 10.0), (20.0, 10.0), (10.0, 20.0)])], size=4)
    scene.render()
    assert painted_pixels(scene) == set()


def test_render_order_decides_overlap(corner_triangle):
    other = make_triangle([(3.0, 3.0), (0.0, 3.0), (3.0, 0.0)], color=BLUE)

    scene = Scene(triangles=[corner_triangle, other], size=4)
    scene.render()
    data = scene.export()
    assert pixel_bytes(data, 4, 1, 2) == BLUE_PIXEL
    assert pixel_bytes(data, 4, 0, 0) == RED_PIXEL
    assert pixel_bytes(data, 4, 3, 3) == BLUE_PIXEL

    scene.reset([other, corner_triangle])
    scene.render()
    data = scene.export()
    assert pixel_bytes(data, 4, 1, 2) == RED_PIXEL
    assert pixel_bytes(data, 4, 3, 3) == BLUE_PIXEL


def test_reset_and_render_is_reproducible():
    source = make_triangle_source(count=5, scale=60.0, seed=3)
    scene = Scene(size=64, triangle_source=source)
    scene.render()
    first = scene.export()

    scene.reset()
    assert scene.export() == bytes(3 * 64 * 64)
    scene.render()
    assert scene.export() == first


def test_render_twice_repaints_the_same(corner_triangle):
    scene = Scene(triangles=[corner_triangle], size=4)
    scene.render()
    first = scene.export()
    scene.render()
    assert scene.export() == first


def test_reset_uses_triangle_source(corner_triangle):
    calls = []

    def source():
        calls.append(1)
        return [corner_triangle]

    scene = Scene(size=4, triangle_source=source)
    assert len(calls) == 1
    scene.reset()
    assert len(calls) == 2
    assert scene.triangles == (corner_triangle,)

    # Explicit triangles bypass the source
    scene.reset([])
    assert len(calls) == 2
    assert scene.triangles == ()


def test_reset_discards_paint(corner_triangle):
    scene = Scene(triangles=[corner_triangle], size=4)
    scene.render()
    scene.reset([corner_triangle])
    assert scene.export() == bytes(3 * 4 * 4)


def test_empty_scene_renders_nothing():
    scene = Scene(triangles=[], size=4)
    scene.render()
    assert scene.export() == bytes(3 * 4 * 4)


def test_point_triangle_paints_one_pixel():
    scene = Scene(triangles=[make_triangle([(1.0, 1.0)] * 3)], size=4)
    scene.render()
    assert painted_pixels(scene) == {(1, 1)}


def test_collinear_triangle_paints_its_line():
    scene = Scene(triangles=[make_triangle([(0.0, 1.0), (2.0, 1.0), (3.0, 1.0)])], size=4)
    scene.render()
    assert painted_pixels(scene) == {(0, 1), (1, 1), (2, 1), (3, 1)}


def test_pixel_accessor(corner_triangle):
    scene = Scene(triangles=[corner_triangle], size=4)
    scene.render()
    assert scene.pixel(0, 0) == RED
    assert scene.pixel(3, 3) == Vector3(0.0, 0.0, 0.0)


def test_default_scene():
    scene = Scene.create(triangle_source=make_triangle_source(seed=1))
    assert scene.size == config.BUFFER_SIZE
    assert len(scene.triangles) == config.DEMO_TRIANGLE_COUNT
    scene.render()
    assert len(scene.export()) == 3 * config.BUFFER_SIZE ** 2


def test_invalid_size():
    with pytest.raises(ValueError):
        Scene(triangles=[], size=0)


def test_caller_color_change_does_not_reach_scene():
    color = Vector3(1.0, 0.0, 0.0)
    scene = Scene(triangles=[make_triangle([(0.0, 0.0), (3.0, 0.0), (0.0, 3.0)], color=color)], size=4)
    color.r = 0.0
    color.b = 1.0
    scene.triangles[0].color.g = 1.0

    scene.reset(scene.triangles)
    scene.render()
    assert scene.export()[:3] == b"\xff\x00\x00"


def test_failed_reset_keeps_scene(corner_triangle):
    def broken_source():
        raise RuntimeError("no triangles today")

    scene = Scene(triangles=[corner_triangle], size=4, triangle_source=broken_source)
    scene.render()
    before = scene.export()

    with pytest.raises(RuntimeError):
        scene.reset()
    assert scene.triangles == (corner_triangle,)
    assert scene.export() == before
