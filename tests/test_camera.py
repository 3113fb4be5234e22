import math
from dataclasses import dataclass

import pytest

from kglab.camera import DRAG_LOCK_KEY, Camera, look_at


@dataclass
class Wheel:
    value: float


@dataclass
class Mouse:
    x: int
    y: int


def _apply(matrix, point):
    vec = (point[0], point[1], point[2], 1.0)
    return tuple(sum(row[i] * vec[i] for i in range(4)) for row in matrix)


def test_default_camera_state():
    cam = Camera()
    assert cam.distance == 5
    assert cam.fi1 == 1
    assert cam.fi2 == 0.5
    assert cam.nz == 1
    assert math.sqrt(cam.x ** 2 + cam.y ** 2 + cam.z ** 2) == pytest.approx(5)


def test_set_position_round_trip():
    cam = Camera()
    cam.set_position(3.0, 4.0, 2.0)
    assert cam.distance == pytest.approx(math.sqrt(29))
    cam.calculate_position()
    assert (cam.x, cam.y, cam.z) == pytest.approx((3.0, 4.0, 2.0))


def test_nz_flips_when_upside_down():
    cam = Camera()
    cam.fi2 = math.pi
    cam.calculate_position()
    assert cam.nz == -1


def test_zoom_in_and_out_returns_to_start():
    cam = Camera()
    start = (cam.distance, cam.x, cam.y, cam.z)
    cam.zoom(None, Wheel(120))
    assert cam.distance > start[0]
    cam.zoom(None, Wheel(-120))
    assert (cam.distance, cam.x, cam.y, cam.z) == pytest.approx(start)


def test_zoom_limited_near():
    cam = Camera()
    cam.set_position(0.0, 0.0, 1.0)
    cam.zoom(None, Wheel(-120))
    assert cam.distance == pytest.approx(1.0)


def test_zoom_limited_far():
    cam = Camera()
    cam.set_position(0.0, 0.0, 100.0)
    cam.zoom(None, Wheel(120))
    assert cam.distance == pytest.approx(100.0)


def test_mouse_move_without_drag_keeps_angles():
    cam = Camera()
    cam.mouse_move(None, Mouse(10, 10))
    cam.mouse_move(None, Mouse(50, 70))
    assert (cam.fi1, cam.fi2) == (1.0, 0.5)
    assert (cam.mouse_x, cam.mouse_y) == (50, 70)


def test_drag_rotates_and_keeps_distance():
    cam = Camera()
    cam.mouse_start_drag(None, Mouse(0, 0))
    cam.mouse_move(None, Mouse(10, 10))
    assert cam.fi1 == 1.0
    cam.mouse_move(None, Mouse(5, 12))
    assert cam.fi1 > 1.0
    assert cam.fi2 > 0.5
    assert math.sqrt(cam.x ** 2 + cam.y ** 2 + cam.z ** 2) == pytest.approx(5)


def test_opposite_drags_cancel():
    cam = Camera()
    cam.mouse_start_drag(None, Mouse(0, 0))
    cam.mouse_move(None, Mouse(10, 10))
    cam.mouse_move(None, Mouse(30, 0))
    cam.mouse_move(None, Mouse(10, 10))
    assert (cam.fi1, cam.fi2) == pytest.approx((1.0, 0.5))


def test_stop_drag_and_leave_forget_position():
    cam = Camera()
    cam.mouse_start_drag(None, Mouse(0, 0))
    cam.mouse_move(None, Mouse(10, 10))
    cam.mouse_stop_drag(None, Mouse(10, 10))
    assert cam.drag is False
    assert cam.mouse_x is None
    cam.mouse_move(None, Mouse(3, 4))
    cam.mouse_leave(None, Mouse(3, 4))
    assert (cam.mouse_x, cam.mouse_y) == (None, None)


def test_lock_key_ignores_mouse():
    pressed = set()
    cam = Camera(lambda key: key in pressed)
    cam.mouse_start_drag(None, Mouse(0, 0))
    pressed.add(DRAG_LOCK_KEY)
    cam.mouse_move(None, Mouse(10, 10))
    cam.mouse_move(None, Mouse(90, 90))
    assert cam.mouse_x is None
    assert (cam.fi1, cam.fi2) == (1.0, 0.5)


def test_look_at_maps_eye_to_origin_and_center_ahead():
    eye = (3.0, -2.0, 5.0)
    matrix = look_at(eye, (0.0, 0.0, 0.0), (0.0, 0.0, 1.0))
    assert _apply(matrix, eye) == pytest.approx((0.0, 0.0, 0.0, 1.0))
    cx, cy, cz, w = _apply(matrix, (0.0, 0.0, 0.0))
    assert (cx, cy) == pytest.approx((0.0, 0.0))
    assert cz == pytest.approx(-math.sqrt(38))


def test_look_at_rotation_is_orthonormal():
    matrix = look_at((1.0, 2.0, 3.0), (0.5, -1.0, 0.0), (0.0, 0.0, 1.0))
    rows = [row[:3] for row in matrix[:3]]
    for i in range(3):
        for j in range(3):
            dot = sum(a * b for a, b in zip(rows[i], rows[j]))
            assert dot == pytest.approx(1.0 if i == j else 0.0, abs=1e-12)


def test_look_at_degenerate_raises():
    with pytest.raises(ValueError):
        look_at((1.0, 1.0, 1.0), (1.0, 1.0, 1.0), (0.0, 0.0, 1.0))
    with pytest.raises(ValueError):
        look_at((0.0, 0.0, 5.0), (0.0, 0.0, 0.0), (0.0, 0.0, 1.0))


def test_camera_look_at_matrix_centres_origin():
    cam = Camera()
    matrix = cam.look_at_matrix()
    assert _apply(matrix, (cam.x, cam.y, cam.z)) == pytest.approx((0.0, 0.0, 0.0, 1.0))
    assert _apply(matrix, (0.0, 0.0, 0.0))[2] == pytest.approx(-cam.distance)