"""An orbiting camera that looks at the origin."""

from __future__ import annotations

import math
from typing import Any, Callable, Sequence

Vector = Sequence[float]
Matrix = tuple[tuple[float, float, float, float], ...]

#: Virtual key code that freezes camera rotation while held.
DRAG_LOCK_KEY = ord("G")

MIN_DISTANCE = 1.0
MAX_DISTANCE = 100.0
ZOOM_STEP = 0.01
ROTATE_STEP = 0.01


def _sub(a: Vector, b: Vector) -> tuple[float, float, float]:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def _cross(a: Vector, b: Vector) -> tuple[float, float, float]:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _dot(a: Vector, b: Vector) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def _normalize(v: Vector, what: str) -> tuple[float, float, float]:
    length = math.sqrt(_dot(v, v))
    if length == 0.0:
        raise ValueError(f"degenerate view: {what} has zero length")
    return (v[0] / length, v[1] / length, v[2] / length)


def look_at(eye: Vector, center: Vector, up: Vector) -> Matrix:
    """Return the row-major view matrix that ``gluLookAt`` would build."""
    forward = _normalize(_sub(center, eye), "view direction")
    side = _normalize(_cross(forward, up), "side vector")
    upward = _cross(side, forward)
    return (
        (side[0], side[1], side[2], -_dot(side, eye)),
        (upward[0], upward[1], upward[2], -_dot(upward, eye)),
        (-forward[0], -forward[1], -forward[2], _dot(forward, eye)),
        (0.0, 0.0, 0.0, 1.0),
    )


class Camera:
    """Spherical-coordinate camera driven by mouse drag and wheel events."""

    def __init__(self, is_key_pressed: Callable[[int], bool] | None = None) -> None:
        self.is_key_pressed = is_key_pressed
        self.distance = 5.0
        self.nz = 1
        self.fi1 = 1.0
        self.fi2 = 0.5
        self.x = 0.0
        self.y = 0.0
        self.z = 0.0
        self.mouse_x: int | None = None
        self.mouse_y: int | None = None
        self.drag = False
        self.calculate_position()

    def _rotation_locked(self) -> bool:
        return self.is_key_pressed is not None and bool(self.is_key_pressed(DRAG_LOCK_KEY))

    def set_position(self, x: float, y: float, z: float) -> None:
        """Place the camera at ``(x, y, z)`` and derive distance and angles."""
        self.x, self.y, self.z = x, y, z
        self.distance = math.sqrt(x * x + y * y + z * z)
        self.fi1 = math.atan2(y, x)
        self.fi2 = math.atan2(z, math.sqrt(x * x + y * y))

    def calculate_position(self) -> None:
        """Recompute the Cartesian position and up direction from the angles."""
        cos2 = math.cos(self.fi2)
        self.x = self.distance * cos2 * math.cos(self.fi1)
        self.y = self.distance * cos2 * math.sin(self.fi1)
        self.z = self.distance * math.sin(self.fi2)
        self.nz = -1 if cos2 <= 0 else 1

    def zoom(self, sender: Any, arg: Any) -> None:
        """Move closer or further by the wheel value, within limits."""
        if arg.value < 0 and self.distance <= MIN_DISTANCE:
            return
        if arg.value > 0 and self.distance >= MAX_DISTANCE:
            return
        self.distance += ZOOM_STEP * arg.value
        self.calculate_position()

    def mouse_move(self, sender: Any, arg: Any) -> None:
        """Rotate around the origin while dragging."""
        if self._rotation_locked():
            return
        if self.mouse_x is None or self.mouse_y is None:
            self.mouse_x, self.mouse_y = arg.x, arg.y
            return
        dx = self.mouse_x - arg.x
        dy = self.mouse_y - arg.y
        self.mouse_x, self.mouse_y = arg.x, arg.y
        if self.drag:
            self.fi1 += ROTATE_STEP * dx
            self.fi2 -= ROTATE_STEP * dy
            self.calculate_position()

    def mouse_leave(self, sender: Any, arg: Any) -> None:
        """Forget the last mouse position."""
        self.mouse_x = None
        self.mouse_y = None

    def mouse_start_drag(self, sender: Any, arg: Any) -> None:
        """Begin rotating on mouse movement."""
        self.drag = True

    def mouse_stop_drag(self, sender: Any, arg: Any) -> None:
        """Stop rotating and forget the last mouse position."""
        self.drag = False
        self.mouse_x = None
        self.mouse_y = None

    def look_at_matrix(self) -> Matrix:
        """View matrix looking from the camera at the origin."""
        return look_at((self.x, self.y, self.z), (0.0, 0.0, 0.0), (0.0, 0.0, float(self.nz)))

    def set_up(self) -> None:
        """Load the camera's view matrix into the current GL context."""
        from pyglet.gl import gl_compat as gl

        matrix = self.look_at_matrix()
        column_major = [matrix[row][col] for col in range(4) for row in range(4)]
        gl.glMatrixMode(gl.GL_MODELVIEW)
        gl.glLoadMatrixd((gl.GLdouble * 16)(*column_major))