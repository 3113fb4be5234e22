"""The drawn scene: a figure made of quadratic Bézier curves."""

from __future__ import annotations

from dataclasses import dataclass

Point = tuple[float, float]

CURVE_COLOR = (0.2, 0.7, 1.0)
POINT_COLOR = (1.0, 0.0, 0.0)
LINE_WIDTH = 3.0
POINT_SIZE = 6.0
STEPS = 100


@dataclass(frozen=True)
class Curve:
    """A quadratic Bézier curve and whether its control points are marked."""

    control: tuple[Point, Point, Point]
    show_control_points: bool = False


def quadratic_bezier(p0: Point, p1: Point, p2: Point, t: float) -> Point:
    """Point of the quadratic Bézier curve at parameter ``t``."""
    a = (1 - t) * (1 - t)
    b = 2 * (1 - t) * t
    c = t * t
    return (a * p0[0] + b * p1[0] + c * p2[0], a * p0[1] + b * p1[1] + c * p2[1])


def bezier_points(p0: Point, p1: Point, p2: Point, steps: int = STEPS) -> list[Point]:
    """Sample the curve at ``steps + 1`` evenly spaced parameters from 0 to 1."""
    if steps < 1:
        raise ValueError("steps must be at least 1")
    return [quadratic_bezier(p0, p1, p2, i / steps) for i in range(steps + 1)]


def scene_curves() -> list[Curve]:
    """The curves of the scene in drawing order."""
    return [
        Curve(((2.5, 3.5), (3.5, 0.5), (2.5, -3.5))),
        Curve(((-2.5, 3.5), (0.0, 7.5), (2.5, 3.5)), show_control_points=True),
        Curve(((-2.5, 3.5), (0.0, -0.5), (2.5, 3.5))),
        Curve(((-2.5, -3.5), (0.0, 0.5), (2.5, -3.5)), show_control_points=True),
        Curve(((-2.5, -3.5), (0.0, -7.5), (2.5, -3.5))),
    ]


def render(delta_time: float) -> None:
    """Draw the scene into the current GL context."""
    from pyglet.gl import gl_compat as gl

    gl.glLineWidth(LINE_WIDTH)
    for curve in scene_curves():
        gl.glColor3f(*CURVE_COLOR)
        gl.glBegin(gl.GL_LINE_STRIP)
        for x, y in bezier_points(*curve.control, STEPS):
            gl.glVertex2f(x, y)
        gl.glEnd()

        if curve.show_control_points:
            gl.glPointSize(POINT_SIZE)
            gl.glColor3f(*POINT_COLOR)
            gl.glBegin(gl.GL_POINTS)
            for x, y in curve.control:
                gl.glVertex2f(x, y)
            gl.glEnd()