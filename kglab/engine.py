"""Input routing and frame rendering for the lab scene."""

from __future__ import annotations

import enum
import functools
import math
import threading
from collections import deque
from dataclasses import dataclass
from typing import Callable

from kglab import scene
from kglab.camera import Camera
from kglab.events import Event

#: Field of view and clip planes of the perspective projection.
FIELD_OF_VIEW = 45.0
NEAR_PLANE = 0.2
FAR_PLANE = 200.0
AXIS_LENGTH = 10.0


def _short(value: int) -> int:
    """Wrap an integer to a signed 16-bit value, as window coordinates are."""
    return ((int(value) + 0x8000) & 0xFFFF) - 0x8000


@dataclass(frozen=True)
class MouseWheelEventArg:
    """Wheel rotation; one notch is 120 units."""

    value: float


@dataclass(frozen=True)
class MouseEventArg:
    """Mouse position in window coordinates, origin at the top left."""

    x: int
    y: int


@dataclass(frozen=True)
class KeyEventArg:
    """Virtual key code of a pressed or released key."""

    key: int


class MessageKind(enum.Enum):
    """Kinds of window messages the engine understands."""

    MOUSE_LEAVE = enum.auto()
    MOUSE_WHEEL = enum.auto()
    MOUSE_MOVE = enum.auto()
    SIZE = enum.auto()
    LBUTTON_DOWN = enum.auto()
    LBUTTON_UP = enum.auto()
    RBUTTON_DOWN = enum.auto()
    RBUTTON_UP = enum.auto()
    MBUTTON_DOWN = enum.auto()
    MBUTTON_UP = enum.auto()
    KEY_DOWN = enum.auto()
    KEY_UP = enum.auto()
    CLOSE = enum.auto()


@dataclass(frozen=True)
class Message:
    """A window message.

    ``x`` and ``y`` carry the mouse position, or the new width and height for
    ``SIZE``; ``delta`` is the wheel rotation and ``key`` the key code.
    """

    kind: MessageKind
    x: int = 0
    y: int = 0
    delta: float = 0.0
    key: int = 0


def _perspective(fovy: float, aspect: float, near: float, far: float) -> list[float]:
    """Column-major projection matrix equal to the one ``gluPerspective`` builds."""
    f = 1.0 / math.tan(math.radians(fovy) / 2.0)
    depth = near - far
    return [
        f / aspect, 0.0, 0.0, 0.0,
        0.0, f, 0.0, 0.0,
        0.0, 0.0, (far + near) / depth, -1.0,
        0.0, 0.0, 2.0 * far * near / depth, 0.0,
    ]


class Engine:
    """Collects input, runs its handlers before each frame and draws the frame."""

    def __init__(self, key_state: Callable[[int], bool] | None = None) -> None:
        self.key_state = key_state
        self._pressed: set[int] = set()
        self._lock = threading.Lock()
        self._pending: deque[Callable[[], None]] = deque()
        self._pending_size: tuple[int, int] | None = None
        self._projection_dirty = False
        self._gl_ready = False
        self.width = 0
        self.height = 0
        self.closed = False

        self.on_wheel = Event()
        self.on_mouse_move = Event()
        self.on_mouse_leave = Event()
        self.on_mouse_lup = Event()
        self.on_mouse_ldown = Event()
        self.on_mouse_rdown = Event()
        self.on_mouse_rup = Event()
        self.on_mouse_mdown = Event()
        self.on_mouse_mup = Event()
        self.on_key_up = Event()
        self.on_key_down = Event()

        self.camera = Camera(self.is_key_pressed)
        self.on_wheel.reaction(self.camera.zoom)
        self.on_mouse_move.reaction(self.camera.mouse_move)
        self.on_mouse_leave.reaction(self.camera.mouse_leave)
        self.on_mouse_ldown.reaction(self.camera.mouse_start_drag)
        self.on_mouse_lup.reaction(self.camera.mouse_stop_drag)

    def is_key_pressed(self, key: int) -> bool:
        """Whether the key with virtual code ``key`` is held right now."""
        if self.key_state is not None:
            return bool(self.key_state(key))
        return key in self._pressed

    def _queue(self, event: Event, arg: object) -> None:
        with self._lock:
            self._pending.append(functools.partial(event.fire, self, arg))

    def _queue_mouse(self, event: Event, x: int, y: int) -> None:
        self._queue(event, MouseEventArg(_short(x), _short(y)))

    def wheel_event(self, delta: float) -> None:
        self._queue(self.on_wheel, MouseWheelEventArg(delta))

    def mouse_move(self, x: int, y: int) -> None:
        self._queue_mouse(self.on_mouse_move, x, y)

    def mouse_leave(self, x: int, y: int) -> None:
        self._queue_mouse(self.on_mouse_leave, x, y)

    def mouse_ldown(self, x: int, y: int) -> None:
        self._queue_mouse(self.on_mouse_ldown, x, y)

    def mouse_lup(self, x: int, y: int) -> None:
        self._queue_mouse(self.on_mouse_lup, x, y)

    def mouse_rdown(self, x: int, y: int) -> None:
        self._queue_mouse(self.on_mouse_rdown, x, y)

    def mouse_rup(self, x: int, y: int) -> None:
        self._queue_mouse(self.on_mouse_rup, x, y)

    def mouse_mdown(self, x: int, y: int) -> None:
        self._queue_mouse(self.on_mouse_mdown, x, y)

    def mouse_mup(self, x: int, y: int) -> None:
        self._queue_mouse(self.on_mouse_mup, x, y)

    def key_down(self, key: int) -> None:
        self._pressed.add(key)
        self._queue(self.on_key_down, KeyEventArg(key))

    def key_up(self, key: int) -> None:
        self._pressed.discard(key)
        self._queue(self.on_key_up, KeyEventArg(key))

    def try_to_resize(self, width: int, height: int) -> None:
        """Request a resize that takes effect before the next frame."""
        with self._lock:
            self._pending_size = (width, height)

    def process_pending(self) -> None:
        """Apply a requested resize, then run queued handlers in arrival order."""
        with self._lock:
            size = self._pending_size
            self._pending_size = None
            pending = list(self._pending)
            self._pending.clear()
        if size is not None:
            self.resize(*size)
        for call in pending:
            call()

    def dispatch(self, message: Message) -> None:
        """Route a window message to the matching input method."""
        if self.closed:
            return
        kind = message.kind
        mouse = {
            MessageKind.MOUSE_MOVE: self.mouse_move,
            MessageKind.MOUSE_LEAVE: self.mouse_leave,
            MessageKind.LBUTTON_DOWN: self.mouse_ldown,
            MessageKind.LBUTTON_UP: self.mouse_lup,
            MessageKind.RBUTTON_DOWN: self.mouse_rdown,
            MessageKind.RBUTTON_UP: self.mouse_rup,
            MessageKind.MBUTTON_DOWN: self.mouse_mdown,
            MessageKind.MBUTTON_UP: self.mouse_mup,
        }
        if kind in mouse:
            mouse[kind](message.x, message.y)
        elif kind is MessageKind.MOUSE_WHEEL:
            self.wheel_event(message.delta)
        elif kind is MessageKind.SIZE:
            self.try_to_resize(_short(message.x), _short(message.y))
        elif kind is MessageKind.KEY_DOWN:
            self.key_down(message.key)
        elif kind is MessageKind.KEY_UP:
            self.key_up(message.key)
        elif kind is MessageKind.CLOSE:
            self.closed = True

    def resize(self, width: int, height: int) -> None:
        """Set the viewport size; the projection is rebuilt on the next frame."""
        self.width = width
        self.height = height
        self._projection_dirty = True

    def _apply_projection(self, gl) -> None:
        gl.glViewport(0, 0, self.width, self.height)
        aspect = self.width / self.height if self.height else float(self.width or 1)
        matrix = _perspective(FIELD_OF_VIEW, aspect, NEAR_PLANE, FAR_PLANE)
        gl.glMatrixMode(gl.GL_PROJECTION)
        gl.glLoadMatrixd((gl.GLdouble * 16)(*matrix))
        gl.glMatrixMode(gl.GL_MODELVIEW)
        gl.glLoadIdentity()
        self._projection_dirty = False

    def draw_axes(self) -> None:
        """Draw the X, Y and Z axes in red, green and blue."""
        from pyglet.gl import gl_compat as gl

        gl.glDisable(gl.GL_LIGHTING)
        gl.glDisable(gl.GL_TEXTURE_2D)
        gl.glBegin(gl.GL_LINES)
        for color, end in (
            ((1.0, 0.0, 0.0), (AXIS_LENGTH, 0.0, 0.0)),
            ((0.0, 1.0, 0.0), (0.0, AXIS_LENGTH, 0.0)),
            ((0.0, 0.0, 1.0), (0.0, 0.0, AXIS_LENGTH)),
        ):
            gl.glColor3f(*color)
            gl.glVertex3d(0.0, 0.0, 0.0)
            gl.glVertex3d(*end)
        gl.glEnd()
        gl.glColor3f(0.0, 0.0, 0.0)

    def render(self, delta: float) -> None:
        """Handle pending input and draw one frame into the current GL context."""
        from pyglet.gl import gl_compat as gl

        if not self._gl_ready:
            gl.glClearColor(1.0, 1.0, 1.0, 1.0)
            gl.glEnable(gl.GL_DEPTH_TEST)
            self.camera.calculate_position()
            self._gl_ready = True

        self.process_pending()
        if self._projection_dirty:
            self._apply_projection(gl)

        gl.glClear(gl.GL_COLOR_BUFFER_BIT | gl.GL_DEPTH_BUFFER_BIT)
        self.camera.set_up()
        self.draw_axes()
        scene.render(delta)