"""The application window and its command line."""

from __future__ import annotations

import argparse
import time

from kglab.engine import Engine, Message, MessageKind

DEFAULT_TITLE = "Лабораторка по КГ"
DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 600

#: Wheel units reported for one notch of the mouse wheel.
WHEEL_DELTA = 120

# Mouse button bits as reported by the windowing layer.
_LEFT, _MIDDLE, _RIGHT = 1, 2, 4

_PRESS = {
    _LEFT: MessageKind.LBUTTON_DOWN,
    _MIDDLE: MessageKind.MBUTTON_DOWN,
    _RIGHT: MessageKind.RBUTTON_DOWN,
}
_RELEASE = {
    _LEFT: MessageKind.LBUTTON_UP,
    _MIDDLE: MessageKind.MBUTTON_UP,
    _RIGHT: MessageKind.RBUTTON_UP,
}


def _virtual_key(symbol: int) -> int:
    """Map a key symbol to a virtual key code: letters become upper case."""
    if ord("a") <= symbol <= ord("z"):
        return symbol - ord("a") + ord("A")
    return symbol


class LabWindow:
    """A window that forwards its input to an :class:`Engine` and draws its frames."""

    def __init__(self, engine: Engine, **kwargs) -> None:
        self.engine = engine
        self._last_frame = time.perf_counter()
        self.window = self._create_window(**kwargs)
        self.window.push_handlers(self)

    def _create_window(self, **kwargs):
        import pyglet

        return pyglet.window.Window(**kwargs)

    def _top_down(self, y: int) -> int:
        return self.window.height - y

    def _send(self, kind: MessageKind, x: int = 0, y: int = 0) -> None:
        self.engine.dispatch(Message(kind, int(x), self._top_down(int(y))))

    def on_draw(self) -> None:
        now = time.perf_counter()
        delta = now - self._last_frame
        self._last_frame = now
        self.engine.render(delta)

    def on_resize(self, width: int, height: int) -> bool:
        self.engine.dispatch(Message(MessageKind.SIZE, width, height))
        return True

    def on_mouse_motion(self, x, y, dx, dy) -> None:
        self._send(MessageKind.MOUSE_MOVE, x, y)

    def on_mouse_drag(self, x, y, dx, dy, buttons, modifiers) -> None:
        self._send(MessageKind.MOUSE_MOVE, x, y)

    def on_mouse_leave(self, x, y) -> None:
        self._send(MessageKind.MOUSE_LEAVE, x, y)

    def on_mouse_press(self, x, y, button, modifiers) -> None:
        kind = _PRESS.get(button)
        if kind is not None:
            self._send(kind, x, y)

    def on_mouse_release(self, x, y, button, modifiers) -> None:
        kind = _RELEASE.get(button)
        if kind is not None:
            self._send(kind, x, y)

    def on_mouse_scroll(self, x, y, scroll_x, scroll_y) -> None:
        self.engine.dispatch(Message(MessageKind.MOUSE_WHEEL, delta=scroll_y * WHEEL_DELTA))

    def on_key_press(self, symbol, modifiers) -> None:
        self.engine.dispatch(Message(MessageKind.KEY_DOWN, key=_virtual_key(symbol)))

    def on_key_release(self, symbol, modifiers) -> None:
        self.engine.dispatch(Message(MessageKind.KEY_UP, key=_virtual_key(symbol)))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="kglab", description="Show the lab scene.")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH, help="window width")
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT, help="window height")
    parser.add_argument("--title", default=DEFAULT_TITLE, help="window title")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.width <= 0 or args.height <= 0:
        build_parser().error("width and height must be positive")

    import pyglet

    engine = Engine()
    LabWindow(
        engine,
        width=args.width,
        height=args.height,
        caption=args.title,
        resizable=True,
    )
    pyglet.app.run()
    engine.dispatch(Message(MessageKind.CLOSE))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())