# kglab

A small interactive 3D viewer for computer-graphics lab work. It opens a
window that shows the coordinate axes (X red, Y green, Z blue) and a figure
drawn from quadratic Bezier curves. Some of the curves have their control
points marked in red. An orbiting camera looks at the origin. You can drag it
around the scene and zoom it in and out.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running

```
kglab
```

The options are `--width` and `--height` for the window size (default 800 x
600, both must be positive) and `--title` for the window caption. To list them:

```
kglab --help
```

## Controls

- **Left mouse button + drag**: orbit the camera around the origin.
  While **G** is held, mouse movement is ignored and the camera stays still.
- **Mouse wheel**: zoom. One notch changes the camera distance by 1.2. Zooming
  in stops once the distance is 1 or less, and zooming out stops once it is
  100 or more.
- When the pointer leaves the window, the camera forgets the last pointer
  position. The next movement then starts from a fresh point and does not jump.

## Library use

You can use the parts without a window:

- `kglab.events.Event` is a thread-safe list of handlers. `reaction(func)`
  adds a handler. `remove_reaction(func)` and `remove_all_reactions()` take
  handlers away. `fire(sender, arg)` calls each handler in the order it was
  added, and `len(event)` gives the handler count.
- `kglab.camera.Camera` holds the orbit state: `distance`, the angles `fi1` and
  `fi2`, the position `x`, `y`, `z` and the up sign `nz`. Use
  `set_position(x, y, z)` to place it, and `calculate_position()` to update
  the position from the angles. `look_at_matrix()` returns the row-major view
  matrix. `kglab.camera.look_at(eye, center, up)` builds one for any eye
  point, and raises `ValueError` for a degenerate view.
- `kglab.scene.quadratic_bezier(p0, p1, p2, t)` evaluates a curve.
  `kglab.scene.bezier_points(p0, p1, p2, steps)` samples it `steps + 1` times.
  `kglab.scene.scene_curves()` returns the `Curve` objects that make up the
  figure.
- `kglab.engine.Engine` queues input as events. `process_pending()` applies
  any requested resize and then runs the queued handlers, which `render(delta)`
  also does before it draws each frame. `dispatch(Message(MessageKind..., ...))`
  turns window messages into those events. After a `CLOSE` message, the engine
  ignores all later messages.
- `kglab.app.LabWindow` connects a window's input and draw callbacks to an
  `Engine`.

## Limitations

The scene is fixed: it has only the axes and the built-in curves. There is no
way to load or save scenes, and no lighting or textures. Drawing needs a
display and an OpenGL context with the fixed-function pipeline.