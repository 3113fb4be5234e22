"""Interactive 3D viewer: thread-safe events, an orbiting camera, a Bezier curve scene and its window."""

__version__ = "0.1.0"
__all__ = ["app", "camera", "engine", "events", "scene"]