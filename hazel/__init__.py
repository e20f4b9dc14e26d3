"""A small layered game engine: events, layers, input, an orthographic camera and an OpenGL renderer."""

__version__ = "0.1.0"