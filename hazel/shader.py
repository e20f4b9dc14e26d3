"""GLSL shader programs built from vertex and fragment sources."""

from __future__ import annotations

from typing import Any

import numpy as np

# The shader backend (pyglet's shader module); loaded on first use so that
# importing this module does not need a GL context.
BACKEND: Any = None


def _backend() -> Any:
    global BACKEND
    if BACKEND is None:
        from pyglet.graphics import shader as backend

        BACKEND = backend
    return BACKEND


class ShaderError(RuntimeError):
    """A shader failed to compile or a program failed to link."""

    def __init__(self, message: str, log: str = "") -> None:
        super().__init__(f"{message}\n{log}" if log else message)
        self.log = log


class Shader:
    """A linked vertex and fragment shader program."""

    def __init__(self, vertex_src: str, fragment_src: str) -> None:
        backend = _backend()

        try:
            vertex = backend.Shader(vertex_src, "vertex")
        except backend.ShaderException as exc:
            raise ShaderError("Vertex shader compilation failure!", str(exc)) from exc

        try:
            fragment = backend.Shader(fragment_src, "fragment")
        except backend.ShaderException as exc:
            vertex.delete()
            raise ShaderError("Fragment shader compilation failure!", str(exc)) from exc

        try:
            program = backend.ShaderProgram(vertex, fragment)
        except backend.ShaderException as exc:
            vertex.delete()
            fragment.delete()
            raise ShaderError("Shader link failure!", str(exc)) from exc

        self._program = program

    @property
    def renderer_id(self) -> int:
        return self._program.id

    def bind(self) -> None:
        self._program.use()

    def unbind(self) -> None:
        self._program.stop()

    def upload_uniform_mat4(self, name: str, matrix: Any) -> None:
        """Set a ``mat4`` uniform from a 4x4 row-major matrix.

        A name the program does not use is ignored.
        """
        values = np.asarray(matrix, dtype=np.float32)
        if values.shape != (4, 4):
            raise ValueError("matrix must be 4x4")
        if name not in self._program.uniforms:
            return
        self._program[name] = tuple(values.flatten(order="F").tolist())

    def delete(self) -> None:
        """Release the program object."""
        self._program.delete()

    def __enter__(self) -> "Shader":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.delete()