"""OpenGL implementations of the graphics context, buffers, vertex arrays and draw calls."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Sequence

from hazel.buffer import BufferLayout, IndexBuffer, ShaderDataType, VertexBuffer
from hazel.renderer import RendererAPI, VertexArray

# The OpenGL binding; loaded on first use so that importing does not need a context.
GL: Any = None


def _gl() -> Any:
    global GL
    if GL is None:
        from pyglet import gl

        GL = gl
    return GL


class GraphicsContext(ABC):
    """A rendering context bound to a window."""

    @abstractmethod
    def init(self) -> None:
        """Make the context ready for drawing."""

    @abstractmethod
    def swap_buffers(self) -> None:
        """Present the finished frame."""


class OpenGLContext(GraphicsContext):
    """OpenGL context of a window that offers ``switch_to`` and ``flip``."""

    def __init__(self, window_handle: Any) -> None:
        if window_handle is None:
            raise ValueError("Window handle is null!")
        self._window = window_handle

    def init(self) -> None:
        self._window.switch_to()

    def swap_buffers(self) -> None:
        self._window.flip()


def shader_data_type_to_gl_base_type(data_type: ShaderDataType) -> int:
    """The OpenGL component type of a shader data type."""
    gl = _gl()
    if data_type in (
        ShaderDataType.FLOAT,
        ShaderDataType.FLOAT2,
        ShaderDataType.FLOAT3,
        ShaderDataType.FLOAT4,
        ShaderDataType.MAT3,
        ShaderDataType.MAT4,
    ):
        return gl.GL_FLOAT
    if data_type in (
        ShaderDataType.INT,
        ShaderDataType.INT2,
        ShaderDataType.INT3,
        ShaderDataType.INT4,
    ):
        return gl.GL_INT
    if data_type is ShaderDataType.BOOL:
        return gl.GL_BOOL
    raise ValueError(f"Unknown ShaderDataType: {data_type!r}")


def _create_buffer(gl: Any) -> int:
    handle = gl.GLuint(0)
    gl.glCreateBuffers(1, handle)
    return handle.value


def _upload(gl: Any, target: int, element_type: Any, values: list) -> None:
    data = (element_type * len(values))(*values)
    gl.glBufferData(target, memoryview(data).nbytes, data, gl.GL_STATIC_DRAW)


class OpenGLVertexBuffer(VertexBuffer):
    """Static vertex data in an OpenGL array buffer."""

    def __init__(self, vertices: Sequence[float]) -> None:
        gl = _gl()
        values = [float(v) for v in vertices]
        self._renderer_id = _create_buffer(gl)
        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, self._renderer_id)
        _upload(gl, gl.GL_ARRAY_BUFFER, gl.GLfloat, values)
        self.layout = BufferLayout()

    @property
    def renderer_id(self) -> int:
        return self._renderer_id

    def bind(self) -> None:
        gl = _gl()
        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, self._renderer_id)

    def unbind(self) -> None:
        gl = _gl()
        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, 0)

    def delete(self) -> None:
        gl = _gl()
        gl.glDeleteBuffers(1, gl.GLuint(self._renderer_id))


class OpenGLIndexBuffer(IndexBuffer):
    """Static 32-bit indices in an OpenGL element array buffer."""

    def __init__(self, indices: Sequence[int]) -> None:
        gl = _gl()
        values = [int(i) for i in indices]
        self._count = len(values)
        self._renderer_id = _create_buffer(gl)
        gl.glBindBuffer(gl.GL_ELEMENT_ARRAY_BUFFER, self._renderer_id)
        _upload(gl, gl.GL_ELEMENT_ARRAY_BUFFER, gl.GLuint, values)

    @property
    def renderer_id(self) -> int:
        return self._renderer_id

    @property
    def count(self) -> int:
        return self._count

    def bind(self) -> None:
        gl = _gl()
        gl.glBindBuffer(gl.GL_ELEMENT_ARRAY_BUFFER, self._renderer_id)

    def unbind(self) -> None:
        gl = _gl()
        gl.glBindBuffer(gl.GL_ELEMENT_ARRAY_BUFFER, 0)

    def delete(self) -> None:
        gl = _gl()
        gl.glDeleteBuffers(1, gl.GLuint(self._renderer_id))


class OpenGLVertexArray(VertexArray):
    """An OpenGL vertex array object."""

    def __init__(self) -> None:
        gl = _gl()
        handle = gl.GLuint(0)
        gl.glCreateVertexArrays(1, handle)
        self._renderer_id = handle.value
        self._vertex_buffers: list[VertexBuffer] = []
        self._index_buffer: IndexBuffer | None = None

    @property
    def renderer_id(self) -> int:
        return self._renderer_id

    def bind(self) -> None:
        _gl().glBindVertexArray(self._renderer_id)

    def unbind(self) -> None:
        _gl().glBindVertexArray(0)

    def add_vertex_buffer(self, vertex_buffer: VertexBuffer) -> None:
        layout = vertex_buffer.layout
        if not len(layout):
            raise ValueError("Vertex Buffer has no layout!")
        gl = _gl()
        gl.glBindVertexArray(self._renderer_id)
        vertex_buffer.bind()
        for index, element in enumerate(layout):
            gl.glEnableVertexAttribArray(index)
            gl.glVertexAttribPointer(
                index,
                element.component_count,
                shader_data_type_to_gl_base_type(element.data_type),
                gl.GL_TRUE if element.normalized else gl.GL_FALSE,
                layout.stride,
                element.offset,
            )
        self._vertex_buffers.append(vertex_buffer)

    def set_index_buffer(self, index_buffer: IndexBuffer) -> None:
        _gl().glBindVertexArray(self._renderer_id)
        index_buffer.bind()
        self._index_buffer = index_buffer

    @property
    def vertex_buffers(self) -> tuple[VertexBuffer, ...]:
        return tuple(self._vertex_buffers)

    @property
    def index_buffer(self) -> IndexBuffer | None:
        return self._index_buffer

    def delete(self) -> None:
        gl = _gl()
        gl.glDeleteVertexArrays(1, gl.GLuint(self._renderer_id))


class OpenGLRendererAPI(RendererAPI):
    """Drawing operations through OpenGL."""

    def set_clear_color(self, color: Sequence[float]) -> tuple[float, float, float, float]:
        """Set the clear colour; returns the colour as applied."""
        r, g, b, a = (float(c) for c in color)
        _gl().glClearColor(r, g, b, a)
        return (r, g, b, a)

    def clear(self) -> int:
        """Clear colour and depth; returns the buffer mask that was cleared."""
        gl = _gl()
        mask = gl.GL_COLOR_BUFFER_BIT | gl.GL_DEPTH_BUFFER_BIT
        gl.glClear(mask)
        return mask

    def draw_indexed(self, vertex_array: VertexArray) -> int:
        """Draw the indexed triangles; returns the number of indices drawn."""
        index_buffer = vertex_array.index_buffer
        if index_buffer is None:
            raise RuntimeError("vertex array has no index buffer")
        gl = _gl()
        count = index_buffer.count
        gl.glDrawElements(gl.GL_TRIANGLES, count, gl.GL_UNSIGNED_INT, None)
        return count