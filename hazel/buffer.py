"""Vertex layouts and the abstract vertex and index buffers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Iterable, Iterator, Sequence, Union


class ShaderDataType(Enum):
    NONE = 0
    FLOAT = 1
    FLOAT2 = 2
    FLOAT3 = 3
    FLOAT4 = 4
    MAT3 = 5
    MAT4 = 6
    INT = 7
    INT2 = 8
    INT3 = 9
    INT4 = 10
    BOOL = 11


_SIZES = {
    ShaderDataType.FLOAT: 4,
    ShaderDataType.FLOAT2: 4 * 2,
    ShaderDataType.FLOAT3: 4 * 3,
    ShaderDataType.FLOAT4: 4 * 4,
    ShaderDataType.MAT3: 4 * 3 * 3,
    ShaderDataType.MAT4: 4 * 4 * 4,
    ShaderDataType.INT: 4,
    ShaderDataType.INT2: 4 * 2,
    ShaderDataType.INT3: 4 * 3,
    ShaderDataType.INT4: 4 * 4,
    ShaderDataType.BOOL: 1,
}

_COMPONENTS = {
    ShaderDataType.FLOAT: 1,
    ShaderDataType.FLOAT2: 2,
    ShaderDataType.FLOAT3: 3,
    ShaderDataType.FLOAT4: 4,
    ShaderDataType.INT: 1,
    ShaderDataType.INT2: 2,
    ShaderDataType.INT3: 3,
    ShaderDataType.INT4: 4,
    ShaderDataType.MAT3: 3 * 3,
    ShaderDataType.MAT4: 4 * 4,
    ShaderDataType.BOOL: 1,
}


def shader_data_type_size(data_type: ShaderDataType) -> int:
    """Size in bytes of one value of ``data_type``."""
    try:
        return _SIZES[data_type]
    except KeyError:
        raise ValueError(f"Unknown ShaderDataType: {data_type!r}") from None


@dataclass(frozen=True)
class BufferElement:
    """One named attribute of a vertex."""

    data_type: ShaderDataType
    name: str
    normalized: bool = False
    offset: int = 0
    size: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "size", shader_data_type_size(self.data_type))

    @property
    def component_count(self) -> int:
        try:
            return _COMPONENTS[self.data_type]
        except KeyError:
            raise ValueError(f"Unknown ShaderDataType: {self.data_type!r}") from None


ElementSpec = Union[BufferElement, Sequence]


class BufferLayout:
    """An ordered, immutable list of elements with computed offsets and stride."""

    __slots__ = ("_elements", "_stride")

    def __init__(self, elements: Iterable[ElementSpec] = ()) -> None:
        placed: list[BufferElement] = []
        offset = 0
        for spec in elements:
            element = spec if isinstance(spec, BufferElement) else BufferElement(*spec)
            placed.append(replace(element, offset=offset))
            offset += element.size
        self._elements = tuple(placed)
        self._stride = offset

    @property
    def stride(self) -> int:
        return self._stride

    @property
    def elements(self) -> tuple[BufferElement, ...]:
        return self._elements

    def __iter__(self) -> Iterator[BufferElement]:
        return iter(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BufferLayout):
            return NotImplemented
        return self._elements == other._elements

    def __hash__(self) -> int:
        return hash(self._elements)

    def __repr__(self) -> str:
        return f"BufferLayout({list(self._elements)!r})"


class VertexBuffer(ABC):
    """GPU buffer of vertex data described by ``layout``."""

    layout: BufferLayout = BufferLayout()

    @abstractmethod
    def bind(self) -> None:
        """Make this buffer the current vertex buffer."""

    @abstractmethod
    def unbind(self) -> None:
        """Unbind any current vertex buffer."""


class IndexBuffer(ABC):
    """GPU buffer of vertex indices."""

    @abstractmethod
    def bind(self) -> None:
        """Make this buffer the current index buffer."""

    @abstractmethod
    def unbind(self) -> None:
        """Unbind any current index buffer."""

    @property
    @abstractmethod
    def count(self) -> int:
        """Number of indices held."""


def create_vertex_buffer(vertices: Sequence[float]) -> VertexBuffer:
    """Create a vertex buffer for the active graphics API."""
    from hazel.renderer import GraphicsAPI, Renderer

    api = Renderer.get_api()
    if api is GraphicsAPI.OPENGL:
        from hazel.opengl import OpenGLVertexBuffer

        return OpenGLVertexBuffer(vertices)
    if api is GraphicsAPI.NONE:
        raise RuntimeError("RendererAPI::None is currently not supported")
    raise RuntimeError("Unknown renderer API")


def create_index_buffer(indices: Sequence[int]) -> IndexBuffer:
    """Create an index buffer for the active graphics API."""
    from hazel.renderer import GraphicsAPI, Renderer

    api = Renderer.get_api()
    if api is GraphicsAPI.OPENGL:
        from hazel.opengl import OpenGLIndexBuffer

        return OpenGLIndexBuffer(indices)
    if api is GraphicsAPI.NONE:
        raise RuntimeError("RendererAPI::None is currently not supported")
    raise RuntimeError("Unknown renderer API")