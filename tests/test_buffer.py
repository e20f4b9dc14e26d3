import pytest

from hazel.buffer import (
    BufferElement,
    BufferLayout,
    IndexBuffer,
    ShaderDataType,
    VertexBuffer,
    shader_data_type_size,
)


@pytest.mark.parametrize(
    "data_type, size",
    [
        (ShaderDataType.FLOAT, 4),
        (ShaderDataType.FLOAT2, 4 * 2),
        (ShaderDataType.FLOAT3, 4 * 3),
        (ShaderDataType.FLOAT4, 4 * 4),
        (ShaderDataType.MAT3, 4 * 3 * 3),
        (ShaderDataType.MAT4, 4 * 4 * 4),
        (ShaderDataType.INT, 4),
        (ShaderDataType.INT2, 4 * 2),
        (ShaderDataType.INT3, 4 * 3),
        (ShaderDataType.INT4, 4 * 4),
        (ShaderDataType.BOOL, 1),
    ],
)
def test_shader_data_type_size(data_type, size):
    assert shader_data_type_size(data_type) == size
    assert BufferElement(data_type, "x").size == size


@pytest.mark.parametrize(
    "data_type, count",
    [
        (ShaderDataType.FLOAT, 1),
        (ShaderDataType.FLOAT2, 2),
        (ShaderDataType.FLOAT3, 3),
        (ShaderDataType.FLOAT4, 4),
        (ShaderDataType.INT, 1),
        (ShaderDataType.INT2, 2),
        (ShaderDataType.INT3, 3),
        (ShaderDataType.INT4, 4),
        (ShaderDataType.MAT3, 3 * 3),
        (ShaderDataType.MAT4, 4 * 4),
        (ShaderDataType.BOOL, 1),
    ],
)
def test_component_count(data_type, count):
    assert BufferElement(data_type, "x").component_count == count


def test_none_type_is_rejected():
    with pytest.raises(ValueError):
        shader_data_type_size(ShaderDataType.NONE)
    with pytest.raises(ValueError):
        BufferElement(ShaderDataType.NONE, "x")


def test_element_defaults():
    element = BufferElement(ShaderDataType.FLOAT3, "a_Position")
    assert element.name == "a_Position"
    assert element.offset == 0
    assert element.normalized is False


def test_layout_offsets_are_cumulative():
    layout = BufferLayout(
        [
            BufferElement(ShaderDataType.FLOAT3, "a_Position"),
            BufferElement(ShaderDataType.FLOAT4, "a_Color"),
            BufferElement(ShaderDataType.FLOAT2, "a_TexCoord"),
        ]
    )
    elements = list(layout)
    assert len(layout) == 3
    assert [e.name for e in elements] == ["a_Position", "a_Color", "a_TexCoord"]
    assert elements[0].offset == 0
    for previous, current in zip(elements, elements[1:]):
        assert current.offset == previous.offset + previous.size
    assert layout.stride == sum(e.size for e in elements)


def test_layout_accepts_tuples():
    from_tuples = BufferLayout(
        [(ShaderDataType.FLOAT3, "a_Position"), (ShaderDataType.FLOAT4, "a_Color")]
    )
    from_elements = BufferLayout(
        [
            BufferElement(ShaderDataType.FLOAT3, "a_Position"),
            BufferElement(ShaderDataType.FLOAT4, "a_Color"),
        ]
    )
    assert from_tuples == from_elements
    assert from_tuples.stride == from_elements.stride


def test_empty_layout():
    layout = BufferLayout()
    assert layout.stride == 0
    assert len(layout) == 0
    assert list(layout) == []


def test_layout_does_not_change_input_elements():
    element = BufferElement(ShaderDataType.FLOAT4, "a_Color")
    BufferLayout([BufferElement(ShaderDataType.FLOAT3, "a_Position"), element])
    assert element.offset == 0


class _MemoryVertexBuffer(VertexBuffer):
    def __init__(self):
        self.bound = False

    def bind(self):
        self.bound = True

    def unbind(self):
        self.bound = False


def test_vertex_buffer_layout_defaults_to_empty_and_can_be_set():
    vb = _MemoryVertexBuffer()
    assert len(vb.layout) == 0
    layout = BufferLayout([(ShaderDataType.FLOAT3, "a_Position")])
    vb.layout = layout
    assert vb.layout == layout
    assert len(_MemoryVertexBuffer().layout) == 0


def test_abstract_buffers_cannot_be_instantiated():
    with pytest.raises(TypeError):
        VertexBuffer()
    with pytest.raises(TypeError):
        IndexBuffer()