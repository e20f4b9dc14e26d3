"""Example program: a coloured triangle and a blue square under a movable camera."""

from __future__ import annotations

from typing import Optional

from hazel import log
from hazel.application import Application, run_application
from hazel.buffer import (
    BufferLayout,
    ShaderDataType,
    create_index_buffer,
    create_vertex_buffer,
)
from hazel.camera import OrthographicCamera
from hazel.events import Event, EventDispatcher, KeyPressedEvent
from hazel.input import Input
from hazel.keycodes import Key
from hazel.layer import Layer
from hazel.renderer import RenderCommand, Renderer, create_vertex_array
from hazel.shader import Shader
from hazel.timestep import Timestep
from hazel.window import Window

_VERTEX_SRC = """
#version 330 core

layout(location = 0) in vec3 a_Position;
layout(location = 1) in vec4 a_Color;

uniform mat4 u_ViewProjection;

out vec3 v_Position;
out vec4 v_Color;

void main()
{
    v_Position = a_Position;
    v_Color = a_Color;
    gl_Position = u_ViewProjection * vec4(a_Position, 1.0);
}
"""

_FRAGMENT_SRC = """
#version 330 core
layout(location = 0) out vec4 color;

in vec3 v_Position;
in vec4 v_Color;

void main()
{
    color = v_Color;
}
"""

_BLUE_VERTEX_SRC = """
#version 330 core

layout(location = 0) in vec3 a_Position;
uniform mat4 u_ViewProjection;
out vec3 v_Position;

void main()
{
    v_Position = a_Position;
    gl_Position = u_ViewProjection * vec4(a_Position, 1.0);
}
"""

_BLUE_FRAGMENT_SRC = """
#version 330 core
layout(location = 0) out vec4 color;

in vec3 v_Position;

void main()
{
    color = vec4(0.2, 0.3, 0.8, 1.0);
}
"""


class ExampleLayer(Layer):
    """Draws the scene and moves the camera with the arrow keys and A/D."""

    move_speed = 5.0
    rotation_speed = 180.0

    def __init__(self) -> None:
        super().__init__("Example")
        self._camera = OrthographicCamera(-1.6, 1.6, -0.9, 0.9)
        self._camera_position = [0.0, 0.0, 0.0]
        self._camera_rotation = 0.0
        self._scene = None

    @property
    def camera(self) -> OrthographicCamera:
        return self._camera

    def on_attach(self) -> None:
        triangle = create_vertex_array()
        vertex_buffer = create_vertex_buffer([
            -0.5, -0.5, 0.0, 0.8, 0.2, 0.8, 1.0,
            0.5, -0.5, 0.0, 0.2, 0.0, 0.8, 1.0,
            0.0, 0.5, 0.0, 0.8, 0.8, 0.2, 1.0,
        ])
        vertex_buffer.layout = BufferLayout([
            (ShaderDataType.FLOAT3, "a_Position"),
            (ShaderDataType.FLOAT4, "a_Color"),
        ])
        triangle.add_vertex_buffer(vertex_buffer)
        triangle.set_index_buffer(create_index_buffer([0, 1, 2]))

        square = create_vertex_array()
        square_buffer = create_vertex_buffer([
            -0.75, -0.75, 0.0,
            0.75, -0.75, 0.0,
            0.75, 0.75, 0.0,
            -0.75, 0.75, 0.0,
        ])
        square_buffer.layout = BufferLayout([(ShaderDataType.FLOAT3, "a_Position")])
        square.add_vertex_buffer(square_buffer)
        square.set_index_buffer(create_index_buffer([0, 1, 2, 2, 3, 0]))

        self._scene = (
            (Shader(_BLUE_VERTEX_SRC, _BLUE_FRAGMENT_SRC), square),
            (Shader(_VERTEX_SRC, _FRAGMENT_SRC), triangle),
        )

    def on_update(self, ts: Timestep) -> None:
        try:
            log.client_logger().trace("Delta time: %ss", ts.seconds)
        except RuntimeError:
            pass
        step = float(ts)
        if Input.is_key_pressed(Key.LEFT):
            self._camera_position[0] -= self.move_speed * step
        elif Input.is_key_pressed(Key.RIGHT):
            self._camera_position[0] += self.move_speed * step

        if Input.is_key_pressed(Key.DOWN):
            self._camera_position[1] -= self.move_speed * step
        elif Input.is_key_pressed(Key.UP):
            self._camera_position[1] += self.move_speed * step

        if Input.is_key_pressed(Key.A):
            self._camera_rotation += self.rotation_speed * step
        if Input.is_key_pressed(Key.D):
            self._camera_rotation -= self.rotation_speed * step

        RenderCommand.set_clear_color((0.2, 0.2, 0.2, 1.0))
        RenderCommand.clear()

        self._camera.position = self._camera_position
        self._camera.rotation = self._camera_rotation

        Renderer.begin_scene(self._camera)
        for shader, vertex_array in self._scene or ():
            Renderer.submit(shader, vertex_array)
        Renderer.end_scene()

    def on_imgui_render(self) -> None:
        pass

    def on_event(self, event: Event) -> None:
        EventDispatcher(event).dispatch(KeyPressedEvent, self._on_key_pressed)

    def _on_key_pressed(self, event: KeyPressedEvent) -> bool:
        return False


class Sandbox(Application):
    def __init__(self, window: Optional[Window] = None) -> None:
        super().__init__(window)
        self.push_layer(ExampleLayer())


def create_application() -> Application:
    return Sandbox()


def main(argv: Optional[list[str]] = None) -> int:
    run_application(create_application)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())