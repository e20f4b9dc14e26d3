# hazel

A small layered game engine. An application owns a window and a stack of
layers. Every frame each layer is updated with the elapsed `Timestep` and
then given its `on_imgui_render` hook; window events are passed down the
stack from the topmost overlay until one marks them handled. Drawing goes
through an OpenGL backend (via pyglet) with vertex and index buffers,
buffer layouts, shaders and an orthographic camera.

## Install

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Try the sandbox

    hazel-sandbox

It opens a window showing a coloured triangle over a blue square. The arrow
keys move the camera, and `A` / `D` rotate it. Closing the window ends the
program.

## Writing an application

```python
from hazel.application import Application, run_application
from hazel.events import EventDispatcher, KeyPressedEvent
from hazel.keycodes import Key
from hazel.layer import Layer
from hazel.log import client_logger


class HelloLayer(Layer):
    def __init__(self):
        super().__init__("Hello")

    def on_update(self, ts):
        client_logger().debug("frame took %.2f ms", ts.milliseconds)

    def on_event(self, event):
        EventDispatcher(event).dispatch(KeyPressedEvent, self._on_key)

    def _on_key(self, event):
        if event.key_code == Key.ESCAPE:
            client_logger().info("escape pressed")
            return True
        return False


class HelloApp(Application):
    def __init__(self, window=None):
        super().__init__(window)
        self.push_layer(HelloLayer())


run_application(HelloApp)
```

`run_application` sets up the `HAZEL` and `APP` loggers, builds the
application with the given factory, runs its loop and closes it afterwards.
Only one `Application` may exist at a time; `Application.get()` returns it.

## Building blocks

- `hazel.events`: `Event` and its subclasses (`WindowResizeEvent`,
  `WindowCloseEvent`, `KeyPressedEvent`, `KeyReleasedEvent`,
  `KeyTypedEvent`, `MouseMovedEvent`, `MouseScrolledEvent`,
  `MouseButtonPressedEvent`, `MouseButtonReleasedEvent`, ...),
  `EventType`, `EventCategory` and `EventDispatcher`.
- `hazel.layer`: `Layer` and `LayerStack`; layers are kept below overlays,
  and iteration runs from bottom to top.
- `hazel.timestep`: `Timestep`, a float of seconds with `seconds` and
  `milliseconds`.
- `hazel.keycodes`: `Key` and `MouseButton` codes.
- `hazel.window`: `WindowProps`, `Window`, `DesktopWindow` and
  `create_window`; the window turns native input into engine events and
  keeps the currently held keys, buttons and cursor position.
- `hazel.input`: `Input` for polling keys and the mouse
  (`is_key_pressed`, `is_mouse_button_pressed`, `get_mouse_position`,
  `get_mouse_x`, `get_mouse_y`); by default it reads the running
  application's window.
- `hazel.buffer`: `ShaderDataType`, `BufferElement`, `BufferLayout`,
  `create_vertex_buffer`, `create_index_buffer`.
- `hazel.camera`: `OrthographicCamera` with `position`, `rotation` (degrees)
  and its projection, view and view-projection matrices as numpy arrays.
- `hazel.renderer`: `Renderer` (`begin_scene`, `submit`, `end_scene`),
  `RenderCommand`, `RendererAPI`, `GraphicsAPI`, `VertexArray`,
  `create_vertex_array`.
- `hazel.opengl`: the OpenGL context, buffers, vertex array and renderer API.
- `hazel.shader`: `Shader`, raising `ShaderError` when compiling or linking
  fails.
- `hazel.log`: `init`, `core_logger`, `client_logger`; loggers also offer
  `trace` and `fatal`.

## What it does not do

- There is no immediate-mode debug UI. `Layer.on_imgui_render` is only a
  per-frame hook; nothing draws a user interface for it.
- OpenGL is the only graphics backend. Selecting `GraphicsAPI.NONE` makes the
  `create_*` functions raise `RuntimeError`.
- `Input` knows only what the window has reported through its events; it
  does not query the operating system directly.