import pytest

from hazel.application import Application, run_application
from hazel.events import KeyPressedEvent, WindowCloseEvent
from hazel.layer import Layer
from hazel.window import InputState, Window


class FakeWindow(Window):
    def __init__(self, frames=3):
        self.frames = frames
        self.updates = 0
        self.callback = None
        self.vsync = True
        self.closed = False

    def on_update(self):
        self.updates += 1
        if self.updates >= self.frames:
            self.callback(WindowCloseEvent())

    def set_event_callback(self, callback):
        self.callback = callback

    def set_vsync(self, enabled):
        self.vsync = enabled

    def is_vsync(self):
        return self.vsync

    @property
    def width(self):
        return 100

    @property
    def height(self):
        return 100

    @property
    def native_window(self):
        return None

    @property
    def input_state(self):
        return InputState()

    def close(self):
        self.closed = True


class Recorder(Layer):
    def __init__(self, name, handle=False, seen=None):
        super().__init__(name)
        self.handle = handle
        self.seen = seen if seen is not None else []
        self.steps = []
        self.renders = 0

    def on_update(self, ts):
        self.steps.append(ts)

    def on_imgui_render(self):
        self.renders += 1

    def on_event(self, event):
        self.seen.append(self.name)
        event.handled = self.handle


@pytest.fixture(autouse=True)
def release():
    yield
    try:
        Application.get().close()
    except RuntimeError:
        pass


def test_single_instance():
    window = FakeWindow()
    app = Application(window)
    assert Application.get() is app
    assert window.vsync is False
    with pytest.raises(RuntimeError):
        Application(FakeWindow())


def test_run_until_window_closes():
    window = FakeWindow(frames=3)
    app = Application(window)
    layer = Recorder("a")
    app.push_layer(layer)
    app.run()
    assert len(layer.steps) == 3
    assert layer.renders == 3
    assert all(step >= 0 for step in layer.steps)
    assert app.running is False


def test_events_go_top_down_and_stop_when_handled():
    seen = []
    app = Application(FakeWindow())
    app.push_layer(Recorder("bottom", seen=seen))
    app.push_layer(Recorder("middle", handle=True, seen=seen))
    app.push_overlay(Recorder("overlay", seen=seen))
    event = KeyPressedEvent(65, 0)
    app.on_event(event)
    assert seen == ["overlay", "middle"]
    assert event.handled is True


def test_close_releases_instance():
    window = FakeWindow()
    app = Application(window)
    app.close()
    assert window.closed is True
    with pytest.raises(RuntimeError):
        Application.get()


def test_run_application():
    window = FakeWindow(frames=1)
    run_application(lambda: Application(window))
    assert window.updates == 1
    assert window.closed is True
    with pytest.raises(RuntimeError):
        Application.get()