import numpy as np
import pytest

from glscene.keys import Key
from glscene.transforms import ortho
from glscene.window import Window, to_pyglet_key


class FakeBackend:
    def __init__(self, size=(640, 480), version="3.3 fake"):
        self.size = size
        self.version = version
        self.pressed = set()
        self.calls = []
        self.on_key = None
        self.on_close = None
        self.closed = 0

    def set_callbacks(self, on_key, on_close):
        self.on_key = on_key
        self.on_close = on_close

    def is_pressed(self, key):
        return key in self.pressed

    def framebuffer_size(self):
        return self.size

    def clear(self, color, depth):
        self.calls.append(("clear", color, depth))

    def set_depth_test(self, enabled):
        self.calls.append(("depth_test", enabled))

    def set_projection(self, matrix):
        self.calls.append(("projection", np.array(matrix)))

    def gl_version(self):
        return self.version

    def flip(self):
        self.calls.append(("flip",))

    def poll_events(self):
        self.calls.append(("poll",))

    def close(self):
        self.closed += 1


def make_window(depth=True, **kwargs):
    backend = FakeBackend(**kwargs)
    return Window(800, 800, "Scene", depth=depth, backend=backend), backend


def test_is_pressed_reports_backend_state():
    window, backend = make_window()
    backend.pressed = {Key.UP}
    assert window.is_pressed(Key.UP) is True
    assert window.is_pressed(Key.DOWN) is False


def test_should_close_flag():
    window, _ = make_window()
    assert window.should_not_close() is True
    window.set_should_close()
    assert window.should_not_close() is False


@pytest.mark.parametrize("key", [Key.ESCAPE, Key.Q])
def test_close_keys_request_close(key):
    window, backend = make_window()
    backend.on_key(key)
    assert window.should_not_close() is False


def test_other_keys_do_not_close():
    window, backend = make_window()
    backend.on_key(Key.UP)
    backend.on_key(Key.ZERO)
    assert window.should_not_close() is True


def test_window_close_event_requests_close():
    window, backend = make_window()
    backend.on_close()
    assert window.should_not_close() is False


def test_depth_window_prints_version_and_enables_depth(capsys):
    window, backend = make_window(depth=True, version="4.6 test")
    out = capsys.readouterr().out
    assert "OpenGL Version: 4.6 test" in out
    assert ("depth_test", True) in backend.calls


def test_depth_window_clears_colour_and_depth():
    window, backend = make_window(depth=True)
    backend.calls.clear()
    window.start_iteration()
    assert backend.calls == [("clear", (1.0, 1.0, 1.0, 1.0), True)]


def test_flat_window_sets_pixel_projection():
    window, backend = make_window(depth=False, size=(640, 480))
    window.start_iteration()
    clears = [c for c in backend.calls if c[0] == "clear"]
    assert clears == [("clear", (1.0, 1.0, 1.0, 1.0), False)]
    assert ("depth_test", False) in backend.calls
    projections = [c[1] for c in backend.calls if c[0] == "projection"]
    assert len(projections) == 1
    np.testing.assert_allclose(projections[0], ortho(0, 640, 480, 0, 0, 1))


def test_flat_window_maps_top_left_corner_to_clip_corner():
    window, backend = make_window(depth=False, size=(640, 480))
    window.start_iteration()
    matrix = [c[1] for c in backend.calls if c[0] == "projection"][0]
    corner = matrix @ np.array([0.0, 0.0, 0.0, 1.0])
    np.testing.assert_allclose(corner[:2], [-1.0, 1.0])


def test_flat_window_prints_nothing(capsys):
    make_window(depth=False)
    assert capsys.readouterr().out == ""


def test_end_iteration_flips_then_polls():
    window, backend = make_window()
    backend.calls.clear()
    window.end_iteration()
    assert backend.calls == [("flip",), ("poll",)]


def test_close_is_idempotent():
    window, backend = make_window()
    window.close()
    window.close()
    assert backend.closed == 1
    assert window.should_not_close() is False


def test_context_manager_closes():
    backend = FakeBackend()
    with Window(100, 100, "t", backend=backend) as window:
        assert window.should_not_close() is True
    assert backend.closed == 1


def test_to_pyglet_key_escape_symbol():
    assert to_pyglet_key(Key.ESCAPE) == 0xFF1B


def test_to_pyglet_key_aliases_share_symbol():
    assert to_pyglet_key(Key.FRONT) == to_pyglet_key(Key.UP)
    assert to_pyglet_key(Key.BACK) == to_pyglet_key(Key.DOWN)


def test_to_pyglet_key_distinct_for_every_key():
    codes = {to_pyglet_key(key) for key in Key}
    assert len(codes) == len(list(Key))


def test_to_pyglet_key_accepts_plain_int():
    assert to_pyglet_key(int(Key.LEFT)) == to_pyglet_key(Key.LEFT)


def test_to_pyglet_key_unknown_raises():
    with pytest.raises(ValueError):
        to_pyglet_key(999)