"""An on-screen window with keyboard state and per-frame buffer handling."""

from __future__ import annotations

from typing import Callable, Protocol

import numpy as np

from glscene.errors import WindowCreateError, WindowInitError
from glscene.keys import Key, is_close_key
from glscene.transforms import ortho

Color = tuple[float, float, float, float]
WHITE: Color = (1.0, 1.0, 1.0, 1.0)

# Key symbols as numbered by pyglet.window.key.
_PYGLET_CODES: dict[Key, int] = {
    Key.ZERO: 0x030,
    Key.ONE: 0x031,
    Key.Q: 0x071,
    Key.ESCAPE: 0xFF1B,
    Key.LEFT: 0xFF51,
    Key.UP: 0xFF52,
    Key.RIGHT: 0xFF53,
    Key.DOWN: 0xFF54,
}
_FROM_PYGLET: dict[int, Key] = {code: key for key, code in _PYGLET_CODES.items()}


def to_pyglet_key(key: int) -> int:
    """Return pyglet's key symbol for ``key``; unknown keys raise ValueError."""
    return _PYGLET_CODES[Key(key)]


class _Backend(Protocol):
    def set_callbacks(
        self, on_key: Callable[[Key], None], on_close: Callable[[], None]
    ) -> None: ...

    def is_pressed(self, key: Key) -> bool: ...

    def framebuffer_size(self) -> tuple[int, int]: ...

    def clear(self, color: Color, depth: bool) -> None: ...

    def set_depth_test(self, enabled: bool) -> None: ...

    def set_projection(self, matrix: np.ndarray) -> None: ...

    def gl_version(self) -> str: ...

    def flip(self) -> None: ...

    def poll_events(self) -> None: ...

    def close(self) -> None: ...


class _PygletBackend:
    """A pyglet window with a key state handler."""

    def __init__(self, width: int, height: int, title: str, modern: bool) -> None:
        try:
            import pyglet
            from pyglet import gl
            from pyglet.window import key as pyglet_key
        except Exception as exc:
            raise WindowInitError("Failed to initialize the windowing library") from exc

        self._gl = gl
        self._event_handled = pyglet.event.EVENT_HANDLED
        if modern:
            config = gl.Config(
                double_buffer=True,
                depth_size=24,
                major_version=3,
                minor_version=3,
                forward_compatible=True,
            )
        else:
            config = gl.Config(double_buffer=True)
        try:
            self._window = pyglet.window.Window(
                width, height, title, config=config, resizable=True
            )
        except Exception as exc:
            raise WindowCreateError("Failed to create window") from exc
        self._window.switch_to()
        self._keys = pyglet_key.KeyStateHandler()
        self._on_key: Callable[[Key], None] | None = None
        self._on_close: Callable[[], None] | None = None
        self._window.push_handlers(
            on_key_press=self._handle_key_press, on_close=self._handle_close
        )
        self._window.push_handlers(self._keys)

    def _handle_key_press(self, symbol: int, modifiers: int):
        key = _FROM_PYGLET.get(symbol)
        if key is not None and self._on_key is not None:
            self._on_key(key)
            if is_close_key(key):
                return self._event_handled
        return None

    def _handle_close(self):
        if self._on_close is not None:
            self._on_close()
        return self._event_handled

    def set_callbacks(
        self, on_key: Callable[[Key], None], on_close: Callable[[], None]
    ) -> None:
        self._on_key = on_key
        self._on_close = on_close

    def is_pressed(self, key: Key) -> bool:
        return bool(self._keys[to_pyglet_key(key)])

    def framebuffer_size(self) -> tuple[int, int]:
        width, height = self._window.get_framebuffer_size()
        return int(width), int(height)

    def clear(self, color: Color, depth: bool) -> None:
        gl = self._gl
        gl.glClearColor(*color)
        mask = gl.GL_COLOR_BUFFER_BIT
        if depth:
            mask |= gl.GL_DEPTH_BUFFER_BIT
        gl.glClear(mask)

    def set_depth_test(self, enabled: bool) -> None:
        if enabled:
            self._gl.glEnable(self._gl.GL_DEPTH_TEST)
        else:
            self._gl.glDisable(self._gl.GL_DEPTH_TEST)

    def set_projection(self, matrix: np.ndarray) -> None:
        from pyglet.math import Mat4

        column_major = np.asarray(matrix, dtype=np.float64).T.reshape(-1)
        self._window.projection = Mat4(*column_major.tolist())

    def gl_version(self) -> str:
        from pyglet.gl import gl_info

        return str(gl_info.get_version_string())

    def flip(self) -> None:
        self._window.flip()

    def poll_events(self) -> None:
        self._window.dispatch_events()

    def close(self) -> None:
        self._window.close()


class Window:
    """A window that frames each rendered frame and reports held keys.

    With ``depth`` set the window is a 3D scene: an OpenGL 3.3 core context
    with depth testing. Without it the window is a 2D canvas whose
    coordinates are pixels with the origin at the top-left corner.
    Pressing Escape or Q asks the window to close.
    """

    def __init__(
        self,
        width: int,
        height: int,
        title: str,
        *,
        depth: bool = True,
        backend: _Backend | None = None,
    ) -> None:
        self.width = width
        self.height = height
        self.title = title
        self.depth = depth
        self._should_close = False
        self._closed = False
        self._backend = (
            backend
            if backend is not None
            else _PygletBackend(width, height, title, modern=depth)
        )
        self._backend.set_callbacks(self._on_key, self.set_should_close)
        if depth:
            print(f"OpenGL Version: {self._backend.gl_version()}")
            self._backend.set_depth_test(True)

    def _on_key(self, key: Key) -> None:
        if is_close_key(key):
            self.set_should_close()

    def is_pressed(self, key: Key) -> bool:
        """Return True while ``key`` is held down."""
        return self._backend.is_pressed(Key(key))

    def should_not_close(self) -> bool:
        """Return True until the window has been asked to close."""
        return not self._should_close

    def set_should_close(self) -> None:
        """Ask the window to close at the end of the current frame."""
        self._should_close = True

    def start_iteration(self) -> None:
        """Clear the frame and, for 2D windows, set the pixel projection."""
        if self.depth:
            self._backend.clear(WHITE, depth=True)
            return
        width, height = self._backend.framebuffer_size()
        self._backend.clear(WHITE, depth=False)
        self._backend.set_depth_test(False)
        self._backend.set_projection(ortho(0, width, height, 0, 0, 1))

    def end_iteration(self) -> None:
        """Show the frame and handle pending window events."""
        self._backend.flip()
        self._backend.poll_events()

    def close(self) -> None:
        """Destroy the window; later calls do nothing."""
        if self._closed:
            return
        self._closed = True
        self._should_close = True
        self._backend.close()

    def __enter__(self) -> "Window":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()