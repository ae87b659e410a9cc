"""Input processors that react to keys held in a window."""

from __future__ import annotations

from typing import Iterable, Protocol

from glscene.circle import PulseRadiusCircleUpdater
from glscene.figure import InputProcessor
from glscene.keys import Key
from glscene.meshes import Sphere

_STEP = 0.1


class _KeyWindow(Protocol):
    def is_pressed(self, key: Key) -> bool: ...

    def set_should_close(self) -> None: ...


class CommonKeyProcessor(InputProcessor):
    """Closes the window when Escape is held."""

    def __init__(self, window: _KeyWindow) -> None:
        self.window = window

    def process(self) -> None:
        if self.window.is_pressed(Key.ESCAPE):
            self.window.set_should_close()


class CircleRadiusUpdateKeyProcessor(InputProcessor):
    """Grows the pulsing radius with Up and shrinks it with Down."""

    def __init__(
        self, window: _KeyWindow, updater: PulseRadiusCircleUpdater, dr: float
    ) -> None:
        self.window = window
        self.updater = updater
        self.dr = dr

    def process(self) -> None:
        if self.window.is_pressed(Key.UP):
            self.updater.radius = self.updater.radius + self.dr
        elif self.window.is_pressed(Key.DOWN):
            self.updater.radius = self.updater.radius - self.dr


class SpheresMoveKeyProcessor(InputProcessor):
    """Selects a sphere with 0/1 and moves it with the arrow keys."""

    _MOVES: tuple[tuple[Key, tuple[float, float, float]], ...] = (
        (Key.FRONT, (0.0, 0.0, -_STEP)),
        (Key.BACK, (0.0, 0.0, _STEP)),
        (Key.LEFT, (-_STEP, 0.0, 0.0)),
        (Key.RIGHT, (_STEP, 0.0, 0.0)),
    )

    def __init__(self, window: _KeyWindow, spheres: Iterable[Sphere]) -> None:
        self.window = window
        self.spheres = list(spheres)
        if not self.spheres:
            raise ValueError("Error: no spheres specifyed!")
        self.current = self.spheres[0]

    def process(self) -> None:
        if self.window.is_pressed(Key.ZERO):
            self.current = self.spheres[0]
            return
        if self.window.is_pressed(Key.ONE):
            self.current = self.spheres[1]
            return
        for key, direction in self._MOVES:
            if self.window.is_pressed(key):
                self.current.move(direction)
                return