"""A pulsing circle and its Bresenham outline drawer."""

from __future__ import annotations

import math
import time
from typing import Callable, Sequence

from glscene.figure import Figure, FigureDrawer, FigureUpdater

Point = tuple[float, float]
Color = tuple[float, float, float]
RenderFn = Callable[[Sequence[Point], Color], None]


class Circle(Figure):
    """A circle with centre (x, y) and radius r."""

    def __init__(
        self,
        x: float,
        y: float,
        r: float,
        drawer: FigureDrawer | None = None,
        updater: FigureUpdater | None = None,
    ) -> None:
        super().__init__(drawer, updater)
        self.x = x
        self.y = y
        self.r = r

    @property
    def radius(self) -> float:
        return self.r


class PulseRadiusCircleUpdater(FigureUpdater):
    """Makes a circle's radius oscillate sinusoidally around a base radius."""

    def __init__(
        self,
        radius: float,
        pulse_amplitude_rate: float,
        frequency: float,
        edge: int | None = None,
    ) -> None:
        self._radius = radius
        self.pulse_amplitude_rate = pulse_amplitude_rate
        self.frequency = frequency
        self.edge = time.time_ns() if edge is None else edge

    @property
    def radius(self) -> float:
        return self._radius

    @radius.setter
    def radius(self, value: float) -> None:
        # Non-positive radii are silently ignored.
        if value > 0:
            self._radius = value

    def pulse(self, timestamp: int) -> float:
        """Sine of the phase at ``timestamp`` nanoseconds."""
        return math.sin(self.frequency * (timestamp - self.edge))

    def update(self, figure: Figure, timestamp: int) -> None:
        if not isinstance(figure, Circle):
            raise TypeError(f"expected a Circle, got {type(figure).__name__}")
        figure.r = self._radius * (1.0 + self.pulse_amplitude_rate * self.pulse(timestamp))


def _octants(x0: float, y0: float, dx: float, dy: float) -> list[Point]:
    return [
        (x0 + dx, y0 + dy),
        (x0 + dx, y0 - dy),
        (x0 - dx, y0 + dy),
        (x0 - dx, y0 - dy),
        (x0 + dy, y0 + dx),
        (x0 + dy, y0 - dx),
        (x0 - dy, y0 + dx),
        (x0 - dy, y0 - dx),
    ]


def bresenham_points(cx: float, cy: float, r: float) -> list[Point]:
    """Outline points of a circle by Bresenham's midpoint method, eight per step."""
    x, y = 0.0, float(r)
    delta = 3 - 2 * r
    points = _octants(cx, cy, x, y)
    while x <= y:
        if delta > 0:
            y -= 1
            delta += 4 * (x - y) + 10
        else:
            delta += 4 * x + 6.0
        x += 1
        points.extend(_octants(cx, cy, x, y))
    return points


def _gl_line_loop(points: Sequence[Point], color: Color) -> None:
    from pyglet import gl, graphics

    count = len(points)
    positions = [c for px, py in points for c in (px, py, 0.0)]
    rgba = tuple(round(c * 255) for c in color) + (255,)
    graphics.draw(
        count,
        gl.GL_LINE_LOOP,
        position=("f", positions),
        colors=("Bn", rgba * count),
    )


class BresenhamsCircleDrawer(FigureDrawer):
    """Draws a circle outline as a blue line loop of Bresenham points."""

    color: Color = (0.0, 0.0, 1.0)

    def __init__(self, render: RenderFn | None = None) -> None:
        self._render = render if render is not None else _gl_line_loop

    def draw(self, figure: Figure) -> None:
        if not isinstance(figure, Circle):
            return
        self._render(bresenham_points(figure.x, figure.y, figure.r), self.color)