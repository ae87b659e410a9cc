import math

import pytest

from glscene.circle import (
    BresenhamsCircleDrawer,
    Circle,
    PulseRadiusCircleUpdater,
    bresenham_points,
)
from glscene.figure import Figure


def test_circle_fields():
    circle = Circle(400, 400, 50)
    assert (circle.x, circle.y, circle.r) == (400, 400, 50)
    assert circle.radius == 50


def test_pulse_zero_at_edge():
    updater = PulseRadiusCircleUpdater(50, 0.2, 10e-9, edge=1000)
    circle = Circle(0, 0, 1, updater=updater)
    circle.update(1000)
    assert circle.r == pytest.approx(50)


def test_pulse_peak():
    updater = PulseRadiusCircleUpdater(50, 0.2, (math.pi / 2) / 1000, edge=0)
    assert updater.pulse(1000) == pytest.approx(1.0)
    circle = Circle(0, 0, 1)
    updater.update(circle, 1000)
    assert circle.r == pytest.approx(50 * 1.2)


def test_radius_setter_ignores_non_positive():
    updater = PulseRadiusCircleUpdater(50, 0.2, 1.0, edge=0)
    updater.radius = 55
    assert updater.radius == 55
    updater.radius = 0
    updater.radius = -5
    assert updater.radius == 55


def test_update_rejects_non_circle():
    updater = PulseRadiusCircleUpdater(50, 0.2, 1.0, edge=0)
    with pytest.raises(TypeError):
        updater.update(Figure(), 0)


def test_first_point_on_top_of_circle():
    points = bresenham_points(400, 400, 50)
    assert points[0] == (400, 450)


@pytest.mark.parametrize("r", [0, 5, 10, 50])
def test_points_come_in_groups_of_eight(r):
    assert len(bresenham_points(0, 0, r)) % 8 == 0


@pytest.mark.parametrize("r", [5, 10, 50])
def test_points_close_to_radius(r):
    for x, y in bresenham_points(3, -2, r):
        assert abs(math.hypot(x - 3, y + 2) - r) <= 1.5


def test_points_are_symmetric():
    points = set(bresenham_points(0, 0, 20))
    for x, y in points:
        assert (-x, y) in points
        assert (y, x) in points


def test_drawer_renders_circle_points():
    calls = []
    drawer = BresenhamsCircleDrawer(render=lambda pts, color: calls.append((pts, color)))
    circle = Circle(10, 20, 7, drawer=drawer)
    circle.draw()
    assert calls == [(bresenham_points(10, 20, 7), (0.0, 0.0, 1.0))]


def test_drawer_ignores_other_figures():
    calls = []
    drawer = BresenhamsCircleDrawer(render=lambda pts, color: calls.append(pts))
    drawer.draw(Figure())
    assert calls == []