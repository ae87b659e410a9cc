"""Command-line entry points that open the demo scenes."""

from __future__ import annotations

import sys
from typing import NamedTuple, Sequence

from glscene.application import WindowApplication
from glscene.circle import BresenhamsCircleDrawer, Circle, PulseRadiusCircleUpdater
from glscene.figure import Figure, FigureDrawer, InputProcessor
from glscene.gpu import MeshDrawer
from glscene.meshes import Cube, Cylinder, Pyramid, Sphere
from glscene.processors import (
    CircleRadiusUpdateKeyProcessor,
    CommonKeyProcessor,
    SpheresMoveKeyProcessor,
)
from glscene.shader import ShaderProgram
from glscene.window import Window

BLUE = (0.184313725, 0.23529411764705882, 0.49411764)


class Scene(NamedTuple):
    """The figures of a scene and the processors that react to input."""

    figures: list[Figure]
    processors: list[InputProcessor]


def build_circle_scene(window) -> Scene:
    """A pulsing circle whose radius the Up and Down keys change."""
    radius, rate, frequency = 50.0, 0.2, 10e-9
    drawer = BresenhamsCircleDrawer()
    updater = PulseRadiusCircleUpdater(radius, rate, frequency)
    circle = Circle(400, 400, radius, drawer, updater)
    processors: list[InputProcessor] = [
        CommonKeyProcessor(window),
        CircleRadiusUpdateKeyProcessor(window, updater, 5),
    ]
    return Scene([circle], processors)


def build_shapes_scene(window, drawer: FigureDrawer) -> Scene:
    """A cube, pyramid, cylinder and two movable spheres."""
    cylinder = Cylinder((-3.0, -2.0, -10.0), (0.0, 0.0, 1.0), 50, 2, 1, drawer)
    pyramid = Pyramid((0.0, -1.0, -10.0), (1.0, 0.0, 0.0), drawer)
    cube = Cube((3.0, -2.0, -10.0), (0.0, 1.0, 0.0), drawer)
    sphere1 = Sphere((-1.0, 2.0, -10.0), (1.0, 0.9, 0.0), 50, 50, 0.5, drawer)
    sphere2 = Sphere((1.0, 2.0, -10.0), (1.0, 0.8, 0.0), 50, 50, 0.5, drawer)
    figures: list[Figure] = [cube, pyramid, cylinder, sphere1, sphere2]
    processors: list[InputProcessor] = [
        SpheresMoveKeyProcessor(window, [sphere1, sphere2])
    ]
    return Scene(figures, processors)


def _args(argv: Sequence[str] | None) -> list[str]:
    return list(sys.argv[1:] if argv is None else argv)


def main_circle(argv: Sequence[str] | None = None) -> int:
    """Open the pulsing-circle window."""
    _args(argv)
    with Window(800, 800, "Circle!", depth=False) as window:
        scene = build_circle_scene(window)
        WindowApplication(window, scene.figures, scene.processors).launch()
    return 0


def main_shapes(argv: Sequence[str] | None = None) -> int:
    """Open the shapes scene; takes vertex and fragment shader paths."""
    args = _args(argv)
    if len(args) != 2:
        print("Error: enter shader source pathes")
        return -1
    vertex_path, fragment_path = args
    try:
        with Window(800, 800, "Scene") as window:
            shader = ShaderProgram(vertex_path, fragment_path)
            scene = build_shapes_scene(window, MeshDrawer(shader))
            WindowApplication(window, scene.figures, scene.processors).launch()
    except Exception as exc:
        print(f"Error: {exc}", file=sys.stderr)
    return 0


def main_cube(argv: Sequence[str] | None = None) -> int:
    """Open a single blue cube, with shaders read from the working directory."""
    _args(argv)
    try:
        with Window(800, 800, "Scene") as window:
            shader = ShaderProgram("vertex_shader.glsl", "fragment_shader.glsl")
            cube = Cube((0.0, 0.0, -10.0), BLUE, MeshDrawer(shader))
            WindowApplication(window, [cube], []).launch()
    except Exception as exc:
        print(f"Error: {exc}", file=sys.stderr)
    return 0


_COMMANDS = {
    "circle": main_circle,
    "shapes": main_shapes,
    "cube": main_cube,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run the scene named by the first argument."""
    args = _args(argv)
    if not args or args[0] not in _COMMANDS:
        names = ",".join(_COMMANDS)
        print(f"usage: glscene {{{names}}} [args...]", file=sys.stderr)
        return 2
    return _COMMANDS[args[0]](args[1:])


if __name__ == "__main__":
    sys.exit(main())