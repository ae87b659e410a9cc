"""Triangle meshes: vertex and index generation for the scene's solid shapes."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Iterable, Protocol, Sequence

import numpy as np

from glscene.figure import Figure, FigureDrawer, FigureUpdater

Vec3 = tuple[float, float, float]


def _vec3(values: Iterable[float]) -> Vec3:
    x, y, z = values
    return (float(x), float(y), float(z))


def _add(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


@dataclass(frozen=True)
class Vertex:
    """A mesh vertex: a position and an RGB colour."""

    position: Vec3
    color: Vec3

    def moved(self, direction: Vec3) -> "Vertex":
        """Return a copy shifted by ``direction``."""
        return replace(self, position=_add(self.position, direction))


class _VertexSink(Protocol):
    def upload_vertices(self, vertices: Sequence[Vertex]) -> None: ...


class Mesh(Figure):
    """A figure made of coloured vertices joined into triangles by an index list.

    ``buffers`` may be set to an object with ``upload_vertices`` that keeps a
    GPU copy of the vertices; it is refreshed whenever the vertices change.
    """

    def __init__(
        self,
        vertices: Iterable[Vertex],
        indices: Iterable[int],
        drawer: FigureDrawer | None = None,
        updater: FigureUpdater | None = None,
    ) -> None:
        super().__init__(drawer, updater)
        self.vertices: list[Vertex] = list(vertices)
        self.indices: list[int] = [int(i) for i in indices]
        self.buffers: _VertexSink | None = None

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    def vertex_data(self) -> np.ndarray:
        """Interleaved ``x, y, z, r, g, b`` rows as a float32 array of shape (n, 6)."""
        rows = [vertex.position + vertex.color for vertex in self.vertices]
        return np.array(rows, dtype=np.float32).reshape(len(rows), 6)

    def index_data(self) -> np.ndarray:
        """The triangle indices as a flat uint32 array."""
        return np.array(self.indices, dtype=np.uint32)


_CUBE_CORNERS: tuple[Vec3, ...] = (
    (-0.5, -0.5, -0.5), (0.5, -0.5, -0.5),
    (0.5, 0.5, -0.5), (-0.5, 0.5, -0.5),
    (-0.5, -0.5, 0.5), (0.5, -0.5, 0.5),
    (0.5, 0.5, 0.5), (-0.5, 0.5, 0.5),
)

_CUBE_INDICES: tuple[int, ...] = (
    0, 1, 2, 2, 3, 0,  # back
    4, 5, 6, 6, 7, 4,  # front
    3, 2, 6, 6, 7, 3,  # top
    0, 1, 5, 5, 4, 0,  # bottom
    1, 5, 6, 6, 2, 1,  # right
    0, 4, 7, 7, 3, 0,  # left
)

# Five real corners, padded with three zero points to a block of eight.
_PYRAMID_CORNERS: tuple[Vec3, ...] = (
    (-0.5, -0.5, -0.5),
    (-0.5, -0.5, 0.5),
    (0.5, -0.5, 0.5),
    (0.5, -0.5, -0.5),
    (0.0, 0.5, 0.0),
    (0.0, 0.0, 0.0),
    (0.0, 0.0, 0.0),
    (0.0, 0.0, 0.0),
)

_PYRAMID_INDICES: tuple[int, ...] = (
    3, 0, 1,
    3, 1, 2,
    4, 1, 0,
    4, 2, 1,
    4, 3, 2,
    4, 0, 3,
)


def cube_vertices(center: Iterable[float], color: Iterable[float]) -> list[Vertex]:
    """The eight corners of a unit cube around ``center``."""
    center, color = _vec3(center), _vec3(color)
    return [Vertex(_add(corner, center), color) for corner in _CUBE_CORNERS]


def cube_indices() -> list[int]:
    """Two triangles per cube face."""
    return list(_CUBE_INDICES)


def pyramid_vertices(center: Iterable[float], color: Iterable[float]) -> list[Vertex]:
    """A square-based unit pyramid around ``center``, apex up."""
    center, color = _vec3(center), _vec3(color)
    return [Vertex(_add(corner, center), color) for corner in _PYRAMID_CORNERS]


def pyramid_indices() -> list[int]:
    """Two base triangles followed by the four sides."""
    return list(_PYRAMID_INDICES)


def cylinder_vertices(
    center: Iterable[float],
    color: Iterable[float],
    segments: int,
    height: float,
    radius: float,
) -> list[Vertex]:
    """Cap centres (top, bottom) then a top/bottom pair per rim segment."""
    center, color = _vec3(center), _vec3(color)
    half = height / 2
    vertices = [
        Vertex(_add(center, (0.0, half, 0.0)), color),
        Vertex(_add(center, (0.0, -half, 0.0)), color),
    ]
    for i in range(segments):
        theta = 2.0 * math.pi * i / segments
        x = radius * math.cos(theta)
        z = radius * math.sin(theta)
        vertices.append(Vertex(_add(center, (x, half, z)), color))
        vertices.append(Vertex(_add(center, (x, -half, z)), color))
    return vertices


def cylinder_indices(segments: int) -> list[int]:
    """Cap triangles for every segment, then two side triangles per segment."""
    indices: list[int] = []
    for i in range(segments):
        nxt = (i + 1) % segments
        indices += [0, 2 + i * 2, 2 + nxt * 2]
        indices += [1, 3 + nxt * 2, 3 + i * 2]
    for i in range(segments):
        nxt = (i + 1) % segments
        v0, v1 = 2 + i * 2, 3 + i * 2
        v2, v3 = 2 + nxt * 2, 3 + nxt * 2
        indices += [v0, v2, v1]
        indices += [v1, v2, v3]
    return indices


def _check_sphere_segments(lat_segments: int, lon_segments: int) -> None:
    if lat_segments < 1 or lon_segments < 1:
        raise ValueError("sphere needs at least one latitude and one longitude segment")


def sphere_vertices(
    center: Iterable[float],
    color: Iterable[float],
    lat_segments: int,
    lon_segments: int,
    radius: float,
) -> list[Vertex]:
    """A latitude/longitude grid of ``(lat+1) * (lon+1)`` points on the sphere."""
    _check_sphere_segments(lat_segments, lon_segments)
    center, color = _vec3(center), _vec3(color)
    vertices = []
    for lat in range(lat_segments + 1):
        theta = math.pi * lat / lat_segments
        sin_theta, cos_theta = math.sin(theta), math.cos(theta)
        for lon in range(lon_segments + 1):
            phi = 2.0 * math.pi * lon / lon_segments
            offset = (
                radius * sin_theta * math.cos(phi),
                radius * cos_theta,
                radius * sin_theta * math.sin(phi),
            )
            vertices.append(Vertex(_add(offset, center), color))
    return vertices


def sphere_indices(lat_segments: int, lon_segments: int) -> list[int]:
    """Two triangles for every cell of the latitude/longitude grid."""
    _check_sphere_segments(lat_segments, lon_segments)
    indices: list[int] = []
    for lat in range(lat_segments):
        for lon in range(lon_segments):
            current = lat * (lon_segments + 1) + lon
            nxt = current + lon_segments + 1
            indices += [current, nxt, current + 1]
            indices += [current + 1, nxt, nxt + 1]
    return indices


class Cube(Mesh):
    """A unit cube."""

    def __init__(
        self,
        center: Iterable[float],
        color: Iterable[float],
        drawer: FigureDrawer | None = None,
        updater: FigureUpdater | None = None,
    ) -> None:
        super().__init__(cube_vertices(center, color), cube_indices(), drawer, updater)


class Pyramid(Mesh):
    """A square-based unit pyramid."""

    def __init__(
        self,
        center: Iterable[float],
        color: Iterable[float],
        drawer: FigureDrawer | None = None,
        updater: FigureUpdater | None = None,
    ) -> None:
        super().__init__(
            pyramid_vertices(center, color), pyramid_indices(), drawer, updater
        )


class Cylinder(Mesh):
    """A closed cylinder standing along the y axis."""

    def __init__(
        self,
        center: Iterable[float],
        color: Iterable[float],
        segments: int,
        height: float,
        radius: float,
        drawer: FigureDrawer | None = None,
        updater: FigureUpdater | None = None,
    ) -> None:
        super().__init__(
            cylinder_vertices(center, color, segments, height, radius),
            cylinder_indices(segments),
            drawer,
            updater,
        )


class Sphere(Mesh):
    """A UV sphere that can be moved around the scene."""

    def __init__(
        self,
        center: Iterable[float],
        color: Iterable[float],
        lat_segments: int,
        lon_segments: int,
        radius: float,
        drawer: FigureDrawer | None = None,
        updater: FigureUpdater | None = None,
    ) -> None:
        super().__init__(
            sphere_vertices(center, color, lat_segments, lon_segments, radius),
            sphere_indices(lat_segments, lon_segments),
            drawer,
            updater,
        )

    def move(self, direction: Iterable[float]) -> None:
        """Shift every vertex by ``direction`` and refresh attached buffers."""
        shift = _vec3(direction)
        self.vertices = [vertex.moved(shift) for vertex in self.vertices]
        if self.buffers is not None:
            self.buffers.upload_vertices(self.vertices)