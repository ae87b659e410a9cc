"""GPU buffers for meshes and the drawer that renders them with a shader."""

from __future__ import annotations

import math
from typing import Any, Iterable, Protocol, Sequence

import numpy as np

from glscene.figure import Figure, FigureDrawer
from glscene.meshes import Mesh, Vertex
from glscene.transforms import identity, perspective, translate

_FLOAT_SIZE = 4
_COMPONENTS = 3
VERTEX_STRIDE = 2 * _COMPONENTS * _FLOAT_SIZE
COLOR_OFFSET = _COMPONENTS * _FLOAT_SIZE

ARRAY = "array"
ELEMENT = "element"

_UINT32_MAX = 0xFFFFFFFF


def pack_vertices(vertices: Iterable[Vertex]) -> np.ndarray:
    """Interleave vertices as a flat float32 array of ``x, y, z, r, g, b``."""
    rows = [vertex.position + vertex.color for vertex in vertices]
    return np.array(rows, dtype=np.float32).reshape(-1)


def pack_indices(indices: Iterable[int]) -> np.ndarray:
    """Pack triangle indices as a flat uint32 array."""
    values = np.array([int(i) for i in indices], dtype=np.int64)
    if values.size and (values.min() < 0 or values.max() > _UINT32_MAX):
        raise ValueError("indices must fit in an unsigned 32-bit integer")
    return values.astype(np.uint32)


class _BufferGL(Protocol):
    def gen_vertex_array(self) -> int: ...

    def gen_buffer(self) -> int: ...

    def bind_vertex_array(self, vao: int) -> None: ...

    def bind_buffer(self, target: str, buffer: int) -> None: ...

    def buffer_data(self, target: str, data: np.ndarray) -> None: ...

    def vertex_attrib(self, layout: int, components: int, stride: int, offset: int) -> None: ...

    def delete_vertex_array(self, vao: int) -> None: ...

    def delete_buffer(self, buffer: int) -> None: ...

    def uniform_location(self, program: int, name: str) -> int: ...

    def uniform_matrix4(self, location: int, matrix: np.ndarray) -> None: ...

    def draw_elements(self, count: int) -> None: ...


class _PygletBufferGL:
    """Buffer and draw calls issued through pyglet's OpenGL objects."""

    def __init__(self) -> None:
        from pyglet import gl
        from pyglet.graphics.vertexarray import VertexArray
        from pyglet.graphics.vertexbuffer import BufferObject

        self._gl = gl
        self._vertex_array_cls = VertexArray
        self._buffer_cls = BufferObject
        self._arrays: dict[int, Any] = {}
        self._buffers: dict[int, Any] = {}
        self._targets = {
            ARRAY: gl.GL_ARRAY_BUFFER,
            ELEMENT: gl.GL_ELEMENT_ARRAY_BUFFER,
        }

    def gen_vertex_array(self) -> int:
        vao = self._vertex_array_cls()
        self._arrays[vao.id] = vao
        return vao.id

    def gen_buffer(self) -> int:
        buffer = self._buffer_cls(0, self._gl.GL_STATIC_DRAW)
        self._gl.glBindBuffer(self._gl.GL_ARRAY_BUFFER, 0)
        self._buffers[buffer.id] = buffer
        return buffer.id

    def bind_vertex_array(self, vao: int) -> None:
        self._gl.glBindVertexArray(vao)

    def bind_buffer(self, target: str, buffer: int) -> None:
        self._gl.glBindBuffer(self._targets[target], buffer)

    def buffer_data(self, target: str, data: np.ndarray) -> None:
        raw = np.ascontiguousarray(data).tobytes()
        self._gl.glBufferData(
            self._targets[target], len(raw), raw, self._gl.GL_STATIC_DRAW
        )

    def vertex_attrib(self, layout: int, components: int, stride: int, offset: int) -> None:
        gl = self._gl
        gl.glVertexAttribPointer(
            layout, components, gl.GL_FLOAT, gl.GL_FALSE, stride, offset or None
        )
        gl.glEnableVertexAttribArray(layout)

    def delete_vertex_array(self, vao: int) -> None:
        array = self._arrays.pop(vao, None)
        if array is not None:
            array.delete()

    def delete_buffer(self, buffer: int) -> None:
        stored = self._buffers.pop(buffer, None)
        if stored is not None:
            stored.delete()

    def uniform_location(self, program: int, name: str) -> int:
        raw = name.encode("ascii")
        text = (self._gl.GLchar * (len(raw) + 1))()
        text.value = raw
        return self._gl.glGetUniformLocation(program, text)

    def uniform_matrix4(self, location: int, matrix: np.ndarray) -> None:
        column_major = np.asarray(matrix, dtype=np.float32).T.reshape(-1)
        data = (self._gl.GLfloat * 16)(*column_major.tolist())
        self._gl.glUniformMatrix4fv(location, 1, self._gl.GL_FALSE, data)

    def draw_elements(self, count: int) -> None:
        gl = self._gl
        gl.glDrawElements(gl.GL_TRIANGLES, count, gl.GL_UNSIGNED_INT, None)


class MeshBuffers:
    """A vertex array with its vertex and element buffers on the GPU.

    Attribute 0 is the position and attribute 1 the colour, three floats each.
    """

    def __init__(
        self,
        vertices: Iterable[Vertex],
        indices: Iterable[int],
        gl: _BufferGL | None = None,
    ) -> None:
        self._gl = gl if gl is not None else _PygletBufferGL()
        vertex_data = pack_vertices(vertices)
        index_data = pack_indices(indices)
        self.index_count = len(index_data)
        self._deleted = False

        self.vao = self._gl.gen_vertex_array()
        self._gl.bind_vertex_array(self.vao)

        self.vbo = self._gl.gen_buffer()
        self._gl.bind_buffer(ARRAY, self.vbo)
        self._gl.buffer_data(ARRAY, vertex_data)

        self.ebo = self._gl.gen_buffer()
        self._gl.bind_buffer(ELEMENT, self.ebo)
        self._gl.buffer_data(ELEMENT, index_data)

        self._link_attributes()

        self._gl.bind_vertex_array(0)
        self._gl.bind_buffer(ARRAY, 0)
        self._gl.bind_buffer(ELEMENT, 0)

    def _link_attributes(self) -> None:
        for layout, offset in ((0, 0), (1, COLOR_OFFSET)):
            self._gl.bind_buffer(ARRAY, self.vbo)
            self._gl.vertex_attrib(layout, _COMPONENTS, VERTEX_STRIDE, offset)
            self._gl.bind_buffer(ARRAY, 0)

    def upload_vertices(self, vertices: Sequence[Vertex]) -> None:
        """Replace the vertex data kept on the GPU."""
        self._gl.bind_vertex_array(self.vao)
        self._gl.bind_buffer(ARRAY, self.vbo)
        self._gl.buffer_data(ARRAY, pack_vertices(vertices))
        self._gl.bind_buffer(ARRAY, 0)
        self._gl.bind_vertex_array(0)

    def bind(self) -> None:
        """Bind the vertex array for drawing."""
        self._gl.bind_vertex_array(self.vao)

    def delete(self) -> None:
        """Free the GPU objects; later calls do nothing."""
        if self._deleted:
            return
        self._gl.delete_vertex_array(self.vao)
        self._gl.delete_buffer(self.vbo)
        self._gl.delete_buffer(self.ebo)
        self._deleted = True


class _Shader(Protocol):
    program: int

    def use(self) -> None: ...


class MeshDrawer(FigureDrawer):
    """Draws meshes as indexed triangles with fixed model, view and projection."""

    def __init__(self, shader: _Shader, gl: _BufferGL | None = None) -> None:
        self.shader = shader
        self._gl = gl if gl is not None else _PygletBufferGL()
        self.model = identity()
        self.view = translate(identity(), (0.0, -0.5, -2.0))
        self.proj = perspective(math.radians(45.0), 1.0, 0.1, 100.0)
        program = shader.program
        self._locations = {
            name: self._gl.uniform_location(program, name)
            for name in ("model", "view", "proj")
        }

    def _buffers_for(self, mesh: Mesh) -> MeshBuffers:
        buffers = mesh.buffers
        if not isinstance(buffers, MeshBuffers):
            buffers = MeshBuffers(mesh.vertices, mesh.indices, self._gl)
            mesh.buffers = buffers
        return buffers

    def draw(self, figure: Figure) -> None:
        if not isinstance(figure, Mesh):
            return
        self.shader.use()
        self._buffers_for(figure).bind()
        for name, matrix in (("model", self.model), ("view", self.view), ("proj", self.proj)):
            self._gl.uniform_matrix4(self._locations[name], matrix)
        self._gl.draw_elements(len(figure.indices))