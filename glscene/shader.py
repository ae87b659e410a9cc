"""Loading, compiling and linking GLSL shader programs."""

from __future__ import annotations

import sys
from os import PathLike
from pathlib import Path
from typing import Any, Protocol, Union

StrPath = Union[str, "PathLike[str]"]


def load_shader_source(path: StrPath) -> str:
    """Read a shader source file and echo it to standard output."""
    source = Path(path).read_text(encoding="utf-8")
    print(f"Loaded shader source: \n{source}")
    return source


class _ShaderGL(Protocol):
    def compile_shader(self, kind: str, source: str) -> tuple[int, str | None]: ...

    def link_program(self, vertex: int, fragment: int) -> int: ...

    def delete_shader(self, shader: int) -> None: ...

    def use_program(self, program: int) -> None: ...


class _PygletShaderGL:
    """Shader calls issued through pyglet's shader objects."""

    def __init__(self) -> None:
        from pyglet import gl
        from pyglet.graphics import shader as pyglet_shader

        self._gl = gl
        self._module = pyglet_shader
        self._shaders: dict[int, Any] = {}
        self._programs: dict[int, Any] = {}

    def compile_shader(self, kind: str, source: str) -> tuple[int, str | None]:
        try:
            shader = self._module.Shader(source, kind)
        except self._module.ShaderException as exc:
            return 0, str(exc)
        self._shaders[shader.id] = shader
        return shader.id, None

    def link_program(self, vertex: int, fragment: int) -> int:
        shaders = [self._shaders[h] for h in (vertex, fragment) if h in self._shaders]
        program = self._module.ShaderProgram(*shaders)
        self._programs[program.id] = program
        return program.id

    def delete_shader(self, shader: int) -> None:
        compiled = self._shaders.pop(shader, None)
        if compiled is not None:
            compiled.delete()

    def use_program(self, program: int) -> None:
        self._gl.glUseProgram(program)


class ShaderProgram:
    """A linked vertex + fragment shader program built from two source files.

    Compilation errors are reported on standard error before linking.
    """

    def __init__(
        self,
        vertex_path: StrPath,
        fragment_path: StrPath,
        gl: _ShaderGL | None = None,
    ) -> None:
        self._gl = gl if gl is not None else _PygletShaderGL()
        vertex_code = load_shader_source(vertex_path)
        fragment_code = load_shader_source(fragment_path)

        vertex = self._compile("vertex", vertex_code)
        fragment = self._compile("fragment", fragment_code)

        self.program = self._gl.link_program(vertex, fragment)

        self._gl.delete_shader(vertex)
        self._gl.delete_shader(fragment)

    def _compile(self, kind: str, source: str) -> int:
        shader, error = self._gl.compile_shader(kind, source)
        if error is not None:
            print(f"Shader Compilation Error:\n{error}", file=sys.stderr)
        return shader

    def use(self) -> None:
        """Make this program the current one."""
        self._gl.use_program(self.program)