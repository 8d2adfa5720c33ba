"""Shader programs built from a vertex and a fragment source file."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

__all__ = ["ShaderError", "ShaderProgram", "read_sources"]


class ShaderError(Exception):
    """A shader file could not be read, or a program failed to build."""


def read_sources(vertex_path, fragment_path) -> tuple[str, str]:
    """Return the text of the vertex and fragment shader files."""
    sources = []
    for path in (vertex_path, fragment_path):
        try:
            sources.append(Path(path).read_text())
        except OSError as exc:
            raise ShaderError(f"can't open {path}") from exc
    return sources[0], sources[1]


class _PygletProgram:
    """A linked GPU program; unknown uniform names are ignored, as in GL."""

    def __init__(self, vertex_source: str, fragment_source: str) -> None:
        from pyglet.graphics.shader import Shader, ShaderException
        from pyglet.graphics.shader import ShaderProgram as NativeProgram

        try:
            vertex = Shader(vertex_source, "vertex")
            fragment = Shader(fragment_source, "fragment")
            self.native = NativeProgram(vertex, fragment)
        except ShaderException as exc:
            raise ShaderError(f"shader program failed to build:\n{exc}") from exc

    def use(self) -> None:
        self.native.use()

    def set_uniform(self, name: str, value: Any) -> None:
        if name in self.native.uniforms:
            self.native[name] = value


class ShaderProgram:
    """Vertex and fragment shader paths and the program built from them.

    ``builder`` turns the two source texts into a program object offering
    ``use()`` and ``set_uniform(name, value)``; by default the program is
    compiled and linked on the current GL context.
    """

    def __init__(
        self,
        vertex_path,
        fragment_path,
        builder: Callable[[str, str], Any] | None = None,
    ) -> None:
        self.vertex_path = Path(vertex_path)
        self.fragment_path = Path(fragment_path)
        self.program: Any = None
        self._builder = builder if builder is not None else _PygletProgram

    def compile(self) -> ShaderProgram:
        """Read both sources and build the program."""
        vertex_source, fragment_source = read_sources(self.vertex_path, self.fragment_path)
        self.program = self._builder(vertex_source, fragment_source)
        return self

    def _built(self) -> Any:
        if self.program is None:
            raise ShaderError(
                f"program from {self.vertex_path} and {self.fragment_path} is not compiled"
            )
        return self.program

    def use(self) -> None:
        """Make this program the active one."""
        self._built().use()

    def __setitem__(self, name: str, value: Any) -> None:
        self._built().set_uniform(name, value)

    def set_bool(self, name: str, value: bool) -> None:
        self[name] = int(bool(value))

    def set_int(self, name: str, value: int) -> None:
        self[name] = int(value)

    def set_float(self, name: str, value: float) -> None:
        self[name] = float(value)