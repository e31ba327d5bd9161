"""GLSL source assembly: version header, defines and compatibility rewrites."""

from __future__ import annotations

import enum
import os
import re
from dataclasses import dataclass
from typing import Tuple, Union

from softgl.fileutils import read_text

OPENGL_GLSL_VERSION = "#version 330 core"
OPENGL_GLSL_DEFINE = "OpenGL"

PathLike = Union[str, "os.PathLike[str]"]

_IN_LOCATION = re.compile(r"layout\s*\(\s*location\s*=\s*\d+\s*\)\s*in\s*")
_OUT_LOCATION = re.compile(r"layout\s*\(\s*location\s*=\s*\d+\s*\)\s*out\s*")
_STD140 = re.compile(r"layout\s*\(.*std140.*\)\s*uniform\s*")
_UNIFORM_BINDING = re.compile(r"layout\s*\(.*binding\s*=.*\)\s*uniform\s*")


class ShaderStage(enum.Enum):
    VERTEX = "vertex"
    FRAGMENT = "fragment"


def _rewrite_uniforms(source: str) -> str:
    result = _STD140.sub("layout (std140) uniform ", source)
    return _UNIFORM_BINDING.sub("uniform ", result)


def preprocess_vertex(source: str) -> str:
    """Strip output locations and uniform bindings unsupported by GLSL 330."""
    return _rewrite_uniforms(_OUT_LOCATION.sub("out ", source))


def preprocess_fragment(source: str) -> str:
    """Strip input/output locations and uniform bindings unsupported by GLSL 330."""
    result = _IN_LOCATION.sub("in ", source)
    result = _OUT_LOCATION.sub("out ", result)
    return _rewrite_uniforms(result)


@dataclass
class ShaderSource:
    """One shader stage's header and defines, prepended to the body on compose."""

    stage: ShaderStage
    header: str = OPENGL_GLSL_VERSION + "\n"
    defines: str = ""

    def compose(self, source: str) -> str:
        """Full preprocessed source text for this stage."""
        text = self.header + self.defines + source
        if self.stage is ShaderStage.VERTEX:
            text = preprocess_vertex(text)
        else:
            text = preprocess_fragment(text)
        if not text:
            raise ValueError("empty shader source")
        return text

    def load_file(self, path: PathLike) -> str:
        """Read a shader body from ``path`` and compose it."""
        source = read_text(path)
        if not source:
            raise ValueError(f"read shader source failed: {os.fspath(path)}")
        return self.compose(source)


class ProgramSource:
    """Vertex and fragment sources sharing one set of ``#define`` lines."""

    def __init__(self) -> None:
        self.defines = ""
        self.add_define(OPENGL_GLSL_DEFINE)

    def add_define(self, definition: str) -> None:
        """Append ``#define <definition>``; empty definitions are ignored."""
        if not definition:
            return
        self.defines += "#define " + definition + " \n"

    def _stages(self) -> Tuple[ShaderSource, ShaderSource]:
        return (
            ShaderSource(ShaderStage.VERTEX, defines=self.defines),
            ShaderSource(ShaderStage.FRAGMENT, defines=self.defines),
        )

    def build(self, vs_source: str, fs_source: str) -> Tuple[str, str]:
        """Composed vertex and fragment sources."""
        vs, fs = self._stages()
        return vs.compose(vs_source), fs.compose(fs_source)

    def load_files(self, vs_path: PathLike, fs_path: PathLike) -> Tuple[str, str]:
        """Composed vertex and fragment sources read from files."""
        vs, fs = self._stages()
        return vs.load_file(vs_path), fs.load_file(fs_path)