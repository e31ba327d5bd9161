"""Viewer settings and the unit cube mesh used for skyboxes."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Tuple

ASSETS_DIR = "./assets/"
SHADER_GLSL_DIR = "./shaders/GLSL/"

Vec3 = Tuple[float, float, float]
Vec4 = Tuple[float, float, float, float]


class AAType(enum.IntEnum):
    NONE = 0
    MSAA = 1
    FXAA = 2


@dataclass
class Config:
    """User-adjustable viewer state."""

    model_name: str = ""
    model_path: str = ""
    skybox_name: str = ""
    skybox_path: str = ""

    triangle_count: int = 0

    wireframe: bool = False
    world_axis: bool = True
    show_skybox: bool = False
    show_floor: bool = True

    shadow_map: bool = True
    pbr_ibl: bool = False
    mipmaps: bool = False

    cull_face: bool = True
    depth_test: bool = True
    reverse_z: bool = False

    clear_color: Vec4 = (0.0, 0.0, 0.0, 0.0)
    ambient_color: Vec3 = (0.5, 0.5, 0.5)

    show_light: bool = True
    point_light_position: Vec3 = (0.0, 0.0, 0.0)
    point_light_color: Vec3 = (0.5, 0.5, 0.5)

    aa_type: AAType = AAType.NONE
    renderer_type: str = "soft"


_CUBE_VERTICES: Tuple[Vec3, ...] = (
    (-1.0, 1.0, -1.0), (-1.0, -1.0, -1.0), (1.0, -1.0, -1.0),
    (1.0, -1.0, -1.0), (1.0, 1.0, -1.0), (-1.0, 1.0, -1.0),

    (-1.0, -1.0, 1.0), (-1.0, -1.0, -1.0), (-1.0, 1.0, -1.0),
    (-1.0, 1.0, -1.0), (-1.0, 1.0, 1.0), (-1.0, -1.0, 1.0),

    (1.0, -1.0, -1.0), (1.0, -1.0, 1.0), (1.0, 1.0, 1.0),
    (1.0, 1.0, 1.0), (1.0, 1.0, -1.0), (1.0, -1.0, -1.0),

    (-1.0, -1.0, 1.0), (-1.0, 1.0, 1.0), (1.0, 1.0, 1.0),
    (1.0, 1.0, 1.0), (1.0, -1.0, 1.0), (-1.0, -1.0, 1.0),

    (-1.0, 1.0, -1.0), (1.0, 1.0, -1.0), (1.0, 1.0, 1.0),
    (1.0, 1.0, 1.0), (-1.0, 1.0, 1.0), (-1.0, 1.0, -1.0),

    (-1.0, -1.0, -1.0), (-1.0, -1.0, 1.0), (1.0, -1.0, -1.0),
    (1.0, -1.0, -1.0), (-1.0, -1.0, 1.0), (1.0, -1.0, 1.0),
)


def cube_vertices() -> Tuple[Vec3, ...]:
    """The 36 positions (12 triangles) of a cube spanning -1..1 on every axis."""
    return _CUBE_VERTICES