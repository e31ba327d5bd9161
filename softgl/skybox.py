"""Skybox projection helpers and diffuse irradiance convolution."""

from __future__ import annotations

import math
from typing import Callable, Sequence, Tuple

import numpy as np

Vec = Sequence[float]
Sample = Callable[[np.ndarray], Sequence[float]]


def _vec3(value: Vec) -> np.ndarray:
    return np.asarray(value, dtype=float).reshape(-1)[:3]


def _normalize(v: np.ndarray) -> np.ndarray:
    return v / np.linalg.norm(v)


def sample_spherical_map(direction: Vec) -> Tuple[float, float]:
    """Equirectangular texture coordinates for a unit ``direction``."""
    d = _vec3(direction)
    u = math.atan2(d[2], d[0]) * 0.1591 + 0.5
    v = math.asin(-d[1]) * 0.3183 + 0.5
    return u, v


def skybox_clip_position(
    mvp: Sequence[Sequence[float]], position: Vec, reverse_z: bool = False
) -> np.ndarray:
    """Clip-space position of a skybox vertex, pinned to the far plane."""
    m = np.asarray(mvp, dtype=float).reshape(4, 4)
    pos = m @ np.append(_vec3(position), 1.0)
    z = 0.0 if reverse_z else pos[3]
    return np.array([pos[0], pos[1], z, pos[3]])


def irradiance(sample: Sample, normal: Vec, sample_delta: float = 0.025) -> np.ndarray:
    """Cosine-weighted hemisphere integral of ``sample(direction)`` around ``normal``."""
    if sample_delta <= 0.0:
        raise ValueError("sample_delta must be positive")
    n = _normalize(_vec3(normal))
    up = np.array([0.0, 1.0, 0.0])
    right = _normalize(np.cross(up, n))
    up = _normalize(np.cross(n, right))

    total = np.zeros(3)
    count = 0
    phi = 0.0
    while phi < 2.0 * math.pi:
        theta = 0.0
        while theta < 0.5 * math.pi:
            sin_t, cos_t = math.sin(theta), math.cos(theta)
            tangent = (sin_t * math.cos(phi), sin_t * math.sin(phi), cos_t)
            direction = tangent[0] * right + tangent[1] * up + tangent[2] * n
            total += _vec3(sample(direction)) * cos_t * sin_t
            count += 1
            theta += sample_delta
        phi += sample_delta

    return math.pi * total * (1.0 / count)