"""Physically based shading terms and GGX prefiltering of environment maps."""

from __future__ import annotations

import math
from typing import Callable, Sequence, Tuple

import numpy as np

Vec = Sequence[float]
SampleLod = Callable[[np.ndarray, float], Sequence[float]]

_MASK32 = 0xFFFFFFFF
_ENV_C0 = np.array([-1.0, -0.0275, -0.572, 0.022])
_ENV_C1 = np.array([1.0, 0.0425, 1.04, -0.04])


def _vec3(value: Vec) -> np.ndarray:
    return np.asarray(value, dtype=float).reshape(-1)[:3]


def _normalize(v: np.ndarray) -> np.ndarray:
    return v / np.linalg.norm(v)


def distribution_ggx(n: Vec, h: Vec, roughness: float) -> float:
    """GGX / Trowbridge-Reitz normal distribution for half vector ``h``."""
    a = roughness * roughness
    a2 = a * a
    n_dot_h = max(float(np.dot(_vec3(n), _vec3(h))), 0.0)
    denom = n_dot_h * n_dot_h * (a2 - 1.0) + 1.0
    return a2 / (math.pi * denom * denom)


def geometry_schlick_ggx(n_dot_v: float, roughness: float) -> float:
    """Schlick-GGX geometry term with the direct-lighting remapping of ``k``."""
    r = roughness + 1.0
    k = (r * r) / 8.0
    return n_dot_v / (n_dot_v * (1.0 - k) + k)


def geometry_smith(n: Vec, v: Vec, l: Vec, roughness: float) -> float:
    """Smith geometry term combining view and light shadowing."""
    nv = _vec3(n)
    n_dot_v = max(float(np.dot(nv, _vec3(v))), 0.0)
    n_dot_l = max(float(np.dot(nv, _vec3(l))), 0.0)
    return geometry_schlick_ggx(n_dot_l, roughness) * geometry_schlick_ggx(n_dot_v, roughness)


def _schlick_weight(cos_theta: float) -> float:
    return min(max(1.0 - cos_theta, 0.0), 1.0) ** 5.0


def fresnel_schlick(cos_theta: float, f0: Vec) -> np.ndarray:
    """Schlick's Fresnel approximation."""
    f = _vec3(f0)
    return f + (1.0 - f) * _schlick_weight(cos_theta)


def fresnel_schlick_roughness(cos_theta: float, f0: Vec, roughness: float) -> np.ndarray:
    """Schlick's Fresnel approximation damped by roughness, for ambient lighting."""
    f = _vec3(f0)
    return f + (np.maximum(1.0 - roughness, f) - f) * _schlick_weight(cos_theta)


def env_brdf_approx(specular_color: Vec, roughness: float, n_dot_v: float) -> np.ndarray:
    """Analytic approximation of the split-sum environment BRDF."""
    spec = _vec3(specular_color)
    r = roughness * _ENV_C0 + _ENV_C1
    a004 = min(r[0] * r[0], 2.0 ** (-9.28 * n_dot_v)) * r[0] + r[1]
    ab_x = -1.04 * a004 + r[2]
    ab_y = 1.04 * a004 + r[3]
    ab_y *= max(0.0, min(1.0, 50.0 * spec[1]))
    return spec * ab_x + ab_y


def radical_inverse_vdc(bits: int) -> float:
    """Van der Corput radical inverse in base 2 of a 32-bit integer."""
    bits &= _MASK32
    bits = ((bits << 16) | (bits >> 16)) & _MASK32
    bits = ((bits & 0x55555555) << 1) | ((bits & 0xAAAAAAAA) >> 1)
    bits = ((bits & 0x33333333) << 2) | ((bits & 0xCCCCCCCC) >> 2)
    bits = ((bits & 0x0F0F0F0F) << 4) | ((bits & 0xF0F0F0F0) >> 4)
    bits = ((bits & 0x00FF00FF) << 8) | ((bits & 0xFF00FF00) >> 8)
    return float(np.float32((bits & _MASK32) * 2.3283064365386963e-10))


def hammersley(i: int, n: int) -> Tuple[float, float]:
    """The ``i``-th point of an ``n``-point Hammersley set."""
    return i / n, radical_inverse_vdc(i)


def importance_sample_ggx(xi: Sequence[float], n: Vec, roughness: float) -> np.ndarray:
    """Half vector around normal ``n`` sampled from the GGX distribution at ``xi``."""
    normal = _vec3(n)
    a = roughness * roughness
    phi = 2.0 * math.pi * xi[0]
    cos_theta = math.sqrt((1.0 - xi[1]) / (1.0 + (a * a - 1.0) * xi[1]))
    sin_theta = math.sqrt(max(1.0 - cos_theta * cos_theta, 0.0))

    h = np.array([math.cos(phi) * sin_theta, math.sin(phi) * sin_theta, cos_theta])

    up = np.array([0.0, 0.0, 1.0]) if abs(normal[2]) < 0.999 else np.array([1.0, 0.0, 0.0])
    tangent = _normalize(np.cross(up, normal))
    bitangent = np.cross(normal, tangent)
    return _normalize(tangent * h[0] + bitangent * h[1] + normal * h[2])


def prefilter(
    sample_lod: SampleLod,
    normal: Vec,
    roughness: float,
    src_resolution: float,
    sample_count: int = 1024,
) -> np.ndarray:
    """Prefiltered environment colour along ``normal`` for the given roughness.

    ``sample_lod(direction, lod)`` reads the source cube map; the result is the
    cosine-weighted average of the importance-sampled reflections.
    """
    if sample_count < 1:
        raise ValueError("sample_count must be positive")
    n = _normalize(_vec3(normal))
    v = n

    color = np.zeros(3)
    total_weight = 0.0
    sa_texel = 4.0 * math.pi / (6.0 * src_resolution * src_resolution)

    for i in range(sample_count):
        xi = hammersley(i, sample_count)
        h = importance_sample_ggx(xi, n, roughness)
        l = _normalize(2.0 * float(np.dot(v, h)) * h - v)

        n_dot_l = max(float(np.dot(n, l)), 0.0)
        if n_dot_l <= 0.0:
            continue
        d = distribution_ggx(n, h, roughness)
        n_dot_h = max(float(np.dot(n, h)), 0.0)
        h_dot_v = max(float(np.dot(h, v)), 0.0)
        pdf = d * n_dot_h / (4.0 * h_dot_v) + 0.0001
        sa_sample = 1.0 / (sample_count * pdf + 0.0001)
        mip_level = 0.0 if roughness == 0.0 else 0.5 * math.log2(sa_sample / sa_texel)

        color += _vec3(sample_lod(l, mip_level)) * n_dot_l
        total_weight += n_dot_l

    return color / total_weight