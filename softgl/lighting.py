"""Blinn-Phong shading with percentage-closer filtered shadows."""

from __future__ import annotations

from typing import Callable, Optional, Sequence

import numpy as np

Vec = Sequence[float]
ShadowSample = Callable[[np.ndarray], float]

DEPTH_BIAS_COEFF = 0.00025
DEPTH_BIAS_MIN = 0.00005
POINT_LIGHT_RANGE_INVERSE = 1.0 / 5.0
SPECULAR_EXPONENT = 128.0


def _vec(value: Vec, size: int) -> np.ndarray:
    return np.asarray(value, dtype=float).reshape(-1)[:size]


def _normalize(v: np.ndarray) -> np.ndarray:
    return v / np.linalg.norm(v)


def shadow_factor(
    frag_pos: Vec,
    normal: Vec,
    light_direction: Vec,
    shadow_sample: ShadowSample,
    texel_size: Vec,
    reverse_z: bool = False,
) -> float:
    """Fraction of a 3x3 shadow-map neighbourhood occluding the fragment.

    ``frag_pos`` is the fragment in the light's clip space, ``shadow_sample(uv)``
    reads a depth from the shadow map and ``texel_size`` is the uv size of one
    shadow-map texel. Fragments outside the depth range are never shadowed.
    """
    pos = _vec(frag_pos, 4)
    proj = pos[:3] / pos[3]
    current_depth = float(proj[2])
    if current_depth < 0.0 or current_depth > 1.0:
        return 0.0

    n = _vec(normal, 3)
    l_dir = _normalize(_vec(light_direction, 3))
    bias = max(DEPTH_BIAS_COEFF * (1.0 - float(np.dot(n, l_dir))), DEPTH_BIAS_MIN)

    offset = _vec(texel_size, 2)
    base = proj[:2]
    shadow = 0.0
    for x in (-1, 0, 1):
        for y in (-1, 0, 1):
            pcf_depth = float(shadow_sample(base + np.array([x, y], dtype=float) * offset))
            if reverse_z:
                occluded = current_depth + bias < pcf_depth
            else:
                occluded = current_depth - bias > pcf_depth
            shadow += 1.0 if occluded else 0.0
    return shadow / 9.0


def blinn_phong(
    base_color: Vec,
    normal: Vec,
    light_direction: Vec,
    camera_direction: Vec,
    ambient_color: Vec,
    light_color: Optional[Vec],
    k_specular: float,
    ao: float = 1.0,
    shadow: float = 0.0,
) -> np.ndarray:
    """RGBA colour of a fragment lit by one point light.

    ``light_direction`` and ``camera_direction`` run from the fragment to the
    light and camera, unnormalised; the light fades out at a distance of 5.
    ``light_color`` of ``None`` disables the light, leaving only ambient.
    ``shadow`` is the occluded fraction from :func:`shadow_factor`.
    """
    base = _vec(base_color, 4)
    rgb = base[:3]
    n = _normalize(_vec(normal, 3))

    ambient = rgb * _vec(ambient_color, 3) * ao
    diffuse = np.zeros(3)
    specular = np.zeros(3)

    if light_color is not None:
        light_vec = _vec(light_direction, 3)
        l_dir = light_vec * POINT_LIGHT_RANGE_INVERSE
        attenuation = min(max(1.0 - float(np.dot(l_dir, l_dir)), 0.0), 1.0)

        light_dir = _normalize(light_vec)
        diffuse_term = max(float(np.dot(n, light_dir)), 0.0)
        diffuse = _vec(light_color, 3) * rgb * diffuse_term * attenuation

        camera_dir = _normalize(_vec(camera_direction, 3))
        half_vector = _normalize(light_dir + camera_dir)
        specular_angle = max(float(np.dot(n, half_vector)), 0.0)
        specular = np.full(3, k_specular * specular_angle**SPECULAR_EXPONENT)

        lit = 1.0 - shadow
        diffuse = diffuse * lit
        specular = specular * lit

    color = ambient + diffuse + specular
    return np.append(color, base[3])