"""Fast approximate anti-aliasing of a single screen fragment."""

from __future__ import annotations

from typing import Callable, Sequence

import numpy as np

Sample = Callable[[np.ndarray], Sequence[float]]

EDGE_THRESHOLD_MIN = 0.0312
EDGE_THRESHOLD_MAX = 0.125
ITERATIONS = 12
SUBPIXEL_QUALITY = 0.75

_LUMA = np.array([0.299, 0.587, 0.114])


def rgb2luma(rgb: Sequence[float]) -> float:
    """Perceived brightness of an RGB colour."""
    return float(np.dot(np.asarray(rgb, dtype=float).reshape(-1)[:3], _LUMA))


def quality(q: float) -> float:
    """Step multiplier used at exploration step ``q``."""
    if q < 5.0:
        return 1.0
    if q > 5.0:
        if q < 10.0:
            return 2.0
        if q < 11.0:
            return 4.0
        return 8.0
    return 1.5


def _rgb(value: Sequence[float]) -> np.ndarray:
    return np.asarray(value, dtype=float).reshape(-1)[:3]


def fxaa(sample: Sample, uv: Sequence[float], screen_size: Sequence[float]) -> np.ndarray:
    """Anti-aliased RGB colour at ``uv``; ``sample(uv)`` reads the screen texture."""
    inv = 1.0 / np.asarray(screen_size, dtype=float).reshape(2)
    center_uv = np.asarray(uv, dtype=float).reshape(2)

    def luma_at(dx: int, dy: int) -> float:
        return rgb2luma(sample(center_uv + np.array([dx, dy], dtype=float) * inv))

    color_center = _rgb(sample(center_uv))
    luma_center = rgb2luma(color_center)

    luma_down = luma_at(0, -1)
    luma_up = luma_at(0, 1)
    luma_left = luma_at(-1, 0)
    luma_right = luma_at(1, 0)

    luma_min = min(luma_center, luma_down, luma_up, luma_left, luma_right)
    luma_max = max(luma_center, luma_down, luma_up, luma_left, luma_right)
    luma_range = luma_max - luma_min

    if luma_range < max(EDGE_THRESHOLD_MIN, luma_max * EDGE_THRESHOLD_MAX):
        return color_center

    luma_down_left = luma_at(-1, -1)
    luma_up_right = luma_at(1, 1)
    luma_up_left = luma_at(-1, 1)
    luma_down_right = luma_at(1, -1)

    luma_down_up = luma_down + luma_up
    luma_left_right = luma_left + luma_right

    luma_left_corners = luma_down_left + luma_up_left
    luma_down_corners = luma_down_left + luma_down_right
    luma_right_corners = luma_down_right + luma_up_right
    luma_up_corners = luma_up_right + luma_up_left

    edge_horizontal = (
        abs(-2.0 * luma_left + luma_left_corners)
        + abs(-2.0 * luma_center + luma_down_up) * 2.0
        + abs(-2.0 * luma_right + luma_right_corners)
    )
    edge_vertical = (
        abs(-2.0 * luma_up + luma_up_corners)
        + abs(-2.0 * luma_center + luma_left_right) * 2.0
        + abs(-2.0 * luma_down + luma_down_corners)
    )

    is_horizontal = edge_horizontal >= edge_vertical
    step_length = inv[1] if is_horizontal else inv[0]

    luma1 = luma_down if is_horizontal else luma_left
    luma2 = luma_up if is_horizontal else luma_right
    gradient1 = luma1 - luma_center
    gradient2 = luma2 - luma_center

    is1_steepest = abs(gradient1) >= abs(gradient2)
    gradient_scaled = 0.25 * max(abs(gradient1), abs(gradient2))

    if is1_steepest:
        step_length = -step_length
        luma_local_average = 0.5 * (luma1 + luma_center)
    else:
        luma_local_average = 0.5 * (luma2 + luma_center)

    current_uv = center_uv.copy()
    if is_horizontal:
        current_uv[1] += step_length * 0.5
    else:
        current_uv[0] += step_length * 0.5

    offset = np.array([inv[0], 0.0]) if is_horizontal else np.array([0.0, inv[1]])
    uv1 = current_uv - offset * quality(0.0)
    uv2 = current_uv + offset * quality(0.0)

    luma_end1 = 0.0
    luma_end2 = 0.0
    reached1 = False
    reached2 = False

    for i in range(1, ITERATIONS):
        if not reached1:
            luma_end1 = rgb2luma(sample(uv1)) - luma_local_average
            reached1 = abs(luma_end1) >= gradient_scaled
        if not reached2:
            luma_end2 = rgb2luma(sample(uv2)) - luma_local_average
            reached2 = abs(luma_end2) >= gradient_scaled

        if not reached1:
            uv1 = uv1 - offset * quality(i)
        if not reached2:
            uv2 = uv2 + offset * quality(i)

        if reached1 and reached2:
            break

    if is_horizontal:
        distance1 = center_uv[0] - uv1[0]
        distance2 = uv2[0] - center_uv[0]
    else:
        distance1 = center_uv[1] - uv1[1]
        distance2 = uv2[1] - center_uv[1]

    is_direction1 = distance1 < distance2
    distance_final = min(distance1, distance2)

    is_luma_center_smaller = luma_center < luma_local_average
    correct_variation1 = (luma_end1 < 0.0) != is_luma_center_smaller
    correct_variation2 = (luma_end2 < 0.0) != is_luma_center_smaller
    correct_variation = correct_variation1 if is_direction1 else correct_variation2

    edge_length = distance1 + distance2
    pixel_offset = -distance_final / edge_length + 0.5
    final_offset = pixel_offset if correct_variation else 0.0

    luma_average = (1.0 / 12.0) * (
        2.0 * (luma_down_up + luma_left_right) + luma_left_corners + luma_right_corners
    )
    sub_pixel_offset1 = min(max(abs(luma_average - luma_center) / luma_range, 0.0), 1.0)
    sub_pixel_offset2 = (-2.0 * sub_pixel_offset1 + 3.0) * sub_pixel_offset1 * sub_pixel_offset1
    sub_pixel_offset_final = sub_pixel_offset2 * sub_pixel_offset2 * SUBPIXEL_QUALITY

    final_offset = max(final_offset, sub_pixel_offset_final)

    final_uv = center_uv.copy()
    if is_horizontal:
        final_uv[1] += final_offset * step_length
    else:
        final_uv[0] += final_offset * step_length

    return _rgb(sample(final_uv))