"""Bounding boxes, planes and view frustums with intersection tests."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import List, Sequence

import numpy as np

from softgl.auxmath import K_FEPS, K_FLOAT_EPS, abs_equal, less_than

Vec3 = Sequence[float]


def _vec3(value: Vec3) -> np.ndarray:
    return np.asarray(value, dtype=float).reshape(3)


@dataclass
class BoundingBox:
    """Axis-aligned box given by its ``min`` and ``max`` corners."""

    min: np.ndarray = field(default_factory=lambda: np.zeros(3))
    max: np.ndarray = field(default_factory=lambda: np.zeros(3))

    def __post_init__(self) -> None:
        self.min = _vec3(self.min)
        self.max = _vec3(self.max)

    def corners(self) -> List[np.ndarray]:
        """The eight corners, near face (max z) first, each face counter-clockwise."""
        lo, hi = self.min, self.max
        return [
            np.array([lo[0], hi[1], hi[2]]),
            np.array([lo[0], lo[1], hi[2]]),
            np.array([hi[0], lo[1], hi[2]]),
            np.array([hi[0], hi[1], hi[2]]),
            np.array([hi[0], hi[1], lo[2]]),
            np.array([hi[0], lo[1], lo[2]]),
            np.array([lo[0], lo[1], lo[2]]),
            np.array([lo[0], hi[1], lo[2]]),
        ]

    def transform(self, matrix: Sequence[Sequence[float]]) -> "BoundingBox":
        """Box enclosing the corners transformed by the 4x4 ``matrix`` (acting on column vectors)."""
        m = np.asarray(matrix, dtype=float).reshape(4, 4)
        points = np.array([m @ np.append(c, 1.0) for c in self.corners()])[:, :3]
        return BoundingBox(points.min(axis=0), points.max(axis=0))

    def intersects(self, box: "BoundingBox") -> bool:
        """True when the two boxes overlap or touch on every axis."""
        return all(
            (box.min[i] <= self.min[i] <= box.max[i]) or (self.min[i] <= box.min[i] <= self.max[i])
            for i in range(3)
        )

    def merge(self, box: "BoundingBox") -> None:
        """Grow this box in place to enclose ``box``."""
        self.min = np.minimum(self.min, box.min)
        self.max = np.maximum(self.max, box.max)


class PlaneIntersects(enum.IntEnum):
    CROSS = 0
    TANGENT = 1
    FRONT = 2
    BACK = 3


@dataclass
class Plane:
    """Plane ``dot(normal, p) + d == 0`` with a unit normal once :meth:`set` is called."""

    normal: np.ndarray = field(default_factory=lambda: np.zeros(3))
    d: float = 0.0

    def __post_init__(self) -> None:
        self.normal = _vec3(self.normal)

    def set(self, normal: Vec3, point: Vec3) -> None:
        """Define the plane through ``point`` with direction ``normal``."""
        n = _vec3(normal)
        self.normal = n / np.linalg.norm(n)
        self.d = -float(np.dot(self.normal, _vec3(point)))

    def distance(self, point: Vec3) -> float:
        """Signed distance of ``point``; positive on the side the normal points to."""
        return float(np.dot(self.normal, _vec3(point))) + self.d

    def intersects_box(self, box: BoundingBox) -> PlaneIntersects:
        center = (box.min + box.max) * 0.5
        extent = (box.max - box.min) * 0.5
        d = self.distance(center)
        r = float(np.sum(np.abs(extent * self.normal)))
        if abs_equal(d, r, K_FEPS):
            return PlaneIntersects.TANGENT
        if less_than(abs(d), r, K_FLOAT_EPS):
            return PlaneIntersects.CROSS
        return PlaneIntersects.FRONT if d > 0.0 else PlaneIntersects.BACK

    def intersects_point(self, p0: Vec3) -> PlaneIntersects:
        d = self.distance(p0)
        if abs_equal(d, 0.0, K_FEPS):
            return PlaneIntersects.TANGENT
        return PlaneIntersects.FRONT if d > 0.0 else PlaneIntersects.BACK

    def intersects_segment(self, p0: Vec3, p1: Vec3) -> PlaneIntersects:
        state0 = self.intersects_point(p0)
        state1 = self.intersects_point(p1)
        if state0 == state1:
            return state0
        if PlaneIntersects.TANGENT in (state0, state1):
            return PlaneIntersects.TANGENT
        return PlaneIntersects.CROSS

    def intersects_triangle(self, p0: Vec3, p1: Vec3, p2: Vec3) -> PlaneIntersects:
        state0 = self.intersects_segment(p0, p1)
        state1 = self.intersects_segment(p0, p2)
        state2 = self.intersects_segment(p1, p2)
        if state0 == state1 == state2:
            return state0
        if PlaneIntersects.CROSS in (state0, state1, state2):
            return PlaneIntersects.CROSS
        return PlaneIntersects.TANGENT


@dataclass
class Frustum:
    """View frustum.

    ``planes``: near, far, top, bottom, left, right (normals point inwards).
    ``corners``: near top-left, near top-right, near bottom-left, near bottom-right,
    then the same four on the far plane.
    """

    planes: List[Plane] = field(default_factory=lambda: [Plane() for _ in range(6)])
    corners: List[np.ndarray] = field(default_factory=lambda: [np.zeros(3) for _ in range(8)])
    bbox: BoundingBox = field(default_factory=BoundingBox)

    def intersects_box(self, box: BoundingBox) -> bool:
        if any(p.intersects_box(box) == PlaneIntersects.BACK for p in self.planes):
            return False
        return self.bbox.intersects(box)

    def intersects_point(self, p0: Vec3) -> bool:
        return all(p.intersects_point(p0) != PlaneIntersects.BACK for p in self.planes)

    def intersects_segment(self, p0: Vec3, p1: Vec3) -> bool:
        return all(p.intersects_segment(p0, p1) != PlaneIntersects.BACK for p in self.planes)

    def intersects_triangle(self, p0: Vec3, p1: Vec3, p2: Vec3) -> bool:
        return all(
            p.intersects_triangle(p0, p1, p2) != PlaneIntersects.BACK for p in self.planes
        )


class FrustumClipMask(enum.IntFlag):
    POSITIVE_X = 1 << 0
    NEGATIVE_X = 1 << 1
    POSITIVE_Y = 1 << 2
    NEGATIVE_Y = 1 << 3
    POSITIVE_Z = 1 << 4
    NEGATIVE_Z = 1 << 5


FRUSTUM_CLIP_MASKS = (
    FrustumClipMask.POSITIVE_X,
    FrustumClipMask.NEGATIVE_X,
    FrustumClipMask.POSITIVE_Y,
    FrustumClipMask.NEGATIVE_Y,
    FrustumClipMask.POSITIVE_Z,
    FrustumClipMask.NEGATIVE_Z,
)

FRUSTUM_CLIP_PLANES = (
    (-1.0, 0.0, 0.0, 1.0),
    (1.0, 0.0, 0.0, 1.0),
    (0.0, -1.0, 0.0, 1.0),
    (0.0, 1.0, 0.0, 1.0),
    (0.0, 0.0, -1.0, 1.0),
    (0.0, 0.0, 1.0, 1.0),
)