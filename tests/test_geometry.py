import numpy as np
import pytest

from softgl.geometry import BoundingBox, Frustum, Plane, PlaneIntersects


def _plane(normal, point):
    plane = Plane()
    plane.set(normal, point)
    return plane


def _unit_cube_frustum():
    frustum = Frustum()
    inward = [(0, 0, -1), (0, 0, 1), (0, -1, 0), (0, 1, 0), (1, 0, 0), (-1, 0, 0)]
    for plane, n in zip(frustum.planes, inward):
        plane.set(n, -np.asarray(n, dtype=float))
    frustum.bbox = BoundingBox((-1, -1, -1), (1, 1, 1))
    return frustum


def test_corners_cover_all_extremes():
    box = BoundingBox((-1, -2, -3), (4, 5, 6))
    corners = box.corners()
    assert len(corners) == 8
    assert len({tuple(c) for c in corners}) == 8
    np.testing.assert_allclose(np.min(corners, axis=0), box.min)
    np.testing.assert_allclose(np.max(corners, axis=0), box.max)


def test_transform_identity_and_translation():
    box = BoundingBox((-1, -2, -3), (4, 5, 6))
    same = box.transform(np.eye(4))
    np.testing.assert_allclose(same.min, box.min)
    np.testing.assert_allclose(same.max, box.max)

    m = np.eye(4)
    m[:3, 3] = (10, 20, 30)
    moved = box.transform(m)
    np.testing.assert_allclose(moved.min, box.min + (10, 20, 30))
    np.testing.assert_allclose(moved.max, box.max + (10, 20, 30))


def test_transform_negative_scale_keeps_min_below_max():
    box = BoundingBox((1, 2, 3), (4, 5, 6))
    out = box.transform(np.diag([-1.0, -1.0, -1.0, 1.0]))
    np.testing.assert_allclose(out.min, -box.max)
    np.testing.assert_allclose(out.max, -box.min)


def test_box_intersects():
    a = BoundingBox((0, 0, 0), (2, 2, 2))
    assert a.intersects(BoundingBox((1, 1, 1), (3, 3, 3)))
    assert a.intersects(BoundingBox((2, 0, 0), (3, 2, 2)))
    assert not a.intersects(BoundingBox((3, 0, 0), (4, 2, 2)))
    assert BoundingBox((-1, -1, -1), (5, 5, 5)).intersects(a)


def test_merge_encloses_both():
    a = BoundingBox((0, 0, 0), (1, 1, 1))
    b = BoundingBox((-2, 0.5, 3), (0.5, 4, 5))
    a.merge(b)
    np.testing.assert_allclose(a.min, (-2, 0, 0))
    np.testing.assert_allclose(a.max, (1, 4, 5))


def test_plane_set_normalises():
    plane = _plane((0, 0, 5), (0, 0, 1))
    assert np.linalg.norm(plane.normal) == pytest.approx(1.0)
    assert plane.distance((0, 0, 1)) == pytest.approx(0.0)


def test_plane_distance_signed():
    plane = _plane((0, 1, 0), (0, 0, 0))
    assert plane.distance((1, 5, 2)) == pytest.approx(5.0)
    assert plane.distance((1, -5, 2)) == pytest.approx(-5.0)


def test_plane_point():
    plane = _plane((0, 1, 0), (0, 0, 0))
    assert plane.intersects_point((0, 1, 0)) is PlaneIntersects.FRONT
    assert plane.intersects_point((0, -1, 0)) is PlaneIntersects.BACK
    assert plane.intersects_point((3, 0, 7)) is PlaneIntersects.TANGENT


def test_plane_segment():
    plane = _plane((0, 1, 0), (0, 0, 0))
    assert plane.intersects_segment((0, 1, 0), (0, -1, 0)) is PlaneIntersects.CROSS
    assert plane.intersects_segment((0, 1, 0), (0, 2, 0)) is PlaneIntersects.FRONT
    assert plane.intersects_segment((0, 0, 0), (0, -2, 0)) is PlaneIntersects.TANGENT


def test_plane_triangle():
    plane = _plane((0, 1, 0), (0, 0, 0))
    assert plane.intersects_triangle((0, 1, 0), (1, 2, 0), (0, -1, 1)) is PlaneIntersects.CROSS
    assert plane.intersects_triangle((0, -1, 0), (1, -2, 0), (0, -1, 1)) is PlaneIntersects.BACK
    assert plane.intersects_triangle((0, 0, 0), (1, 1, 0), (0, 1, 1)) is PlaneIntersects.TANGENT


def test_plane_box():
    plane = _plane((0, 1, 0), (0, 0, 0))
    assert plane.intersects_box(BoundingBox((0, -1, 0), (1, 1, 1))) is PlaneIntersects.CROSS
    assert plane.intersects_box(BoundingBox((0, 1, 0), (1, 2, 1))) is PlaneIntersects.FRONT
    assert plane.intersects_box(BoundingBox((0, -3, 0), (1, -2, 1))) is PlaneIntersects.BACK
    assert plane.intersects_box(BoundingBox((0, 0, 0), (1, 2, 1))) is PlaneIntersects.TANGENT


def test_frustum_point_and_segment():
    frustum = _unit_cube_frustum()
    assert frustum.intersects_point((0, 0, 0))
    assert not frustum.intersects_point((0, 3, 0))
    assert frustum.intersects_segment((0, 3, 0), (0, -3, 0))
    assert not frustum.intersects_segment((2, 3, 0), (2, -3, 0))


def test_frustum_triangle():
    frustum = _unit_cube_frustum()
    assert frustum.intersects_triangle((0, 0, 0), (5, 0, 0), (0, 5, 0))
    assert not frustum.intersects_triangle((3, 3, 3), (4, 3, 3), (3, 4, 3))


def test_frustum_box():
    frustum = _unit_cube_frustum()
    assert frustum.intersects_box(BoundingBox((-0.5, -0.5, -0.5), (0.5, 0.5, 0.5)))
    assert frustum.intersects_box(BoundingBox((0.5, 0.5, 0.5), (3, 3, 3)))
    assert not frustum.intersects_box(BoundingBox((2, 2, 2), (3, 3, 3)))