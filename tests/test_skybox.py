import math

import numpy as np
import pytest

from softgl.skybox import irradiance, sample_spherical_map, skybox_clip_position


def test_spherical_map_center():
    u, v = sample_spherical_map((1, 0, 0))
    assert u == pytest.approx(0.5)
    assert v == pytest.approx(0.5)


def test_spherical_map_poles():
    _, v_down = sample_spherical_map((0, -1, 0))
    _, v_up = sample_spherical_map((0, 1, 0))
    assert v_down == pytest.approx(1.0, abs=1e-3)
    assert v_up == pytest.approx(0.0, abs=1e-3)


def test_spherical_map_in_unit_square():
    rng = np.random.default_rng(1)
    for _ in range(50):
        d = rng.normal(size=3)
        d /= np.linalg.norm(d)
        u, v = sample_spherical_map(d)
        assert -1e-3 <= u <= 1.0 + 1e-3
        assert -1e-3 <= v <= 1.0 + 1e-3


def test_clip_position_identity():
    out = skybox_clip_position(np.eye(4), (1, 2, 3))
    assert np.allclose(out, (1, 2, 1, 1))


def test_clip_position_reverse_z():
    out = skybox_clip_position(np.eye(4), (1, 2, 3), reverse_z=True)
    assert np.allclose(out, (1, 2, 0, 1))


def test_clip_position_depth_equals_w():
    m = np.array([[2, 0, 0, 0], [0, 3, 0, 0], [0, 0, 4, 1], [0, 0, -1, 0]], dtype=float)
    out = skybox_clip_position(m, (0.5, -0.5, -2.0))
    assert out[2] == pytest.approx(out[3])


def test_irradiance_constant_environment():
    color = (0.2, 0.4, 0.8)
    out = irradiance(lambda d: color, (0, 0, 1), 0.05)
    assert np.allclose(out, color, rtol=0.05)


def test_irradiance_is_linear():
    a = irradiance(lambda d: (0.1, 0.2, 0.3, 1.0), (1, 0, 0), 0.2)
    b = irradiance(lambda d: (0.2, 0.4, 0.6, 1.0), (1, 0, 0), 0.2)
    assert np.allclose(b, 2 * a)


def test_irradiance_samples_hemisphere():
    normal = np.array([0.0, 0.0, 1.0])
    seen = []

    def sample(direction):
        seen.append(np.array(direction))
        return (1.0, 1.0, 1.0)

    out = irradiance(sample, normal, 0.3)
    assert float(out[0]) > 0.0
    assert float(out[1]) == pytest.approx(float(out[0]))
    assert float(out[2]) == pytest.approx(float(out[0]))
    assert len(seen) > 0
    assert all(float(np.dot(d, normal)) >= -1e-9 for d in seen)
    assert all(np.linalg.norm(d) == pytest.approx(1.0) for d in seen)


def test_irradiance_rejects_non_positive_delta():
    with pytest.raises(ValueError):
        irradiance(lambda d: (1, 1, 1), (0, 0, 1), 0.0)


def test_irradiance_dark_environment():
    out = irradiance(lambda d: (0.0, 0.0, 0.0), (0, 0, 1), math.pi / 8)
    assert np.allclose(out, 0.0)