"""Tests for the matrix helpers."""

import math

import numpy as np
import pytest

from transforms import look_at, normalize, perspective


class TestNormalize:

    def test_unit_length(self):
        v = normalize((3.0, 0.0, 4.0))
        np.testing.assert_allclose(v, [0.6, 0.0, 0.8])

    def test_zero_vector_is_returned_unchanged(self):
        np.testing.assert_array_equal(normalize((0.0, 0.0, 0.0)), [0, 0, 0])


class TestLookAt:

    def test_identity_when_looking_down_negative_z_from_origin(self):
        view = look_at((0, 0, 0), (0, 0, -1), (0, 1, 0))
        np.testing.assert_allclose(view, np.identity(4), atol=1e-7)

    def test_target_lands_on_negative_z_axis(self):
        eye = np.array([1.0, 2.0, 3.0])
        target = np.array([-4.0, 0.5, 9.0])
        view = look_at(eye, target, (0, 1, 0))
        p = view @ np.append(target, 1.0)
        distance = np.linalg.norm(target - eye)
        np.testing.assert_allclose(p, [0, 0, -distance, 1], atol=1e-5)

    def test_rotation_part_is_orthonormal(self):
        view = look_at((2, 3, 4), (0, 0, 0), (0, 1, 0))
        r = view[:3, :3].astype(np.float64)
        np.testing.assert_allclose(r @ r.T, np.identity(3), atol=1e-6)

    def test_dtype(self):
        assert look_at((0, 0, 1), (0, 0, 0), (0, 1, 0)).dtype == np.float32


class TestPerspective:

    def test_focal_terms(self):
        p = perspective(90.0, 2.0, 1.0, 3.0)
        assert p[1, 1] == pytest.approx(1.0)
        assert p[0, 0] == pytest.approx(0.5)
        assert p[3, 2] == -1.0

    @pytest.mark.parametrize("z, ndc", [(-1.0, -1.0), (-3.0, 1.0)])
    def test_near_and_far_map_to_clip_bounds(self, z, ndc):
        p = perspective(90.0, 1.0, 1.0, 3.0)
        clip = p @ np.array([0.0, 0.0, z, 1.0])
        assert clip[2] / clip[3] == pytest.approx(ndc)

    def test_narrower_fov_magnifies(self):
        assert perspective(10, 1, 0.1, 100)[1, 1] > perspective(45, 1, 0.1, 100)[1, 1]
        assert perspective(45, 1, 0.1, 100)[1, 1] == pytest.approx(1 / math.tan(math.radians(22.5)))
