"""Unit tests for sampling and optics helpers."""

import math

import pytest

from core.utils import (
    random_in_hemisphere,
    random_in_unit_disk,
    random_in_unit_sphere,
    random_unit_vector,
    reflect,
    refract,
    schlick,
)
from core.vector import Vector3


class TestSampling:
    """Tests for random direction generation with an injected source."""

    def test_random_in_unit_sphere_is_inside(self, rng):
        for _ in range(500):
            assert random_in_unit_sphere(rng).length_squared() < 1.0

    def test_random_in_unit_sphere_rejects_outside_points(self, scripted):
        # First candidate (1, 1, 1) is rejected, second (0, 0, 0) accepted.
        source = scripted([1.0, 1.0, 1.0, 0.5, 0.5, 0.5])
        p = random_in_unit_sphere(source)
        assert tuple(p) == (0.0, 0.0, 0.0)
        assert source.calls == 6

    def test_random_unit_vector_has_unit_length(self, rng):
        for _ in range(500):
            assert random_unit_vector(rng).length() == pytest.approx(1.0)

    def test_random_unit_vector_uses_two_draws(self, scripted):
        source = scripted([0.0, 1.0])
        v = random_unit_vector(source)
        assert source.calls == 2
        assert tuple(v) == pytest.approx((0.0, 0.0, 1.0))

    def test_random_in_hemisphere_faces_normal(self, rng):
        normal = Vector3(0.0, 0.0, -1.0)
        for _ in range(500):
            assert random_in_hemisphere(rng, normal).dot(normal) >= 0.0

    def test_random_in_hemisphere_negates_opposing_vector(self, scripted):
        # Height fraction 0 gives z = -1, opposite the +z normal.
        v = random_in_hemisphere(scripted([0.0, 0.0]), Vector3(0.0, 0.0, 1.0))
        assert tuple(v) == pytest.approx((0.0, 0.0, 1.0))

    def test_random_in_unit_disk_is_flat(self, rng):
        for _ in range(500):
            p = random_in_unit_disk(rng)
            assert p.z == 0.0
            assert p.x * p.x + p.y * p.y < 1.0


class TestOptics:
    """Tests for reflection, refraction and the Schlick approximation."""

    def test_reflect_mirror_about_normal(self):
        inv_sqrt2 = 1.0 / math.sqrt(2.0)
        d = Vector3(inv_sqrt2, -inv_sqrt2, 0.0)
        r = reflect(d, Vector3(0.0, 1.0, 0.0))
        assert tuple(r) == pytest.approx((inv_sqrt2, inv_sqrt2, 0.0))

    def test_refract_normal_incidence_goes_straight(self):
        r = refract(Vector3(0.0, -1.0, 0.0), Vector3(0.0, 1.0, 0.0), 1.0 / 1.5)
        assert tuple(r) == pytest.approx((0.0, -1.0, 0.0))

    def test_refract_bends_toward_normal_entering_denser_medium(self):
        d = Vector3(1.0, -1.0, 0.0).normalize()
        r = refract(d, Vector3(0.0, 1.0, 0.0), 1.0 / 1.5)
        sin_in = abs(d.x)
        sin_out = abs(r.x) / r.length()
        assert r.length() == pytest.approx(1.0)
        assert sin_in / sin_out == pytest.approx(1.5)

    def test_schlick_at_normal_incidence_is_r0(self):
        r0 = ((1.0 - 1.5) / (1.0 + 1.5)) ** 2
        assert schlick(1.0, 1.5) == pytest.approx(r0)

    def test_schlick_at_grazing_angle_is_one(self):
        assert schlick(0.0, 1.5) == pytest.approx(1.0)
