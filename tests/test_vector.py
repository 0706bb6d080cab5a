"""Unit tests for Vector3, Ray and the optics helpers in core.utils.

Tests cover:
- Arithmetic, dot/cross, axis indexing
- Normalization of the zero vector
- Reflection, refraction and Schlick reflectance
- Random sampling helpers stay in their domains
"""

import math
import random

import pytest

from core.ray import Ray
from core.utils import (
    clamp,
    random_in_unit_disk,
    random_in_unit_sphere,
    random_unit_vector,
    reflect,
    refract,
    schlick,
    task_rng,
)
from core.vector import Vector3


class TestVectorArithmetic:
    """Tests for basic Vector3 operations."""

    def test_add_sub_neg(self):
        a = Vector3(1, 2, 3)
        b = Vector3(4, 5, 6)
        assert a + b == Vector3(5, 7, 9)
        assert b - a == Vector3(3, 3, 3)
        assert -a == Vector3(-1, -2, -3)

    def test_scalar_and_componentwise_mul(self):
        a = Vector3(1, 2, 3)
        assert a * 2 == Vector3(2, 4, 6)
        assert 2 * a == Vector3(2, 4, 6)
        assert a * Vector3(2, 0, -1) == Vector3(2, 0, -3)

    def test_div(self):
        assert Vector3(2, 4, 6) / 2 == Vector3(1, 2, 3)

    def test_operations_do_not_mutate(self):
        a = Vector3(1, 2, 3)
        _ = a + a
        _ = a * 3
        _ = a.normalize()
        assert a == Vector3(1, 2, 3)

    def test_dot_cross(self):
        x = Vector3(1, 0, 0)
        y = Vector3(0, 1, 0)
        assert x.dot(y) == 0
        assert x.cross(y) == Vector3(0, 0, 1)
        assert y.cross(x) == Vector3(0, 0, -1)

    def test_indexing(self):
        v = Vector3(7, 8, 9)
        assert (v[0], v[1], v[2]) == (7, 8, 9)
        with pytest.raises(IndexError):
            v[3]

    def test_length(self):
        assert Vector3(3, 4, 0).length() == pytest.approx(5.0)
        assert Vector3(3, 4, 0).length_squared() == pytest.approx(25.0)


class TestNormalization:
    """Tests for normalize() and near_zero()."""

    def test_normalize_unit_length(self):
        n = Vector3(3, 4, 12).normalize()
        assert n.length() == pytest.approx(1.0)

    def test_normalize_zero_vector_falls_back_to_zero(self):
        n = Vector3(0, 0, 0).normalize()
        assert n == Vector3(0, 0, 0)
        assert not any(math.isnan(c) for c in n)

    def test_near_zero(self):
        assert Vector3(1e-9, -1e-9, 0).near_zero()
        assert not Vector3(1e-9, 1e-7, 0).near_zero()


class TestRay:
    """Tests for Ray.at()."""

    def test_at(self):
        ray = Ray(Vector3(1, 2, 3), Vector3(0, 0, -2))
        assert ray.at(0) == Vector3(1, 2, 3)
        assert ray.at(1.5) == Vector3(1, 2, 0)


class TestOptics:
    """Tests for reflect/refract/schlick."""

    def test_reflect(self):
        v = Vector3(1, -1, 0)
        n = Vector3(0, 1, 0)
        assert reflect(v, n) == Vector3(1, 1, 0)

    def test_refract_normal_incidence_goes_straight(self):
        d = Vector3(0, 0, -1)
        n = Vector3(0, 0, 1)
        out = refract(d, n, 1.0 / 1.5)
        assert out.isclose(Vector3(0, 0, -1))

    def test_refract_obeys_snell(self):
        theta = math.radians(30)
        d = Vector3(math.sin(theta), -math.cos(theta), 0)
        n = Vector3(0, 1, 0)
        eta = 1.0 / 1.5
        out = refract(d, n, eta)
        sin_out = out.x / out.length()
        assert sin_out == pytest.approx(eta * math.sin(theta))
        assert out.y < 0

    def test_schlick_limits(self):
        r0 = ((1 - 1.5) / (1 + 1.5)) ** 2
        assert schlick(1.0, 1.5) == pytest.approx(r0)
        assert schlick(0.0, 1.5) == pytest.approx(1.0)

    def test_clamp(self):
        assert clamp(-1, 0, 1) == 0
        assert clamp(2, 0, 1) == 1
        assert clamp(0.3, 0, 1) == 0.3


class TestSampling:
    """Tests for the random sampling helpers."""

    def test_unit_sphere_points_inside(self, rng):
        for _ in range(200):
            assert random_in_unit_sphere(rng).length_squared() < 1.0

    def test_unit_vectors_have_unit_length(self, rng):
        for _ in range(200):
            assert random_unit_vector(rng).length() == pytest.approx(1.0)

    def test_unit_disk_points_flat_and_inside(self, rng):
        for _ in range(200):
            p = random_in_unit_disk(rng)
            assert p.z == 0.0
            assert p.length_squared() < 1.0

    def test_task_rng_reproducible_and_distinct(self):
        a = [task_rng(42, 3).random() for _ in range(2)]
        assert a[0] == a[1]
        assert task_rng(42, 3).random() != task_rng(42, 4).random()
        assert isinstance(task_rng(0, 0), random.Random)
