"""Tests for Vec3 class."""

import pytest
import math
import numpy as np

from sphereforge.vec3 import Vec3, Point3, Color, resolve_rng


class TestVec3Creation:
    """Test Vec3 construction."""

    def test_default_constructor(self):
        v = Vec3()
        assert v.x == 0.0
        assert v.y == 0.0
        assert v.z == 0.0

    def test_value_constructor(self):
        v = Vec3(1.0, 2.0, 3.0)
        assert v.x == 1.0
        assert v.y == 2.0
        assert v.z == 3.0

    def test_from_array(self):
        v = Vec3.from_array(np.array([1.0, 2.0, 3.0]))
        assert (v.x, v.y, v.z) == (1.0, 2.0, 3.0)

    def test_color_aliases(self):
        c = Color(0.5, 0.6, 0.7)
        assert c.r == 0.5
        assert c.g == 0.6
        assert c.b == 0.7

    def test_iteration(self):
        assert list(Vec3(1, 2, 3)) == [1.0, 2.0, 3.0]


class TestVec3Arithmetic:
    """Test Vec3 arithmetic operations."""

    def test_negation(self):
        assert -Vec3(1, 2, 3) == Vec3(-1, -2, -3)

    def test_addition(self):
        assert Vec3(1, 2, 3) + Vec3(4, 5, 6) == Vec3(5, 7, 9)

    def test_addition_scalar(self):
        assert Vec3(1, 2, 3) + 1.0 == Vec3(2, 3, 4)

    def test_subtraction(self):
        assert Vec3(4, 5, 6) - Vec3(1, 2, 3) == Vec3(3, 3, 3)

    def test_multiplication(self):
        assert Vec3(1, 2, 3) * 2 == Vec3(2, 4, 6)
        assert 2 * Vec3(1, 2, 3) == Vec3(2, 4, 6)

    def test_multiplication_vector(self):
        assert Vec3(1, 2, 3) * Vec3(2, 3, 4) == Vec3(2, 6, 12)

    def test_division(self):
        assert Vec3(2, 4, 6) / 2 == Vec3(1, 2, 3)


class TestVec3Operations:
    """Test vector operations."""

    def test_length(self):
        assert Vec3(3, 4, 0).length() == 5.0
        assert Vec3(3, 4, 0).length_squared() == 25.0

    def test_normalize(self):
        n = Vec3(0, 0, -7).normalize()
        assert n == Vec3(0, 0, -1)
        assert abs(n.length() - 1.0) < 1e-12

    def test_normalize_zero(self):
        assert Vec3(0, 0, 0).normalize() == Vec3(0, 0, 0)

    def test_dot(self):
        assert Vec3(1, 2, 3).dot(Vec3(4, 5, 6)) == 32.0

    def test_reflect(self):
        reflected = Vec3(1, -1, 0).reflect(Vec3(0, 1, 0))
        assert reflected == Vec3(1, 1, 0)

    def test_near_zero(self):
        assert Vec3(1e-9, -1e-9, 0).near_zero()
        assert not Vec3(1e-9, 1e-7, 0).near_zero()

    def test_to_array(self):
        arr = Vec3(1, 2, 3).to_array()
        assert isinstance(arr, np.ndarray)
        assert list(arr) == [1, 2, 3]


class TestVec3Random:
    """Test Vec3 random generation."""

    def test_random_unit_vector_length(self):
        rng = np.random.default_rng(2)
        for _ in range(1000):
            v = Vec3.random_unit_vector(rng)
            assert abs(v.length() - 1.0) < 1e-12

    def test_random_unit_vector_default_rng(self):
        v = Vec3.random_unit_vector()
        assert abs(v.length() - 1.0) < 1e-12

    def test_random_unit_vector_covers_all_octants(self):
        rng = np.random.default_rng(3)
        octants = set()
        for _ in range(500):
            v = Vec3.random_unit_vector(rng)
            octants.add((v.x > 0, v.y > 0, v.z > 0))
        assert len(octants) == 8

    def test_random_unit_vector_unbiased_mean(self):
        rng = np.random.default_rng(4)
        total = Vec3(0, 0, 0)
        n = 4000
        for _ in range(n):
            total = total + Vec3.random_unit_vector(rng)
        mean = total / n
        assert mean.length() < 0.05

    def test_seeded_generators_repeat(self):
        a = Vec3.random_unit_vector(np.random.default_rng(42))
        b = Vec3.random_unit_vector(np.random.default_rng(42))
        assert a == b

    def test_resolve_rng(self):
        rng = np.random.default_rng(0)
        assert resolve_rng(rng) is rng
        assert isinstance(resolve_rng(None), np.random.Generator)


class TestVec3Comparison:
    """Test Vec3 comparison operations."""

    def test_equality(self):
        assert Vec3(1, 2, 3) == Vec3(1, 2, 3)

    def test_inequality(self):
        assert Vec3(1, 2, 3) != Vec3(1, 2, 4)

    def test_approximate_equality(self):
        assert Vec3(1, 2, 3) == Vec3(1 + 1e-12, 2, 3)

    def test_aliases_are_vec3(self):
        assert Point3 is Vec3
        assert Color is Vec3
