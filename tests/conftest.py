"""Pytest configuration for path tracer tests.

Provides shared fixtures: seeded generators, a scripted generator for
forcing specific random draws, and small reference scenes.
"""

import random

import pytest

from core.vector import Vector3
from geometry.sphere import Sphere
from materials.lambertian import Lambertian


class ScriptedRng:
    """Stand-in generator that replays fixed values.

    random() cycles through `values`; uniform(a, b) maps the same values
    onto [a, b). randint always returns `a`.
    """

    def __init__(self, *values):
        self.values = list(values) or [0.5]
        self.calls = 0

    def random(self):
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value

    def uniform(self, a, b):
        return a + (b - a) * self.random()

    def randint(self, a, b):
        return a


@pytest.fixture
def rng():
    """A fresh, seeded generator per test."""
    return random.Random(1234)


@pytest.fixture
def scripted_rng():
    """Factory for ScriptedRng instances."""
    return ScriptedRng


@pytest.fixture
def gray():
    """One shared diffuse material."""
    return Lambertian(Vector3(0.5, 0.5, 0.5))


@pytest.fixture
def diagonal_spheres(gray):
    """Unit spheres at (0,0,0), (2,2,2) and (-2,-2,-2) sharing one material."""
    return [
        Sphere(Vector3(0, 0, 0), 1.0, gray),
        Sphere(Vector3(2, 2, 2), 1.0, gray),
        Sphere(Vector3(-2, -2, -2), 1.0, gray),
    ]


def random_spheres(rng, count, spread=10.0, max_radius=1.0, material=None):
    """Random spheres, possibly overlapping, for agreement tests."""
    return [
        Sphere(
            Vector3(rng.uniform(-spread, spread), rng.uniform(-spread, spread), rng.uniform(-spread, spread)),
            rng.uniform(0.1, max_radius),
            material,
        )
        for _ in range(count)
    ]
