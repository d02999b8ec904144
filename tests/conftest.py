"""Pytest configuration for path tracer tests.

Provides seeded random sources and a few shared materials so that
stochastic tests are reproducible.
"""

import random

import pytest

from pathtracer.core.vector import Color
from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal


@pytest.fixture
def rng():
    """A seeded random source, fresh for every test."""
    return random.Random(1234)


@pytest.fixture
def diffuse():
    return Lambertian(Color(0.5, 0.5, 0.5))


@pytest.fixture
def mirror():
    return Metal(Color(0.8, 0.6, 0.2))


@pytest.fixture
def glass():
    return Dielectric(1.5)
