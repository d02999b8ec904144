"""Unit tests for Ray."""

from pathtracer.core.ray import Ray
from pathtracer.core.vector import Point3, Vector3


class TestRay:

    def test_at_origin(self):
        ray = Ray(Point3(1.0, 2.0, 3.0), Vector3(0.0, 0.0, -1.0))
        assert ray.at(0.0) == Point3(1.0, 2.0, 3.0)

    def test_at_uses_unnormalized_direction(self):
        ray = Ray(Point3(0.0, 0.0, 0.0), Vector3(2.0, 0.0, 0.0))
        assert ray.at(1.5) == Point3(3.0, 0.0, 0.0)

    def test_negative_t(self):
        ray = Ray(Point3(0.0, 1.0, 0.0), Vector3(0.0, 1.0, 0.0))
        assert ray.at(-1.0) == Point3(0.0, 0.0, 0.0)
