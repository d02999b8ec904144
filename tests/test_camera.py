"""Unit tests for the look-at camera."""

import pytest

from pathtracer.camera.camera import Camera
from pathtracer.core.vector import Point3, Vector3
from tests.helpers import assert_vec_close


@pytest.fixture
def axis_camera():
    """Camera at the origin looking down -z with a 90 degree, 2:1 viewport."""
    return Camera(Point3(0.0, 0.0, 0.0), Point3(0.0, 0.0, -1.0),
                  Vector3(0.0, 1.0, 0.0), 90.0, 2.0)


class TestCameraSetup:

    def test_viewport(self, axis_camera):
        assert_vec_close(axis_camera.horizontal, Vector3(4.0, 0.0, 0.0))
        assert_vec_close(axis_camera.vertical, Vector3(0.0, 2.0, 0.0))
        assert_vec_close(axis_camera.lower_left_corner, Point3(-2.0, -1.0, -1.0))
        assert axis_camera.origin == Point3(0.0, 0.0, 0.0)

    def test_basis_is_orthonormal(self):
        camera = Camera(Point3(-2.0, 2.0, 1.0), Point3(0.0, 0.0, -1.0),
                        Vector3(0.0, 1.0, 0.0), 90.0, 1.5)
        for axis in (camera.u, camera.v, camera.w):
            assert axis.length() == pytest.approx(1.0)
        assert camera.u.dot(camera.v) == pytest.approx(0.0, abs=1e-12)
        assert camera.u.dot(camera.w) == pytest.approx(0.0, abs=1e-12)
        assert camera.v.dot(camera.w) == pytest.approx(0.0, abs=1e-12)

    def test_narrow_fov_shrinks_viewport(self):
        wide = Camera(Point3(0, 0, 0), Point3(0, 0, -1), Vector3(0, 1, 0), 90.0, 1.0)
        narrow = Camera(Point3(0, 0, 0), Point3(0, 0, -1), Vector3(0, 1, 0), 20.0, 1.0)
        assert narrow.vertical.length() < wide.vertical.length()

    def test_parallel_up_vector_does_not_raise(self):
        camera = Camera(Point3(0, 0, 0), Point3(0, 1, 0), Vector3(0, 1, 0), 90.0, 1.0)
        assert camera.u == Vector3(0, 0, 0)


class TestGetRay:

    def test_center_ray_points_at_target(self, axis_camera):
        ray = axis_camera.get_ray(0.5, 0.5)
        assert ray.origin == Point3(0.0, 0.0, 0.0)
        assert_vec_close(ray.direction, Vector3(0.0, 0.0, -1.0))

    def test_corner_rays(self, axis_camera):
        assert_vec_close(axis_camera.get_ray(0.0, 0.0).direction, Vector3(-2.0, -1.0, -1.0))
        assert_vec_close(axis_camera.get_ray(1.0, 1.0).direction, Vector3(2.0, 1.0, -1.0))

    def test_center_ray_of_offset_camera(self):
        camera = Camera(Point3(-2.0, 2.0, 1.0), Point3(0.0, 0.0, -1.0),
                        Vector3(0.0, 1.0, 0.0), 90.0, 1.5)
        ray = camera.get_ray(0.5, 0.5)
        expected = (Point3(0.0, 0.0, -1.0) - Point3(-2.0, 2.0, 1.0)).normalize()
        assert_vec_close(ray.direction.normalize(), expected, tol=1e-12)
