# camera/camera.py
import math

from pathtracer.core.ray import Ray
from pathtracer.core.vector import Point3, Vector3


class Camera:
    """
    Pinhole camera positioned with look-at parameters.

    The viewport sits at unit distance in front of look_from. All derived
    vectors are computed once here and only read while rendering.
    """
    def __init__(self, look_from: Point3, look_at: Point3, view_up: Vector3,
                 vfov: float, aspect_ratio: float):
        self.look_from = look_from
        self.look_at = look_at
        self.view_up = view_up
        self.vfov = vfov  # Vertical field of view in degrees
        self.aspect_ratio = aspect_ratio
        self.update_camera()

    def update_camera(self):
        """Computes the camera's basis vectors and viewport."""
        theta = math.radians(self.vfov)
        viewport_height = 2.0 * math.tan(theta / 2)
        viewport_width = self.aspect_ratio * viewport_height

        # w points backward, u right, v up
        self.w = (self.look_from - self.look_at).normalize()
        self.u = self.view_up.cross(self.w).normalize()
        self.v = self.w.cross(self.u)

        self.origin = self.look_from
        self.horizontal = self.u * viewport_width
        self.vertical = self.v * viewport_height
        self.lower_left_corner = (self.origin -
                                  self.horizontal / 2 -
                                  self.vertical / 2 -
                                  self.w)

    def get_ray(self, s: float, t: float) -> Ray:
        """
        Ray from the camera origin through viewport coordinates (s, t),
        where (0, 0) is the lower left and (1, 1) the upper right corner.
        """
        direction = (self.lower_left_corner +
                     self.horizontal * s +
                     self.vertical * t -
                     self.origin)
        return Ray(self.origin, direction)
