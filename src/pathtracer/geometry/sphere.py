# geometry/sphere.py
import math
from typing import TYPE_CHECKING, Optional

from pathtracer.core.ray import Ray
from pathtracer.core.vector import Point3
from pathtracer.geometry.hittable import HitRecord, Hittable

if TYPE_CHECKING:
    from pathtracer.materials.material import Material


class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.

    A negative radius flips the outward normal inward, which turns the
    sphere into the inner wall of a hollow glass shell.
    """
    def __init__(self, center: Point3, radius: float, material: "Material"):
        self.center = center
        self.radius = radius
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        oc = ray.origin - self.center
        a = ray.direction.length_squared()
        half_b = oc.dot(ray.direction)
        c = oc.length_squared() - self.radius * self.radius
        discriminant = half_b * half_b - a * c

        # Zero-length rays and zero-radius spheres have no usable surface.
        if discriminant < 0 or a == 0 or self.radius == 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        # Find the nearest root that lies in the open interval (t_min, t_max)
        root = (-half_b - sqrt_disc) / a
        if root <= t_min or root >= t_max:
            root = (-half_b + sqrt_disc) / a
            if root <= t_min or root >= t_max:
                return None

        rec = HitRecord()
        rec.t = root
        rec.p = ray.at(rec.t)
        outward_normal = (rec.p - self.center) / self.radius
        rec.set_face_normal(ray, outward_normal)
        rec.material = self.material
        return rec

    def __repr__(self) -> str:
        return f"Sphere({self.center!r}, {self.radius}, {self.material!r})"
