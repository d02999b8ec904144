from pathtracer.geometry.hittable import HitRecord, Hittable
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.world import HittableList

__all__ = ["HitRecord", "Hittable", "Sphere", "HittableList"]
