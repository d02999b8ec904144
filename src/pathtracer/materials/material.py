# materials/material.py
import random
from typing import Optional, Tuple

from pathtracer.core.ray import Ray
from pathtracer.core.vector import Color
from pathtracer.geometry.hittable import HitRecord

# (attenuation, scattered_ray)
ScatterResult = Tuple[Color, Ray]


class Material:
    """
    Abstract material class. Subclasses must implement scatter().
    Materials are immutable after construction and shared between spheres
    and rendering threads.
    """
    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: random.Random) -> Optional[ScatterResult]:
        """
        Computes the attenuation and scattered ray.
        Returns a tuple (attenuation, scattered_ray), or None when the ray
        is absorbed. rng is the calling worker's own random source.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")
