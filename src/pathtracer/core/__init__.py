from pathtracer.core.vector import Color, Point3, Vector3
from pathtracer.core.ray import Ray

__all__ = ["Vector3", "Point3", "Color", "Ray"]
