from pathtracer.materials.material import Material, ScatterResult
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal
from pathtracer.materials.dielectric import Dielectric

__all__ = ["Material", "ScatterResult", "Lambertian", "Metal", "Dielectric"]
