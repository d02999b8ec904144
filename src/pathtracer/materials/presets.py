# materials/presets.py
from pathtracer.core.vector import Color
from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal


class MetalPresets:
    """Predefined metal materials with realistic properties."""

    @staticmethod
    def gold() -> Metal:
        return Metal(Color(1.0, 0.78, 0.34), fuzz=0.1)

    @staticmethod
    def silver() -> Metal:
        return Metal(Color(0.95, 0.93, 0.88), fuzz=0.05)

    @staticmethod
    def copper() -> Metal:
        return Metal(Color(0.95, 0.64, 0.54), fuzz=0.1)

    @staticmethod
    def chrome() -> Metal:
        return Metal(Color(0.9, 0.9, 0.9))

    @staticmethod
    def brushed() -> Metal:
        return Metal(Color(0.8, 0.8, 0.8), fuzz=0.3)


class DielectricPresets:
    """Predefined dielectric materials with realistic refractive indices."""

    @staticmethod
    def glass() -> Dielectric:
        return Dielectric(1.5)

    @staticmethod
    def water() -> Dielectric:
        return Dielectric(1.33)

    @staticmethod
    def diamond() -> Dielectric:
        return Dielectric(2.42)


class DiffusePresets:
    """Matte colors."""

    @staticmethod
    def chalk() -> Lambertian:
        return Lambertian(Color(0.9, 0.9, 0.9))

    @staticmethod
    def grass() -> Lambertian:
        return Lambertian(Color(0.8, 0.8, 0.0))

    @staticmethod
    def navy() -> Lambertian:
        return Lambertian(Color(0.1, 0.2, 0.5))

    @staticmethod
    def brick() -> Lambertian:
        return Lambertian(Color(0.7, 0.3, 0.2))
