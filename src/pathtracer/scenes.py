# scenes.py
"""
Hardcoded scenes selectable by name.

Every builder takes the render settings (for the camera's aspect ratio and
field of view) and returns a Scene.
"""
from dataclasses import dataclass
from typing import Callable, Dict

from pathtracer.camera.camera import Camera
from pathtracer.config import RenderSettings
from pathtracer.core.vector import Color, Point3, Vector3
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.world import HittableList
from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal
from pathtracer.materials.presets import DielectricPresets, DiffusePresets, MetalPresets


@dataclass
class Scene:
    world: HittableList
    camera: Camera


def _default_camera(settings: RenderSettings) -> Camera:
    return Camera(Point3(-2.0, 2.0, 1.0),
                  Point3(0.0, 0.0, -1.0),
                  Vector3(0.0, 1.0, 0.0),
                  settings.vfov,
                  settings.aspect_ratio)


def three_spheres(settings: RenderSettings) -> Scene:
    """Diffuse, glass and metal spheres resting on a large yellow ground sphere."""
    mat_ground = Lambertian(Color(0.8, 0.8, 0.0))
    mat_center = Lambertian(Color(0.1, 0.2, 0.5))
    mat_left = Dielectric(1.5)
    mat_right = Metal(Color(0.8, 0.6, 0.2))

    world = HittableList()
    world.add(Sphere(Point3(0.0, -100.5, -1.0), 100.0, mat_ground))
    world.add(Sphere(Point3(0.0, 0.0, -1.0), 0.5, mat_center))
    world.add(Sphere(Point3(-1.0, 0.0, -1.0), 0.5, mat_left))
    world.add(Sphere(Point3(1.0, 0.0, -1.0), 0.5, mat_right))
    return Scene(world, _default_camera(settings))


def hollow_glass(settings: RenderSettings) -> Scene:
    """Same as three_spheres, with the glass sphere turned into a thin shell."""
    scene = three_spheres(settings)
    # Negative radius: normal points inward, so this is the shell's inner wall.
    scene.world.add(Sphere(Point3(-1.0, 0.0, -1.0), -0.4, Dielectric(1.5)))
    return scene


def material_presets(settings: RenderSettings) -> Scene:
    """A row of spheres showing the preset materials."""
    world = HittableList()
    world.add(Sphere(Point3(0.0, -100.5, -1.0), 100.0, DiffusePresets.grass()))

    row = [
        DiffusePresets.brick(),
        MetalPresets.gold(),
        DielectricPresets.glass(),
        MetalPresets.silver(),
        DielectricPresets.diamond(),
        MetalPresets.brushed(),
    ]
    for index, material in enumerate(row):
        x = -2.5 + index
        world.add(Sphere(Point3(x, 0.0, -1.5), 0.45, material))

    camera = Camera(Point3(0.0, 1.0, 2.0),
                    Point3(0.0, 0.0, -1.5),
                    Vector3(0.0, 1.0, 0.0),
                    settings.vfov,
                    settings.aspect_ratio)
    return Scene(world, camera)


SCENES: Dict[str, Callable[[RenderSettings], Scene]] = {
    "three-spheres": three_spheres,
    "hollow-glass": hollow_glass,
    "material-presets": material_presets,
}


def build_scene(name: str, settings: RenderSettings) -> Scene:
    try:
        builder = SCENES[name]
    except KeyError:
        raise KeyError(f"Unknown scene {name!r}, expected one of: "
                       f"{', '.join(sorted(SCENES))}") from None
    return builder(settings)
