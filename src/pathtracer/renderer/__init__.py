from pathtracer.renderer.raytracer import Renderer, ray_color, sky_color
from pathtracer.renderer.tone_mapping import to_rgb8
from pathtracer.renderer.image_output import save_png, write_ppm

__all__ = ["Renderer", "ray_color", "sky_color", "to_rgb8", "write_ppm", "save_png"]
