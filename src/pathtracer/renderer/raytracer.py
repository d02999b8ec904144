# renderer/raytracer.py
import itertools
import logging
import math
import random
import sys
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from typing import Iterator

import numpy as np

from pathtracer.camera.camera import Camera
from pathtracer.config import RenderSettings
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Color
from pathtracer.geometry.hittable import Hittable
from pathtracer.renderer.tone_mapping import to_rgb8

logger = logging.getLogger(__name__)

# Scattered rays start on the surface; ignore hits closer than this.
T_MIN = 0.001

BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
SKY_BLUE = Color(0.5, 0.7, 1.0)


def sky_color(ray: Ray) -> Color:
    """
    Vertical white-to-blue gradient seen by rays that escape the scene.
    """
    unit_direction = ray.direction.normalize()
    t = 0.5 * (unit_direction.y + 1.0)
    return WHITE * (1.0 - t) + SKY_BLUE * t


def ray_color(ray: Ray, world: Hittable, depth: int, rng: random.Random) -> Color:
    """
    Radiance carried back along ray, following at most depth bounces.
    """
    if depth <= 0:
        return BLACK

    rec = world.hit(ray, T_MIN, math.inf)
    if rec is None:
        return sky_color(ray)

    scattered = rec.material.scatter(ray, rec, rng)
    if scattered is None:
        return BLACK
    attenuation, scattered_ray = scattered
    return attenuation * ray_color(scattered_ray, world, depth - 1, rng)


class Renderer:
    """
    Samples every pixel of the image and produces 8-bit scanlines.

    Scanlines are rendered top to bottom. Pixels of one scanline are split
    across a fixed pool of worker threads; each worker draws from its own
    random source and the world and camera are only read.
    """
    def __init__(self, world: Hittable, camera: Camera, settings: RenderSettings,
                 show_progress: bool = False):
        self.world = world
        self.camera = camera
        self.settings = settings
        self.width = settings.image_width
        self.height = settings.image_height
        self.show_progress = show_progress

        self._local = threading.local()
        self._worker_ids = itertools.count()
        self._worker_ids_lock = threading.Lock()

    def _rng(self) -> random.Random:
        rng = getattr(self._local, "rng", None)
        if rng is None:
            seed = self.settings.seed
            if seed is not None:
                with self._worker_ids_lock:
                    seed += next(self._worker_ids)
            rng = random.Random(seed)
            self._local.rng = rng
        return rng

    def sample_pixel(self, i: int, j: int) -> Color:
        """
        Sum of samples_per_pixel jittered samples for pixel column i,
        row j (row 0 is the bottom of the image).
        """
        rng = self._rng()
        u_scale = max(self.width - 1, 1)
        v_scale = max(self.height - 1, 1)
        depth = self.settings.max_depth

        pixel_color = BLACK
        for _ in range(self.settings.samples_per_pixel):
            u = (i + rng.random()) / u_scale
            v = (j + rng.random()) / v_scale
            ray = self.camera.get_ray(u, v)
            pixel_color = pixel_color + ray_color(ray, self.world, depth, rng)
        return pixel_color

    def _report_progress(self, remaining: int):
        if self.show_progress:
            print(f"\rScanlines remaining: {remaining:3}    ", end="",
                  file=sys.stderr, flush=True)

    def scanlines(self) -> Iterator[np.ndarray]:
        """
        Yield one uint8 array of shape (width, 3) per scanline, from the top
        row of the image down to the bottom row.
        """
        settings = self.settings
        logger.info("Rendering %dx%d, %d samples per pixel, depth %d, %d workers",
                    self.width, self.height, settings.samples_per_pixel,
                    settings.max_depth, settings.threads)
        start = time.perf_counter()

        with ThreadPoolExecutor(max_workers=settings.threads,
                                thread_name_prefix="pathtracer") as executor:
            for j in range(self.height - 1, -1, -1):
                self._report_progress(j)
                # map() keeps results in pixel order whatever thread ran them.
                row = list(executor.map(partial(self.sample_pixel, j=j), range(self.width)))
                yield to_rgb8(row, settings.samples_per_pixel)

        if self.show_progress:
            print("\nDone.", file=sys.stderr, flush=True)
        logger.info("Rendered %d scanlines in %.2fs", self.height,
                    time.perf_counter() - start)

    def render(self) -> np.ndarray:
        """
        Render the whole image into an array of shape (height, width, 3),
        top row first.
        """
        image = np.zeros((self.height, self.width, 3), dtype=np.uint8)
        for row, scanline in enumerate(self.scanlines()):
            image[row] = scanline
        return image
