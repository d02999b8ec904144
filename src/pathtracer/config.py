# config.py
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class RenderSettings:
    """
    Render parameters. The image height is derived from the width and the
    aspect ratio.
    """
    image_width: int = 400
    aspect_ratio: float = 3.0 / 2.0
    samples_per_pixel: int = 50
    max_depth: int = 10
    vfov: float = 90.0
    threads: int = 8
    seed: Optional[int] = None

    def __post_init__(self):
        if self.image_width <= 0:
            raise ValueError(f"image_width must be positive, got {self.image_width}")
        if self.aspect_ratio <= 0:
            raise ValueError(f"aspect_ratio must be positive, got {self.aspect_ratio}")
        if self.samples_per_pixel <= 0:
            raise ValueError(
                f"samples_per_pixel must be positive, got {self.samples_per_pixel}")
        if self.max_depth < 0:
            raise ValueError(f"max_depth must not be negative, got {self.max_depth}")
        if not 0 < self.vfov < 180:
            raise ValueError(f"vfov must be between 0 and 180 degrees, got {self.vfov}")
        if self.threads <= 0:
            raise ValueError(f"threads must be positive, got {self.threads}")

    @property
    def image_height(self) -> int:
        return max(1, int(self.image_width / self.aspect_ratio))
