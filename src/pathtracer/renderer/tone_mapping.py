# renderer/tone_mapping.py
from typing import Sequence

import numpy as np

from pathtracer.core.vector import Color


def to_rgb8(pixel_sums: Sequence[Color], samples_per_pixel: int) -> np.ndarray:
    """
    Convert accumulated per-pixel color sums into 8-bit RGB.

    Each sum is averaged over the sample count, clamped to [0, 1], gamma
    corrected with gamma 2 (square root), scaled by 256 and truncated into
    [0, 255]. NaN channels become 0, +inf channels 255.

    Returns an array of shape (len(pixel_sums), 3) and dtype uint8.
    """
    linear = np.array([(c.x, c.y, c.z) for c in pixel_sums], dtype=np.float64)
    linear = linear.reshape(-1, 3) / samples_per_pixel
    linear = np.nan_to_num(linear, nan=0.0, posinf=1.0, neginf=0.0)
    corrected = np.sqrt(np.clip(linear, 0.0, 1.0))
    return (corrected * 256.0).clip(0, 255).astype("uint8")
