# renderer/image_output.py
from typing import Iterable, TextIO

import numpy as np
from PIL import Image

PPM_MAGIC = "P3"
MAX_CHANNEL = 255


def write_ppm_header(stream: TextIO, width: int, height: int):
    stream.write(f"{PPM_MAGIC}\n{width} {height}\n{MAX_CHANNEL}\n")


def write_ppm_rows(stream: TextIO, rows: Iterable[np.ndarray]) -> int:
    """
    Write scanlines of uint8 RGB pixels, one "R G B" line per pixel.
    Returns the number of pixel lines written.
    """
    count = 0
    for row in rows:
        stream.write("".join(f"{r} {g} {b}\n" for r, g, b in row.tolist()))
        count += len(row)
    return count


def write_ppm(stream: TextIO, width: int, height: int,
              rows: Iterable[np.ndarray]) -> int:
    """
    Write a plain-text PPM image. rows must arrive top to bottom; they are
    written as they are produced, so a generator streams the image.
    """
    write_ppm_header(stream, width, height)
    count = write_ppm_rows(stream, rows)
    if count != width * height:
        raise ValueError(
            f"Expected {width * height} pixels for a {width}x{height} image, got {count}")
    return count


def save_png(path: str, image: np.ndarray):
    """
    Save an image array of shape (height, width, 3), dtype uint8, as PNG.
    """
    Image.fromarray(np.ascontiguousarray(image, dtype=np.uint8)).save(path)
