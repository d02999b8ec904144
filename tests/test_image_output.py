"""Unit tests for PPM and PNG output."""

import io

import numpy as np
import pytest
from PIL import Image

from pathtracer.renderer.image_output import save_png, write_ppm, write_ppm_header


def _rows(width, height, value=0):
    for _ in range(height):
        yield np.full((width, 3), value, dtype=np.uint8)


class TestPpm:

    def test_header(self):
        stream = io.StringIO()
        write_ppm_header(stream, 4, 3)
        assert stream.getvalue() == "P3\n4 3\n255\n"

    def test_one_line_per_pixel(self):
        stream = io.StringIO()
        count = write_ppm(stream, 4, 3, _rows(4, 3, 7))
        lines = stream.getvalue().splitlines()
        assert count == 12
        assert lines[:3] == ["P3", "4 3", "255"]
        assert len(lines) == 3 + 12
        assert all(line == "7 7 7" for line in lines[3:])

    def test_rows_keep_their_order(self):
        rows = [np.array([[1, 2, 3], [4, 5, 6]], dtype=np.uint8),
                np.array([[7, 8, 9], [10, 11, 12]], dtype=np.uint8)]
        stream = io.StringIO()
        write_ppm(stream, 2, 2, iter(rows))
        assert stream.getvalue().splitlines()[3:] == ["1 2 3", "4 5 6", "7 8 9", "10 11 12"]

    def test_wrong_pixel_count_raises(self):
        with pytest.raises(ValueError):
            write_ppm(io.StringIO(), 4, 3, _rows(4, 2))


class TestPng:

    def test_save_png_round_trip(self, tmp_path):
        image = np.zeros((2, 3, 3), dtype=np.uint8)
        image[0, 0] = (255, 0, 0)
        image[1, 2] = (0, 0, 255)
        path = tmp_path / "out.png"

        save_png(str(path), image)

        with Image.open(path) as loaded:
            assert loaded.size == (3, 2)
            assert loaded.mode == "RGB"
            assert loaded.getpixel((0, 0)) == (255, 0, 0)
            assert loaded.getpixel((2, 1)) == (0, 0, 255)
