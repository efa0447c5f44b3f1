"""Tests for row splitting and chunked rendering."""

import math

import pytest

from camera.camera import Camera
from core.transformations import view_transform
from core.vector import point, vector
from renderer.parallel import render, render_rows, split_rows


@pytest.fixture
def camera():
    return Camera(6, 5, math.pi / 2,
                  view_transform(point(0, 0, -5), point(0, 0, 0), vector(0, 1, 0)))


class TestSplitRows:
    def test_rows_are_split_into_chunks(self):
        assert split_rows(10, 4) == [(0, 4), (4, 8), (8, 10)]

    def test_a_single_chunk(self):
        assert split_rows(3, 4) == [(0, 3)]

    def test_chunks_cover_every_row_once(self):
        rows = [y for start, end in split_rows(17, 5) for y in range(start, end)]
        assert rows == list(range(17))


class TestRender:
    def test_render_rows_shape(self, camera, default_world):
        rows = render_rows(camera, default_world, 1, 3)
        assert rows.shape == (2, 6, 3)

    def test_render_rows_matches_color_at(self, camera, default_world):
        rows = render_rows(camera, default_world, 2, 3)
        expected = default_world.color_at(camera.ray_for_pixel(3, 2))
        assert tuple(rows[0, 3]) == pytest.approx(tuple(expected))

    def test_chunk_size_does_not_change_the_image(self, camera, default_world):
        a = render(camera, default_world, workers=1, rows_per_chunk=1)
        b = render(camera, default_world, workers=1, rows_per_chunk=4)
        assert (a.pixels == b.pixels).all()

    @pytest.mark.slow
    def test_pool_render_matches_serial_render(self, camera, default_world):
        serial = render(camera, default_world, workers=1, rows_per_chunk=2)
        pooled = render(camera, default_world, workers=2, rows_per_chunk=2)
        assert (serial.pixels == pooled.pixels).all()
