"""Tests for the view transform."""

from core.matrix import Matrix
from core.transformations import view_transform
from core.vector import point, vector


def test_the_default_orientation():
    t = view_transform(point(0, 0, 0), point(0, 0, -1), vector(0, 1, 0))
    assert t == Matrix.identity()


def test_looking_in_the_positive_z_direction():
    t = view_transform(point(0, 0, 0), point(0, 0, 1), vector(0, 1, 0))
    assert t == Matrix.scaling(-1, 1, -1)


def test_the_view_transform_moves_the_world():
    t = view_transform(point(0, 0, 8), point(0, 0, 0), vector(0, 1, 0))
    assert t == Matrix.translation(0, 0, -8)


def test_an_arbitrary_view_transformation():
    t = view_transform(point(1, 3, 2), point(4, -2, 8), vector(1, 1, 0))
    assert t == Matrix([
        -0.50709, 0.50709, 0.67612, -2.36643,
        0.76772, 0.60609, 0.12122, -2.82843,
        -0.35857, 0.59761, -0.71714, 0.0,
        0.0, 0.0, 0.0, 1.0,
    ])
