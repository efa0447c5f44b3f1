"""Pytest configuration and shared fixtures."""

import pytest

from core.color import Color
from core.vector import Tuple
from geometry.shape import Shape
from geometry.world import World
from materials.patterns import Pattern


class ProbeShape(Shape):
    """A shape that records the object-space ray it was asked to intersect."""
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.saved_ray = None

    def local_intersect(self, ray):
        self.saved_ray = ray
        return []

    def local_normal_at(self, local_point):
        return Tuple.vector(local_point.x, local_point.y, local_point.z)


class PointPattern(Pattern):
    """A pattern whose color is the pattern-space point itself."""
    def __init__(self, transform=None):
        super().__init__(Color.white(), Color.black(), transform)

    def pattern_at(self, point):
        return Color(point.x, point.y, point.z)


@pytest.fixture
def probe_shape():
    return ProbeShape()


@pytest.fixture
def point_pattern():
    return PointPattern()


@pytest.fixture
def default_world():
    return World.default_world()


@pytest.fixture
def white():
    return Color.white()


@pytest.fixture
def black():
    return Color.black()
