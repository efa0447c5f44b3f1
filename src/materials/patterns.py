# materials/patterns.py
import math
from typing import Optional

from core.color import Color
from core.frozen import Freezable
from core.matrix import IDENTITY, Matrix
from core.vector import Tuple


class Pattern(Freezable):
    """Base class for all procedural color patterns."""
    def __init__(self, a: Color, b: Color, transform: Optional[Matrix] = None):
        self._a = a
        self._b = b
        self._transform = IDENTITY
        self._inverse = IDENTITY
        if transform is not None:
            self.transform = transform

    @property
    def a(self) -> Color:
        return self._a

    @a.setter
    def a(self, color: Color):
        self._check_mutable("a")
        self._a = color

    @property
    def b(self) -> Color:
        return self._b

    @b.setter
    def b(self, color: Color):
        self._check_mutable("b")
        self._b = color

    @property
    def transform(self) -> Matrix:
        return self._transform

    @transform.setter
    def transform(self, transform: Matrix):
        self._check_mutable("transform")
        self._inverse = transform.inverse()
        self._transform = transform

    def with_transform(self, transform: Matrix) -> "Pattern":
        self.transform = transform
        return self

    def pattern_at(self, point: Tuple) -> Color:
        """Color at a point given in pattern space."""
        raise NotImplementedError("pattern_at() must be implemented by pattern subclasses.")

    def at_object(self, shape, world_point: Tuple) -> Color:
        """
        Color at a world-space point on ``shape``: world space to object
        space by the shape transform, then to pattern space by this one.
        """
        object_point = shape.world_to_object(world_point)
        return self.pattern_at(self._inverse * object_point)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.a!r}, {self.b!r}, transform={self._transform!r})"


class StripePattern(Pattern):
    """Alternates between a and b along x."""
    def pattern_at(self, point: Tuple) -> Color:
        return self.a if math.floor(point.x) % 2 == 0 else self.b


class GradientPattern(Pattern):
    """Blends linearly from a to b over each unit of x."""
    def pattern_at(self, point: Tuple) -> Color:
        fraction = point.x - math.floor(point.x)
        return self.a + (self.b - self.a) * fraction


class RingPattern(Pattern):
    """Concentric rings around the y axis."""
    def pattern_at(self, point: Tuple) -> Color:
        distance = math.sqrt(point.x * point.x + point.z * point.z)
        return self.a if math.floor(distance) % 2 == 0 else self.b


class CheckersPattern(Pattern):
    """A 3D checkerboard of unit cubes."""
    def pattern_at(self, point: Tuple) -> Color:
        total = math.floor(point.x) + math.floor(point.y) + math.floor(point.z)
        return self.a if total % 2 == 0 else self.b
