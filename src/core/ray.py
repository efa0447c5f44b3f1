# core/ray.py
from core.matrix import Matrix
from core.vector import Tuple


class Ray:
    """
    Represents a ray in 3D space with an origin point and direction vector.
    """
    __slots__ = ("origin", "direction")

    def __init__(self, origin: Tuple, direction: Tuple):
        self.origin = origin
        self.direction = direction

    def position(self, t: float) -> Tuple:
        """
        Returns the point along the ray at parameter t.
        """
        return self.origin + self.direction * t

    def transform(self, m: Matrix) -> "Ray":
        return Ray(m * self.origin, m * self.direction)

    def intersect(self, shape):
        """
        Intersects this ray with a shape, returning the shape's Intersections.
        """
        return shape.intersect(self)

    def __repr__(self) -> str:
        return f"Ray(origin={self.origin!r}, direction={self.direction!r})"
