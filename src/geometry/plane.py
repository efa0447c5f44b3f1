# geometry/plane.py
from typing import List

from core.ray import Ray
from core.utils import EPSILON
from core.vector import Tuple
from geometry.shape import Shape

UP = Tuple.vector(0, 1, 0)


class Plane(Shape):
    """
    The infinite xz plane through the object-space origin.
    """
    def local_intersect(self, ray: Ray) -> List[float]:
        # Parallel and coplanar rays both count as a miss.
        if abs(ray.direction.y) < EPSILON:
            return []
        return [-ray.origin.y / ray.direction.y]

    def local_normal_at(self, local_point: Tuple) -> Tuple:
        return UP
