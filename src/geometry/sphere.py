# geometry/sphere.py
import math
from typing import List

from core.ray import Ray
from core.vector import Tuple
from geometry.shape import Shape

ORIGIN = Tuple.point(0, 0, 0)


class Sphere(Shape):
    """
    A unit sphere centred on the object-space origin. Position and size come
    from the shape transform.
    """
    def local_intersect(self, ray: Ray) -> List[float]:
        sphere_to_ray = ray.origin - ORIGIN
        a = ray.direction.dot(ray.direction)
        b = 2.0 * ray.direction.dot(sphere_to_ray)
        c = sphere_to_ray.dot(sphere_to_ray) - 1.0
        discriminant = b * b - 4 * a * c

        if discriminant < 0:
            return []

        sqrt_disc = math.sqrt(discriminant)
        return [(-b - sqrt_disc) / (2 * a), (-b + sqrt_disc) / (2 * a)]

    def local_normal_at(self, local_point: Tuple) -> Tuple:
        return local_point - ORIGIN
