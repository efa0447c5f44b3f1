"""Shapes, ray-shape intersections and the world that holds them."""
from geometry.intersection import Computations, Intersection, Intersections
from geometry.plane import Plane
from geometry.shape import Shape
from geometry.sphere import Sphere
from geometry.world import World

__all__ = [
    "Computations",
    "Intersection",
    "Intersections",
    "Plane",
    "Shape",
    "Sphere",
    "World",
]
