# geometry/world.py
import logging
from typing import List, Optional

from core.color import Color
from core.frozen import Freezable
from core.matrix import Matrix
from core.ray import Ray
from core.vector import Tuple
from geometry.intersection import Computations, Intersections
from geometry.shape import Shape
from geometry.sphere import Sphere
from materials.light import PointLight
from materials.lighting import lighting
from materials.material import Material

logger = logging.getLogger(__name__)


class World(Freezable):
    """
    A scene: an optional point light and an ordered list of shapes.

    The world is built by mutation and then frozen. Once frozen, none of
    the world, its light or its shapes can change, which lets render workers
    share it without locks.
    """
    def __init__(self, light: Optional[PointLight] = None):
        self._light = light
        self._objects: List[Shape] = []

    @classmethod
    def default_world(cls, material: Optional[Material] = None) -> "World":
        """
        Two concentric spheres lit from the upper left; the fixture most
        world and camera scenarios are written against.
        """
        if material is None:
            material = Material(color=Color(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2)
        world = cls(PointLight(Tuple.point(-10, 10, -10), Color.white()))
        world.add(Sphere(material=material))
        world.add(Sphere(transform=Matrix.scaling(0.5, 0.5, 0.5)))
        return world

    @property
    def light(self) -> Optional[PointLight]:
        return self._light

    @light.setter
    def light(self, light: Optional[PointLight]):
        self._check_mutable("light")
        self._light = light

    @property
    def objects(self) -> List[Shape]:
        return list(self._objects)

    def add(self, shape: Shape) -> int:
        """
        Append a shape and return its stable handle.
        """
        self._check_mutable("objects")
        self._objects.append(shape)
        return len(self._objects) - 1

    def __getitem__(self, handle: int) -> Shape:
        return self._objects[handle]

    def __len__(self) -> int:
        return len(self._objects)

    def contains(self, shape: Shape) -> bool:
        return any(o is shape for o in self._objects)

    def freeze(self) -> "World":
        if not self._frozen:
            for shape in self._objects:
                shape.freeze()
            if self._light is not None:
                self._light.freeze()
            super().freeze()
            logger.debug("Froze world with %d shapes", len(self._objects))
        return self

    def intersect(self, ray: Ray) -> Intersections:
        xs = Intersections()
        for shape in self._objects:
            xs.extend(shape.intersect(ray))
        xs.sort()
        return xs

    def is_shadowed(self, point: Tuple) -> bool:
        """
        True when some shape lies between ``point`` and the light. Shapes
        behind the light do not count.
        """
        if self._light is None:
            return False
        v = self._light.position - point
        distance = v.magnitude()
        hit = self.intersect(Ray(point, v.normalize())).hit()
        return hit is not None and hit.t < distance

    def shade_hit(self, comps: Computations) -> Color:
        if self._light is None:
            return Color.black()
        shadowed = self.is_shadowed(comps.over_point)
        return lighting(comps.object.material, comps.object, self._light,
                        comps.point, comps.eyev, comps.normalv, shadowed)

    def color_at(self, ray: Ray) -> Color:
        hit = self.intersect(ray).hit()
        if hit is None:
            return Color.black()
        return self.shade_hit(hit.prepare_computations(ray))

    def __repr__(self) -> str:
        return f"World(light={self._light!r}, objects={self._objects!r})"
