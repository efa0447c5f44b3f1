# geometry/shape.py
from typing import List, Optional

from core.frozen import Freezable
from core.matrix import IDENTITY, Matrix
from core.ray import Ray
from core.vector import Tuple
from geometry.intersection import Intersection, Intersections
from materials.material import Material


class Shape(Freezable):
    """
    Abstract base for anything a ray can hit.

    Subclasses implement the geometry in object space through
    ``local_intersect`` and ``local_normal_at``; this class handles the
    conversion between world and object space using the shape's transform.
    The inverse of the transform is computed once when it is assigned, so a
    singular transform is rejected before the scene is ever rendered.
    """
    def __init__(self, transform: Optional[Matrix] = None, material: Optional[Material] = None):
        self._transform = IDENTITY
        self._inverse = IDENTITY
        self._normal_matrix = IDENTITY
        self._material = Material()
        if transform is not None:
            self.transform = transform
        if material is not None:
            self.material = material

    @property
    def transform(self) -> Matrix:
        return self._transform

    @transform.setter
    def transform(self, transform: Matrix):
        self._check_mutable("transform")
        inverse = transform.inverse()
        self._transform = transform
        self._inverse = inverse
        self._normal_matrix = inverse.transpose()

    @property
    def inverse_transform(self) -> Matrix:
        return self._inverse

    @property
    def material(self) -> Material:
        return self._material

    @material.setter
    def material(self, material: Material):
        self._check_mutable("material")
        # Each shape owns its own copy; patterns stay shared.
        self._material = material.copy()

    def with_transform(self, transform: Matrix) -> "Shape":
        self.transform = transform
        return self

    def with_material(self, material: Material) -> "Shape":
        self.material = material
        return self

    def freeze(self):
        super().freeze()
        self._material.freeze()
        return self

    def world_to_object(self, point: Tuple) -> Tuple:
        return self._inverse * point

    def intersect(self, ray: Ray) -> Intersections:
        """
        Intersects a world-space ray with this shape.
        """
        local_ray = ray.transform(self._inverse)
        return Intersections(Intersection(t, self) for t in self.local_intersect(local_ray))

    def normal_at(self, world_point: Tuple) -> Tuple:
        """
        Returns the unit surface normal at a world-space point.

        The object-space normal is carried back to world space by the
        inverse-transpose of the transform, which keeps it perpendicular to
        the surface under non-uniform scaling.
        """
        local_normal = self.local_normal_at(self._inverse * world_point)
        world_normal = self._normal_matrix * local_normal
        return Tuple.vector(world_normal.x, world_normal.y, world_normal.z).normalize()

    def local_intersect(self, ray: Ray) -> List[float]:
        raise NotImplementedError("local_intersect() must be implemented by subclasses.")

    def local_normal_at(self, local_point: Tuple) -> Tuple:
        raise NotImplementedError("local_normal_at() must be implemented by subclasses.")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(transform={self._transform!r})"
