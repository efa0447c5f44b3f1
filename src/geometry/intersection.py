# geometry/intersection.py
from typing import Iterable, Iterator, Optional

from core.ray import Ray
from core.utils import EPSILON
from core.vector import Tuple


class Computations:
    """
    Precomputed shading state for one intersection seen along one ray.
    """
    __slots__ = ("t", "object", "point", "eyev", "normalv", "inside", "over_point")

    def __init__(self, t: float, obj, point: Tuple, eyev: Tuple, normalv: Tuple, inside: bool):
        self.t = t
        self.object = obj
        self.point = point
        self.eyev = eyev
        self.normalv = normalv
        self.inside = inside
        # Shadow rays start slightly above the surface to avoid acne.
        self.over_point = point + normalv * EPSILON


class Intersection:
    """
    A parametric distance t along a ray together with the shape it hit.
    """
    __slots__ = ("t", "object")

    def __init__(self, t: float, obj):
        self.t = t
        self.object = obj

    def prepare_computations(self, ray: Ray) -> Computations:
        point = ray.position(self.t)
        eyev = -ray.direction
        normalv = self.object.normal_at(point)
        inside = normalv.dot(eyev) < 0
        if inside:
            normalv = -normalv
        return Computations(self.t, self.object, point, eyev, normalv, inside)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Intersection):
            return NotImplemented
        return self.t == other.t and self.object is other.object

    __hash__ = None

    def __repr__(self) -> str:
        return f"Intersection(t={self.t}, object={self.object!r})"


class Intersections:
    """
    An ordered collection of intersections.
    """
    __slots__ = ("_items",)

    def __init__(self, intersections: Iterable[Intersection] = ()):
        self._items = list(intersections)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Intersection:
        return self._items[index]

    def __iter__(self) -> Iterator[Intersection]:
        return iter(self._items)

    def extend(self, other: Iterable[Intersection]):
        self._items.extend(other)

    def sort(self):
        # list.sort is stable, so equal t values keep their input order.
        self._items.sort(key=lambda i: i.t)

    def hit(self) -> Optional[Intersection]:
        """
        Returns the intersection with the smallest strictly positive t, the
        first one in input order on ties, or None.
        """
        best = None
        for intersection in self._items:
            if intersection.t > 0 and (best is None or intersection.t < best.t):
                best = intersection
        return best

    def __repr__(self) -> str:
        return f"Intersections({self._items!r})"


def intersections(*items: Intersection) -> Intersections:
    return Intersections(items)
