# core/vector.py
import math

from core.errors import ZeroLengthVectorError
from core.utils import equal, reflect


class Tuple:
    """
    A homogeneous 4-component tuple. Points have w=1 and vectors have w=0.

    Tuples are immutable: every operation returns a new instance.
    """
    __slots__ = ("x", "y", "z", "w")

    def __init__(self, x: float, y: float, z: float, w: float):
        object.__setattr__(self, "x", float(x))
        object.__setattr__(self, "y", float(y))
        object.__setattr__(self, "z", float(z))
        object.__setattr__(self, "w", float(w))

    @classmethod
    def point(cls, x: float, y: float, z: float) -> "Tuple":
        return cls(x, y, z, 1.0)

    @classmethod
    def vector(cls, x: float, y: float, z: float) -> "Tuple":
        return cls(x, y, z, 0.0)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (Tuple, (self.x, self.y, self.z, self.w))

    def is_point(self) -> bool:
        return equal(self.w, 1.0)

    def is_vector(self) -> bool:
        return equal(self.w, 0.0)

    def __add__(self, other: "Tuple") -> "Tuple":
        return Tuple(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: "Tuple") -> "Tuple":
        return Tuple(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __neg__(self) -> "Tuple":
        return Tuple(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, t: float) -> "Tuple":
        return Tuple(self.x * t, self.y * t, self.z * t, self.w * t)

    def __rmul__(self, t: float) -> "Tuple":
        return self.__mul__(t)

    def __truediv__(self, t: float) -> "Tuple":
        return Tuple(self.x / t, self.y / t, self.z / t, self.w / t)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Tuple):
            return NotImplemented
        return (equal(self.x, other.x) and equal(self.y, other.y)
                and equal(self.z, other.z) and equal(self.w, other.w))

    __hash__ = None

    def __iter__(self):
        return iter((self.x, self.y, self.z, self.w))

    def dot(self, other: "Tuple") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def cross(self, other: "Tuple") -> "Tuple":
        # Only meaningful for vectors; the result is always a vector.
        return Tuple.vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def magnitude(self) -> float:
        return math.sqrt(self.dot(self))

    def normalize(self) -> "Tuple":
        l = self.magnitude()
        if l == 0:
            raise ZeroLengthVectorError(f"cannot normalize zero-length tuple {self!r}")
        return self / l

    def reflect(self, normal: "Tuple") -> "Tuple":
        return reflect(self, normal)

    def __repr__(self) -> str:
        return f"Tuple({self.x}, {self.y}, {self.z}, {self.w})"


def point(x: float, y: float, z: float) -> Tuple:
    return Tuple.point(x, y, z)


def vector(x: float, y: float, z: float) -> Tuple:
    return Tuple.vector(x, y, z)
