# camera/camera.py
import math
from typing import Optional

from core.frozen import Freezable
from core.matrix import IDENTITY, Matrix
from core.ray import Ray
from core.vector import Tuple
from renderer.parallel import render

ORIGIN = Tuple.point(0, 0, 0)


class Camera(Freezable):
    """
    A pinhole camera. The canvas sits one unit in front of the eye, at
    z=-1 in camera space, and ``transform`` maps world space into camera
    space (see ``core.transformations.view_transform``).
    """
    def __init__(self, hsize: int, vsize: int, field_of_view: float, transform: Optional[Matrix] = None):
        if hsize <= 0 or vsize <= 0:
            raise ValueError(f"camera size must be positive, got {hsize}x{vsize}")
        self._hsize = hsize
        self._vsize = vsize
        self._field_of_view = field_of_view
        self._half_width, self._half_height = self._half_extent(hsize, vsize, field_of_view)
        self._pixel_size = (self._half_width * 2) / hsize
        self._transform = IDENTITY
        self._inverse = IDENTITY
        self._origin = ORIGIN
        if transform is not None:
            self.transform = transform

    @staticmethod
    def _half_extent(hsize: int, vsize: int, field_of_view: float):
        half_view = math.tan(field_of_view / 2)
        aspect = hsize / vsize
        if aspect >= 1:
            return half_view, half_view / aspect
        return half_view * aspect, half_view

    # Size and field of view are fixed at construction.
    @property
    def hsize(self) -> int:
        return self._hsize

    @property
    def vsize(self) -> int:
        return self._vsize

    @property
    def field_of_view(self) -> float:
        return self._field_of_view

    @property
    def half_width(self) -> float:
        return self._half_width

    @property
    def half_height(self) -> float:
        return self._half_height

    @property
    def pixel_size(self) -> float:
        return self._pixel_size

    @property
    def transform(self) -> Matrix:
        return self._transform

    @transform.setter
    def transform(self, transform: Matrix):
        self._check_mutable("transform")
        self._inverse = transform.inverse()
        self._transform = transform
        self._origin = self._inverse * ORIGIN

    def ray_for_pixel(self, px: int, py: int) -> Ray:
        """Generates the ray from the eye through the centre of pixel (px, py)."""
        xoffset = (px + 0.5) * self._pixel_size
        yoffset = (py + 0.5) * self._pixel_size
        # The camera looks toward -z, so +x is to the left.
        world_x = self._half_width - xoffset
        world_y = self._half_height - yoffset

        pixel = self._inverse * Tuple.point(world_x, world_y, -1)
        direction = (pixel - self._origin).normalize()
        return Ray(self._origin, direction)

    def render(self, world, workers: Optional[int] = None):
        """
        Renders ``world`` into a Canvas. ``workers`` processes are used; see
        ``renderer.parallel.render``.
        """
        return render(self, world, workers=workers)

    def __repr__(self) -> str:
        return (f"Camera({self._hsize}, {self._vsize}, {self._field_of_view}, "
                f"transform={self._transform!r})")
