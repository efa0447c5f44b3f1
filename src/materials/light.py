# materials/light.py
from core.color import Color
from core.frozen import Freezable
from core.vector import Tuple


class PointLight(Freezable):
    """
    A light with no size, emitting the same intensity in every direction.
    """
    def __init__(self, position: Tuple, intensity: Color):
        self._position = position
        self._intensity = intensity

    @property
    def position(self) -> Tuple:
        return self._position

    @position.setter
    def position(self, position: Tuple):
        self._check_mutable("position")
        self._position = position

    @property
    def intensity(self) -> Color:
        return self._intensity

    @intensity.setter
    def intensity(self, intensity: Color):
        self._check_mutable("intensity")
        self._intensity = intensity

    def __eq__(self, other) -> bool:
        if not isinstance(other, PointLight):
            return NotImplemented
        return self.position == other.position and self.intensity == other.intensity

    __hash__ = None

    def __repr__(self) -> str:
        return f"PointLight(position={self.position!r}, intensity={self.intensity!r})"
