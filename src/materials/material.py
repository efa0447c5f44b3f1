# materials/material.py
from typing import Optional

from core.color import Color
from core.frozen import Freezable
from core.utils import equal


class Material(Freezable):
    """
    Phong surface parameters with an optional pattern that overrides the
    flat color.
    """
    def __init__(self, color: Optional[Color] = None, ambient: float = 0.1, diffuse: float = 0.9,
                 specular: float = 0.9, shininess: float = 200.0, pattern=None):
        self.color = color if color is not None else Color.white()
        self.ambient = ambient
        self.diffuse = diffuse
        self.specular = specular
        self.shininess = shininess
        self.pattern = pattern

    def __setattr__(self, name, value):
        if name != "_frozen":
            self._check_mutable(name)
        super().__setattr__(name, value)

    def freeze(self):
        super().freeze()
        if self.pattern is not None:
            self.pattern.freeze()
        return self

    def copy(self) -> "Material":
        """
        Returns an unfrozen copy. The pattern is shared, not copied.
        """
        return Material(Color(*self.color), self.ambient, self.diffuse,
                        self.specular, self.shininess, self.pattern)

    def color_at(self, shape, world_point):
        """
        Get the base color at a world-space point on the given shape.
        """
        if self.pattern is None:
            return self.color
        return self.pattern.at_object(shape, world_point)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Material):
            return NotImplemented
        return (self.color == other.color
                and equal(self.ambient, other.ambient)
                and equal(self.diffuse, other.diffuse)
                and equal(self.specular, other.specular)
                and equal(self.shininess, other.shininess)
                and self.pattern is other.pattern)

    __hash__ = None

    def __repr__(self) -> str:
        return (f"Material(color={self.color!r}, ambient={self.ambient}, diffuse={self.diffuse}, "
                f"specular={self.specular}, shininess={self.shininess}, pattern={self.pattern!r})")
