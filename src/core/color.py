# core/color.py
from core.utils import equal


class Color:
    """
    An RGB color. Components are nominally in [0, 1] but are not clamped
    until the color is written out.

    Colors are immutable: every operation returns a new instance.
    """
    __slots__ = ("red", "green", "blue")

    def __init__(self, red: float, green: float, blue: float):
        object.__setattr__(self, "red", float(red))
        object.__setattr__(self, "green", float(green))
        object.__setattr__(self, "blue", float(blue))

    @classmethod
    def black(cls) -> "Color":
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def white(cls) -> "Color":
        return cls(1.0, 1.0, 1.0)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (Color, (self.red, self.green, self.blue))

    def __add__(self, other: "Color") -> "Color":
        return Color(self.red + other.red, self.green + other.green, self.blue + other.blue)

    def __sub__(self, other: "Color") -> "Color":
        return Color(self.red - other.red, self.green - other.green, self.blue - other.blue)

    def __mul__(self, other):
        if isinstance(other, (int, float)):
            return Color(self.red * other, self.green * other, self.blue * other)
        # Hadamard product.
        return Color(self.red * other.red, self.green * other.green, self.blue * other.blue)

    def __rmul__(self, other: float) -> "Color":
        return self.__mul__(other)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (equal(self.red, other.red) and equal(self.green, other.green)
                and equal(self.blue, other.blue))

    __hash__ = None

    def __iter__(self):
        return iter((self.red, self.green, self.blue))

    def __repr__(self) -> str:
        return f"Color({self.red}, {self.green}, {self.blue})"
