# core/color.py
from typing import Tuple

class Color:
    """
    Linear RGB color. Channels are unbounded floats; clamping and gamma only
    happen when an image is written out.
    """
    __slots__ = ("r", "g", "b")

    def __init__(self, r: float, g: float, b: float):
        self.r = r
        self.g = g
        self.b = b

    def __add__(self, other: "Color") -> "Color":
        return Color(self.r + other.r, self.g + other.g, self.b + other.b)

    def __mul__(self, other):
        if isinstance(other, (int, float)):
            return Color(self.r * other, self.g * other, self.b * other)
        return Color(self.r * other.r, self.g * other.g, self.b * other.b)

    def __rmul__(self, other: float) -> "Color":
        return self.__mul__(other)

    def __truediv__(self, t: float) -> "Color":
        return Color(self.r / t, self.g / t, self.b / t)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.r == other.r and self.g == other.g and self.b == other.b

    def __hash__(self) -> int:
        return hash((self.r, self.g, self.b))

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.r, self.g, self.b)

    def __repr__(self) -> str:
        return f"Color({self.r}, {self.g}, {self.b})"


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
SKY_BLUE = Color(0.5, 0.7, 1.0)
