# shapes.py
import math
from abc import ABC, abstractmethod


class Shape(ABC):
    """A movable figure anchored at (x, y).

    Shapes compare by identity: two figures with the same geometry are still
    distinct members of a drawing.
    """

    kind = "Shape"

    def __init__(self, x: float, y: float):
        self.x = x
        self.y = y

    @property
    def position(self) -> tuple[float, float]:
        return self.x, self.y

    def move(self, dx: float, dy: float):
        self.x += dx
        self.y += dy

    @abstractmethod
    def contains(self, x: float, y: float) -> bool: ...


class Rectangle(Shape):
    kind = "Rectangle"

    def __init__(self, x: float, y: float, width: float, height: float):
        if width <= 0 or height <= 0:
            raise ValueError(f"Rectangle size must be positive, got {width}x{height}")
        super().__init__(x, y)
        self.width = width
        self.height = height

    @classmethod
    def centered_at(cls, x: float, y: float, size: float) -> "Rectangle":
        return cls(x - size / 2, y - size / 2, size, size)

    def contains(self, x, y):
        return self.x <= x <= self.x + self.width and self.y <= y <= self.y + self.height

    def __repr__(self):
        return f"Rectangle(x={self.x}, y={self.y}, width={self.width}, height={self.height})"


class Circle(Shape):
    kind = "Circle"

    def __init__(self, x: float, y: float, radius: float):
        if radius <= 0:
            raise ValueError(f"Circle radius must be positive, got {radius}")
        super().__init__(x, y)
        self.radius = radius

    @classmethod
    def centered_at(cls, x: float, y: float, size: float) -> "Circle":
        return cls(x, y, size / 2)

    def contains(self, x, y):
        return math.hypot(x - self.x, y - self.y) <= self.radius

    def __repr__(self):
        return f"Circle(x={self.x}, y={self.y}, radius={self.radius})"
