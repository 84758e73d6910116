# change.py
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from .shapes import Shape

if TYPE_CHECKING:
    from .drawing_model import DrawingModel


class Change(ABC):
    """One reversible edit to a drawing."""

    description = ""

    @abstractmethod
    def forward(self) -> None:
        """Apply the edit."""

    @abstractmethod
    def reverse(self) -> None:
        """Take the edit back."""

    def __repr__(self):
        return f"<{type(self).__name__} {self.description!r}>"


class Creation(Change):
    def __init__(self, model: "DrawingModel", shape: Shape):
        self._model = model
        self._shape = shape
        self.description = f"Create {shape.kind}"

    def forward(self):
        self._model.add_shape(self._shape)

    def reverse(self):
        self._model.remove_shape(self._shape)


class Edit(Change):
    def __init__(self, shape: Shape, dx: float, dy: float):
        self._shape = shape
        self._dx = dx
        self._dy = dy
        self.description = f"Move {shape.kind}"

    def forward(self):
        self._shape.move(self._dx, self._dy)

    def reverse(self):
        self._shape.move(-self._dx, -self._dy)
