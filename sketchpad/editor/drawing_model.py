# drawing_model.py
import logging
from typing import Optional

from PyQt5.QtCore import QObject, pyqtSignal

from .change import Creation, Edit
from .history import History
from .shapes import Shape


class ShapeNotFoundError(ValueError):
    pass


class DuplicateShapeError(ValueError):
    pass


class DrawingModel(QObject):
    shapes_changed = pyqtSignal()
    history_changed = pyqtSignal()

    def __init__(self, width: float = 100, height: float = 100):
        self.logger = logging.getLogger(__name__)
        super().__init__()
        if width <= 0 or height <= 0:
            raise ValueError(f"Drawing size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._shapes: list[Shape] = []
        self._history = History()

    @property
    def shapes(self) -> tuple[Shape, ...]:
        return tuple(self._shapes)

    @property
    def history(self) -> History:
        return self._history

    def __contains__(self, shape: Shape) -> bool:
        return any(s is shape for s in self._shapes)

    def shape_at(self, x: float, y: float) -> Optional[Shape]:
        for shape in self._shapes:
            if shape.contains(x, y):
                return shape
        return None

    # Scene primitives used by changes
    def add_shape(self, shape: Shape):
        if shape in self:
            raise DuplicateShapeError(f"{shape!r} is already in the drawing")
        self._shapes.append(shape)

    def remove_shape(self, shape: Shape):
        for i, s in enumerate(self._shapes):
            if s is shape:
                del self._shapes[i]
                return
        raise ShapeNotFoundError(f"{shape!r} is not in the drawing")

    def translate_shape(self, shape: Shape, dx: float, dy: float):
        """Translate primitive for hosts; recorded moves go through move_shape."""
        shape.move(dx, dy)

    # Recorded edits
    def create_shape(self, shape: Shape):
        self._history.execute(Creation(self, shape))
        self.logger.info(f"Created {shape!r}")
        self._emit_changed()

    def move_shape(self, shape: Shape, dx: float, dy: float):
        if dx == 0 and dy == 0:
            return
        if shape not in self:
            raise ShapeNotFoundError(f"{shape!r} is not in the drawing")
        self._history.execute(Edit(shape, dx, dy))
        self.logger.info(f"Moved {shape!r} by ({dx}, {dy})")
        self._emit_changed()

    def undo(self):
        if not self._history.can_undo:
            return
        try:
            self._history.undo()
        finally:
            # A failed undo still drops the change from the history
            self._emit_changed()

    def redo(self):
        if not self._history.can_redo:
            return
        try:
            self._history.redo()
        finally:
            self._emit_changed()

    def new_document(self):
        self._shapes = []
        self._history.clear()
        self.logger.info("Started a new drawing")
        self._emit_changed()

    def _emit_changed(self):
        self.shapes_changed.emit()
        self.history_changed.emit()
