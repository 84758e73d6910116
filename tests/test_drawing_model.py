import pytest

from sketchpad.editor.drawing_model import (
    DrawingModel,
    DuplicateShapeError,
    ShapeNotFoundError,
)
from sketchpad.editor.shapes import Circle, Rectangle


class SignalSpy:
    def __init__(self, signal):
        self.count = 0
        signal.connect(self)

    def __call__(self):
        self.count += 1


def test_invalid_drawing_size():
    with pytest.raises(ValueError):
        DrawingModel(0, 10)


def test_scene_primitives(model):
    shape = Rectangle(0, 0, 2, 2)
    model.add_shape(shape)
    with pytest.raises(DuplicateShapeError):
        model.add_shape(shape)
    model.translate_shape(shape, 4, 1)
    assert shape.position == (4, 1)
    model.remove_shape(shape)
    with pytest.raises(ShapeNotFoundError):
        model.remove_shape(shape)


def test_shapes_with_same_geometry_are_distinct(model):
    a = Rectangle(0, 0, 2, 2)
    b = Rectangle(0, 0, 2, 2)
    model.add_shape(a)
    model.add_shape(b)
    model.remove_shape(b)
    assert model.shapes == (a,)
    assert model.shapes[0] is a


def test_shape_at_returns_first_hit_in_draw_order(model):
    first = Rectangle(0, 0, 10, 10)
    second = Circle(5, 5, 3)
    model.add_shape(first)
    model.add_shape(second)
    assert model.shape_at(5, 5) is first
    assert model.shape_at(7.5, 5) is first
    assert model.shape_at(50, 50) is None


def test_create_and_move_are_recorded(model):
    shape = Circle(10, 10, 2)
    model.create_shape(shape)
    model.move_shape(shape, 3, 4)
    assert shape.position == (13, 14)
    assert model.history.undo_text == "Move Circle"

    model.undo()
    assert shape.position == (10, 10)
    model.undo()
    assert model.shapes == ()
    model.redo()
    model.redo()
    assert model.shapes == (shape,)
    assert shape.position == (13, 14)


def test_zero_move_is_not_recorded(model):
    shape = Circle(10, 10, 2)
    model.create_shape(shape)
    model.move_shape(shape, 0, 0)
    assert len(model.history.undo_stack) == 1


def test_moving_absent_shape_fails(model):
    with pytest.raises(ShapeNotFoundError):
        model.move_shape(Circle(1, 1, 1), 1, 1)
    assert not model.history.can_undo


def test_signals_only_fire_when_something_changed(model):
    shapes_spy = SignalSpy(model.shapes_changed)
    history_spy = SignalSpy(model.history_changed)

    model.undo()
    model.redo()
    assert shapes_spy.count == 0
    assert history_spy.count == 0

    model.create_shape(Rectangle(0, 0, 1, 1))
    model.undo()
    model.redo()
    assert shapes_spy.count == 3
    assert history_spy.count == 3


def test_new_document_drops_shapes_and_history(model):
    model.create_shape(Rectangle(0, 0, 1, 1))
    model.undo()
    model.create_shape(Circle(5, 5, 1))
    model.new_document()
    assert model.shapes == ()
    assert not model.history.can_undo
    assert not model.history.can_redo


def test_failed_undo_still_reports_history_change(model):
    shape = Rectangle(0, 0, 1, 1)
    model.create_shape(shape)
    model.remove_shape(shape)
    history_spy = SignalSpy(model.history_changed)

    with pytest.raises(ShapeNotFoundError):
        model.undo()
    assert history_spy.count == 1
    assert not model.history.can_undo
    assert not model.history.can_redo


def test_failed_redo_still_reports_history_change(model):
    shape = Rectangle(0, 0, 1, 1)
    model.create_shape(shape)
    model.undo()
    model.add_shape(shape)
    history_spy = SignalSpy(model.history_changed)

    with pytest.raises(DuplicateShapeError):
        model.redo()
    assert history_spy.count == 1
    assert not model.history.can_redo
