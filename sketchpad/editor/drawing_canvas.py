# drawing_canvas.py
from typing import Optional

import matplotlib.patches as patches
from matplotlib.backend_bases import MouseButton, MouseEvent
from matplotlib.backends.backend_qtagg import (
    FigureCanvasQTAgg as FigureCanvas,  # type: ignore
)
from matplotlib.figure import Figure

from .drawing_model import DrawingModel
from .shapes import Circle, Rectangle, Shape

TOOLS = {"rectangle": Rectangle, "circle": Circle}


class DrawingCanvas(FigureCanvas):  # type: ignore
    def __init__(self, model: DrawingModel, shape_size: float = 10.0):
        self.model = model
        self.shape_size = shape_size
        self.tool = "rectangle"
        self.fig = Figure()
        super().__init__(self.fig)  # type: ignore
        self._drag_shape: Optional[Shape] = None
        self._drag_start: tuple[float, float] = (0.0, 0.0)
        self.plot_shapes()
        self.model.shapes_changed.connect(self.plot_shapes)
        self.mpl_connect("button_press_event", self.on_press)  # type: ignore
        self.mpl_connect("button_release_event", self.on_release)  # type: ignore

    def plot_shapes(self):
        self.fig.clf()
        self.ax = self.fig.add_subplot(111)  # type: ignore
        self.ax.set_xlim(0, self.model.width)  # type: ignore
        self.ax.set_ylim(0, self.model.height)  # type: ignore
        self.ax.set_aspect("equal")  # type: ignore
        self.ax.set_title("Drawing")  # type: ignore
        for shape in self.model.shapes:
            self.ax.add_patch(self._patch(shape))  # type: ignore
        self.draw()

    def _patch(self, shape: Shape) -> patches.Patch:
        style = dict(linewidth=2, edgecolor="k", facecolor="tab:blue", alpha=0.6)
        if isinstance(shape, Circle):
            return patches.Circle((shape.x, shape.y), shape.radius, **style)
        if isinstance(shape, Rectangle):
            return patches.Rectangle(
                (shape.x, shape.y), shape.width, shape.height, **style
            )
        raise NotImplementedError(f"No patch for {type(shape).__name__}")

    def on_press(self, event: MouseEvent) -> None:
        if event.inaxes != self.ax or event.button != MouseButton.LEFT:
            return
        x, y = event.xdata, event.ydata
        if x is None or y is None:
            return
        shape = self.model.shape_at(x, y)
        if shape is None:
            self.model.create_shape(TOOLS[self.tool].centered_at(x, y, self.shape_size))
            return
        self._drag_shape = shape
        self._drag_start = (x, y)

    def on_release(self, event: MouseEvent) -> None:
        shape, self._drag_shape = self._drag_shape, None
        if shape is None or event.inaxes != self.ax:
            return
        x, y = event.xdata, event.ydata
        if x is None or y is None:
            return
        self.model.move_shape(shape, x - self._drag_start[0], y - self._drag_start[1])
