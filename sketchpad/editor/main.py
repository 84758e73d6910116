# main.py
import logging
import sys
from typing import Callable

import typer
from PyQt5.QtWidgets import (
    QAction,
    QActionGroup,
    QApplication,
    QMainWindow,
    QMessageBox,
    QVBoxLayout,
    QWidget,
)

from .drawing_canvas import TOOLS, DrawingCanvas
from .drawing_model import DrawingModel
from .logger import setup_logging

logger = logging.getLogger(__name__)

app = typer.Typer(pretty_exceptions_show_locals=False, add_completion=False)


class MainWindow(QMainWindow):
    def __init__(self, width: float = 100, height: float = 100):
        super().__init__()
        self.setWindowTitle("Sketchpad")
        self.resize(800, 600)

        # The document owns the shapes and their history
        self.model = DrawingModel(width, height)

        self.canvas = DrawingCanvas(self.model)
        layout = QVBoxLayout()
        layout.addWidget(self.canvas)

        container = QWidget()
        container.setLayout(layout)
        self.setCentralWidget(container)

        self.create_actions()
        self.create_menus()
        self.model.history_changed.connect(self.update_edit_actions)
        self.update_edit_actions()

    def create_actions(self):
        # File menu actions
        self.new_act = QAction("&New", self)
        self.new_act.setShortcut("Ctrl+N")
        self.new_act.triggered.connect(self.new_drawing)

        self.exit_act = QAction("&Exit", self)
        self.exit_act.setShortcut("Ctrl+Q")
        self.exit_act.triggered.connect(self.exit_app)

        # Edit menu actions
        self.undo_act = QAction("&Undo", self)
        self.undo_act.setShortcut("Ctrl+Z")
        self.undo_act.triggered.connect(self.undo)

        self.redo_act = QAction("&Redo", self)
        self.redo_act.setShortcut("Ctrl+Y")
        self.redo_act.triggered.connect(self.redo)

        # Tool menu actions
        self.tool_group = QActionGroup(self)
        self.tool_acts: dict[str, QAction] = {}
        for name in TOOLS:
            act = QAction(name.capitalize(), self, checkable=True)
            act.setChecked(name == self.canvas.tool)
            act.triggered.connect(lambda _checked, n=name: self.select_tool(n))
            self.tool_group.addAction(act)
            self.tool_acts[name] = act

    def create_menus(self):
        menubar = self.menuBar()  # type: ignore
        file_menu = menubar.addMenu("&File")  # type: ignore
        file_menu.addAction(self.new_act)  # type: ignore
        file_menu.addSeparator()  # type: ignore
        file_menu.addAction(self.exit_act)  # type: ignore

        edit_menu = menubar.addMenu("&Edit")  # type: ignore
        edit_menu.addAction(self.undo_act)  # type: ignore
        edit_menu.addAction(self.redo_act)  # type: ignore

        tool_menu = menubar.addMenu("&Tool")  # type: ignore
        for act in self.tool_acts.values():
            tool_menu.addAction(act)  # type: ignore

    def update_edit_actions(self):
        history = self.model.history
        self.undo_act.setEnabled(history.can_undo)
        self.undo_act.setText(f"&Undo {history.undo_text}" if history.can_undo else "&Undo")
        self.redo_act.setEnabled(history.can_redo)
        self.redo_act.setText(f"&Redo {history.redo_text}" if history.can_redo else "&Redo")

    def select_tool(self, name: str):
        self.canvas.tool = name
        logger.debug(f"Tool: {name}")

    def exit_app(self):
        self.close()

    def new_drawing(self):
        self._run(self.model.new_document)

    def undo(self):
        self._run(self.model.undo)

    def redo(self):
        self._run(self.model.redo)

    def _run(self, action: Callable[[], None]):
        try:
            action()
        except Exception as e:
            logger.exception("Edit failed")
            QMessageBox.critical(self, "Error", f"The drawing is out of sync:\n{e}")


@app.command()
def main(
    width: float = typer.Option(100.0, min=1, help="Drawing width"),
    height: float = typer.Option(100.0, min=1, help="Drawing height"),
    debug: bool = typer.Option(False, help="Enable debug logging"),
):
    """
    Open the drawing editor.
    """
    setup_logging(logging.DEBUG if debug else logging.INFO)
    qt_app = QApplication(sys.argv)
    window = MainWindow(width, height)
    window.show()
    sys.exit(qt_app.exec_())


# Click command for sphinx-click
typer_click_object = typer.main.get_command(app)


if __name__ == "__main__":
    app()
