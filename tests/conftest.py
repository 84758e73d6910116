import pytest
from PyQt5.QtCore import QCoreApplication

from sketchpad.editor.drawing_model import DrawingModel


@pytest.fixture(scope="session", autouse=True)
def qt_core_app():
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


@pytest.fixture
def model():
    return DrawingModel()
