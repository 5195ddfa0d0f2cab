import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

QtWidgets = pytest.importorskip("PySide6.QtWidgets")
from PySide6.QtCore import QEvent, Qt  # noqa: E402
from PySide6.QtGui import QKeyEvent  # noqa: E402

from algebrapad.app.ui.canvas import EditorCanvas  # noqa: E402
from algebrapad.model.document import Document  # noqa: E402


@pytest.fixture(scope="module")
def qapp():
    return QtWidgets.QApplication.instance() or QtWidgets.QApplication([])


@pytest.fixture
def canvas(qapp):
    widget = EditorCanvas(Document())
    widget.resize(200, 100)
    yield widget
    widget.deleteLater()


def press(canvas: EditorCanvas, key: Qt.Key, text: str = "") -> None:
    canvas.keyPressEvent(QKeyEvent(QEvent.Type.KeyPress, key, Qt.KeyboardModifier.NoModifier, text))


def test_typing_builds_fraction(canvas):
    press(canvas, Qt.Key.Key_1, "1")
    press(canvas, Qt.Key.Key_Slash, "/")
    press(canvas, Qt.Key.Key_2, "2")
    assert canvas.document.to_text() == "(1)/(2)"


def test_editing_keys(canvas):
    for char in "ab":
        canvas.handle_key(Qt.Key.Key_A, char)

    assert canvas.handle_key(Qt.Key.Key_Left, "") is True
    assert canvas.handle_key(Qt.Key.Key_Return, "\r") is True
    assert [line.to_text() for line in canvas.document.lines] == ["a", "b"]

    press(canvas, Qt.Key.Key_Backspace)
    assert canvas.document.to_text() == "ab"


def test_unhandled_keys_are_ignored(canvas):
    assert canvas.handle_key(Qt.Key.Key_Shift, "") is False
    assert canvas.handle_key(Qt.Key.Key_Tab, "\t") is False
    assert canvas.document.to_text() == ""


def test_edited_signal(canvas):
    received = []
    canvas.edited.connect(lambda: received.append(True))
    canvas.handle_key(Qt.Key.Key_X, "x")
    assert received == [True]


def test_measure_text_is_cached(canvas):
    first = canvas.measure_text("abc")
    assert first[0] > 0 and first[1] > 0
    assert canvas.measure_text("abc") is first


def test_paint(canvas):
    canvas.handle_key(Qt.Key.Key_1, "1")
    canvas.handle_key(Qt.Key.Key_Slash, "/")
    pixmap = canvas.grab()
    assert not pixmap.isNull()
