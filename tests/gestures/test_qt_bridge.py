"""Tests for the PySide6 pointer bridge."""

import pytest
from PySide6.QtCore import QEvent, QPointF, Qt
from PySide6.QtGui import QMouseEvent
from PySide6.QtWidgets import QApplication, QWidget

from postfit.gestures.qt_bridge import DragHandleFilter, ResizeHandleFilter, widget_client_rect


def _send_mouse(widget, etype, global_pos, button=Qt.MouseButton.LeftButton):
    buttons = Qt.MouseButton.NoButton if etype == QEvent.Type.MouseButtonRelease else Qt.MouseButton.LeftButton
    if etype == QEvent.Type.MouseMove:
        button = Qt.MouseButton.NoButton
    local = widget.mapFromGlobal(global_pos)
    event = QMouseEvent(etype, local, global_pos, button, buttons, Qt.KeyboardModifier.NoModifier)
    QApplication.sendEvent(widget, event)


@pytest.fixture
def card(qtbot):
    """200x100 container with a 20x20 handle centred at (100, 50)."""
    container = QWidget()
    container.resize(200, 100)
    handle = QWidget(container)
    handle.setGeometry(90, 40, 20, 20)
    qtbot.addWidget(container)
    container.show()
    qtbot.waitExposed(container)
    return container, handle


class TestWidgetClientRect:

    def test_rect_when_widget_missing_then_none(self):
        assert widget_client_rect(None) is None

    def test_rect_when_shown_then_widget_size(self, card):
        container, _ = card
        rect = widget_client_rect(container)
        assert (rect.width, rect.height) == (200, 100)


class TestDragHandleFilter:
    """Mouse events on the handle drive a drag across the card."""

    def test_release_when_dragged_then_emits_finished(self, card):
        container, handle = card
        finished = []
        bridge = DragHandleFilter(handle, container, on_drag_end=lambda x, y: finished.append((x, y)), parent=container)
        emitted = []
        bridge.dragFinished.connect(lambda x, y: emitted.append((x, y)))

        _send_mouse(handle, QEvent.Type.MouseButtonPress, handle.mapToGlobal(QPointF(10, 10)))
        target = container.mapToGlobal(QPointF(150, 25))
        _send_mouse(handle, QEvent.Type.MouseMove, target)
        _send_mouse(handle, QEvent.Type.MouseButtonRelease, target)

        assert finished == [pytest.approx((75.0, 25.0))]
        assert emitted == finished
        assert bridge.controller.is_dragging is False

    def test_move_when_dragging_then_emits_live_position(self, card):
        container, handle = card
        bridge = DragHandleFilter(handle, container, parent=container)
        moves = []
        bridge.dragMoved.connect(lambda x, y: moves.append((x, y)))

        _send_mouse(handle, QEvent.Type.MouseButtonPress, handle.mapToGlobal(QPointF(10, 10)))
        _send_mouse(handle, QEvent.Type.MouseMove, container.mapToGlobal(QPointF(20, 90)))

        assert moves == [pytest.approx((10.0, 90.0))]

    def test_deactivate_when_dragging_then_aborts_without_commit(self, card):
        container, handle = card
        bridge = DragHandleFilter(handle, container, parent=container)
        emitted = []
        bridge.dragFinished.connect(lambda x, y: emitted.append((x, y)))

        _send_mouse(handle, QEvent.Type.MouseButtonPress, handle.mapToGlobal(QPointF(10, 10)))
        QApplication.sendEvent(handle, QEvent(QEvent.Type.WindowDeactivate))
        _send_mouse(handle, QEvent.Type.MouseButtonRelease, container.mapToGlobal(QPointF(150, 25)))

        assert emitted == []
        assert bridge.controller.is_dragging is False


class TestResizeHandleFilter:

    def test_release_when_dragged_right_then_emits_width(self, card):
        container, handle = card
        bridge = ResizeHandleFilter(handle, container, width_source=lambda: 50.0, parent=container)
        widths = []
        bridge.resizeFinished.connect(widths.append)

        start = handle.mapToGlobal(QPointF(10, 10))
        _send_mouse(handle, QEvent.Type.MouseButtonPress, start)
        end = QPointF(start.x() + 20, start.y())
        _send_mouse(handle, QEvent.Type.MouseMove, end)
        _send_mouse(handle, QEvent.Type.MouseButtonRelease, end)

        assert widths == [pytest.approx(60.0)]

    def test_move_when_left_handle_then_preview_mirrored(self, card):
        container, handle = card
        bridge = ResizeHandleFilter(handle, container, width_source=lambda: 50.0, direction="left", parent=container)
        previews = []
        bridge.widthPreview.connect(previews.append)

        start = handle.mapToGlobal(QPointF(10, 10))
        _send_mouse(handle, QEvent.Type.MouseButtonPress, start)
        _send_mouse(handle, QEvent.Type.MouseMove, QPointF(start.x() - 40, start.y()))

        assert previews == [pytest.approx(70.0)]
