"""
Module: gestures.qt_bridge

Purpose:
    Wire DragController / ResizeController onto PySide6 widgets. An event
    filter installed on a handle widget turns mouse press/move/release
    into pointer events in global coordinates, measured against the
    container widget (the card). Focus loss or window deactivation
    aborts the gesture without committing.

Key Classes:
    - DragHandleFilter: Emits dragMoved / dragFinished
    - ResizeHandleFilter: Emits widthPreview / resizeFinished

Dependencies:
    - PySide6: QObject event filters and signals
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from PySide6.QtCore import QEvent, QObject, QPoint, Qt, Signal
from PySide6.QtGui import QMouseEvent
from PySide6.QtWidgets import QWidget

from .drag import DragController
from .events import ClientRect, PointerEvent
from .resize import ResizeController

logger = logging.getLogger(__name__)

# Qt delivers a single mouse pointer; touch points are synthesised into it
MOUSE_POINTER_ID = 1

_ABORT_EVENTS = (
    QEvent.Type.FocusOut,
    QEvent.Type.WindowDeactivate,
    QEvent.Type.UngrabMouse,
)


def widget_client_rect(widget: Optional[QWidget]) -> Optional[ClientRect]:
    """Global rect of a widget, or None if it is missing or not shown."""
    if widget is None or not widget.isVisible():
        return None
    origin = widget.mapToGlobal(QPoint(0, 0))
    return ClientRect(origin.x(), origin.y(), widget.width(), widget.height())


def _pointer(event: QMouseEvent) -> PointerEvent:
    pos = event.globalPosition()
    return PointerEvent(MOUSE_POINTER_ID, pos.x(), pos.y())


class DragHandleFilter(QObject):
    """
    Makes ``handle`` draggable across ``container``.

    Signals:
        dragMoved(float, float): Live position in percent
        dragFinished(float, float): Committed position in percent
    """

    dragMoved = Signal(float, float)
    dragFinished = Signal(float, float)

    def __init__(
        self,
        handle: QWidget,
        container: QWidget,
        on_drag_end: Optional[Callable[[float, float], None]] = None,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._handle = handle
        self._container = container
        self._callback = on_drag_end
        self.controller = DragController(
            lambda: widget_client_rect(self._container),
            on_drag_end=self._finish,
        )
        handle.installEventFilter(self)

    def _finish(self, x: float, y: float) -> None:
        self.dragFinished.emit(x, y)
        if self._callback is not None:
            self._callback(x, y)

    def eventFilter(self, obj: QObject, event: QEvent) -> bool:
        if obj is not self._handle:
            return False

        etype = event.type()
        if etype == QEvent.Type.MouseButtonPress and event.button() == Qt.MouseButton.LeftButton:
            started = self.controller.on_pointer_down(
                _pointer(event), widget_client_rect(self._handle)
            )
            if started:
                self._handle.grabMouse()
            return started
        if etype == QEvent.Type.MouseMove and self.controller.is_dragging:
            pos = self.controller.on_pointer_move(_pointer(event))
            if pos is not None:
                self.dragMoved.emit(pos.x, pos.y)
            return True
        if etype == QEvent.Type.MouseButtonRelease and self.controller.is_dragging:
            self.controller.on_pointer_up(_pointer(event))
            self._handle.releaseMouse()
            return True
        if etype in _ABORT_EVENTS and self.controller.is_dragging:
            self.controller.cancel()
            self._handle.releaseMouse()
        return False


class ResizeHandleFilter(QObject):
    """
    Makes ``handle`` resize a block's width relative to ``container``.

    ``width_source`` is read at the start of every resize so the gesture
    always begins from the block's current width.

    Signals:
        widthPreview(float): Live width in percent
        resizeFinished(float): Committed width in percent
    """

    widthPreview = Signal(float)
    resizeFinished = Signal(float)

    def __init__(
        self,
        handle: QWidget,
        container: QWidget,
        width_source: Callable[[], float],
        direction: str = "right",
        on_resize_end: Optional[Callable[[float], None]] = None,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._handle = handle
        self._container = container
        self._width_source = width_source
        self._direction = direction
        self._callback = on_resize_end
        self.controller = ResizeController(
            lambda: widget_client_rect(self._container),
            initial_width=width_source(),
            on_resize_end=self._finish,
        )
        handle.installEventFilter(self)

    def _finish(self, width: float) -> None:
        self.resizeFinished.emit(width)
        if self._callback is not None:
            self._callback(width)

    def eventFilter(self, obj: QObject, event: QEvent) -> bool:
        if obj is not self._handle:
            return False

        etype = event.type()
        if etype == QEvent.Type.MouseButtonPress and event.button() == Qt.MouseButton.LeftButton:
            self.controller.initial_width = self._width_source()
            started = self.controller.start_resize(_pointer(event), self._direction)
            if started:
                self._handle.grabMouse()
            return started
        if etype == QEvent.Type.MouseMove and self.controller.is_resizing:
            width = self.controller.on_pointer_move(_pointer(event))
            if width is not None:
                self.widthPreview.emit(width)
            return True
        if etype == QEvent.Type.MouseButtonRelease and self.controller.is_resizing:
            self.controller.on_pointer_up(_pointer(event))
            self._handle.releaseMouse()
            return True
        if etype in _ABORT_EVENTS and self.controller.is_resizing:
            self.controller.cancel()
            self._handle.releaseMouse()
        return False
