"""
Module: gestures

Purpose:
    Pointer-driven drag and resize sessions for text blocks.

Key Classes:
    - DragController: Drag to percent position
    - ResizeController: Horizontal width resize

The PySide6 bridge lives in ``postfit.gestures.qt_bridge`` and is not
imported here so the controllers stay usable without a Qt runtime.
"""

from .drag import DragController
from .events import ClientRect, GestureError, PointerEvent
from .resize import RESIZE_DIRECTIONS, ResizeController

__all__ = [
    "ClientRect",
    "DragController",
    "GestureError",
    "PointerEvent",
    "RESIZE_DIRECTIONS",
    "ResizeController",
]
