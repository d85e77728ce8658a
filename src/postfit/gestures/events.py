"""
Module: gestures.events

Purpose:
    Value types shared by the drag and resize controllers: pointer
    events, client-space rectangles and the error raised on caller
    bookkeeping bugs.
"""

from __future__ import annotations

from dataclasses import dataclass


class GestureError(RuntimeError):
    """Raised when a controller is driven incorrectly by its caller."""


@dataclass(frozen=True)
class PointerEvent:
    """
    A pointer sample in client (screen) coordinates.

    Attributes:
        pointer_id: Identity of the pointer (mouse, finger, pen)
        client_x: X in client pixels
        client_y: Y in client pixels
    """

    pointer_id: int
    client_x: float
    client_y: float


@dataclass(frozen=True)
class ClientRect:
    """
    Bounding box in client pixels.

    A zero-size rectangle is valid (a widget not yet laid out) and counts
    as missing geometry; negative sizes are rejected.

    Invariants:
        - width >= 0
        - height >= 0
    """

    left: float
    top: float
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width < 0:
            raise ValueError(f"width must be >= 0: {self.width}")
        if self.height < 0:
            raise ValueError(f"height must be >= 0: {self.height}")

    @property
    def center_x(self) -> float:
        return self.left + self.width / 2

    @property
    def center_y(self) -> float:
        return self.top + self.height / 2

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0
