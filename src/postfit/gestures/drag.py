"""
Module: gestures.drag

Purpose:
    Drag a text block across a card. Converts pointer positions into
    percentages of the container box, keeping the initial click offset
    from the block's centre so the block does not jump under the cursor.

    Lifecycle: Idle -> Dragging(pointer_id, offset) -> Idle. Only the
    pointer that started a drag can move, finish or cancel it.
    Cancelling never commits a position.

Key Classes:
    - DragController: Per-block drag state machine
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from postfit.common import DEFAULT_GESTURE_THRESHOLDS, GestureThresholds
from postfit.positioning import PercentPoint

from .events import ClientRect, PointerEvent

logger = logging.getLogger(__name__)

RectProvider = Callable[[], Optional[ClientRect]]
DragEndCallback = Callable[[float, float], None]


@dataclass(frozen=True)
class _Dragging:
    pointer_id: int
    offset_x: float
    offset_y: float


class DragController:
    """
    Drag state machine for one block.

    Args:
        container: Returns the container's client rect, or None while it
            is not mounted
        on_drag_end: Called once with the final (x, y) percentages
        thresholds: Fallback percent used when the container is missing

    Example:
        >>> ctl = DragController(lambda: ClientRect(0, 0, 200, 100), on_drag_end=print)
        >>> ctl.on_pointer_down(PointerEvent(1, 100, 50))
        True
        >>> ctl.on_pointer_up(PointerEvent(1, 150, 25))
        75.0 25.0
        PercentPoint(x=75.0, y=25.0)
    """

    def __init__(
        self,
        container: RectProvider,
        on_drag_end: DragEndCallback,
        thresholds: GestureThresholds = DEFAULT_GESTURE_THRESHOLDS,
    ) -> None:
        self._container = container
        self._on_drag_end = on_drag_end
        self._thresholds = thresholds
        self._state: Optional[_Dragging] = None
        self._drag_pos: Optional[PercentPoint] = None

    # ─────────────────────────────────────────────────────────────────────────
    # State
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def is_dragging(self) -> bool:
        return self._state is not None

    @property
    def drag_pos(self) -> Optional[PercentPoint]:
        """Live preview position while dragging, else None."""
        return self._drag_pos

    @property
    def active_pointer_id(self) -> Optional[int]:
        return self._state.pointer_id if self._state else None

    def _owns(self, event: PointerEvent) -> bool:
        return self._state is not None and self._state.pointer_id == event.pointer_id

    # ─────────────────────────────────────────────────────────────────────────
    # Geometry
    # ─────────────────────────────────────────────────────────────────────────

    def to_percent(self, client_x: float, client_y: float) -> PercentPoint:
        """Client point -> percent of the container, clamped to [0, 100]."""
        rect = self._container()
        if rect is None or rect.is_empty:
            fallback = self._thresholds.fallback_percent
            logger.warning("Drag container unavailable, using fallback position")
            return PercentPoint(fallback, fallback)
        x = min(100.0, max(0.0, (client_x - rect.left) * 100 / rect.width))
        y = min(100.0, max(0.0, (client_y - rect.top) * 100 / rect.height))
        return PercentPoint(x, y)

    def _position_for(self, event: PointerEvent) -> PercentPoint:
        assert self._state is not None
        return self.to_percent(
            event.client_x - self._state.offset_x,
            event.client_y - self._state.offset_y,
        )

    # ─────────────────────────────────────────────────────────────────────────
    # Pointer handlers
    # ─────────────────────────────────────────────────────────────────────────

    def on_pointer_down(self, event: PointerEvent, element_rect: Optional[ClientRect] = None) -> bool:
        """
        Start dragging.

        Args:
            event: The pointer-down sample
            element_rect: Current client rect of the dragged block; its
                centre is used to compute the click offset

        Returns:
            False if another pointer is already dragging
        """
        if self._state is not None:
            logger.debug(
                f"Ignoring pointer {event.pointer_id}: drag owned by {self._state.pointer_id}"
            )
            return False

        offset_x = offset_y = 0.0
        if element_rect is not None and self._container() is not None:
            offset_x = event.client_x - element_rect.center_x
            offset_y = event.client_y - element_rect.center_y

        self._state = _Dragging(event.pointer_id, offset_x, offset_y)
        self._drag_pos = self._position_for(event)
        return True

    def on_pointer_move(self, event: PointerEvent) -> Optional[PercentPoint]:
        """Update the live position; ignored unless ``event`` is the active pointer."""
        if not self._owns(event):
            return None
        self._drag_pos = self._position_for(event)
        return self._drag_pos

    def on_pointer_up(self, event: PointerEvent) -> Optional[PercentPoint]:
        """
        Finish the drag and commit the final position through the callback.

        Returns:
            The committed position, or None if ``event`` is not the active pointer
        """
        if not self._owns(event):
            return None
        final = self._position_for(event)
        self._reset()
        logger.info(f"Drag committed at ({final.x:.1f}%, {final.y:.1f}%)")
        self._on_drag_end(final.x, final.y)
        return final

    def cancel(self, pointer_id: Optional[int] = None) -> bool:
        """
        Abort the drag without committing.

        Args:
            pointer_id: Only cancel if this pointer owns the drag; None
                cancels whatever drag is active (focus loss, window blur)

        Returns:
            True if a drag was aborted
        """
        if self._state is None:
            return False
        if pointer_id is not None and pointer_id != self._state.pointer_id:
            return False
        logger.info("Drag cancelled")
        self._reset()
        return True

    def _reset(self) -> None:
        self._state = None
        self._drag_pos = None
