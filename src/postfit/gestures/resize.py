"""
Module: gestures.resize

Purpose:
    Horizontal resize of a text block via its edge handles. Width is a
    percentage of the container, clamped to [20, 98] while dragging and
    on release, and rounded to one decimal when committed.

Key Classes:
    - ResizeController: Per-block resize state machine
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from postfit.common import DEFAULT_GESTURE_THRESHOLDS, GestureThresholds

from .events import ClientRect, GestureError, PointerEvent

logger = logging.getLogger(__name__)

RESIZE_DIRECTIONS = ("right", "left", "right-only")


@dataclass(frozen=True)
class _Resizing:
    pointer_id: int
    start_x: float
    start_width: float
    direction: str


class ResizeController:
    """
    Resize state machine for one block.

    The "left" handle mirrors the pointer delta, so dragging it leftwards
    widens the block.

    Args:
        container: Returns the container's client rect, or None while it
            is not mounted
        initial_width: Width (percent) the next resize starts from
        on_resize_end: Called once with the committed width

    Example:
        >>> ctl = ResizeController(lambda: ClientRect(0, 0, 200, 100), 50, print)
        >>> ctl.start_resize(PointerEvent(1, 100, 10), "right")
        True
        >>> ctl.on_pointer_up(PointerEvent(1, 120, 10))
        60.0
        60.0
    """

    def __init__(
        self,
        container: Callable[[], Optional[ClientRect]],
        initial_width: float,
        on_resize_end: Callable[[float], None],
        thresholds: GestureThresholds = DEFAULT_GESTURE_THRESHOLDS,
    ) -> None:
        self._container = container
        self.initial_width = initial_width
        self._on_resize_end = on_resize_end
        self._thresholds = thresholds
        self._state: Optional[_Resizing] = None
        self._preview_width: Optional[float] = None

    @property
    def is_resizing(self) -> bool:
        return self._state is not None

    @property
    def preview_width(self) -> Optional[float]:
        """Live width while resizing, else None."""
        return self._preview_width

    @property
    def active_pointer_id(self) -> Optional[int]:
        return self._state.pointer_id if self._state else None

    def px_to_percent(self, px: float) -> float:
        """Pixels -> percent of container width; 0 when the container is missing."""
        rect = self._container()
        if rect is None or rect.width == 0:
            logger.warning("Resize container unavailable, ignoring pointer delta")
            return 0.0
        return px * 100 / rect.width

    def clamp_width(self, width: float) -> float:
        t = self._thresholds
        return min(t.max_width_pct, max(t.min_width_pct, width))

    def _width_for(self, event: PointerEvent) -> float:
        assert self._state is not None
        delta_x = event.client_x - self._state.start_x
        if self._state.direction == "left":
            delta_x = -delta_x
        return self.clamp_width(self._state.start_width + self.px_to_percent(delta_x))

    def start_resize(self, event: PointerEvent, direction: str = "right") -> bool:
        """
        Begin resizing from the current ``initial_width`` (clamped for the preview).

        Returns:
            False if another pointer is already resizing

        Raises:
            GestureError: If ``direction`` is not a known handle direction
        """
        if direction not in RESIZE_DIRECTIONS:
            raise GestureError(f"Unknown resize direction: {direction!r}")
        if self._state is not None:
            logger.debug(
                f"Ignoring pointer {event.pointer_id}: resize owned by {self._state.pointer_id}"
            )
            return False
        self._state = _Resizing(event.pointer_id, event.client_x, self.initial_width, direction)
        self._preview_width = self.clamp_width(self.initial_width)
        return True

    def on_pointer_move(self, event: PointerEvent) -> Optional[float]:
        if self._state is None or event.pointer_id != self._state.pointer_id:
            return None
        self._preview_width = self._width_for(event)
        return self._preview_width

    def on_pointer_up(self, event: PointerEvent) -> Optional[float]:
        """
        Commit the final width through the callback.

        Returns:
            The committed width, or None if ``event`` is not the active pointer
        """
        if self._state is None or event.pointer_id != self._state.pointer_id:
            return None
        width = round(self._width_for(event), self._thresholds.width_decimals)
        self._reset()
        logger.info(f"Resize committed at {width}%")
        self._on_resize_end(width)
        return width

    def cancel(self, pointer_id: Optional[int] = None) -> bool:
        """Abort the resize without committing; see DragController.cancel."""
        if self._state is None:
            return False
        if pointer_id is not None and pointer_id != self._state.pointer_id:
            return False
        logger.info("Resize cancelled")
        self._reset()
        return True

    def _reset(self) -> None:
        self._state = None
        self._preview_width = None
