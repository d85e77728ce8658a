"""
Module: positioning.grid

Purpose:
    3x3 anchor grid in card percentage space. Snaps dropped coordinates
    to the nearest anchor and resolves a stored position back to the
    point a drag handle is drawn at.

Key Functions:
    - snap_to_grid(): Nearest anchor to (x, y)
    - anchor_center(): Centre point of an anchor name
    - resolve_handle_percent(): Point for a LayoutPosition
    - apply_drop(): Drop contract for snap on / snap off

Dependencies:
    - math (std)
    - common.thresholds: SNAP_ANCHOR_INSET
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Union

from postfit.common.thresholds import SNAP_ANCHOR_INSET

from .models import Free, LayoutPosition, PercentPoint, TextPosition

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GridAnchor:
    """A named anchor and its centre in percent."""

    position: TextPosition
    cx: float
    cy: float

    @property
    def center(self) -> PercentPoint:
        return PercentPoint(self.cx, self.cy)


_NEAR = SNAP_ANCHOR_INSET
_MID = 50.0
_FAR = 100.0 - SNAP_ANCHOR_INSET

# Row-major order; ties in snap_to_grid resolve to the earliest entry
GRID_ANCHORS: tuple[GridAnchor, ...] = (
    GridAnchor(TextPosition.TOP_LEFT, _NEAR, _NEAR),
    GridAnchor(TextPosition.TOP_CENTER, _MID, _NEAR),
    GridAnchor(TextPosition.TOP_RIGHT, _FAR, _NEAR),
    GridAnchor(TextPosition.CENTER_LEFT, _NEAR, _MID),
    GridAnchor(TextPosition.CENTER, _MID, _MID),
    GridAnchor(TextPosition.CENTER_RIGHT, _FAR, _MID),
    GridAnchor(TextPosition.BOTTOM_LEFT, _NEAR, _FAR),
    GridAnchor(TextPosition.BOTTOM_CENTER, _MID, _FAR),
    GridAnchor(TextPosition.BOTTOM_RIGHT, _FAR, _FAR),
)

_CENTER_POINT = PercentPoint(_MID, _MID)


def snap_to_grid(x: float, y: float) -> TextPosition:
    """
    Nearest anchor to a percentage coordinate (Euclidean distance).

    Example:
        >>> snap_to_grid(12, 8)
        <TextPosition.TOP_LEFT: 'top-left'>
    """
    best = GRID_ANCHORS[0]
    best_dist = math.inf
    for anchor in GRID_ANCHORS:
        dist = math.hypot(x - anchor.cx, y - anchor.cy)
        if dist < best_dist:
            best_dist = dist
            best = anchor
    return best.position


def anchor_center(position: Union[TextPosition, str]) -> PercentPoint:
    """Centre of a named anchor; unknown names resolve to the card centre."""
    resolved = TextPosition.lookup(position)
    for anchor in GRID_ANCHORS:
        if anchor.position is resolved:
            return anchor.center
    logger.warning(f"Unknown anchor {position!r}, falling back to center")
    return _CENTER_POINT


def resolve_handle_percent(layout_position: LayoutPosition) -> PercentPoint:
    """
    Point at which a block's drag handle is drawn.

    A free placement is returned verbatim; an anchored one resolves to
    its anchor's centre.
    """
    placement = layout_position.placement
    if isinstance(placement, Free):
        return placement.point
    return anchor_center(placement.position)


def apply_drop(
    layout_position: LayoutPosition,
    x: float,
    y: float,
    snap_enabled: bool,
) -> LayoutPosition:
    """
    New position for a block dropped at (x, y).

    With snapping on, the block is anchored to the nearest cell and any
    free coordinate is discarded. With snapping off, the block becomes
    free at exactly (x, y) and its previous anchor is kept only as the
    base.
    """
    if snap_enabled:
        anchor = snap_to_grid(x, y)
        logger.debug(f"Snapped drop ({x:.1f}, {y:.1f}) to {anchor.value}")
        return layout_position.anchored_to(anchor)
    return layout_position.moved_to(x, y)
