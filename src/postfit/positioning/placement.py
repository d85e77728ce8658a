"""
Module: positioning.placement

Purpose:
    Convert a block's LayoutPosition into the top/left/transform values a
    renderer applies. Anchors sit inside the padding safe zone; free
    positions are clamped into it.

Key Functions:
    - resolve_placement(): LayoutPosition + padding -> CardPlacement
    - anchor_placement(): Placement for a named anchor
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Union

from postfit.common.thresholds import FREE_POSITION_HALF_BLOCK_PCT, NOMINAL_CARD_WIDTH_PX

from .models import MAX_PADDING_PX, MIN_PADDING_PX, Free, LayoutPosition, TextPosition

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CardPlacement:
    """
    Absolute positioning values for one block.

    Example:
        >>> anchor_placement("center", 24).to_style()
        {'top': '50%', 'left': '50%', 'transform': 'translate(-50%, -50%)'}
    """

    top: str
    left: str
    transform: Optional[str] = None

    def to_style(self) -> dict:
        style = {"top": self.top, "left": self.left}
        if self.transform is not None:
            style["transform"] = self.transform
        return style


def _num(value: float) -> str:
    return f"{round(value, 3):g}"


def anchor_placement(position: Union[TextPosition, str], padding: float) -> CardPlacement:
    """
    Placement of a block anchored to ``position`` with ``padding`` px inset.

    Every anchor is expressed with top + left + transform so that moving
    between anchors never changes which corner of the box is pinned.
    """
    p = _num(padding)
    near = f"{p}px"
    far = f"calc(100% - {p}px)"
    resolved = TextPosition.lookup(position)

    if resolved is TextPosition.TOP_LEFT:
        return CardPlacement(top=near, left=near)
    if resolved is TextPosition.TOP_CENTER:
        return CardPlacement(top=near, left="50%", transform="translateX(-50%)")
    if resolved is TextPosition.TOP_RIGHT:
        return CardPlacement(top=near, left=far, transform="translateX(-100%)")
    if resolved is TextPosition.CENTER_LEFT:
        return CardPlacement(top="50%", left=near, transform="translateY(-50%)")
    if resolved is TextPosition.CENTER_RIGHT:
        return CardPlacement(top="50%", left=far, transform="translate(-100%, -50%)")
    if resolved is TextPosition.BOTTOM_LEFT:
        return CardPlacement(top=far, left=near, transform="translateY(-100%)")
    if resolved is TextPosition.BOTTOM_CENTER:
        return CardPlacement(top=far, left="50%", transform="translate(-50%, -100%)")
    if resolved is TextPosition.BOTTOM_RIGHT:
        return CardPlacement(top=far, left=far, transform="translate(-100%, -100%)")
    if resolved is None:
        logger.warning(f"Unknown anchor {position!r}, placing at center")
    return CardPlacement(top="50%", left="50%", transform="translate(-50%, -50%)")


def free_safe_zone(padding: float) -> tuple[float, float]:
    """
    (min, max) percent a free block centre may occupy on either axis.

    Padding is clamped to the 0-80px settings range so the zone never inverts.
    """
    padding = min(MAX_PADDING_PX, max(MIN_PADDING_PX, padding))
    padding_pct = padding * 100 / NOMINAL_CARD_WIDTH_PX
    low = padding_pct + FREE_POSITION_HALF_BLOCK_PCT
    high = 100 - padding_pct - FREE_POSITION_HALF_BLOCK_PCT
    return low, high


def resolve_placement(layout_position: LayoutPosition, padding: float) -> CardPlacement:
    """
    Placement for a block, honouring its free coordinate when it has one.

    Example:
        >>> lp = LayoutPosition().moved_to(99, 50)
        >>> resolve_placement(lp, 0).left
        '95%'
    """
    placement = layout_position.placement
    if isinstance(placement, Free):
        low, high = free_safe_zone(padding)
        x = max(low, min(high, placement.x))
        y = max(low, min(high, placement.y))
        return CardPlacement(
            top=f"{_num(y)}%",
            left=f"{_num(x)}%",
            transform="translate(-50%, -50%)",
        )
    return anchor_placement(placement.position, padding)
