"""
Module: positioning.models

Purpose:
    Where a text block sits on a card. A block is either anchored to one
    of nine named grid cells or placed freely at a percentage coordinate;
    the two are distinct variants so exactly one of them applies.

Key Classes:
    - TextPosition: The nine named anchors
    - Anchored / Free: Placement variants
    - LayoutPosition: Placement + alignment + optional width
    - AdvancedLayoutSettings: Headline, body and accent-bar positions

Dependencies:
    - dataclasses (std)

Used By:
    - positioning.grid: Snapping and resolution
    - positioning.placement: Renderer parameters
    - storage: Persisted editor state
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Mapping, NamedTuple, Optional, Union

logger = logging.getLogger(__name__)


class TextPosition(str, Enum):
    TOP_LEFT = "top-left"
    TOP_CENTER = "top-center"
    TOP_RIGHT = "top-right"
    CENTER_LEFT = "center-left"
    CENTER = "center"
    CENTER_RIGHT = "center-right"
    BOTTOM_LEFT = "bottom-left"
    BOTTOM_CENTER = "bottom-center"
    BOTTOM_RIGHT = "bottom-right"

    @classmethod
    def lookup(cls, name: Union["TextPosition", str, None]) -> Optional["TextPosition"]:
        """
        Resolve an anchor name, or None if it is unknown.

        The legacy name "center-center" maps to CENTER.
        """
        if isinstance(name, cls):
            return name
        if name == "center-center":
            return cls.CENTER
        try:
            return cls(name)
        except ValueError:
            return None


class TextAlignment(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class PercentPoint(NamedTuple):
    """A point in card percentage space (0-100 on both axes)."""

    x: float
    y: float


def _check_percent(name: str, value: float) -> None:
    if not 0 <= value <= 100:
        raise ValueError(f"{name} must be within 0-100: {value}")


def _clamp_percent(value: Any) -> float:
    return min(100.0, max(0.0, float(value)))


@dataclass(frozen=True)
class Anchored:
    """Block snapped to a named anchor."""

    position: TextPosition


@dataclass(frozen=True)
class Free:
    """
    Block placed at an exact percentage coordinate.

    Attributes:
        x: Horizontal centre of the block, 0-100
        y: Vertical centre of the block, 0-100
        base: Anchor the block had before it was dragged free. Kept only
            so it can be persisted and restored; it is never used to
            resolve the block's location.
    """

    x: float
    y: float
    base: TextPosition = TextPosition.BOTTOM_LEFT

    def __post_init__(self) -> None:
        _check_percent("x", self.x)
        _check_percent("y", self.y)

    @property
    def point(self) -> PercentPoint:
        return PercentPoint(self.x, self.y)


Placement = Union[Anchored, Free]


@dataclass(frozen=True)
class LayoutPosition:
    """
    Position of one text block (immutable).

    Attributes:
        placement: Anchored or Free
        text_align: Horizontal text alignment inside the block
        width: Block width in percent of the card, None for the default

    Example:
        >>> lp = LayoutPosition()
        >>> lp.anchor
        <TextPosition.BOTTOM_LEFT: 'bottom-left'>
        >>> lp.is_free
        False
    """

    placement: Placement = field(default_factory=lambda: Anchored(TextPosition.BOTTOM_LEFT))
    text_align: TextAlignment = TextAlignment.LEFT
    width: Optional[float] = None

    def __post_init__(self) -> None:
        if self.width is not None:
            _check_percent("width", self.width)

    @property
    def is_free(self) -> bool:
        return isinstance(self.placement, Free)

    @property
    def anchor(self) -> TextPosition:
        """Named anchor; for a free block, the anchor it was dragged away from."""
        if isinstance(self.placement, Free):
            return self.placement.base
        return self.placement.position

    def anchored_to(self, position: TextPosition) -> LayoutPosition:
        """Copy snapped to ``position``; any free coordinate is dropped."""
        return replace(self, placement=Anchored(position))

    def moved_to(self, x: float, y: float) -> LayoutPosition:
        """Copy placed freely at (x, y); the named anchor is kept as the base."""
        return replace(self, placement=Free(x, y, base=self.anchor))

    def with_width(self, width: Optional[float]) -> LayoutPosition:
        return replace(self, width=width)

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> dict:
        """Serialize to the editor's ``{position, textAlign, freePosition?, width?}`` shape."""
        d: dict = {"position": self.anchor.value, "textAlign": self.text_align.value}
        if isinstance(self.placement, Free):
            d["freePosition"] = {"x": self.placement.x, "y": self.placement.y}
        if self.width is not None:
            d["width"] = self.width
        return d

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> LayoutPosition:
        """
        Deserialize, tolerating stale data.

        Unknown anchor names fall back to CENTER and unknown alignments to
        LEFT. A ``freePosition`` entry wins over ``position``.
        """
        raw_position = data.get("position")
        anchor = TextPosition.lookup(raw_position)
        if anchor is None:
            logger.warning(f"Unknown text position {raw_position!r}, using center")
            anchor = TextPosition.CENTER

        try:
            text_align = TextAlignment(data.get("textAlign", TextAlignment.LEFT.value))
        except ValueError:
            logger.warning(f"Unknown text alignment {data.get('textAlign')!r}, using left")
            text_align = TextAlignment.LEFT

        free = data.get("freePosition")
        placement: Placement
        if isinstance(free, Mapping) and "x" in free and "y" in free:
            placement = Free(_clamp_percent(free["x"]), _clamp_percent(free["y"]), base=anchor)
        else:
            placement = Anchored(anchor)

        width = data.get("width")
        return cls(
            placement=placement,
            text_align=text_align,
            width=_clamp_percent(width) if width is not None else None,
        )


BlockTarget = str  # "headline" | "body" | "accentBar"
BLOCK_TARGETS = ("headline", "body", "accentBar")

MIN_PADDING_PX = 0
MAX_PADDING_PX = 80


@dataclass(frozen=True)
class AdvancedLayoutSettings:
    """
    Positions of every draggable block on a card.

    Attributes:
        headline: Headline block position
        body: Body block position
        accent_bar: Accent bar position, None if the card has none
        padding: Safe-zone padding in px (0-80)
    """

    headline: LayoutPosition = field(default_factory=LayoutPosition)
    body: LayoutPosition = field(default_factory=LayoutPosition)
    accent_bar: Optional[LayoutPosition] = field(
        default_factory=lambda: LayoutPosition(Anchored(TextPosition.TOP_LEFT), width=15)
    )
    padding: int = 24

    def __post_init__(self) -> None:
        if not MIN_PADDING_PX <= self.padding <= MAX_PADDING_PX:
            raise ValueError(
                f"padding must be within {MIN_PADDING_PX}-{MAX_PADDING_PX}px: {self.padding}"
            )

    def get(self, target: BlockTarget) -> Optional[LayoutPosition]:
        if target == "headline":
            return self.headline
        if target == "body":
            return self.body
        if target == "accentBar":
            return self.accent_bar
        raise KeyError(f"Unknown block target: {target!r}")

    def with_block(self, target: BlockTarget, position: LayoutPosition) -> AdvancedLayoutSettings:
        """Copy with one block's position replaced."""
        if target == "headline":
            return replace(self, headline=position)
        if target == "body":
            return replace(self, body=position)
        if target == "accentBar":
            return replace(self, accent_bar=position)
        raise KeyError(f"Unknown block target: {target!r}")

    def to_dict(self) -> dict:
        d = {
            "headline": self.headline.to_dict(),
            "body": self.body.to_dict(),
            "padding": self.padding,
        }
        if self.accent_bar is not None:
            d["accentBar"] = self.accent_bar.to_dict()
        return d

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> AdvancedLayoutSettings:
        accent = data.get("accentBar")
        padding = int(data.get("padding", 24))
        return cls(
            headline=LayoutPosition.from_dict(data.get("headline") or {"position": "bottom-left"}),
            body=LayoutPosition.from_dict(data.get("body") or {"position": "bottom-left"}),
            accent_bar=LayoutPosition.from_dict(accent) if isinstance(accent, Mapping) else None,
            padding=min(MAX_PADDING_PX, max(MIN_PADDING_PX, padding)),
        )


DEFAULT_LAYOUT_SETTINGS = AdvancedLayoutSettings()
