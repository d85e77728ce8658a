"""Centralized policy tables and magic numbers.

All size curves, clamps, character caps and check thresholds used by the
fitting engine live here. There are two character tables: the
truncation caps inside ``RatioFitPolicy`` and ``FIT_STATUS_LIMITS`` used by
the fit-status classifier. They currently agree numerically but are tuned
independently.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from .aspect_ratios import AspectRatio


@dataclass(frozen=True)
class DecayCurve:
    """
    Linear font-size decay: ``max(floor, base - max(0, length - threshold) * decay_rate)``.

    Attributes:
        base: Size in rem at or below the threshold length
        floor: Smallest size the curve can reach
        threshold: Length (characters) where decay starts
        decay_rate: rem removed per character above threshold
    """

    base: float
    floor: float
    threshold: int
    decay_rate: float

    def __post_init__(self) -> None:
        if self.floor > self.base:
            raise ValueError(f"floor must be <= base: {self.floor} > {self.base}")
        if self.threshold < 0:
            raise ValueError(f"threshold must be >= 0: {self.threshold}")
        if self.decay_rate < 0:
            raise ValueError(f"decay_rate must be >= 0: {self.decay_rate}")

    def size_for(self, length: int) -> float:
        """Raw (unrounded) size in rem for a text length."""
        excess = max(0, length - self.threshold)
        return max(self.floor, self.base - excess * self.decay_rate)


@dataclass(frozen=True)
class RatioFitPolicy:
    """
    Fit policy for one aspect ratio.

    Line clamps are ``None`` when the ratio never clamps. A clamp pair
    ``(short, long)`` switches to ``long`` when the measured length exceeds
    the matching ``*_clamp_switch`` value; a switch of ``None`` means the
    short clamp is always used.
    """

    headline: DecayCurve
    body: DecayCurve
    padding: str
    max_headline_chars: int
    max_body_chars: int
    truncates: bool = True
    headline_clamp: Optional[tuple[int, int]] = None
    headline_clamp_switch: Optional[int] = None
    body_clamp: Optional[tuple[int, int]] = None
    body_clamp_switch: Optional[int] = None


@dataclass(frozen=True)
class CompactFitPolicy:
    """Fixed values used for thumbnails and preview strips."""

    headline_size: str = "1rem"
    body_size: str = "0.72rem"
    headline_line_clamp: int = 1
    body_line_clamp: int = 1
    padding: str = "1rem"
    max_headline_chars: int = 50
    max_body_chars: int = 80


FIT_POLICIES: Mapping[AspectRatio, RatioFitPolicy] = MappingProxyType({
    # Story cards are narrow and tall: smaller type, never truncated
    AspectRatio.STORY: RatioFitPolicy(
        headline=DecayCurve(base=1.45, floor=1.0, threshold=30, decay_rate=0.014),
        body=DecayCurve(base=0.85, floor=0.72, threshold=80, decay_rate=0.0015),
        padding="1.75rem 1.5rem",
        max_headline_chars=120,
        max_body_chars=300,
        truncates=False,
    ),
    AspectRatio.PORTRAIT: RatioFitPolicy(
        headline=DecayCurve(base=1.55, floor=1.05, threshold=35, decay_rate=0.014),
        body=DecayCurve(base=0.9, floor=0.75, threshold=110, decay_rate=0.001),
        padding="1.85rem",
        max_headline_chars=80,
        max_body_chars=180,
        headline_clamp=(2, 3),
        headline_clamp_switch=60,
        body_clamp=(3, 4),
        body_clamp_switch=140,
    ),
    AspectRatio.SQUARE: RatioFitPolicy(
        headline=DecayCurve(base=1.65, floor=1.1, threshold=40, decay_rate=0.014),
        body=DecayCurve(base=0.95, floor=0.78, threshold=120, decay_rate=0.0008),
        padding="1.75rem",
        max_headline_chars=60,
        max_body_chars=120,
        headline_clamp=(2, 3),
        headline_clamp_switch=60,
        body_clamp=(4, 4),
    ),
})

COMPACT_POLICY = CompactFitPolicy()


@dataclass(frozen=True)
class FieldLimits:
    """Character limits for the fit-status classifier."""

    headline: int
    body: int


FIT_STATUS_LIMITS: Mapping[AspectRatio, FieldLimits] = MappingProxyType({
    AspectRatio.SQUARE: FieldLimits(headline=60, body=120),
    AspectRatio.PORTRAIT: FieldLimits(headline=80, body=180),
    AspectRatio.STORY: FieldLimits(headline=120, body=300),
})

# Fraction of a limit above which a field is reported as "tight"
TIGHT_FRACTION = 0.8


@dataclass(frozen=True)
class DesignThresholds:
    """Thresholds for the design checklist."""

    contrast_error_below: float = 3.0
    contrast_aa: float = 4.5
    min_type_scale: float = 1.2  # headline/body multiplier ratio
    split_min_headline_chars: int = 10
    whitespace_max_body_chars: int = 90
    whitespace_ideal_body_chars: int = 80


@dataclass(frozen=True)
class GestureThresholds:
    """Limits applied while dragging and resizing text blocks."""

    min_width_pct: float = 20.0
    max_width_pct: float = 98.0
    width_decimals: int = 1
    fallback_percent: float = 50.0  # drag position when the container is unmounted

    def __post_init__(self) -> None:
        if not 0 <= self.min_width_pct <= self.max_width_pct <= 100:
            raise ValueError(
                f"width bounds must satisfy 0 <= min <= max <= 100: "
                f"{self.min_width_pct}, {self.max_width_pct}"
            )


# Distance of edge anchors from the card border, in percent
SNAP_ANCHOR_INSET = 10.0

# Free positions are clamped against a nominal card width (px) and half block (%)
NOMINAL_CARD_WIDTH_PX = 360.0
FREE_POSITION_HALF_BLOCK_PCT = 5.0

DEFAULT_DESIGN_THRESHOLDS = DesignThresholds()
DEFAULT_GESTURE_THRESHOLDS = GestureThresholds()
