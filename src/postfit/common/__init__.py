"""Shared enums and policy tables."""

from __future__ import annotations

from .aspect_ratios import AspectRatio, AspectRatioLike
from .thresholds import (
    COMPACT_POLICY,
    DEFAULT_DESIGN_THRESHOLDS,
    DEFAULT_GESTURE_THRESHOLDS,
    FIT_POLICIES,
    FIT_STATUS_LIMITS,
    TIGHT_FRACTION,
    CompactFitPolicy,
    DecayCurve,
    DesignThresholds,
    FieldLimits,
    GestureThresholds,
    RatioFitPolicy,
)

__all__ = [
    "AspectRatio",
    "AspectRatioLike",
    "COMPACT_POLICY",
    "DEFAULT_DESIGN_THRESHOLDS",
    "DEFAULT_GESTURE_THRESHOLDS",
    "FIT_POLICIES",
    "FIT_STATUS_LIMITS",
    "TIGHT_FRACTION",
    "CompactFitPolicy",
    "DecayCurve",
    "DesignThresholds",
    "FieldLimits",
    "GestureThresholds",
    "RatioFitPolicy",
]
