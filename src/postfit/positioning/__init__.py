"""
Module: positioning

Purpose:
    Text block positions on a card: named anchors, free coordinates,
    grid snapping and renderer placement values.
"""

from .grid import (
    GRID_ANCHORS,
    GridAnchor,
    anchor_center,
    apply_drop,
    resolve_handle_percent,
    snap_to_grid,
)
from .models import (
    BLOCK_TARGETS,
    DEFAULT_LAYOUT_SETTINGS,
    AdvancedLayoutSettings,
    Anchored,
    Free,
    LayoutPosition,
    PercentPoint,
    Placement,
    TextAlignment,
    TextPosition,
)
from .placement import CardPlacement, anchor_placement, free_safe_zone, resolve_placement

__all__ = [
    # Models
    "BLOCK_TARGETS",
    "DEFAULT_LAYOUT_SETTINGS",
    "AdvancedLayoutSettings",
    "Anchored",
    "Free",
    "LayoutPosition",
    "PercentPoint",
    "Placement",
    "TextAlignment",
    "TextPosition",
    # Grid
    "GRID_ANCHORS",
    "GridAnchor",
    "anchor_center",
    "apply_drop",
    "resolve_handle_percent",
    "snap_to_grid",
    # Placement
    "CardPlacement",
    "anchor_placement",
    "free_safe_zone",
    "resolve_placement",
]
