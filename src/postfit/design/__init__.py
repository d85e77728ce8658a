"""Design-quality checklist for post variations."""

from .models import CheckSeverity, DesignCheckItem, PostLayout, PostVariation
from .rules import (
    CHECK_IDS,
    LAYOUT_OBJECTIVE_MAP,
    LayoutObjective,
    check_typography_hierarchy,
    checklist_score,
    validate_design_checklist,
)

__all__ = [
    "CHECK_IDS",
    "LAYOUT_OBJECTIVE_MAP",
    "CheckSeverity",
    "DesignCheckItem",
    "LayoutObjective",
    "PostLayout",
    "PostVariation",
    "check_typography_hierarchy",
    "checklist_score",
    "validate_design_checklist",
]
