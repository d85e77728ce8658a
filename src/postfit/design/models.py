"""
Module: design.models

Purpose:
    Inputs and outputs of the design checklist.

Key Classes:
    - PostLayout: The four card layouts
    - PostVariation: The subset of a generated post the checklist reads
    - CheckSeverity: ok / warn / error
    - DesignCheckItem: One checklist row
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional


class PostLayout(str, Enum):
    CENTERED = "centered"
    LEFT_ALIGNED = "left-aligned"
    SPLIT = "split"
    MINIMAL = "minimal"


class CheckSeverity(str, Enum):
    OK = "ok"
    WARN = "warn"
    ERROR = "error"


@dataclass(frozen=True)
class PostVariation:
    """
    Post fields consumed by the design checklist.

    ``layout`` is kept as a plain string so variations produced by an
    older generator with an unknown layout still validate.

    Attributes:
        headline: Headline text
        body: Body text
        text_color: Hex text colour
        background_color: Hex background colour
        layout: One of the PostLayout values
        headline_font_size: Headline size multiplier (None = 1)
        body_font_size: Body size multiplier (None = 1)
    """

    headline: str
    body: str
    text_color: str
    background_color: str
    layout: str = PostLayout.CENTERED.value
    headline_font_size: Optional[float] = None
    body_font_size: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PostVariation:
        """Build from the camelCase variation payload the generator returns."""
        layout = data.get("layout", PostLayout.CENTERED.value)
        return cls(
            headline=data.get("headline") or "",
            body=data.get("body") or "",
            text_color=data.get("textColor", ""),
            background_color=data.get("backgroundColor", ""),
            layout=layout.value if isinstance(layout, PostLayout) else str(layout),
            headline_font_size=data.get("headlineFontSize"),
            body_font_size=data.get("bodyFontSize"),
        )


@dataclass(frozen=True)
class DesignCheckItem:
    """
    One row of the design checklist.

    Attributes:
        id: Stable check identifier (contrast, hierarchy, ...)
        label: Short display label
        description: Explanation shown to the user
        severity: ok / warn / error
        value: Optional measured value, e.g. "5.2:1"
    """

    id: str
    label: str
    description: str
    severity: CheckSeverity
    value: Optional[str] = None

    @property
    def passed(self) -> bool:
        return self.severity is CheckSeverity.OK

    def to_dict(self) -> dict:
        d = {
            "id": self.id,
            "label": self.label,
            "description": self.description,
            "severity": self.severity.value,
        }
        if self.value is not None:
            d["value"] = self.value
        return d
