"""
Module: textfit.models

Purpose:
    Immutable results of the text-fit analyzer and fit-status classifier.

Key Classes:
    - FitParameters: Font sizes, clamps, padding and truncation flags
    - FitStatus: ideal / tight / overflow
    - TextFitReport: Per-field status plus suggestions

Dependencies:
    - dataclasses (std)

Used By:
    - textfit.analyzer
    - textfit.classifier
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class FitParameters:
    """
    Sizing parameters a renderer applies to a card's text (immutable).

    Attributes:
        headline_font_size: CSS size such as "1.650rem"
        body_font_size: CSS size such as "0.950rem"
        headline_line_clamp: Max headline lines, None for no clamp
        body_line_clamp: Max body lines, None for no clamp
        padding: CSS padding shorthand for the card
        max_headline_chars: Truncation cap for the headline
        max_body_chars: Truncation cap for the body
        should_truncate_headline: Headline is longer than its cap
        should_truncate_body: Body is longer than its cap

    Example:
        >>> params = compute_fit_parameters("Hello", "World", "1:1")
        >>> params.headline_font_size
        '1.650rem'
    """

    headline_font_size: str
    body_font_size: str
    headline_line_clamp: Optional[int]
    body_line_clamp: Optional[int]
    padding: str
    max_headline_chars: int
    max_body_chars: int
    should_truncate_headline: bool
    should_truncate_body: bool

    def to_dict(self) -> dict:
        """Serialize using the camelCase keys the editor front end reads."""
        d = asdict(self)
        return {
            "headlineSize": d["headline_font_size"],
            "bodySize": d["body_font_size"],
            "headlineLineClamp": d["headline_line_clamp"],
            "bodyLineClamp": d["body_line_clamp"],
            "padding": d["padding"],
            "maxHeadlineChars": d["max_headline_chars"],
            "maxBodyChars": d["max_body_chars"],
            "shouldTruncateHeadline": d["should_truncate_headline"],
            "shouldTruncateBody": d["should_truncate_body"],
        }


class FitStatus(str, Enum):
    """How a field's length compares with its limit."""

    IDEAL = "ideal"
    TIGHT = "tight"
    OVERFLOW = "overflow"


@dataclass(frozen=True)
class TextFitReport:
    """
    Fit status of headline and body for one aspect ratio.

    Attributes:
        headline_status: Status of the headline
        body_status: Status of the body
        suggestions: One message per overflowing field
    """

    headline_status: FitStatus
    body_status: FitStatus
    suggestions: tuple[str, ...] = ()

    @property
    def has_overflow(self) -> bool:
        """True if either field overflows its limit."""
        return FitStatus.OVERFLOW in (self.headline_status, self.body_status)

    def to_dict(self) -> dict:
        return {
            "headlineStatus": self.headline_status.value,
            "bodyStatus": self.body_status.value,
            "suggestions": list(self.suggestions),
        }
