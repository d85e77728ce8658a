"""
Module: textfit.classifier

Purpose:
    Classify headline/body lengths against per-ratio limits into
    ideal / tight / overflow and produce human-readable suggestions.

Key Functions:
    - analyze_text_fit(): Per-field status plus suggestions
    - has_text_fit_warning(): True iff any field overflows

Dependencies:
    - common.thresholds: FIT_STATUS_LIMITS, TIGHT_FRACTION
"""

from __future__ import annotations

import logging

from postfit.common import FIT_STATUS_LIMITS, TIGHT_FRACTION, AspectRatio, AspectRatioLike

from .models import FitStatus, TextFitReport

logger = logging.getLogger(__name__)


def classify_length(length: int, limit: int) -> FitStatus:
    """Status of a single field of ``length`` characters against ``limit``."""
    if length > limit:
        return FitStatus.OVERFLOW
    if length > limit * TIGHT_FRACTION:
        return FitStatus.TIGHT
    return FitStatus.IDEAL


def analyze_text_fit(headline: str, body: str, aspect_ratio: AspectRatioLike) -> TextFitReport:
    """
    Classify headline and body lengths for an aspect ratio.

    Example:
        >>> report = analyze_text_fit("x" * 65, "", "1:1")
        >>> report.headline_status
        <FitStatus.OVERFLOW: 'overflow'>
        >>> report.suggestions
        ('Reduce headline to 60 characters (current: 65)',)
    """
    ratio = AspectRatio.parse(aspect_ratio)
    limits = FIT_STATUS_LIMITS[ratio]
    suggestions: list[str] = []

    headline_status = classify_length(len(headline), limits.headline)
    if headline_status is FitStatus.OVERFLOW:
        suggestions.append(
            f"Reduce headline to {limits.headline} characters (current: {len(headline)})"
        )

    body_status = classify_length(len(body), limits.body)
    if body_status is FitStatus.OVERFLOW:
        suggestions.append(
            f"Reduce body to {limits.body} characters (current: {len(body)})"
        )

    if suggestions:
        logger.debug(f"Text overflows {ratio.value} card: {'; '.join(suggestions)}")

    return TextFitReport(
        headline_status=headline_status,
        body_status=body_status,
        suggestions=tuple(suggestions),
    )


def has_text_fit_warning(headline: str, body: str, aspect_ratio: AspectRatioLike) -> bool:
    """True iff headline or body exceeds its limit for the ratio."""
    return analyze_text_fit(headline, body, aspect_ratio).has_overflow
