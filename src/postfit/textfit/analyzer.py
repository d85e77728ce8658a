"""
Module: textfit.analyzer

Purpose:
    Decide font sizes, line clamps, padding and truncation flags so that
    arbitrary copy fits a fixed-aspect card. Pure function of
    (headline, body, aspect ratio, compactness).

Key Functions:
    - compute_fit_parameters(): Main entry point
    - truncate_text(): Word-friendly truncation with an ellipsis

Dependencies:
    - common.thresholds: FIT_POLICIES, COMPACT_POLICY

Used By:
    - Editor card preview and thumbnail rendering
"""

from __future__ import annotations

import logging
from typing import Optional

from postfit.common import COMPACT_POLICY, FIT_POLICIES, AspectRatio, AspectRatioLike
from postfit.common.thresholds import DecayCurve

from .models import FitParameters

logger = logging.getLogger(__name__)

ELLIPSIS = "..."
# A word boundary is only used if it keeps at least this share of the cap
WORD_BREAK_MIN_FRACTION = 0.7


def _format_rem(curve: DecayCurve, length: int) -> str:
    return f"{curve.size_for(length):.3f}rem"


def _clamp(pair: Optional[tuple[int, int]], switch: Optional[int], length: int) -> Optional[int]:
    if pair is None:
        return None
    short, long = pair
    if switch is not None and length > switch:
        return long
    return short


def compute_fit_parameters(
    headline: str,
    body: str,
    aspect_ratio: AspectRatioLike,
    is_compact: bool = False,
) -> FitParameters:
    """
    Compute text sizing for a card.

    The headline size decays with the headline length. The body size
    decays with the combined headline + body length, since a long
    headline takes space from the body even when the body is short.

    Args:
        headline: Headline text
        body: Body text
        aspect_ratio: Card shape ("1:1", "5:6" or "9:16")
        is_compact: Use fixed thumbnail values instead of the decay curves

    Returns:
        Fresh FitParameters

    Example:
        >>> compute_fit_parameters("x" * 41, "", "1:1").headline_font_size
        '1.636rem'
    """
    headline_len = len(headline)
    body_len = len(body)

    if is_compact:
        c = COMPACT_POLICY
        return FitParameters(
            headline_font_size=c.headline_size,
            body_font_size=c.body_size,
            headline_line_clamp=c.headline_line_clamp,
            body_line_clamp=c.body_line_clamp,
            padding=c.padding,
            max_headline_chars=c.max_headline_chars,
            max_body_chars=c.max_body_chars,
            should_truncate_headline=headline_len > c.max_headline_chars,
            should_truncate_body=body_len > c.max_body_chars,
        )

    ratio = AspectRatio.parse(aspect_ratio)
    policy = FIT_POLICIES[ratio]
    total_len = headline_len + body_len

    params = FitParameters(
        headline_font_size=_format_rem(policy.headline, headline_len),
        body_font_size=_format_rem(policy.body, total_len),
        headline_line_clamp=_clamp(policy.headline_clamp, policy.headline_clamp_switch, headline_len),
        body_line_clamp=_clamp(policy.body_clamp, policy.body_clamp_switch, total_len),
        padding=policy.padding,
        max_headline_chars=policy.max_headline_chars,
        max_body_chars=policy.max_body_chars,
        should_truncate_headline=policy.truncates and headline_len > policy.max_headline_chars,
        should_truncate_body=policy.truncates and body_len > policy.max_body_chars,
    )
    logger.debug(
        f"Fit {ratio.value}: headline={headline_len} chars -> {params.headline_font_size}, "
        f"total={total_len} chars -> {params.body_font_size}"
    )
    return params


def truncate_text(text: str, max_chars: int) -> str:
    """
    Shorten text to at most ``max_chars`` characters, ending in "...".

    Prefers cutting at the last space when that space lies beyond 70% of
    the cap, so words are not split mid-way.

    Args:
        text: Text to shorten
        max_chars: Character cap (the ellipsis counts towards it)

    Returns:
        ``text`` unchanged if it already fits, else the shortened text

    Example:
        >>> truncate_text("the quick brown fox jumps", 12)
        'the quick...'
    """
    if len(text) <= max_chars:
        return text

    truncated = text[: max(0, max_chars - len(ELLIPSIS))]
    last_space = truncated.rfind(" ")
    if last_space > max_chars * WORD_BREAK_MIN_FRACTION:
        return truncated[:last_space] + ELLIPSIS
    return truncated + ELLIPSIS
