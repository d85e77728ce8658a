"""
Module: design.rules

Purpose:
    Score a post variation against five fixed design rules: contrast,
    hierarchy, typography, alignment and whitespace. Every call returns
    exactly one item per rule, in that order.

Key Functions:
    - validate_design_checklist(): Main entry point
    - check_typography_hierarchy(): Headline/body scale rule
    - checklist_score(): Fraction of passing items

Dependencies:
    - color.contrast: WCAG contrast ratio
    - common.thresholds: DesignThresholds
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping, Sequence, Union

from postfit.color import contrast_ratio, format_ratio
from postfit.common import DEFAULT_DESIGN_THRESHOLDS, AspectRatio, AspectRatioLike, DesignThresholds

from .models import CheckSeverity, DesignCheckItem, PostLayout, PostVariation

logger = logging.getLogger(__name__)

CHECK_IDS = ("contrast", "hierarchy", "typography", "alignment", "whitespace")


@dataclass(frozen=True)
class LayoutObjective:
    """Where a layout works best and what it is typically used for."""

    label: str
    best_ratios: tuple[AspectRatio, ...]
    use_cases: str


LAYOUT_OBJECTIVE_MAP: Mapping[str, LayoutObjective] = MappingProxyType({
    PostLayout.CENTERED.value: LayoutObjective(
        label="Centered",
        best_ratios=(AspectRatio.SQUARE, AspectRatio.STORY),
        use_cases="Inspiration, emotion, celebration, questions",
    ),
    PostLayout.LEFT_ALIGNED.value: LayoutObjective(
        label="Left-aligned",
        best_ratios=(AspectRatio.PORTRAIT, AspectRatio.STORY),
        use_cases="Education, lists, news, tutorials",
    ),
    PostLayout.SPLIT.value: LayoutObjective(
        label="Split",
        best_ratios=(AspectRatio.SQUARE, AspectRatio.PORTRAIT, AspectRatio.STORY),
        use_cases="Promotions, impact, numbers, strong calls to action",
    ),
    PostLayout.MINIMAL.value: LayoutObjective(
        label="Minimal",
        best_ratios=(AspectRatio.SQUARE, AspectRatio.PORTRAIT, AspectRatio.STORY),
        use_cases="Brands that prioritise white space",
    ),
})


def check_typography_hierarchy(
    headline_mult: float,
    body_mult: float,
    min_scale: float = DEFAULT_DESIGN_THRESHOLDS.min_type_scale,
) -> bool:
    """True if the headline multiplier is at least ``min_scale`` times the body's."""
    if body_mult <= 0:
        return headline_mult > 0
    return headline_mult / body_mult >= min_scale


def _check_contrast(variation: PostVariation, t: DesignThresholds) -> DesignCheckItem:
    ratio = contrast_ratio(variation.text_color, variation.background_color)
    if ratio is None:
        logger.warning(
            f"Invalid colour pair text={variation.text_color!r} "
            f"background={variation.background_color!r}"
        )
        return DesignCheckItem(
            id="contrast",
            label="Legibility",
            description="Cannot compute contrast (invalid colour).",
            severity=CheckSeverity.WARN,
        )

    shown = format_ratio(ratio)
    if ratio < t.contrast_error_below:
        return DesignCheckItem(
            id="contrast",
            label="Legibility",
            description=f"Insufficient contrast ({shown}). Recommended minimum: {t.contrast_aa}:1.",
            severity=CheckSeverity.ERROR,
            value=shown,
        )
    if ratio < t.contrast_aa:
        return DesignCheckItem(
            id="contrast",
            label="Legibility",
            description=f"Acceptable contrast ({shown}), but below WCAG AA ({t.contrast_aa}:1).",
            severity=CheckSeverity.WARN,
            value=shown,
        )
    return DesignCheckItem(
        id="contrast",
        label="Legibility",
        description=f"Excellent contrast ({shown}). Meets WCAG AA.",
        severity=CheckSeverity.OK,
        value=shown,
    )


def _check_hierarchy(variation: PostVariation, ratio: AspectRatio) -> DesignCheckItem:
    objective = LAYOUT_OBJECTIVE_MAP.get(variation.layout)
    # Layouts without an entry are not judged
    matches = objective is None or ratio in objective.best_ratios
    if matches:
        description = f'Layout "{variation.layout}" suits the {ratio.value} ratio.'
    else:
        better = ", ".join(r.value for r in objective.best_ratios)
        description = f'Layout "{variation.layout}" works best in {better}. Consider adjusting.'
    return DesignCheckItem(
        id="hierarchy",
        label="Visual hierarchy",
        description=description,
        severity=CheckSeverity.OK if matches else CheckSeverity.WARN,
    )


def _check_typography(variation: PostVariation, t: DesignThresholds) -> DesignCheckItem:
    headline_mult = variation.headline_font_size if variation.headline_font_size is not None else 1
    body_mult = variation.body_font_size if variation.body_font_size is not None else 1
    ok = check_typography_hierarchy(headline_mult, body_mult, t.min_type_scale)
    return DesignCheckItem(
        id="typography",
        label="Type scale",
        description=(
            "Headline and body sizes are within the recommended scale."
            if ok
            else "Headline and body sizes are too close. Enlarge the headline or shrink the body."
        ),
        severity=CheckSeverity.OK if ok else CheckSeverity.WARN,
    )


def _check_alignment(variation: PostVariation, t: DesignThresholds) -> DesignCheckItem:
    if variation.layout == PostLayout.SPLIT.value and len(variation.headline) < t.split_min_headline_chars:
        return DesignCheckItem(
            id="alignment",
            label="Alignment",
            description='A "split" layout with a very short headline can look unbalanced.',
            severity=CheckSeverity.WARN,
        )
    return DesignCheckItem(
        id="alignment",
        label="Alignment",
        description="Alignment is consistent with the content length.",
        severity=CheckSeverity.OK,
    )


def _check_whitespace(variation: PostVariation, t: DesignThresholds) -> DesignCheckItem:
    body_len = len(variation.body or "")
    if body_len > t.whitespace_max_body_chars:
        return DesignCheckItem(
            id="whitespace",
            label="Breathing room",
            description=(
                f"A {body_len}-character body reduces breathing room. "
                f"Ideal: <= {t.whitespace_ideal_body_chars} characters."
            ),
            severity=CheckSeverity.WARN,
        )
    return DesignCheckItem(
        id="whitespace",
        label="Breathing room",
        description="Content length leaves enough white space.",
        severity=CheckSeverity.OK,
    )


def validate_design_checklist(
    variation: Union[PostVariation, Mapping[str, Any]],
    aspect_ratio: AspectRatioLike,
    thresholds: DesignThresholds = DEFAULT_DESIGN_THRESHOLDS,
) -> list[DesignCheckItem]:
    """
    Evaluate a post variation against the design rules.

    Args:
        variation: PostVariation or its camelCase dict payload
        aspect_ratio: Current card shape
        thresholds: Rule thresholds

    Returns:
        Exactly five items ordered contrast, hierarchy, typography,
        alignment, whitespace

    Example:
        >>> items = validate_design_checklist(
        ...     PostVariation("Hello there", "", "#FFFFFF", "#000000"), "1:1")
        >>> [i.severity.value for i in items]
        ['ok', 'ok', 'warn', 'ok', 'ok']
    """
    if not isinstance(variation, PostVariation):
        variation = PostVariation.from_dict(variation)
    ratio = AspectRatio.parse(aspect_ratio)

    items = [
        _check_contrast(variation, thresholds),
        _check_hierarchy(variation, ratio),
        _check_typography(variation, thresholds),
        _check_alignment(variation, thresholds),
        _check_whitespace(variation, thresholds),
    ]
    logger.debug(
        "Design checklist: " + ", ".join(f"{i.id}={i.severity.value}" for i in items)
    )
    return items


def checklist_score(items: Sequence[DesignCheckItem]) -> float:
    """Fraction of items that passed, in [0, 1]."""
    if not items:
        return 0.0
    return sum(1 for i in items if i.passed) / len(items)
