"""
Module: color.contrast

Purpose:
    WCAG 2.1 relative luminance and contrast ratio for text/background
    colour pairs. Malformed colours never raise; they yield None so the
    checklist can report an "unknown" state.

Key Functions:
    - parse_hex(): Strict 6-digit hex -> normalized RGB
    - relative_luminance(): Linearized channel luminance
    - contrast_ratio(): (Lmax + 0.05) / (Lmin + 0.05)

Dependencies:
    - PIL.ImageColor: Hex colour decoding

Used By:
    - design.rules: Contrast check
"""

from __future__ import annotations

import logging
import re
from typing import Optional, Tuple

from PIL import ImageColor

logger = logging.getLogger(__name__)

_HEX6 = re.compile(r"[0-9a-fA-F]{6}")

RGB = Tuple[float, float, float]


def parse_hex(value: str) -> Optional[RGB]:
    """
    Parse a 6-digit hex colour into channels normalized to [0, 1].

    One leading ``#`` is stripped; shorthand (``#fff``), alpha (``#rrggbbaa``)
    and named colours are rejected.

    Args:
        value: Colour string such as ``"#1A2B3C"`` or ``"1a2b3c"``

    Returns:
        (r, g, b) in [0, 1], or None if the value is malformed
    """
    if not isinstance(value, str):
        return None
    clean = value[1:] if value.startswith("#") else value
    if not _HEX6.fullmatch(clean):
        return None
    r, g, b = ImageColor.getrgb(f"#{clean}")[:3]
    return (r / 255, g / 255, b / 255)


def _linearize(channel: float) -> float:
    if channel <= 0.04045:
        return channel / 12.92
    return ((channel + 0.055) / 1.055) ** 2.4


def relative_luminance(r: float, g: float, b: float) -> float:
    """
    WCAG 2.1 relative luminance of a normalized sRGB colour.

    Args:
        r, g, b: Channels in [0, 1]

    Returns:
        Luminance in [0, 1]
    """
    return 0.2126 * _linearize(r) + 0.7152 * _linearize(g) + 0.0722 * _linearize(b)


def contrast_ratio(hex1: str, hex2: str) -> Optional[float]:
    """
    Contrast ratio between two hex colours.

    Symmetric in its arguments and always >= 1 (21.0 for black on white).

    Returns:
        The ratio, or None if either colour is malformed
    """
    rgb1 = parse_hex(hex1)
    rgb2 = parse_hex(hex2)
    if rgb1 is None or rgb2 is None:
        logger.debug(f"Cannot compute contrast for {hex1!r} / {hex2!r}")
        return None

    l1 = relative_luminance(*rgb1)
    l2 = relative_luminance(*rgb2)
    lighter, darker = max(l1, l2), min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def format_ratio(ratio: float) -> str:
    """Display form of a ratio, e.g. ``"4.5:1"``."""
    return f"{ratio:.1f}:1"
