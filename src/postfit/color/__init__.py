"""Colour math for readability checks."""

from __future__ import annotations

from .contrast import contrast_ratio, format_ratio, parse_hex, relative_luminance

__all__ = ["contrast_ratio", "format_ratio", "parse_hex", "relative_luminance"]
