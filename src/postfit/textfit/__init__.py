"""
Module: textfit

Purpose:
    Automatic text fitting for post cards.

Key Functions:
    - compute_fit_parameters(): Font sizes, clamps and truncation flags
    - truncate_text(): Ellipsis truncation at word boundaries
    - analyze_text_fit(): ideal / tight / overflow classification
    - has_text_fit_warning(): Compact overflow flag
"""

from .analyzer import compute_fit_parameters, truncate_text
from .classifier import analyze_text_fit, classify_length, has_text_fit_warning
from .models import FitParameters, FitStatus, TextFitReport

__all__ = [
    # Models
    "FitParameters",
    "FitStatus",
    "TextFitReport",
    # Functions
    "compute_fit_parameters",
    "truncate_text",
    "analyze_text_fit",
    "classify_length",
    "has_text_fit_warning",
]
