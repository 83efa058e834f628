"""Boussole accessibility colour engine.

Core modules:
    color_math      — hex parsing, relative luminance, contrast ratio
    contrast_policy — WCAG AA / AAA decisions, accessible text colour
    color_adjuster  — bounded darken/lighten search toward a target ratio
    weight_colors   — colour bands for criterion weights
    audit           — contrast report for the application's colour pairs
"""

from boussole.accessibility.color_adjuster import adjust_for_contrast
from boussole.accessibility.color_math import (
    InvalidColorError,
    contrast_ratio,
    format_color,
    parse_color,
    relative_luminance,
)
from boussole.accessibility.contrast_policy import (
    WCAGLevel,
    meets_aa,
    meets_aaa,
    pick_accessible_text_color,
    wcag_level,
)

__all__ = [
    "InvalidColorError",
    "parse_color",
    "format_color",
    "relative_luminance",
    "contrast_ratio",
    "WCAGLevel",
    "meets_aa",
    "meets_aaa",
    "wcag_level",
    "pick_accessible_text_color",
    "adjust_for_contrast",
]
