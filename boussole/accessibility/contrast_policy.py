"""WCAG AA / AAA compliance decisions built on the contrast ratio.

Thresholds:
    AA   normal text  ≥ 4.5     large text (≥18pt, or ≥14pt bold) ≥ 3.0
    AAA  normal text  ≥ 7.0     large text                        ≥ 4.5
"""

from __future__ import annotations

import logging
from enum import Enum

from boussole.accessibility.color_math import contrast_ratio

logger = logging.getLogger("boussole.accessibility.contrast_policy")

AA_NORMAL = 4.5
AA_LARGE = 3.0
AAA_NORMAL = 7.0
AAA_LARGE = 4.5

WHITE = "#FFFFFF"
BLACK = "#000000"


class WCAGLevel(str, Enum):
    """Strictest WCAG level a foreground/background pair satisfies.

    Bands:
        AAA       >= 7.0  — AAA for normal text
        AA        >= 4.5  — AA for normal text (and AAA for large text)
        AA_LARGE  >= 3.0  — AA for large text only
        FAIL       < 3.0
    """

    AAA = "AAA"
    AA = "AA"
    AA_LARGE = "AA_LARGE"
    FAIL = "FAIL"

    @classmethod
    def from_ratio(cls, ratio: float) -> "WCAGLevel":
        if ratio >= AAA_NORMAL:
            return cls.AAA
        if ratio >= AA_NORMAL:
            return cls.AA
        if ratio >= AA_LARGE:
            return cls.AA_LARGE
        return cls.FAIL


def meets_aa(foreground: str, background: str, large_text: bool = False) -> bool:
    """True if the pair meets WCAG AA for normal (or large) text."""
    ratio = contrast_ratio(foreground, background)
    return ratio >= (AA_LARGE if large_text else AA_NORMAL)


def meets_aaa(foreground: str, background: str, large_text: bool = False) -> bool:
    """True if the pair meets WCAG AAA for normal (or large) text."""
    ratio = contrast_ratio(foreground, background)
    return ratio >= (AAA_LARGE if large_text else AAA_NORMAL)


def wcag_level(foreground: str, background: str) -> WCAGLevel:
    return WCAGLevel.from_ratio(contrast_ratio(foreground, background))


def pick_accessible_text_color(background: str) -> str:
    """Choose white or black text for *background*.

    Prefers whichever colour clears AA (4.5) and, when both or neither do,
    the one with the higher ratio.  When neither clears AA the result is a
    best effort, not a compliance guarantee.  Ties go to black.

    Args:
        background: Background colour (hex).

    Returns:
        ``"#FFFFFF"`` or ``"#000000"``.
    """
    white_ratio = contrast_ratio(WHITE, background)
    black_ratio = contrast_ratio(BLACK, background)

    white_ok = white_ratio >= AA_NORMAL
    black_ok = black_ratio >= AA_NORMAL

    if white_ok and not black_ok:
        return WHITE
    if black_ok and not white_ok:
        return BLACK

    if not white_ok:
        logger.debug(
            "No AA text colour for %s (white %.2f, black %.2f); using the better one",
            background,
            white_ratio,
            black_ratio,
        )
    return WHITE if white_ratio > black_ratio else BLACK
