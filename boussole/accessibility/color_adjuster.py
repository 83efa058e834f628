"""Nudge a colour toward a target contrast ratio against a fixed background.

The search is deliberately bounded: at most ``MAX_ITERATIONS`` steps of
``STEP`` on every channel.  If the target is not reached the original colour
comes back unchanged, so callers must re-check compliance when it matters.
"""

from __future__ import annotations

import logging

from boussole.accessibility.color_math import (
    InvalidColorError,
    contrast_ratio,
    format_color,
    parse_color,
)
from boussole.accessibility.contrast_policy import AA_NORMAL

logger = logging.getLogger("boussole.accessibility.color_adjuster")

STEP = 10
MAX_ITERATIONS = 20


def adjust_for_contrast(
    color: str,
    background: str,
    target_ratio: float = AA_NORMAL,
    darken: bool = True,
) -> str:
    """Darken (or lighten) *color* until it reaches *target_ratio* on *background*.

    Args:
        color:        Colour to adjust (hex).
        background:   Background it will be drawn on (hex).
        target_ratio: Minimum contrast ratio to reach.
        darken:       Step channels down (True) or up (False).

    Returns:
        *color* itself if it already meets the target, the first adjusted
        candidate that does, or *color* unchanged if none does within
        ``MAX_ITERATIONS`` steps.
    """
    if contrast_ratio(color, background) >= target_ratio:
        return color

    try:
        r, g, b = parse_color(color)
    except InvalidColorError:
        logger.debug("Cannot adjust unparseable colour %r", color)
        return color

    step = -STEP if darken else STEP
    for iteration in range(1, MAX_ITERATIONS + 1):
        r = max(0, min(255, r + step))
        g = max(0, min(255, g + step))
        b = max(0, min(255, b + step))
        candidate = format_color(r, g, b)
        if contrast_ratio(candidate, background) >= target_ratio:
            logger.debug(
                "Adjusted %s → %s on %s after %d step(s)",
                color, candidate, background, iteration,
            )
            return candidate

    logger.warning(
        "Could not reach contrast %.2f for %s on %s within %d steps; keeping original",
        target_ratio,
        color,
        background,
        MAX_ITERATIONS,
    )
    return color
