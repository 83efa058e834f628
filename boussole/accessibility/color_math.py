"""Colour parsing and WCAG relative luminance / contrast ratio maths.

Colours are ``#RRGGBB`` hex strings.  Parsing is case-insensitive and the
leading ``#`` is optional; colours produced by this package are always
upper-case with a leading ``#``.

Contrast ratio (WCAG 2.x):
    (L_lighter + 0.05) / (L_darker + 0.05)   →  1.0 (identical) … 21.0 (black/white)
"""

from __future__ import annotations

import logging
import re

logger = logging.getLogger("boussole.accessibility.color_math")

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$")

# sRGB linearisation knee (WCAG 2.0 wording)
_SRGB_THRESHOLD = 0.03928

MIN_RATIO = 1.0
MAX_RATIO = 21.0


class InvalidColorError(ValueError):
    """Raised when a string does not parse as a 6-hex-digit colour."""


def parse_color(color: str) -> tuple[int, int, int]:
    """Split a hex colour into its (r, g, b) channels.

    Args:
        color: ``"#1E6B47"``, ``"1e6b47"`` …

    Returns:
        Tuple of three ints in [0, 255].

    Raises:
        InvalidColorError: If *color* is not exactly six hex digits.
    """
    match = _HEX_RE.match(color) if isinstance(color, str) else None
    if match is None:
        raise InvalidColorError(f"Not a 6-digit hex colour: {color!r}")
    return tuple(int(part, 16) for part in match.groups())  # type: ignore[return-value]


def format_color(r: int, g: int, b: int) -> str:
    """Return ``#RRGGBB`` for the given channels, clamped to [0, 255]."""
    return "#{:02X}{:02X}{:02X}".format(*(max(0, min(255, int(c))) for c in (r, g, b)))


def _linearize(channel: int) -> float:
    v = channel / 255.0
    return v / 12.92 if v <= _SRGB_THRESHOLD else ((v + 0.055) / 1.055) ** 2.4


def relative_luminance(r: int, g: int, b: int) -> float:
    """WCAG relative luminance of an sRGB colour, 0.0 (black) – 1.0 (white)."""
    return 0.2126 * _linearize(r) + 0.7152 * _linearize(g) + 0.0722 * _linearize(b)


def contrast_ratio(color_a: str, color_b: str) -> float:
    """Contrast ratio between two colours, symmetric in its arguments.

    Malformed colours never raise here: the ratio degrades to 1.0 so that
    rendering code keeps working on bad configuration.  Callers that want a
    hard failure should call :func:`parse_color` themselves.
    """
    try:
        lum_a = relative_luminance(*parse_color(color_a))
        lum_b = relative_luminance(*parse_color(color_b))
    except InvalidColorError as exc:
        logger.debug("Contrast ratio fallback to %.1f: %s", MIN_RATIO, exc)
        return MIN_RATIO

    lighter = max(lum_a, lum_b)
    darker = min(lum_a, lum_b)
    return (lighter + 0.05) / (darker + 0.05)
