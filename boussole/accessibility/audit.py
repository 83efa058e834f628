"""Contrast audit of the colour pairs the application renders.

Every pair is checked against WCAG AA for normal text.  The application's
fixed pairs are module constants so the audit needs no runtime lookup.

Usage::

    report = audit_application_colors()
    for check in report.failures:
        print(check.label, f"{check.ratio:.2f}:1")
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from boussole.accessibility.color_math import contrast_ratio
from boussole.accessibility.contrast_policy import (
    AA_NORMAL,
    WHITE,
    WCAGLevel,
    pick_accessible_text_color,
)
from boussole.accessibility.weight_colors import WEIGHT_BANDS

logger = logging.getLogger("boussole.accessibility.audit")

TEXT_COLORS: dict[str, str] = {
    "main": "#333333",
    "light": "#5A6268",
    "lighter": "#6C757D",
    "heading": "#2C3E50",
}

HEADER_BACKGROUND = "#5568D3"

# (label, foreground, background)
MESSAGE_PAIRS: list[tuple[str, str, str]] = [
    ("message.success", "#0C5460", "#84FAB0"),
    ("message.error", "#721C24", "#FFECD2"),
]


@dataclass(frozen=True)
class ContrastCheck:
    """Result of checking one foreground/background pair.

    Attributes:
        label:      Where the pair is used (e.g. ``"weight.nsp"``).
        foreground: Text colour.
        background: Surface colour.
        ratio:      Contrast ratio, 1.0–21.0.
        level:      Strictest WCAG level satisfied.
    """

    label: str
    foreground: str
    background: str
    ratio: float
    level: WCAGLevel

    @property
    def passes(self) -> bool:
        return self.ratio >= AA_NORMAL

    def to_dict(self) -> dict:
        return {
            "label": self.label,
            "foreground": self.foreground,
            "background": self.background,
            "ratio": round(self.ratio, 2),
            "level": self.level.value,
            "passes": self.passes,
        }


@dataclass
class AuditReport:
    checks: list[ContrastCheck] = field(default_factory=list)

    @property
    def all_pass(self) -> bool:
        return all(c.passes for c in self.checks)

    @property
    def failures(self) -> list[ContrastCheck]:
        return [c for c in self.checks if not c.passes]

    def get(self, label: str) -> ContrastCheck | None:
        return next((c for c in self.checks if c.label == label), None)


def check_pair(label: str, foreground: str, background: str) -> ContrastCheck:
    ratio = contrast_ratio(foreground, background)
    return ContrastCheck(
        label=label,
        foreground=foreground,
        background=background,
        ratio=ratio,
        level=WCAGLevel.from_ratio(ratio),
    )


def audit_pairs(pairs: Iterable[tuple[str, str, str]]) -> AuditReport:
    """Check each ``(label, foreground, background)`` pair."""
    report = AuditReport(checks=[check_pair(*pair) for pair in pairs])
    for check in report.failures:
        logger.warning(
            "Contrast below AA: %s %s on %s = %.2f:1",
            check.label, check.foreground, check.background, check.ratio,
        )
    return report


def application_pairs() -> list[tuple[str, str, str]]:
    pairs: list[tuple[str, str, str]] = [
        (f"weight.{band.value}", WHITE, band_range.color)
        for band, band_range in WEIGHT_BANDS.items()
    ]
    pairs += [(f"text.{name}", color, WHITE) for name, color in TEXT_COLORS.items()]
    pairs.append(("header", WHITE, HEADER_BACKGROUND))
    pairs += MESSAGE_PAIRS
    return pairs


def audit_application_colors() -> AuditReport:
    """Audit weight band colours, body text colours, header and messages."""
    return audit_pairs(application_pairs())


def audit_palette(palette: Sequence[str]) -> AuditReport:
    """Audit the text colour the UI would pick for each category colour."""
    return audit_pairs(
        (f"palette.{i}", pick_accessible_text_color(color), color)
        for i, color in enumerate(palette)
    )
