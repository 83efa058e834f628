"""Shared fixtures for the accessibility colour engine tests."""

from __future__ import annotations

import pytest

# A spread of colours: greys, primaries, the default palette and weight bands.
SAMPLE_COLORS = [
    "#000000",
    "#FFFFFF",
    "#333333",
    "#666666",
    "#888888",
    "#CCCCCC",
    "#FF0000",
    "#00FF00",
    "#0000FF",
    "#6BB6FF",
    "#FFCC66",
    "#B894FF",
    "#1E6B47",
    "#B71C1C",
]


@pytest.fixture
def sample_colors() -> list[str]:
    return list(SAMPLE_COLORS)


@pytest.fixture
def color_pairs() -> list[tuple[str, str]]:
    """Every ordered pair of sample colours."""
    return [(a, b) for a in SAMPLE_COLORS for b in SAMPLE_COLORS]
