"""Colour bands for criterion weights (importance 1–30).

Each band colour carries white text at WCAG AA or better:

    ADVANTAGE           1–6    #1E6B47
    SMALL_ADVANTAGE     7–12   #2D8659
    NSP                13–18   #B85D0A
    SMALL_DISADVANTAGE 19–24   #B84C6B
    DISADVANTAGE       25–30   #B71C1C
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class WeightBand(str, Enum):
    ADVANTAGE = "advantage"
    SMALL_ADVANTAGE = "small_advantage"
    NSP = "nsp"
    SMALL_DISADVANTAGE = "small_disadvantage"
    DISADVANTAGE = "disadvantage"


@dataclass(frozen=True)
class WeightRange:
    low: int
    high: int
    color: str

    def contains(self, weight: float) -> bool:
        return self.low <= weight <= self.high


WEIGHT_BANDS: dict[WeightBand, WeightRange] = {
    WeightBand.ADVANTAGE: WeightRange(1, 6, "#1E6B47"),
    WeightBand.SMALL_ADVANTAGE: WeightRange(7, 12, "#2D8659"),
    WeightBand.NSP: WeightRange(13, 18, "#B85D0A"),
    WeightBand.SMALL_DISADVANTAGE: WeightRange(19, 24, "#B84C6B"),
    WeightBand.DISADVANTAGE: WeightRange(25, 30, "#B71C1C"),
}


def weight_band(weight: float) -> WeightBand:
    """Return the band for *weight*.

    Weights outside every band (0, 31, 12.5 …) fall into ADVANTAGE.
    """
    for band in (
        WeightBand.DISADVANTAGE,
        WeightBand.SMALL_DISADVANTAGE,
        WeightBand.NSP,
        WeightBand.SMALL_ADVANTAGE,
    ):
        if WEIGHT_BANDS[band].contains(weight):
            return band
    return WeightBand.ADVANTAGE


def weight_color(weight: float) -> str:
    """Background colour for a criterion of the given weight."""
    return WEIGHT_BANDS[weight_band(weight)].color
