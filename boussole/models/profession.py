"""Pydantic models for professions, categories and criteria."""

from __future__ import annotations

from enum import Enum

from pydantic import Field, field_validator

from boussole.accessibility.color_math import format_color, parse_color
from boussole.models.base import BoussoleBase

DEFAULT_WEIGHT = 15
MIN_WEIGHT = 1
MAX_WEIGHT = 30


# ---------- Enums ----------

class CriterionType(str, Enum):
    ADVANTAGE = "advantage"
    DISADVANTAGE = "disadvantage"
    UNDECIDED = "undecided"  # "NSP": no opinion yet


DEFAULT_CRITERION_TYPE = CriterionType.UNDECIDED


# ---------- Criteria ----------

class Criterion(BoussoleBase):
    id: int | None = None
    name: str
    weight: int = Field(default=DEFAULT_WEIGHT, ge=MIN_WEIGHT, le=MAX_WEIGHT)
    type: CriterionType = DEFAULT_CRITERION_TYPE


# ---------- Categories ----------

class Category(BoussoleBase):
    id: int | None = None
    name: str
    color: str
    criteria: list[Criterion] = Field(default_factory=list)

    @field_validator("color")
    @classmethod
    def _canonical_color(cls, value: str) -> str:
        # InvalidColorError is a ValueError, so pydantic reports it as a ValidationError
        return format_color(*parse_color(value))

    @property
    def total_weight(self) -> int:
        return sum(c.weight for c in self.criteria)


# ---------- Templates ----------

class ProfessionTemplate(BoussoleBase):
    categories: list[Category] = Field(default_factory=list)
