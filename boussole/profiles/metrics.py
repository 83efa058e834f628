"""Comparison metrics for one profession's category tree.

Categories without criteria are ignored.  A criterion's weight counts
toward the total and toward its type's bucket in the distribution.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from boussole.models.profession import Category, Criterion, CriterionType

TOP_N = 3


@dataclass
class TypeDistribution:
    """Summed criterion weight per criterion type."""

    advantage: int = 0
    disadvantage: int = 0
    undecided: int = 0

    @property
    def total(self) -> int:
        return self.advantage + self.disadvantage + self.undecided

    def add(self, criterion_type: CriterionType, weight: int) -> None:
        if criterion_type is CriterionType.ADVANTAGE:
            self.advantage += weight
        elif criterion_type is CriterionType.DISADVANTAGE:
            self.disadvantage += weight
        else:
            self.undecided += weight

    def merge(self, other: "TypeDistribution") -> None:
        self.advantage += other.advantage
        self.disadvantage += other.disadvantage
        self.undecided += other.undecided

    def share(self, criterion_type: CriterionType) -> float:
        """Fraction (0.0–1.0) of the total weight held by *criterion_type*."""
        if self.total == 0:
            return 0.0
        return getattr(self, criterion_type.value) / self.total


@dataclass
class CategoryDetail:
    id: int | None
    name: str
    color: str
    weight: int
    criteria_count: int
    distribution: TypeDistribution


@dataclass
class TopCriterion:
    name: str
    weight: int
    type: CriterionType
    category_name: str


@dataclass
class ProfessionMetrics:
    """Comparison metrics for a single profession.

    Attributes:
        profession_id:     Caller's identifier for the profession.
        total_weight:      Sum of every criterion weight (also the global score).
        criteria_count:    Number of criteria across counted categories.
        distribution:      Weight per criterion type across the profession.
        categories:        Per-category breakdown, in input order.
        top_categories:    Up to 3 heaviest categories.
        top_criteria:      Up to 3 heaviest criteria.
    """

    profession_id: int | str
    total_weight: int = 0
    criteria_count: int = 0
    distribution: TypeDistribution = field(default_factory=TypeDistribution)
    categories: list[CategoryDetail] = field(default_factory=list)
    top_categories: list[CategoryDetail] = field(default_factory=list)
    top_criteria: list[TopCriterion] = field(default_factory=list)

    @property
    def global_score(self) -> int:
        return self.total_weight

    @property
    def categories_count(self) -> int:
        return len(self.categories)


def type_distribution(criteria: Sequence[Criterion]) -> TypeDistribution:
    dist = TypeDistribution()
    for criterion in criteria:
        dist.add(criterion.type, criterion.weight)
    return dist


def profession_metrics(
    profession_id: int | str,
    categories: Sequence[Category],
) -> ProfessionMetrics:
    """Compute totals, type distribution and top-3 rankings for a profession."""
    metrics = ProfessionMetrics(profession_id=profession_id)
    ranked_criteria: list[TopCriterion] = []

    for category in categories:
        if not category.criteria:
            continue
        dist = type_distribution(category.criteria)
        detail = CategoryDetail(
            id=category.id,
            name=category.name,
            color=category.color,
            weight=dist.total,
            criteria_count=len(category.criteria),
            distribution=dist,
        )
        metrics.categories.append(detail)
        metrics.total_weight += detail.weight
        metrics.criteria_count += detail.criteria_count
        metrics.distribution.merge(dist)
        ranked_criteria.extend(
            TopCriterion(c.name, c.weight, c.type, category.name) for c in category.criteria
        )

    # sorted() is stable: ties keep input order
    metrics.top_categories = sorted(metrics.categories, key=lambda d: d.weight, reverse=True)[:TOP_N]
    metrics.top_criteria = sorted(ranked_criteria, key=lambda c: c.weight, reverse=True)[:TOP_N]
    return metrics


def professions_metrics(
    categories_by_profession: dict[int | str, Sequence[Category]],
) -> dict[int | str, ProfessionMetrics]:
    return {
        profession_id: profession_metrics(profession_id, categories)
        for profession_id, categories in categories_by_profession.items()
    }
