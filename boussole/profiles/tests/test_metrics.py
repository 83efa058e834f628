"""Tests for per-profession comparison metrics."""

from __future__ import annotations

import pytest

from boussole.models.profession import CriterionType
from boussole.profiles.metrics import (
    TypeDistribution,
    profession_metrics,
    professions_metrics,
    type_distribution,
)


class TestTypeDistribution:
    def test_sums_weight_per_type(self, mostly_advantage) -> None:
        dist = type_distribution(mostly_advantage.criteria)
        assert (dist.advantage, dist.disadvantage, dist.undecided) == (20, 0, 10)
        assert dist.total == 30

    def test_share(self, mostly_advantage) -> None:
        dist = type_distribution(mostly_advantage.criteria)
        assert dist.share(CriterionType.ADVANTAGE) == pytest.approx(2 / 3)
        assert dist.share(CriterionType.DISADVANTAGE) == 0.0

    def test_empty_share_is_zero(self) -> None:
        assert TypeDistribution().share(CriterionType.ADVANTAGE) == 0.0

    def test_merge(self) -> None:
        a = TypeDistribution(advantage=1, disadvantage=2, undecided=3)
        a.merge(TypeDistribution(advantage=10))
        assert (a.advantage, a.disadvantage, a.undecided) == (11, 2, 3)


class TestProfessionMetrics:
    def test_totals(self, professions) -> None:
        metrics = profession_metrics("dev", professions["dev"])
        assert metrics.profession_id == "dev"
        assert metrics.total_weight == 60
        assert metrics.global_score == 60
        assert metrics.criteria_count == 4

    def test_empty_categories_skipped(self, professions) -> None:
        metrics = profession_metrics("dev", professions["dev"])
        assert metrics.categories_count == 2
        assert [d.name for d in metrics.categories] == ["Management", "Finance"]

    def test_distribution(self, professions) -> None:
        dist = profession_metrics("dev", professions["dev"]).distribution
        assert (dist.advantage, dist.disadvantage, dist.undecided) == (30, 20, 10)

    def test_category_detail(self, professions) -> None:
        detail = profession_metrics("dev", professions["dev"]).categories[1]
        assert detail.id == 2
        assert detail.color == "#66D9A3"
        assert detail.weight == 30
        assert detail.criteria_count == 2
        assert detail.distribution.disadvantage == 20

    def test_top_categories_ties_keep_input_order(self, professions) -> None:
        top = profession_metrics("dev", professions["dev"]).top_categories
        assert [d.name for d in top] == ["Management", "Finance"]

    def test_top_criteria(self, professions) -> None:
        top = profession_metrics("dev", professions["dev"]).top_criteria
        assert [(c.name, c.weight) for c in top] == [
            ("Autonomie", 20),
            ("Horaires", 20),
            ("Salaire", 10),
        ]
        assert top[1].category_name == "Finance"
        assert top[1].type is CriterionType.DISADVANTAGE

    def test_no_categories(self) -> None:
        metrics = profession_metrics(1, [])
        assert metrics.total_weight == 0
        assert metrics.top_categories == []
        assert metrics.top_criteria == []

    def test_many_professions(self, professions) -> None:
        result = professions_metrics(professions)
        assert set(result) == {"dev", "ops"}
        assert result["ops"].total_weight == 10
