"""Shared fixtures for profile validation, metrics and recommendation tests."""

from __future__ import annotations

import pytest

from boussole.models.profession import Category, Criterion, CriterionType

ADV = CriterionType.ADVANTAGE
DIS = CriterionType.DISADVANTAGE
NSP = CriterionType.UNDECIDED


def make_category(cat_id, name, color, *criteria) -> Category:
    """Build a category from ``(name, weight, type)`` triples."""
    return Category(
        id=cat_id,
        name=name,
        color=color,
        criteria=[Criterion(name=n, weight=w, type=t) for n, w, t in criteria],
    )


@pytest.fixture
def mostly_advantage() -> Category:
    """Total weight 30, two thirds advantage."""
    return make_category(1, "Management", "#6BB6FF", ("Autonomie", 20, ADV), ("Salaire", 10, NSP))


@pytest.fixture
def mostly_disadvantage() -> Category:
    """Total weight 30, two thirds disadvantage."""
    return make_category(2, "Finance", "#66D9A3", ("Horaires", 20, DIS), ("Mobilité", 10, ADV))


@pytest.fixture
def undecided_only() -> Category:
    return make_category(3, "Technique", "#FFB366", ("Télétravail", 10, NSP))


@pytest.fixture
def empty_category() -> Category:
    return make_category(4, "Design", "#FF7F9F")


@pytest.fixture
def professions(mostly_advantage, mostly_disadvantage, undecided_only, empty_category):
    """Two professions: "dev" scores 60, "ops" scores 10."""
    return {
        "dev": [mostly_advantage, mostly_disadvantage, empty_category],
        "ops": [undecided_only],
    }
