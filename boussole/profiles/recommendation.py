"""Profession recommendation from weighted category trees.

Category score:
    total criterion weight × type multiplier × priority multiplier

Type multiplier (by share of the category's weight):
    advantages    ≥ 50 %  → 1.5
    disadvantages ≥ 50 %  → 0.5
    otherwise             → 1.0

Priority multiplier (user priority 1–5, default 3):
    5 → 2.0   4 → 1.5   3 → 1.0   2 → 0.5   1 → 0.2

Confidence is the winner's lead over the runner-up, as a percentage of the
winner's score.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence

from boussole.models.profession import Category, CriterionType
from boussole.profiles.metrics import type_distribution

logger = logging.getLogger("boussole.profiles.recommendation")

MAJORITY_SHARE = 0.5
DEFAULT_PRIORITY = 3
PRIORITY_MULTIPLIERS: dict[int, float] = {5: 2.0, 4: 1.5, 3: 1.0, 2: 0.5, 1: 0.2}
LOW_CONFIDENCE_PCT = 40


class ConfidenceBand(str, Enum):
    """How far ahead the recommended profession is.

    Thresholds (lead over second place, % of the winner's score):
        VERY_RELIABLE >= 80
        RELIABLE      >= 60
        MODERATE      >= 40
        LOW            < 40
        UNRELIABLE    winner scored 0
    """

    VERY_RELIABLE = "very_reliable"
    RELIABLE = "reliable"
    MODERATE = "moderate"
    LOW = "low"
    UNRELIABLE = "unreliable"

    @classmethod
    def from_percentage(cls, pct: float) -> "ConfidenceBand":
        if pct >= 80:
            return cls.VERY_RELIABLE
        if pct >= 60:
            return cls.RELIABLE
        if pct >= 40:
            return cls.MODERATE
        return cls.LOW


@dataclass
class Preferences:
    """User preferences for scoring.

    Attributes:
        priorities: category id → priority 1–5 (missing ids and 0 use 3).
    """

    priorities: dict[int, int] = field(default_factory=dict)

    def priority_for(self, category_id: int | None) -> int:
        if category_id is None:
            return DEFAULT_PRIORITY
        return self.priorities.get(category_id) or DEFAULT_PRIORITY


@dataclass
class CategoryScore:
    category_id: int | None
    category_name: str
    score: float


@dataclass
class ProfessionScore:
    profession_id: int | str
    total_score: float = 0.0
    category_scores: list[CategoryScore] = field(default_factory=list)


@dataclass
class Confidence:
    percentage: int
    band: ConfidenceBand


@dataclass
class Recommendation:
    """Outcome of comparing several professions.

    Attributes:
        profession_id: The recommended profession.
        score:         Its total score.
        confidence:    Lead over the runner-up.
        scores:        Every profession's score, highest first.
        points:        Human-readable strengths of the recommendation.
        warnings:      Caveats (e.g. scores too close to call).
        preferences:   Preferences the scores were computed with.
    """

    profession_id: int | str
    score: float
    confidence: Confidence
    scores: list[ProfessionScore]
    points: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    preferences: Preferences = field(default_factory=Preferences)


def type_multiplier(category: Category) -> float:
    dist = type_distribution(category.criteria)
    if dist.total == 0:
        return 1.0
    if dist.share(CriterionType.ADVANTAGE) >= MAJORITY_SHARE:
        return 1.5
    if dist.share(CriterionType.DISADVANTAGE) >= MAJORITY_SHARE:
        return 0.5
    return 1.0


def category_score(category: Category, preferences: Preferences) -> float:
    """Score one category; categories without criteria score 0."""
    if not category.criteria:
        return 0.0
    priority = preferences.priority_for(category.id)
    priority_mult = PRIORITY_MULTIPLIERS.get(priority, PRIORITY_MULTIPLIERS[1])
    return category.total_weight * type_multiplier(category) * priority_mult


def profession_score(
    profession_id: int | str,
    categories: Sequence[Category],
    preferences: Preferences,
) -> ProfessionScore:
    result = ProfessionScore(profession_id=profession_id)
    for category in categories:
        score = category_score(category, preferences)
        if score != 0:
            result.total_score += score
            result.category_scores.append(
                CategoryScore(category_id=category.id, category_name=category.name, score=score)
            )
    return result


def confidence(scores: Sequence[ProfessionScore]) -> Confidence:
    """Confidence in the top score given the runner-up."""
    if len(scores) < 2:
        return Confidence(percentage=100, band=ConfidenceBand.VERY_RELIABLE)

    ranked = sorted(scores, key=lambda s: s.total_score, reverse=True)
    best, second = ranked[0].total_score, ranked[1].total_score
    if best == 0:
        return Confidence(percentage=0, band=ConfidenceBand.UNRELIABLE)

    pct = (best - second) / best * 100
    return Confidence(percentage=round(pct), band=ConfidenceBand.from_percentage(pct))


def recommend(
    categories_by_profession: dict[int | str, Sequence[Category]],
    preferences: Preferences | None = None,
) -> Recommendation | None:
    """Pick the best-scoring profession.

    Args:
        categories_by_profession: profession id → its categories (caller-owned).
        preferences:              Scoring preferences; defaults apply when None.

    Returns:
        A :class:`Recommendation`, or None when there is nothing to compare.
    """
    if not categories_by_profession:
        return None
    prefs = preferences or Preferences()

    scores = [
        profession_score(profession_id, categories, prefs)
        for profession_id, categories in categories_by_profession.items()
    ]
    ranked = sorted(scores, key=lambda s: s.total_score, reverse=True)
    winner = ranked[0]
    conf = confidence(scores)

    points: list[str] = []
    warnings: list[str] = []

    top = sorted(winner.category_scores, key=lambda c: c.score, reverse=True)[:3]
    if top:
        points.append("Strengths: " + ", ".join(c.category_name for c in top))

    if len(ranked) > 1 and ranked[1].total_score > 0:
        lead = (winner.total_score - ranked[1].total_score) / winner.total_score * 100
        points.append(f"Score {lead:.1f}% higher than the second profession")

    if conf.percentage < LOW_CONFIDENCE_PCT:
        warnings.append("Scores are very close; the recommendation is not reliable.")

    logger.debug(
        "Recommendation: %s (score=%.1f, confidence=%d%% %s) among %d profession(s)",
        winner.profession_id, winner.total_score, conf.percentage, conf.band.value, len(scores),
    )

    return Recommendation(
        profession_id=winner.profession_id,
        score=winner.total_score,
        confidence=conf,
        scores=ranked,
        points=points,
        warnings=warnings,
        preferences=prefs,
    )
