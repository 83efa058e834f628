"""Starter-template generator for a new profession.

A template is built from the suggestion catalogs:

    1. Shuffle interests and motivations independently.
    2. Keep the first K interests as category names.
    3. Shuffle the palette and colour category i with palette[i % len(palette)].
    4. Category i gets motivations [i*C, i*C + C) as its criteria.
    5. Every criterion starts at the default weight with type UNDECIDED.

K and C come from :class:`GenerationConfig`.  Nothing is retained between
calls; the randomness source is injectable so tests can pin it.
"""

from __future__ import annotations

import logging
import random
from typing import Protocol, Sequence, TypeVar

from boussole.models.profession import (
    DEFAULT_CRITERION_TYPE,
    Category,
    Criterion,
    ProfessionTemplate,
)
from boussole.suggestions.catalog import INTEREST_SUGGESTIONS, MOTIVATION_SUGGESTIONS
from boussole.templates.config_loader import TemplateConfig, get_template_config

logger = logging.getLogger("boussole.templates.generator")

T = TypeVar("T")


class RandomSource(Protocol):
    """Anything with ``random() -> float in [0, 1)``; ``random.Random`` qualifies."""

    def random(self) -> float: ...


def shuffle(sequence: Sequence[T], rng: RandomSource | None = None) -> list[T]:
    """Return a uniformly shuffled copy of *sequence* (Fisher–Yates).

    Walks from the last index down to 1, swapping each element with one at a
    uniformly chosen index in ``[0, i]``.  The input is never mutated.

    Args:
        sequence: Items to shuffle.
        rng:      Random source; defaults to the process-wide ``random`` module.
    """
    source = rng if rng is not None else random
    shuffled = list(sequence)
    for i in range(len(shuffled) - 1, 0, -1):
        j = int(source.random() * (i + 1))
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


class TemplateGenerator:
    """Assemble starter categories and criteria for a profession.

    Usage::

        generator = TemplateGenerator()
        template = generator.generate()
        for category in template.categories:
            print(category.name, category.color, [c.name for c in category.criteria])
    """

    def __init__(
        self,
        config: TemplateConfig | None = None,
        rng: RandomSource | None = None,
        interests: Sequence[str] = INTEREST_SUGGESTIONS,
        motivations: Sequence[str] = MOTIVATION_SUGGESTIONS,
    ) -> None:
        self._config = config or get_template_config()
        self._rng = rng
        self._interests = tuple(interests)
        self._motivations = tuple(motivations)

    def generate(self) -> ProfessionTemplate:
        gen = self._config.generation
        per_category = gen.criteria_per_category

        shuffled_interests = shuffle(self._interests, self._rng)
        shuffled_motivations = shuffle(self._motivations, self._rng)
        selected = shuffled_interests[: gen.categories_per_template]
        palette = shuffle(self._config.palette, self._rng)

        categories: list[Category] = []
        for index, name in enumerate(selected):
            start = index * per_category
            criteria = [
                Criterion(name=motivation, weight=gen.default_weight, type=DEFAULT_CRITERION_TYPE)
                for motivation in shuffled_motivations[start : start + per_category]
            ]
            if len(criteria) < per_category:
                logger.debug(
                    "Category %r got %d/%d criteria (motivation catalog exhausted)",
                    name, len(criteria), per_category,
                )
            categories.append(
                Category(name=name, color=palette[index % len(palette)], criteria=criteria)
            )

        logger.debug(
            "Generated template: %d categories, %d criteria",
            len(categories),
            sum(len(c.criteria) for c in categories),
        )
        return ProfessionTemplate(categories=categories)


def generate_profession_template(
    config: TemplateConfig | None = None,
    rng: RandomSource | None = None,
) -> ProfessionTemplate:
    """One-shot helper: ``TemplateGenerator(config, rng).generate()``."""
    return TemplateGenerator(config=config, rng=rng).generate()
