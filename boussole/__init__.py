"""Boussole — compare professions through weighted interests and motivations.

Usage::

    from boussole import generate_profession_template, pick_accessible_text_color

    template = generate_profession_template()
    for category in template.categories:
        text = pick_accessible_text_color(category.color)
        print(category.name, category.color, text)

Subpackages:
    accessibility/ — contrast maths, WCAG policy, colour adjustment, audits
    suggestions/   — suggestion catalogs and accent-insensitive search
    templates/     — starter-template generation and its YAML config
    profiles/      — validation, comparison metrics, recommendation
    models/        — Pydantic value types
"""

from boussole.accessibility import (
    adjust_for_contrast,
    contrast_ratio,
    meets_aa,
    meets_aaa,
    pick_accessible_text_color,
)
from boussole.models import Category, Criterion, CriterionType, ProfessionTemplate
from boussole.templates import TemplateGenerator, generate_profession_template

__version__ = "0.1.0"

__all__ = [
    "adjust_for_contrast",
    "contrast_ratio",
    "meets_aa",
    "meets_aaa",
    "pick_accessible_text_color",
    "Category",
    "Criterion",
    "CriterionType",
    "ProfessionTemplate",
    "TemplateGenerator",
    "generate_profession_template",
]
