"""Input validation for profile editing.

Each validator returns a user-facing error message, or ``None`` when the
input is acceptable, so form code can show the message directly.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterable

from boussole.templates.config_loader import LimitsConfig, get_template_config


def _limits(limits: LimitsConfig | None) -> LimitsConfig:
    return limits or get_template_config().limits


def validate_category_name(name: str | None) -> str | None:
    if not name or not name.strip():
        return "Please enter a name for the professional interest"
    return None


def validate_criterion_name(name: str | None) -> str | None:
    if not name or not name.strip():
        return "Please enter a name for the key motivation"
    return None


def validate_weight(weight: Any, limits: LimitsConfig | None = None) -> str | None:
    """Reject weights that are not numbers or fall outside [min_weight, max_weight]."""
    lim = _limits(limits)
    message = f"Importance must be between {lim.min_weight} and {lim.max_weight}"
    if isinstance(weight, bool):
        return message
    try:
        value = float(weight)
    except (TypeError, ValueError):
        return message
    if value != value or not (lim.min_weight <= value <= lim.max_weight):  # NaN check
        return message
    return None


def validate_category_limit(current_count: int, limits: LimitsConfig | None = None) -> str | None:
    lim = _limits(limits)
    if current_count >= lim.max_categories:
        return f"You cannot add more than {lim.max_categories} professional interests"
    return None


def validate_criterion_limit(current_count: int, limits: LimitsConfig | None = None) -> str | None:
    lim = _limits(limits)
    if current_count >= lim.max_criteria_per_category:
        return (
            f"You cannot add more than {lim.max_criteria_per_category} "
            "key motivations per professional interest"
        )
    return None


def is_color_used(
    color: str,
    categories: Iterable[Any],
    exclude_id: int | None = None,
) -> bool:
    """True if another category (not *exclude_id*) already uses *color*.

    Colours are compared case-insensitively.
    """
    target = color.upper()
    for category in categories:
        if isinstance(category, Mapping):
            cat_id, cat_color = category.get("id"), category.get("color")
        else:
            cat_id, cat_color = getattr(category, "id", None), getattr(category, "color", None)
        if cat_id != exclude_id and cat_color and cat_color.upper() == target:
            return True
    return False
