"""Suggestion catalogs and accent-insensitive search for the suggestion pickers."""

from boussole.suggestions.catalog import (
    INTEREST_SUGGESTIONS,
    MOTIVATION_SUGGESTIONS,
    filter_interest_suggestions,
    filter_motivation_suggestions,
    is_name_used,
)
from boussole.suggestions.normalizer import normalize

__all__ = [
    "INTEREST_SUGGESTIONS",
    "MOTIVATION_SUGGESTIONS",
    "normalize",
    "is_name_used",
    "filter_interest_suggestions",
    "filter_motivation_suggestions",
]
