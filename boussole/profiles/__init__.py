"""Profile validation, comparison metrics and recommendation.

Core modules:
    validation     — form-level checks returning an error message or None
    metrics        — totals, type distribution and top-3 rankings
    recommendation — weighted profession scoring with a confidence band
"""

from boussole.profiles.metrics import ProfessionMetrics, profession_metrics
from boussole.profiles.recommendation import Preferences, Recommendation, recommend

__all__ = [
    "ProfessionMetrics",
    "profession_metrics",
    "Preferences",
    "Recommendation",
    "recommend",
]
