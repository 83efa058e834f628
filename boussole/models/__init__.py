from boussole.models.base import BoussoleBase
from boussole.models.profession import (
    DEFAULT_CRITERION_TYPE,
    DEFAULT_WEIGHT,
    Category,
    Criterion,
    CriterionType,
    ProfessionTemplate,
)

__all__ = [
    "BoussoleBase",
    "Category",
    "Criterion",
    "CriterionType",
    "DEFAULT_CRITERION_TYPE",
    "DEFAULT_WEIGHT",
    "ProfessionTemplate",
]
