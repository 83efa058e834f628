"""Boussole starter-template generation.

Core modules:
    generator     — Fisher–Yates shuffle and template assembly
    config_loader — Load/validate/hot-reload template_config.yaml
"""

from boussole.templates.config_loader import (
    ConfigValidationError,
    TemplateConfig,
    get_template_config,
)
from boussole.templates.generator import (
    TemplateGenerator,
    generate_profession_template,
    shuffle,
)

__all__ = [
    "ConfigValidationError",
    "TemplateConfig",
    "get_template_config",
    "TemplateGenerator",
    "generate_profession_template",
    "shuffle",
]
