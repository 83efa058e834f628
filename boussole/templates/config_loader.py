"""Load, validate, and hot-reload the starter-template configuration.

The config lives in ``template_config.yaml`` alongside this module (or at
``Settings.template_config_path`` when set).  It is loaded once on first use
and cached.  Call ``reload_template_config()`` to re-read it from disk.

Usage::

    from boussole.templates.config_loader import get_template_config

    config = get_template_config()
    config.palette                         # ["#6BB6FF", ...]
    config.generation.categories_per_template   # 6
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from boussole.accessibility.color_math import InvalidColorError, format_color, parse_color
from boussole.config import get_settings
from boussole.models.profession import MAX_WEIGHT, MIN_WEIGHT
from boussole.suggestions.catalog import MOTIVATION_SUGGESTIONS

logger = logging.getLogger("boussole.templates.config")

# Path to the YAML file sitting next to this module
_CONFIG_PATH = Path(__file__).parent / "template_config.yaml"


# ---------------------------------------------------------------------------
# Typed config sections
# ---------------------------------------------------------------------------


@dataclass
class GenerationConfig:
    """How many categories/criteria a generated template holds."""

    categories_per_template: int = 6
    criteria_per_category: int = 5
    default_weight: int = 15

    @property
    def motivations_needed(self) -> int:
        return self.categories_per_template * self.criteria_per_category


@dataclass
class LimitsConfig:
    """Upper bounds the UI enforces when a user edits a profile."""

    max_categories: int = 10
    max_criteria_per_category: int = 110
    min_weight: int = 1
    max_weight: int = 30


@dataclass
class TemplateConfig:
    """Complete, validated template configuration.

    Attributes:
        version:    Config schema version string.
        palette:    Category colours, upper-case ``#RRGGBB``, never empty.
        generation: Template generation parameters.
        limits:     Profile editing limits.
    """

    version: str
    palette: list[str]
    generation: GenerationConfig
    limits: LimitsConfig


# ---------------------------------------------------------------------------
# Loader / validation
# ---------------------------------------------------------------------------


class ConfigValidationError(ValueError):
    """Raised when template_config.yaml fails validation."""


def _load_yaml(path: Path) -> dict:
    """Read and parse a YAML file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigValidationError: If the YAML is malformed.
    """
    if not path.exists():
        raise FileNotFoundError(f"Template config not found: {path}")

    with path.open("r", encoding="utf-8") as fh:
        try:
            raw = yaml.safe_load(fh) or {}
        except yaml.YAMLError as exc:
            raise ConfigValidationError(f"YAML parse error in {path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigValidationError(f"{path} must contain a mapping at the top level")
    return raw


def _validate_and_build(raw: dict) -> TemplateConfig:
    """Validate the raw YAML dict and construct a TemplateConfig.

    Every problem is collected so one error lists them all.

    Raises:
        ConfigValidationError: If required fields are missing or invalid.
    """
    errors: list[str] = []

    def _positive_int(section: dict, key: str, default: int, where: str) -> int:
        value = section.get(key, default)
        if isinstance(value, bool) or not isinstance(value, int):
            errors.append(f"{where}.{key} must be an integer, got {value!r}")
            return default
        if value < 1:
            errors.append(f"{where}.{key} must be >= 1, got {value}")
        return value

    version = str(raw.get("version", "1.0"))

    # ── Palette ──
    palette_raw = raw.get("palette")
    palette: list[str] = []
    if not palette_raw or not isinstance(palette_raw, list):
        errors.append("'palette' must be a non-empty list of colours")
    else:
        for i, color in enumerate(palette_raw):
            try:
                palette.append(format_color(*parse_color(color)))
            except InvalidColorError:
                errors.append(f"palette[{i}] = {color!r} is not a #RRGGBB colour")

    # ── Generation ──
    gen_raw = raw.get("generation") or {}
    generation = GenerationConfig(
        categories_per_template=_positive_int(gen_raw, "categories_per_template", 6, "generation"),
        criteria_per_category=_positive_int(gen_raw, "criteria_per_category", 5, "generation"),
        default_weight=_positive_int(gen_raw, "default_weight", 15, "generation"),
    )

    # ── Limits ──
    lim_raw = raw.get("limits") or {}
    limits = LimitsConfig(
        max_categories=_positive_int(lim_raw, "max_categories", 10, "limits"),
        max_criteria_per_category=_positive_int(lim_raw, "max_criteria_per_category", 110, "limits"),
        min_weight=_positive_int(lim_raw, "min_weight", 1, "limits"),
        max_weight=_positive_int(lim_raw, "max_weight", 30, "limits"),
    )

    if not (MIN_WEIGHT <= limits.min_weight and limits.max_weight <= MAX_WEIGHT):
        errors.append(
            f"limits weight range [{limits.min_weight}, {limits.max_weight}] must stay "
            f"within [{MIN_WEIGHT}, {MAX_WEIGHT}]"
        )
    if limits.min_weight > limits.max_weight:
        errors.append(
            f"limits.min_weight ({limits.min_weight}) exceeds limits.max_weight ({limits.max_weight})"
        )
    if not (limits.min_weight <= generation.default_weight <= limits.max_weight):
        errors.append(
            f"generation.default_weight = {generation.default_weight} is outside "
            f"[{limits.min_weight}, {limits.max_weight}]"
        )
    if generation.categories_per_template > limits.max_categories:
        errors.append(
            f"generation.categories_per_template = {generation.categories_per_template} "
            f"exceeds limits.max_categories = {limits.max_categories}"
        )

    if errors:
        raise ConfigValidationError(
            f"template_config.yaml has {len(errors)} validation error(s):\n"
            + "\n".join(f"  • {e}" for e in errors)
        )

    # Warn only: generation still works, trailing categories just get fewer criteria
    if generation.motivations_needed > len(MOTIVATION_SUGGESTIONS):
        logger.warning(
            "Template needs %d motivations but the catalog has %d; "
            "trailing categories will have fewer than %d criteria",
            generation.motivations_needed,
            len(MOTIVATION_SUGGESTIONS),
            generation.criteria_per_category,
        )

    return TemplateConfig(
        version=version,
        palette=palette,
        generation=generation,
        limits=limits,
    )


def _default_path() -> Path:
    configured = get_settings().template_config_path
    return Path(configured) if configured else _CONFIG_PATH


def load_template_config(path: Path | None = None) -> TemplateConfig:
    """Load and validate the template config from disk.

    Args:
        path: Override path to YAML. Defaults to ``Settings.template_config_path``
              or the bundled template_config.yaml.
    """
    target = path or _default_path()
    raw = _load_yaml(target)
    config = _validate_and_build(raw)
    logger.info("Loaded template config v%s from %s", config.version, target)
    return config


# ---------------------------------------------------------------------------
# Global singleton with hot-reload support
# ---------------------------------------------------------------------------

_config: TemplateConfig | None = None
_config_lock = threading.Lock()


def get_template_config() -> TemplateConfig:
    """Return the global TemplateConfig singleton, loading it on first call."""
    global _config
    if _config is None:
        with _config_lock:
            if _config is None:  # double-checked locking
                _config = load_template_config()
    return _config


def reload_template_config(path: Path | None = None) -> TemplateConfig:
    """Reload the config from disk and replace the global singleton.

    If validation fails the old config is kept and the error propagates.

    Raises:
        ConfigValidationError: If the new config is invalid.
        FileNotFoundError:     If the config file is missing.
    """
    global _config
    new_config = load_template_config(path)  # validate before acquiring lock
    with _config_lock:
        old_version = _config.version if _config else "none"
        _config = new_config
    logger.info("Reloaded template config: %s → %s", old_version, new_config.version)
    return new_config


def config_from_dict(raw: dict[str, Any]) -> TemplateConfig:
    """Build a validated config from an in-memory mapping (tests, embedding)."""
    return _validate_and_build(raw)
