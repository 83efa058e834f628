"""Shared fixtures for template generation tests."""

from __future__ import annotations

import random

import pytest

from boussole.templates.config_loader import TemplateConfig, config_from_dict, load_template_config

THREE_COLOR_PALETTE = ["#6BB6FF", "#66D9A3", "#FFB366"]


class FixedRandom:
    """Random source that always returns the same value."""

    def __init__(self, value: float = 0.5) -> None:
        self.value = value
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return self.value


@pytest.fixture
def fixed_random() -> FixedRandom:
    return FixedRandom(0.5)


@pytest.fixture
def seeded_random() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def template_config() -> TemplateConfig:
    """The bundled template_config.yaml."""
    return load_template_config()


@pytest.fixture
def three_color_config() -> TemplateConfig:
    return config_from_dict({"version": "test", "palette": THREE_COLOR_PALETTE})


@pytest.fixture
def make_config():
    """Build a validated config from keyword overrides of the generation section."""

    def _make(palette: list[str] | None = None, **generation) -> TemplateConfig:
        return config_from_dict(
            {
                "version": "test",
                "palette": palette or THREE_COLOR_PALETTE,
                "generation": generation,
            }
        )

    return _make
