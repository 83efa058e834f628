"""Shared fixtures for the suggestion catalog tests."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from boussole.models.profession import Category


@dataclass
class NamedThing:
    """Minimal stand-in for any entity exposing ``.name``."""

    name: str


@pytest.fixture
def existing_categories() -> list[Category]:
    return [
        Category(name="management", color="#6BB6FF"),
        Category(name="CREATIVITE", color="#66D9A3"),
    ]


@pytest.fixture
def named_thing():
    return NamedThing
