"""Shared fixtures for the dicebag test suite."""
from __future__ import annotations

import random

import pytest

from dicebag.app import DiceApp


@pytest.fixture
def seeded_rng():
    state = random.getstate()
    random.seed(42)
    yield
    random.setstate(state)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def app_config() -> dict:
    return {
        "dice": {"default_expression": "1d1+2", "explosion_limit": 10},
        "distribution": {"default_rolls": 200},
        "display": {"show_rolls": True},
    }


@pytest.fixture
def dice_app(app_config) -> DiceApp:
    return DiceApp(config=app_config)
