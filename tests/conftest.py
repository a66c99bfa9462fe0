"""Global test fixtures for the palette-mcp test suite."""

from __future__ import annotations

import os
import random
from unittest.mock import MagicMock

import pytest

from palette_mcp.core.config import clear_config_cache
from palette_mcp.engine import RampenSauEngine


@pytest.fixture
def clean_env(monkeypatch):
    """Remove all PALETTE_ environment variables and reset cached config."""
    for key in list(os.environ.keys()):
        if key.startswith("PALETTE_"):
            monkeypatch.delenv(key, raising=False)
    clear_config_cache()
    yield
    clear_config_cache()


@pytest.fixture
def engine():
    """Real engine with a seeded randomness source."""
    return RampenSauEngine(rng=random.Random(1234))


@pytest.fixture
def fake_engine():
    """Engine double recording every call."""
    fake = MagicMock(spec=RampenSauEngine)
    fake.generate_ramp.return_value = [[0.0, 0.5, 0.5], [120.0, 0.5, 0.5], [240.0, 0.5, 0.5]]
    fake.generate_ramp_with_curve.return_value = [[10.0, 0.2, 0.3], [20.0, 0.4, 0.6]]
    fake.color_to_css.side_effect = lambda color, mode: f"{mode}:{color[0]}"
    return fake
