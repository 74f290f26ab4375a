"""Shared test fixtures."""

from __future__ import annotations

import pytest

from nineblock.engine.colors import ResolvedColor
from nineblock.engine.config import RenderConfig
from nineblock.identicon import identicon_code


@pytest.fixture
def default_config() -> RenderConfig:
    return RenderConfig()


@pytest.fixture
def red_on_white() -> ResolvedColor:
    """Fill far from the background, so no outline is drawn."""
    return ResolvedColor(fill=(248, 0, 0), background=(255, 255, 255), stroke=None)


@pytest.fixture
def sample_codes() -> list[int]:
    return [identicon_code(f"user{i}@example.com") for i in range(200)]
