"""
Shared fixtures for the Poong test suite
"""

import os

# Headless pygame for the GUI tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import numpy as np  # noqa: E402
import pytest  # noqa: E402

from poong.core.game_engine import GameEngine  # noqa: E402
from poong.core.physics import PhysicsEngine  # noqa: E402
from poong.utils.config import GameConfig  # noqa: E402


@pytest.fixture
def config() -> GameConfig:
    """Fresh default configuration, independent of the global one"""
    return GameConfig()


@pytest.fixture
def physics(config: GameConfig) -> PhysicsEngine:
    """Physics engine with a seeded random generator"""
    return PhysicsEngine(config, rng=np.random.default_rng(1234))


@pytest.fixture
def engine(config: GameConfig) -> GameEngine:
    """Game engine with a seeded random generator"""
    return GameEngine(config, rng=np.random.default_rng(1234))
