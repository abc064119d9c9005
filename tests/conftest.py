"""
Pytest fixtures for Whack-a-Button tests.
"""

import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "hide"

import pygame
import pytest

from whack.round import RoundConfig, RoundEngine


@pytest.fixture
def rng() -> random.Random:
    """Seeded generator so placements are repeatable."""
    return random.Random(1234)


@pytest.fixture
def engine(rng) -> RoundEngine:
    """Idle engine with the default play area."""
    return RoundEngine(RoundConfig(), rng=rng)


@pytest.fixture
def running_engine(engine) -> RoundEngine:
    """Engine already in a 5 second round."""
    engine.set_configured_duration(5)
    engine.start()
    return engine


@pytest.fixture
def pygame_headless():
    """Initialise pygame against the dummy video driver."""
    pygame.init()
    pygame.display.set_mode((1, 1))
    yield
    pygame.quit()
