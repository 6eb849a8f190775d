"""
Shared fixtures for Synth Pong tests
"""

import os

# Headless pygame: no window, no sound card
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import random  # noqa: E402

import pytest  # noqa: E402

from synth_pong.core.game_engine import GameEngine  # noqa: E402


@pytest.fixture
def engine() -> GameEngine:
    """Game engine with a seeded serve generator"""
    return GameEngine(rng=random.Random(1234))
