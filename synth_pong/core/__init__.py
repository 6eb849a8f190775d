"""
Core module of Synth Pong game
"""

from synth_pong.core.entities import Ball
from synth_pong.core.entities import GameEvent
from synth_pong.core.entities import GameState
from synth_pong.core.entities import Paddle
from synth_pong.core.entities import Score
from synth_pong.core.entities import Side
from synth_pong.core.entities import Vector2D
from synth_pong.core.physics import PhysicsEngine

__all__ = [
    "Ball",
    "Paddle",
    "Score",
    "Side",
    "GameEvent",
    "GameState",
    "PhysicsEngine",
    "Vector2D",
]
