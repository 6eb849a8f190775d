"""
Physics system for Synth Pong

Motion uses fixed per-frame increments: one call to ``step`` is one
display frame, so game speed follows the host refresh rate.
"""

import math
import random

from synth_pong.core.entities import Ball
from synth_pong.core.entities import GameEvent
from synth_pong.core.entities import GameState
from synth_pong.core.entities import Paddle
from synth_pong.core.entities import Side
from synth_pong.utils.config import game_config


def bounce_angle(ball: Ball, paddle: Paddle) -> float:
    """
    Deflection angle for a ball hitting a paddle.

    The offset between paddle center and ball center is normalized by half
    the paddle height to [-1, 1], then scaled by the maximum bounce angle.
    Positive angles send the ball upwards.
    """
    offset = (paddle.center_y - ball.center.y) / (paddle.height / 2)
    offset = max(-1.0, min(1.0, offset))
    return offset * game_config.MAX_BOUNCE_ANGLE


def paddle_contact(ball: Ball, paddle: Paddle) -> bool:
    """True when the ball's leading edge has crossed the paddle's facing edge
    while both vertical spans overlap"""
    if paddle.side is Side.LEFT:
        crossed = ball.position.x <= paddle.facing_edge
    else:
        crossed = ball.position.x + ball.size >= paddle.facing_edge

    overlaps = (
        ball.position.y + ball.size >= paddle.position.y
        and ball.position.y <= paddle.position.y + paddle.height
    )
    return crossed and overlaps


class PhysicsEngine:
    """Per-frame ball integration, wall bounces and paddle collisions"""

    def __init__(self, field_width: float, field_height: float, rng: random.Random | None = None):
        self.field_width = field_width
        self.field_height = field_height
        self.rng = rng or random.Random()

    def serve_ball(self, ball: Ball, towards: Side) -> None:
        """Puts the ball back at the center, moving towards the given side at base speed"""
        ball.position.x = self.field_width / 2 - ball.size / 2
        ball.position.y = self.field_height / 2 - ball.size / 2
        ball.speed = game_config.BALL_SPEED

        spread = game_config.SERVE_ANGLE_SPREAD
        angle = self.rng.uniform(-spread, spread)
        vertical_sign = self.rng.choice((-1, 1))
        ball.velocity.x = math.cos(angle) * ball.speed * towards.direction
        ball.velocity.y = math.sin(angle) * ball.speed * vertical_sign

    def step(self, state: GameState) -> list[GameEvent]:
        """Advances the ball one frame and resolves collisions, returns emitted events"""
        events: list[GameEvent] = []
        ball = state.ball

        ball.update()

        if self.bounce_walls(ball):
            events.append(GameEvent.WALL)

        # Both checks always run, each guarded by its own contact test
        for paddle in state.paddles:
            if self.collide_paddle(ball, paddle):
                events.append(GameEvent.PADDLE)

        return events

    def bounce_walls(self, ball: Ball) -> bool:
        """Reflects the ball off the top or bottom edge"""
        if ball.position.y <= 0:
            ball.position.y = 0.0
        elif ball.position.y + ball.size >= self.field_height:
            ball.position.y = self.field_height - ball.size
        else:
            return False

        ball.velocity.y = -ball.velocity.y
        return True

    def collide_paddle(self, ball: Ball, paddle: Paddle) -> bool:
        """Returns the ball off a paddle with an angle proportional to the hit offset"""
        if not paddle_contact(ball, paddle):
            return False

        # Flush against the paddle, then travel away from it
        if paddle.side is Side.LEFT:
            ball.position.x = paddle.facing_edge
        else:
            ball.position.x = paddle.facing_edge - ball.size
        away = paddle.side.opponent.direction

        angle = bounce_angle(ball, paddle)
        ball.speed = min(ball.speed + game_config.BALL_SPEED_INCREMENT, game_config.MAX_BALL_SPEED)
        ball.velocity.x = math.cos(angle) * ball.speed * away
        ball.velocity.y = -math.sin(angle) * ball.speed
        return True
