"""
Reactive paddle controller for the right-hand player
"""

from synth_pong.core.entities import Ball
from synth_pong.core.entities import Paddle
from synth_pong.utils.config import game_config


class FollowBallAI:
    """
    Proportional ball tracker with a dead zone.

    No lookahead and no memory: every frame the paddle center is compared to
    the ball center, and the paddle steps towards the ball unless the two
    are within the dead zone.
    """

    def __init__(self, name: str = "FollowBallAI", dead_zone: float | None = None):
        self.name = name
        self.dead_zone = dead_zone if dead_zone is not None else game_config.AI_DEAD_ZONE

    def get_move(self, paddle: Paddle, ball: Ball, speed: float) -> float:
        """Returns the vertical displacement for this frame"""
        step = speed * game_config.AI_DAMPING
        paddle_center = paddle.center_y
        ball_center = ball.center.y

        if paddle_center < ball_center - self.dead_zone:
            return step
        if paddle_center > ball_center + self.dead_zone:
            return -step
        return 0.0

    def update(self, paddle: Paddle, ball: Ball, speed: float, field_height: float) -> None:
        """Moves the paddle towards the ball and keeps it on the board"""
        paddle.position.y += self.get_move(paddle, ball, speed)
        paddle.clamp(field_height)
